"""Tests for mapping raw rows onto load case records."""

from processing.field_mapper import FieldMapper, map_load_cases, number_load_cases


class TestFieldMapper:
    """Tests for FieldMapper.map_rows."""

    def test_maps_numeric_fields_and_label(self, sample_table, sample_field_mapping):
        """Should copy the label verbatim and coerce the force columns."""
        records = map_load_cases(sample_table.rows, sample_field_mapping)

        first = records[0]
        assert first.label == "NESC Heavy"
        assert first.c_v == 2.5
        assert first.sw_t == 0.8
        assert first.wind_psf == 4.0

    def test_skips_blank_labels(self, sample_table, sample_field_mapping):
        """Rows whose label is blank should not produce records."""
        records = map_load_cases(sample_table.rows, sample_field_mapping)

        assert [r.label for r in records] == ["NESC Heavy", "Rule B w/ OLF", "ASCE Extreme Wind"]

    def test_whitespace_label_is_blank(self):
        """A label of only spaces counts as blank."""
        rows = [{"lc": "   ", "v": 1}, {"lc": "A", "v": 2}]
        records = map_load_cases(rows, {"load_case": "lc", "c_v": "v"})

        assert len(records) == 1
        assert records[0].label == "A"

    def test_non_numeric_and_missing_values_read_as_zero(self):
        """Unparseable or absent force cells become 0 when used."""
        rows = [{"lc": "A", "v": "n/a"}]
        record = map_load_cases(rows, {"load_case": "lc", "c_v": "v", "c_t": "missing"})[0]

        assert record.force("c_v") == 0.0
        assert record.force("c_t") == 0.0
        assert record.force("sw_l") == 0.0

    def test_infinite_and_underscored_values_read_as_zero(self):
        rows = [{"lc": "A", "v": "inf", "t": "1_000", "l": "-Infinity"}]
        record = map_load_cases(rows, {"load_case": "lc", "sw_v": "v", "sw_t": "t", "sw_l": "l"})[0]

        assert record.force("sw_v") == 0.0
        assert record.force("sw_t") == 0.0
        assert record.force("sw_l") == 0.0

    def test_numeric_label_copied_as_string(self):
        """Numeric labels are rendered without a trailing .0."""
        record = map_load_cases([{"lc": 12.0}], {"load_case": "lc"})[0]

        assert record.label == "12"

    def test_no_label_mapping_returns_empty(self, sample_table):
        """Without a mapped label column nothing can be mapped."""
        assert map_load_cases(sample_table.rows, {"c_v": "C_V_kips"}) == []
        assert map_load_cases(sample_table.rows, {"load_case": "none"}) == []

    def test_keeps_source_fields_for_custom_loads(self):
        """Records keep the full source row for passthrough columns."""
        rows = [{"lc": "A", "arm_v": "1.5"}]
        record = FieldMapper({"load_case": "lc"}).map_row(rows[0])

        assert record.source_value("arm_v") == 1.5
        assert record.source_value("") == 0.0

    def test_does_not_mutate_input(self, sample_table, sample_field_mapping):
        """Mapping is a pure function of its inputs."""
        before = [dict(row) for row in sample_table.rows]
        map_load_cases(sample_table.rows, sample_field_mapping)

        assert sample_table.rows == before


class TestNumberLoadCases:
    """Tests for number_load_cases."""

    def test_prefixes_position(self):
        """Labels get a 1-based '<n>. ' prefix."""
        rows = [{"lc": "Heavy"}, {"lc": "Light"}]

        numbered = number_load_cases(rows, "lc")

        assert [r["lc"] for r in numbered] == ["1. Heavy", "2. Light"]

    def test_blank_labels_keep_position(self):
        """Blank labels stay blank but still consume a number."""
        rows = [{"lc": "Heavy"}, {"lc": ""}, {"lc": "Light"}]

        numbered = number_load_cases(rows, "lc")

        assert [r["lc"] for r in numbered] == ["1. Heavy", "", "3. Light"]

    def test_returns_copies(self):
        """Input rows are left untouched."""
        rows = [{"lc": "Heavy"}]

        number_load_cases(rows, "lc")

        assert rows == [{"lc": "Heavy"}]

    def test_without_label_column(self):
        """No label column means rows are copied unchanged."""
        rows = [{"lc": "Heavy"}]

        assert number_load_cases(rows, None) == rows
