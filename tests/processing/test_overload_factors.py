"""Tests for the overload factor table."""

from processing.overload_factors import (
    LOAD_CASE_COLUMN,
    TENSION_OLF_COLUMN,
    VERTICAL_OLF_COLUMN,
    OverloadFactorTable,
    resolve_factor_lookup,
)
from processing.table_models import LoadCaseRecord


class TestDerive:
    def test_one_identity_entry_per_record(self):
        """Each record gets (1, 1) keyed by its stored label."""
        records = [LoadCaseRecord("1. Heavy"), LoadCaseRecord("2. Light")]

        table = OverloadFactorTable.derive(records)

        assert table.labels() == ["1. Heavy", "2. Light"]
        assert all(entry.is_identity for entry in table)

    def test_rederive_discards_edits(self):
        """Edits last only until the next derivation."""
        records = [LoadCaseRecord("1. Heavy")]
        table = OverloadFactorTable.derive(records)
        table.set_factors("1. Heavy", vertical=1.5)

        rebuilt = OverloadFactorTable.derive(records)

        assert rebuilt.lookup("1. Heavy").vertical_olf == 1.0


class TestEdits:
    def test_set_factors_replaces_values(self):
        table = OverloadFactorTable.derive([LoadCaseRecord("A")])

        assert table.set_factors("A", vertical=1.5, tension=1.65) is True
        entry = table.lookup("A")
        assert (entry.vertical_olf, entry.tension_olf) == (1.5, 1.65)

    def test_set_factors_accepts_zero(self):
        """No validation on write; zero is rejected at generation time."""
        table = OverloadFactorTable.derive([LoadCaseRecord("A")])
        table.set_factors("A", tension=0)

        assert table.lookup("A").has_zero_factor

    def test_unknown_label(self):
        table = OverloadFactorTable.derive([LoadCaseRecord("A")])

        assert table.set_factors("B", vertical=2) is False
        assert table.lookup("B") is None

    def test_lookup_is_exact(self):
        table = OverloadFactorTable.derive([LoadCaseRecord("1. A")])

        assert table.lookup("A") is None


class TestRows:
    def test_round_trip_through_rows(self):
        table = OverloadFactorTable.derive([LoadCaseRecord("A")])
        table.set_factors("A", vertical=1.5)

        restored = OverloadFactorTable.from_rows(table.to_rows())

        assert restored.lookup("A").vertical_olf == 1.5
        assert restored.lookup("A").tension_olf == 1.0

    def test_from_rows_reads_bad_values_as_zero(self):
        rows = [
            {LOAD_CASE_COLUMN: "A", VERTICAL_OLF_COLUMN: "abc", TENSION_OLF_COLUMN: 1},
            {LOAD_CASE_COLUMN: "", VERTICAL_OLF_COLUMN: 1, TENSION_OLF_COLUMN: 1},
        ]

        table = OverloadFactorTable.from_rows(rows)

        assert len(table) == 1
        assert table.lookup("A").vertical_olf == 0.0


class TestResolveFactorLookup:
    def test_none_is_empty(self):
        assert len(resolve_factor_lookup(None)) == 0

    def test_plain_mapping(self):
        table = resolve_factor_lookup({"A": (1.5, 2)})

        entry = table.lookup("A")
        assert (entry.vertical_olf, entry.tension_olf) == (1.5, 2.0)

    def test_table_passes_through(self):
        table = OverloadFactorTable()

        assert resolve_factor_lookup(table) is table
