"""Map extracted table columns onto canonical load case fields."""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional

from config.load_case_fields import FORCE_FIELDS, LABEL_FIELD, resolve_mapped_column
from utils.data_utils import cell_to_str, parse_numeric_safe

from .table_models import LoadCaseRecord, RawRow

logger = logging.getLogger(__name__)

_NUMERIC_FIELDS = FORCE_FIELDS + ("wind_psf",)


class FieldMapper:
    """Turns raw rows into LoadCaseRecords using a field -> column mapping.

    Args:
        mapping: Canonical field key (see STANDARD_FIELDS) -> source column.
            Missing keys, '' and 'none' mean the field is unmapped.
    """

    def __init__(self, mapping: Mapping[str, Optional[str]]):
        self.mapping = dict(mapping)
        self.label_column = resolve_mapped_column(self.mapping, LABEL_FIELD)

    def map_row(self, row: RawRow) -> LoadCaseRecord:
        """Map one row; the label is copied verbatim, numbers are coerced."""
        label = ""
        if self.label_column is not None and row.get(self.label_column) is not None:
            label = cell_to_str(row[self.label_column])

        record = LoadCaseRecord(label=label, fields=dict(row))
        for name in _NUMERIC_FIELDS:
            column = resolve_mapped_column(self.mapping, name)
            if column is None:
                continue
            value = row.get(column)
            if value is None:
                continue
            setattr(record, name, parse_numeric_safe(value))
        return record

    def map_rows(self, rows: Iterable[RawRow]) -> List[LoadCaseRecord]:
        """Map every row, dropping rows whose label is blank."""
        if self.label_column is None:
            return []

        records = []
        skipped = 0
        for row in rows:
            record = self.map_row(row)
            if not record.label.strip():
                skipped += 1
                continue
            records.append(record)

        if skipped:
            logger.debug("Skipped %d row(s) with a blank load case label", skipped)
        return records


def map_load_cases(
    rows: Iterable[RawRow],
    mapping: Mapping[str, Optional[str]],
) -> List[LoadCaseRecord]:
    """Pure function form of FieldMapper(mapping).map_rows(rows)."""
    return FieldMapper(mapping).map_rows(rows)


def number_load_cases(rows: Iterable[RawRow], label_column: Optional[str]) -> List[RawRow]:
    """
    Prefix each row's label with its 1-based position ('1. NESC Heavy').

    Returns new row dicts; the input rows are left untouched. Blank labels
    stay blank so they are still excluded from generation, but they keep
    their position in the numbering.
    """
    numbered: List[RawRow] = []
    for index, row in enumerate(rows, start=1):
        new_row = dict(row)
        if label_column:
            label = cell_to_str(row.get(label_column))
            if label.strip():
                new_row[label_column] = f"{index}. {label}"
        numbered.append(new_row)
    return numbered
