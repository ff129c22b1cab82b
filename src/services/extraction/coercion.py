"""Turn a headers/rows payload into a RawTable of coerced cells."""

from __future__ import annotations

from typing import Any, Sequence

from processing.table_models import RawRow, RawTable
from utils.data_utils import coerce_cell_value


def to_raw_table(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> RawTable:
    """
    Zip each row with the headers.

    Short rows are padded with "" and extra trailing cells are dropped.
    An empty header list or an empty row list yields an empty table.
    """
    headers = [str(header) for header in headers]
    if not headers or not rows:
        return RawTable()

    table_rows: list[RawRow] = []
    for row in rows:
        record: RawRow = {}
        for index, header in enumerate(headers):
            value = row[index] if index < len(row) else None
            record[header] = coerce_cell_value(value)
        table_rows.append(record)
    return RawTable(headers=headers, rows=table_rows)
