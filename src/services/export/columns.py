"""Column descriptors and row flattening shared by the export writers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Sequence

import pandas as pd

from config.load_case_fields import GENERATED_ROW_HEADERS
from config.vector_templates import VECTOR_LOAD_CASE_HEADERS
from processing.overload_factors import LOAD_CASE_COLUMN, TENSION_OLF_COLUMN, VERTICAL_OLF_COLUMN
from utils.data_utils import normalize_number

NO_DATA_MESSAGE = "No data available to export."


@dataclass(frozen=True)
class ExportColumn:
    """Row key to read and the header label to write."""

    key: str
    label: str


def columns_for(headers: Iterable[str]) -> List[ExportColumn]:
    """Columns whose label is the key itself."""
    return [ExportColumn(header, header) for header in headers]


def generated_row_columns() -> List[ExportColumn]:
    return columns_for(GENERATED_ROW_HEADERS)


def vector_table_columns() -> List[ExportColumn]:
    return columns_for(VECTOR_LOAD_CASE_HEADERS)


def overload_factor_columns() -> List[ExportColumn]:
    return columns_for((LOAD_CASE_COLUMN, VERTICAL_OLF_COLUMN, TENSION_OLF_COLUMN))


def _cell(row: Mapping[str, Any], key: str) -> Any:
    value = row.get(key)
    if value is None:
        return ""
    return normalize_number(value)


def rows_to_frame(
    columns: Sequence[ExportColumn],
    rows: Sequence[Mapping[str, Any]],
) -> pd.DataFrame:
    """
    Flatten row records into a DataFrame headed by the column labels.

    Missing and None cells become "", integral floats are written as ints.

    Raises:
        ValueError: If there are no rows to export
    """
    if not rows:
        raise ValueError(NO_DATA_MESSAGE)

    data = [[_cell(row, column.key) for column in columns] for row in rows]
    # object dtype keeps ints as ints next to "" cells
    return pd.DataFrame(data, columns=[column.label for column in columns], dtype=object)


def to_tab_delimited(
    columns: Sequence[ExportColumn],
    rows: Sequence[Mapping[str, Any]],
) -> str:
    """Header line plus one tab-separated line per row, for pasting into a sheet."""
    lines = ["\t".join(column.label for column in columns)]
    for row in rows:
        lines.append("\t".join(str(_cell(row, column.key)) for column in columns))
    return "\n".join(lines)
