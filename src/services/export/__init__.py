"""Export service package."""

from .columns import (
    ExportColumn,
    columns_for,
    generated_row_columns,
    overload_factor_columns,
    rows_to_frame,
    to_tab_delimited,
    vector_table_columns,
)
from .csv_writer import CsvDatasetWriter
from .excel_writer import ExcelDatasetWriter
from .writer import ExportWriter, format_for_path

__all__ = [
    "CsvDatasetWriter",
    "ExcelDatasetWriter",
    "ExportColumn",
    "ExportWriter",
    "columns_for",
    "format_for_path",
    "generated_row_columns",
    "overload_factor_columns",
    "rows_to_frame",
    "to_tab_delimited",
    "vector_table_columns",
]
