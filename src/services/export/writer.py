"""Excel/CSV writing helpers for export flows."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Sequence

import pandas as pd

from utils.logging_utils import log_event

from .columns import ExportColumn, rows_to_frame
from .csv_writer import CsvDatasetWriter
from .excel_writer import DEFAULT_SHEET_NAME, ExcelDatasetWriter

logger = logging.getLogger(__name__)

FORMATS = ("csv", "excel")


def format_for_path(path: Path) -> str:
    """Infer 'excel' or 'csv' from a file extension."""
    suffix = Path(path).suffix.lower()
    if suffix in {".xlsx", ".xlsm"}:
        return "excel"
    if suffix == ".csv":
        return "csv"
    raise ValueError(f"Cannot infer export format from extension: {suffix or '(none)'}")


class ExportWriter:
    """Handles writing datasets to Excel/CSV with simple progress callbacks."""

    def __init__(self, progress_callback: Optional[Callable[[str, int, int], None]] = None):
        self.progress_callback = progress_callback or (lambda msg, curr, total: None)

    def write_dataset(
        self,
        df: pd.DataFrame,
        output_path: Path,
        format: str,
        sheet_name: str = DEFAULT_SHEET_NAME,
    ) -> None:
        if format == "excel":
            ExcelDatasetWriter(self.progress_callback, sheet_name=sheet_name).write(df, output_path)
        elif format == "csv":
            CsvDatasetWriter(self.progress_callback).write(df, output_path)
        else:
            raise ValueError(f"Unknown export format: {format}")

    def write_rows(
        self,
        columns: Sequence[ExportColumn],
        rows: Sequence[Mapping[str, Any]],
        output_path: Path,
        format: Optional[str] = None,
        sheet_name: str = DEFAULT_SHEET_NAME,
    ) -> None:
        """Write row records under the given columns.

        Raises:
            ValueError: If there are no rows or the format is unknown
        """
        output_path = Path(output_path)
        format = format or format_for_path(output_path)
        df = rows_to_frame(columns, rows)
        self.write_dataset(df, output_path, format, sheet_name=sheet_name)
        log_event(
            logger,
            "export.complete",
            f"Exported {len(df)} rows to {output_path.name}",
            output_path=str(output_path),
            format=format,
            rows=len(df),
        )
