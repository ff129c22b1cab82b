"""Excel export helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

import pandas as pd
from openpyxl import load_workbook
from openpyxl.styles import Font

logger = logging.getLogger(__name__)

DEFAULT_SHEET_NAME = "ExtractedData"


def apply_header_formatting(file_path: Path, sheet_name: str) -> None:
    """Bold the header row of ``sheet_name`` and freeze it in place."""
    wb = load_workbook(file_path)
    if sheet_name in wb.sheetnames:
        ws = wb[sheet_name]
        for row in ws.iter_rows(min_row=1, max_row=1):
            for cell in row:
                cell.font = Font(bold=True)
        ws.freeze_panes = "A2"
    wb.save(file_path)


class ExcelDatasetWriter:
    """Writes a dataset to a single-sheet workbook with progress callbacks."""

    def __init__(
        self,
        progress_callback: Optional[Callable[[str, int, int], None]] = None,
        sheet_name: str = DEFAULT_SHEET_NAME,
    ):
        self.progress_callback = progress_callback or (lambda msg, curr, total: None)
        self.sheet_name = sheet_name

    def write(self, df: pd.DataFrame, output_path: Path) -> None:
        total_steps = 2
        self.progress_callback("Writing file...", 1, total_steps)
        df.to_excel(output_path, index=False, sheet_name=self.sheet_name, engine="openpyxl")
        self.progress_callback("Applying formatting...", 2, total_steps)
        apply_header_formatting(output_path, self.sheet_name)
        self.progress_callback("Export complete!", total_steps, total_steps)
        logger.debug("Wrote %d rows to sheet %s of %s", len(df), self.sheet_name, output_path)
