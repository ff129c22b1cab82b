"""CSV export helpers."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Callable, Optional

import pandas as pd


class CsvDatasetWriter:
    """Writes datasets to CSV with progress callbacks.

    Fields containing a comma, quote or newline are quoted and inner quotes
    are doubled; every other field is written bare.
    """

    def __init__(self, progress_callback: Optional[Callable[[str, int, int], None]] = None):
        self.progress_callback = progress_callback or (lambda msg, curr, total: None)

    def write(self, df: pd.DataFrame, output_path: Path) -> None:
        total_steps = 1
        self.progress_callback("Writing file...", 1, total_steps)
        df.to_csv(
            output_path,
            index=False,
            quoting=csv.QUOTE_MINIMAL,
            doublequote=True,
            lineterminator="\n",
            encoding="utf-8",
        )
        self.progress_callback("Export complete!", total_steps, total_steps)
