"""Read load case tables from CSV or Excel files into a RawTable."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from processing.table_models import RawTable
from services.extraction.coercion import to_raw_table

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
SUPPORTED_SUFFIXES = EXCEL_SUFFIXES | {".csv"}


def read_frame(path: Union[str, Path]) -> pd.DataFrame:
    """
    Read a table file with every cell as text.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the extension is not .csv, .xlsx or .xlsm
    """
    table_path = Path(path)
    suffix = table_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported table file type: {suffix or '(none)'}")
    if not table_path.exists():
        raise FileNotFoundError(f"Table file not found: {table_path}")

    if suffix in EXCEL_SUFFIXES:
        df = pd.read_excel(table_path, sheet_name=0, dtype=str, engine="openpyxl")
    else:
        df = pd.read_csv(table_path, dtype=str, keep_default_na=False)
    logger.debug("Read %s rows, %s columns from %s", len(df), len(df.columns), table_path.name)
    return df.fillna("")


def read_table(path: Union[str, Path]) -> RawTable:
    """Read a table file and coerce numeric-looking cells the way extraction does."""
    df = read_frame(path)
    headers = [str(column) for column in df.columns]
    return to_raw_table(headers, df.values.tolist())
