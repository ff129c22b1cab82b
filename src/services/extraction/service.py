"""Extraction entry point used by the CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from processing.table_models import RawTable
from utils.error_handling import handle_operation_error, log_exception
from utils.logging_utils import log_event

from .client import ExtractionError, OpenAITableExtractor, TableExtractor, mime_type_for
from .coercion import to_raw_table

logger = logging.getLogger(__name__)

NO_TABLE_NOTICE = "No table data could be extracted from the image."


@dataclass
class ExtractionOutcome:
    """Table from one extraction, plus a notice or an error for the user."""

    table: RawTable = field(default_factory=RawTable)
    notice: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ExtractionService:
    def __init__(self, extractor: Optional[TableExtractor] = None):
        self.extractor = extractor or OpenAITableExtractor()

    def extract_bytes(self, image: bytes, mime_type: str) -> ExtractionOutcome:
        try:
            extracted = self.extractor.extract(image, mime_type)
        except ExtractionError as e:
            log_exception(e, "Table extraction", extra={"event": "extraction.failure"})
            return ExtractionOutcome(error=str(e))

        table = to_raw_table(extracted.headers, extracted.rows)
        if table.is_empty:
            log_event(logger, "extraction.empty", NO_TABLE_NOTICE)
            return ExtractionOutcome(table=table, notice=NO_TABLE_NOTICE)

        log_event(
            logger,
            "extraction.success",
            f"Extracted {len(table)} rows",
            rows=len(table),
            columns=len(table.headers),
        )
        return ExtractionOutcome(table=table)

    def extract_file(self, path: Union[str, Path]) -> ExtractionOutcome:
        image_path = Path(path)
        try:
            mime_type = mime_type_for(image_path)
            image = image_path.read_bytes()
        except (ExtractionError, OSError) as e:
            return ExtractionOutcome(error=handle_operation_error(e, "Reading image", str(image_path)))
        return self.extract_bytes(image, mime_type)


def extract_table(path: Union[str, Path], extractor: Optional[TableExtractor] = None) -> ExtractionOutcome:
    return ExtractionService(extractor).extract_file(path)
