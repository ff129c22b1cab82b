"""Image-to-table extraction."""

from .client import ExtractionError, OpenAITableExtractor, TableExtractor, mime_type_for
from .coercion import to_raw_table
from .schema import ExtractedTable
from .service import NO_TABLE_NOTICE, ExtractionOutcome, ExtractionService, extract_table

__all__ = [
    "NO_TABLE_NOTICE",
    "ExtractedTable",
    "ExtractionError",
    "ExtractionOutcome",
    "ExtractionService",
    "OpenAITableExtractor",
    "TableExtractor",
    "extract_table",
    "mime_type_for",
    "to_raw_table",
]
