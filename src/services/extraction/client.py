"""OpenAI vision client that reads a table out of an image."""

from __future__ import annotations

import base64
import logging
import os
from pathlib import Path
from typing import Optional, Protocol

from dotenv import load_dotenv
from openai import OpenAI, OpenAIError

from .schema import ExtractedTable

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]

DEFAULT_MODEL = "gpt-4o-mini"

SUPPORTED_MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
}

EXTRACTION_PROMPT = """\
Analyze the table in the provided image. Extract all data. Return a single JSON object with two keys: 'headers' and 'rows'.
'headers' should be an array of strings representing the sanitized column headers (e.g., 'Conductor (per phase)' becomes 'conductor_per_phase', and 'V (kips)' becomes 'V_kips').
'rows' should be an array of arrays, where each inner array represents a row of data. All data values in the rows, whether text or numeric, should be represented as strings.
If no table is found, return an object with empty 'headers' and 'rows' arrays."""


class ExtractionError(Exception):
    """Raised when an image cannot be turned into a table."""

    def __init__(self, details: str):
        self.details = details
        super().__init__(f"Failed to process the image. Details: {details}")


class TableExtractor(Protocol):
    def extract(self, image: bytes, mime_type: str) -> ExtractedTable: ...


def mime_type_for(path: Path) -> str:
    """Image MIME type from the file extension.

    Raises:
        ExtractionError: If the extension is not a supported image type
    """
    mime_type = SUPPORTED_MIME_TYPES.get(Path(path).suffix.lower())
    if mime_type is None:
        raise ExtractionError(f"Unsupported image type: {Path(path).suffix or '(none)'}")
    return mime_type


class OpenAITableExtractor:
    """Sends the image to a vision model with a structured-output schema.

    The key, model and base URL default to ``OPENAI_API_KEY``,
    ``LCG_EXTRACTION_MODEL`` and ``OPENAI_BASE_URL``, read after loading the
    project's ``.env``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[OpenAI] = None,
    ):
        load_dotenv(PROJECT_ROOT / ".env")
        self.model = model or os.getenv("LCG_EXTRACTION_MODEL", DEFAULT_MODEL)
        self._client = client
        self._api_key = api_key or os.getenv("OPENAI_API_KEY", "")
        self._base_url = base_url or os.getenv("OPENAI_BASE_URL") or None

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            if not self._api_key:
                raise ExtractionError("Server configuration error: OPENAI_API_KEY is missing.")
            self._client = OpenAI(api_key=self._api_key, base_url=self._base_url)
        return self._client

    def extract(self, image: bytes, mime_type: str) -> ExtractedTable:
        if mime_type not in SUPPORTED_MIME_TYPES.values():
            raise ExtractionError(f"Unsupported image type: {mime_type}")
        if not image:
            raise ExtractionError("Missing image data")

        encoded = base64.b64encode(image).decode("ascii")
        messages = [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": EXTRACTION_PROMPT},
                    {
                        "type": "image_url",
                        "image_url": {"url": f"data:{mime_type};base64,{encoded}"},
                    },
                ],
            }
        ]

        logger.debug("Requesting table extraction from %s (%d bytes)", self.model, len(image))
        try:
            completion = self.client.beta.chat.completions.parse(
                model=self.model,
                messages=messages,
                response_format=ExtractedTable,
            )
        except OpenAIError as e:
            raise ExtractionError(str(e)) from e

        parsed = completion.choices[0].message.parsed
        if parsed is None:
            raise ExtractionError(
                "AI model returned an empty response. This may be due to content safety filters or other issues."
            )
        return parsed
