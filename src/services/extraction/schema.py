"""Pydantic model for the structured table returned by the extraction model.

Used as the structured-output response format. Every cell is kept as a
string here; numeric coercion happens later in ``to_raw_table``.
"""

from pydantic import BaseModel, field_validator


class ExtractedTable(BaseModel):
    """Headers plus rows of string cells, both empty when no table was found."""

    headers: list[str]
    rows: list[list[str]]

    @field_validator("headers")
    @classmethod
    def strip_headers(cls, v: list[str]) -> list[str]:
        return [header.strip() for header in v]

    @property
    def is_empty(self) -> bool:
        return not self.headers or not self.rows
