"""Data parsing and conversion utilities for extracted table cells."""

import math
import re

_INTEGER_LITERAL = re.compile(r"[+-]?\d+")


def parse_numeric_safe(val, default: float = 0.0) -> float:
    """
    Safely parse a value to float with fallback.

    Blank strings, None, NaN, infinities, underscore digit groups ("1_000")
    and anything float() rejects all fall back to the default, so a missing
    or malformed force component reads as zero.

    Args:
        val: Value to parse
        default: Default value if parsing fails

    Returns:
        Parsed float or default value
    """
    if isinstance(val, str) and (not val.strip() or "_" in val):
        return default
    try:
        result = float(val)
    except (ValueError, TypeError):
        return default
    if not math.isfinite(result):
        return default
    return result


def coerce_cell_value(value):
    """
    Coerce a raw extracted cell into a number where it looks like one.

    Args:
        value: Cell as delivered by the extraction service or a file reader

    Returns:
        "" for missing/blank cells, int for integer literals, float for other
        finite numbers, otherwise the value unchanged.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return ""
        return value

    text = str(value).strip()
    if not text:
        return ""
    if "_" in text:
        return value
    try:
        number = float(text)
    except ValueError:
        return value
    if not math.isfinite(number):
        return value
    if _INTEGER_LITERAL.fullmatch(text):
        return int(text)
    return number


def normalize_number(value):
    """Return integral floats as int (2000.0 -> 2000); other values unchanged."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def cell_to_str(value) -> str:
    """
    Render a cell the way it is shown to users and compared in joins.

    None becomes "", integral floats drop their trailing ".0".
    """
    if value is None:
        return ""
    return str(normalize_number(value))
