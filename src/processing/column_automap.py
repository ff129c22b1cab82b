"""Best-effort column auto-mapping used to pre-fill a field mapping."""

from __future__ import annotations

import re
from typing import Dict, Mapping, Optional, Sequence

from config.load_case_fields import STANDARD_FIELDS

UNMAPPED = "none"

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_NON_ALNUM_SPACE = re.compile(r"[^a-z0-9\s]")


def _normalize_field_label(label: str) -> str:
    return _NON_ALNUM.sub("", label.lower())


def _normalize_header(header: str) -> str:
    return _NON_ALNUM_SPACE.sub("", header.lower().replace("_", " "))


def match_score(field_label: str, header: str) -> float:
    """Share of the header taken up by the field label, 0 when it is absent."""
    needle = _normalize_field_label(field_label)
    haystack = _normalize_header(header)
    if not needle or not haystack or needle not in haystack:
        return 0.0
    return len(needle) / len(haystack)


def auto_map(
    headers: Sequence[str],
    fields: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Propose a field -> header mapping.

    Fields are matched in declaration order and each header is used at most
    once; the highest score wins and the earlier header wins a tie. Fields
    without any match map to 'none'.
    """
    fields = STANDARD_FIELDS if fields is None else fields
    mapping: Dict[str, str] = {}
    used = set()

    for key, label in fields.items():
        best_header = None
        best_score = 0.0
        for header in headers:
            if header in used:
                continue
            score = match_score(label, header)
            if score > best_score:
                best_header = header
                best_score = score

        if best_header is None:
            mapping[key] = UNMAPPED
        else:
            mapping[key] = best_header
            used.add(best_header)

    return mapping
