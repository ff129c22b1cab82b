"""Canonical load case fields and generated force row columns."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

# Canonical field key -> display label. Declaration order drives the
# column auto-mapper and the displayed column order after mapping.
STANDARD_FIELDS: Dict[str, str] = {
    "load_case": "Load Case",
    "c_v": "C-V",
    "c_t": "C-T",
    "c_l": "C-L",
    "sw_v": "SW-V",
    "sw_t": "SW-T",
    "sw_l": "SW-L",
    "wind_psf": "WIND (PSF)",
}

LABEL_FIELD = "load_case"

FORCE_FIELDS: Tuple[str, ...] = ("c_v", "c_t", "c_l", "sw_v", "sw_t", "sw_l")

# Mapping values that mean "this field is not mapped to any column".
UNMAPPED_VALUES = frozenset({"", "none"})

# Extracted tables are tabulated in kips; joint loads are written in pounds.
KIPS_TO_LBS = 1000

ROW_NUMBER = "Row #"
LOAD_CASE = "Load Case"
JOINT_LABEL = "Joint Label"
VERTICAL_LOAD = "Vertical Load (lbs)"
TRANSVERSE_LOAD = "Transverse Load (lbs)"
LONGITUDINAL_LOAD = "Longitudinal Loads (lbs)"

GENERATED_ROW_HEADERS: Tuple[str, ...] = (
    ROW_NUMBER,
    LOAD_CASE,
    JOINT_LABEL,
    VERTICAL_LOAD,
    TRANSVERSE_LOAD,
    LONGITUDINAL_LOAD,
)

UNFACTORED_SUFFIX = "UNFACT"


def resolve_mapped_column(mapping: Dict[str, Optional[str]], field: str) -> Optional[str]:
    """Return the column mapped to ``field`` or None when it is unmapped."""
    column = mapping.get(field)
    if column is None or column.strip().lower() in UNMAPPED_VALUES:
        return None
    return column
