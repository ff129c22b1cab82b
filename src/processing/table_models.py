"""Value types shared by the load case generation pipeline."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from config.load_case_fields import (
    JOINT_LABEL,
    LOAD_CASE,
    LONGITUDINAL_LOAD,
    ROW_NUMBER,
    TRANSVERSE_LOAD,
    UNFACTORED_SUFFIX,
    VERTICAL_LOAD,
)
from utils.data_utils import parse_numeric_safe

CellValue = Union[str, int, float]
RawRow = Dict[str, CellValue]

_SEQUENCE_PREFIX = re.compile(r"^\d+\.\s*")
_UNFACTORED_TAIL = re.compile(rf"\s{UNFACTORED_SUFFIX}$")


def strip_sequence_prefix(label: str) -> str:
    """Remove a leading '<digits>. ' sequence prefix ('3. Rule B' -> 'Rule B')."""
    return _SEQUENCE_PREFIX.sub("", label, count=1)


def base_load_case_name(label: str) -> str:
    """Label with its sequence prefix and ' UNFACT' suffix removed, trimmed."""
    return _UNFACTORED_TAIL.sub("", strip_sequence_prefix(label), count=1).strip()


@dataclass
class RawTable:
    """An extracted or loaded table: ordered headers plus row mappings."""

    headers: List[str] = field(default_factory=list)
    rows: List[RawRow] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.headers or not self.rows

    def __len__(self) -> int:
        return len(self.rows)


@dataclass
class LoadCaseRecord:
    """One engineering load case with canonical force components in kips.

    Force components are None when the source column is unmapped or the cell
    is missing; consumers treat None as zero.
    """

    label: str
    c_v: Optional[float] = None
    c_t: Optional[float] = None
    c_l: Optional[float] = None
    sw_v: Optional[float] = None
    sw_t: Optional[float] = None
    sw_l: Optional[float] = None
    wind_psf: Optional[float] = None
    fields: RawRow = field(default_factory=dict)

    def force(self, name: str) -> float:
        """Canonical force component (e.g. 'sw_v'), zero when absent."""
        return getattr(self, name) or 0.0

    def source_value(self, column: str) -> float:
        """Numeric value of a passthrough column, zero when unset or non-numeric."""
        if not column:
            return 0.0
        return parse_numeric_safe(self.fields.get(column))


@dataclass(frozen=True)
class GeneratedForceRow:
    """One joint's force at one load case, in pounds."""

    row_number: int
    load_case: str
    joint_label: str
    vertical: float
    transverse: float
    longitudinal: float

    def as_record(self) -> Dict[str, CellValue]:
        """Row keyed by the export column names."""
        return {
            ROW_NUMBER: self.row_number,
            LOAD_CASE: self.load_case,
            JOINT_LABEL: self.joint_label,
            VERTICAL_LOAD: self.vertical,
            TRANSVERSE_LOAD: self.transverse,
            LONGITUDINAL_LOAD: self.longitudinal,
        }


@dataclass
class OverloadFactorEntry:
    load_case: str
    vertical_olf: float = 1.0
    tension_olf: float = 1.0

    @property
    def has_zero_factor(self) -> bool:
        return self.vertical_olf == 0 or self.tension_olf == 0

    @property
    def is_identity(self) -> bool:
        return self.vertical_olf == 1 and self.tension_olf == 1
