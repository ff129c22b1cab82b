"""Per-load-case overload factors used to recover unfactored loads."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from utils.data_utils import cell_to_str, parse_numeric_safe

from .table_models import CellValue, LoadCaseRecord, OverloadFactorEntry

logger = logging.getLogger(__name__)

LOAD_CASE_COLUMN = "Load Case"
VERTICAL_OLF_COLUMN = "Vertical OLF"
TENSION_OLF_COLUMN = "Tension OLF"

FactorLookup = Union["OverloadFactorTable", Mapping[str, Tuple[float, float]]]


class OverloadFactorTable:
    """Ordered (load case, vertical OLF, tension OLF) entries.

    The table is rebuilt with ``derive`` whenever the load case records or
    the label mapping change; user edits made with ``set_factors`` last until
    that next rebuild. Values are not validated on write; a zero factor is
    rejected by the generator instead.
    """

    def __init__(self, entries: Optional[Iterable[OverloadFactorEntry]] = None):
        self._entries: List[OverloadFactorEntry] = list(entries or [])

    @classmethod
    def derive(cls, records: Iterable[LoadCaseRecord]) -> "OverloadFactorTable":
        """One (1, 1) entry per record, keyed by the label as stored."""
        table = cls(OverloadFactorEntry(record.label) for record in records)
        logger.debug("Derived overload factor table with %d entries", len(table))
        return table

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, CellValue]]) -> "OverloadFactorTable":
        """Load from rows with 'Load Case', 'Vertical OLF', 'Tension OLF' columns.

        Unparseable factors read as 0, which the generator then reports.
        """
        entries = []
        for row in rows:
            label = cell_to_str(row.get(LOAD_CASE_COLUMN))
            if not label:
                continue
            entries.append(
                OverloadFactorEntry(
                    load_case=label,
                    vertical_olf=parse_numeric_safe(row.get(VERTICAL_OLF_COLUMN)),
                    tension_olf=parse_numeric_safe(row.get(TENSION_OLF_COLUMN)),
                )
            )
        return cls(entries)

    def to_rows(self) -> List[Dict[str, CellValue]]:
        return [
            {
                LOAD_CASE_COLUMN: entry.load_case,
                VERTICAL_OLF_COLUMN: entry.vertical_olf,
                TENSION_OLF_COLUMN: entry.tension_olf,
            }
            for entry in self._entries
        ]

    def lookup(self, load_case: str) -> Optional[OverloadFactorEntry]:
        """First entry whose label matches exactly, or None."""
        for entry in self._entries:
            if entry.load_case == load_case:
                return entry
        return None

    def set_factors(
        self,
        load_case: str,
        vertical: Optional[float] = None,
        tension: Optional[float] = None,
    ) -> bool:
        """Replace the factors of ``load_case``; False if the label is unknown."""
        entry = self.lookup(load_case)
        if entry is None:
            return False
        if vertical is not None:
            entry.vertical_olf = vertical
        if tension is not None:
            entry.tension_olf = tension
        return True

    def labels(self) -> List[str]:
        return [entry.load_case for entry in self._entries]

    def __iter__(self) -> Iterator[OverloadFactorEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def resolve_factor_lookup(factors: Optional[FactorLookup]) -> OverloadFactorTable:
    """Accept a table or a plain {label: (vertical, tension)} mapping."""
    if factors is None:
        return OverloadFactorTable()
    if isinstance(factors, OverloadFactorTable):
        return factors
    return OverloadFactorTable(
        OverloadFactorEntry(label, float(vertical), float(tension))
        for label, (vertical, tension) in factors.items()
    )
