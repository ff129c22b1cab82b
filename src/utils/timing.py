"""Simple timing helpers for collecting phase durations with optional context."""

from __future__ import annotations

from contextlib import contextmanager
from time import perf_counter
from typing import Any, Dict, Iterator, List, Optional


class PhaseTimer:
    """Collects wall-clock durations for named CLI/pipeline phases."""

    def __init__(self, base_context: Optional[Dict[str, Any]] = None) -> None:
        self._base_context = base_context or {}
        self._entries: List[Dict[str, Any]] = []

    def as_list(self) -> List[Dict[str, Any]]:
        return list(self._entries)

    def total(self) -> float:
        """Sum of all recorded phase durations in seconds."""
        return sum(entry["duration"] for entry in self._entries)

    @contextmanager
    def measure(self, phase: str, extra: Optional[Dict[str, Any]] = None) -> Iterator[None]:
        """Record elapsed time for ``phase``; failed phases are recorded too."""
        start = perf_counter()
        try:
            yield
        finally:
            entry: Dict[str, Any] = {"phase": phase, "duration": perf_counter() - start}
            entry.update(self._base_context)
            if extra:
                entry.update(extra)
            self._entries.append(entry)
