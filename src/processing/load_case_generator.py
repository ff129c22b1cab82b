"""Expand load case records into per-joint factored and unfactored force rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from config.analysis_config import AnalysisConfig
from config.load_case_fields import KIPS_TO_LBS, UNFACTORED_SUFFIX
from utils.error_handling import timed
from utils.logging_utils import log_event

from .errors import ZeroOverloadFactorError
from .overload_factors import FactorLookup, OverloadFactorTable, resolve_factor_lookup
from .table_models import GeneratedForceRow, LoadCaseRecord, strip_sequence_prefix

logger = logging.getLogger(__name__)

# (joint label, vertical, transverse, longitudinal) in kips
JointForces = Tuple[str, float, float, float]


@dataclass
class GenerationResult:
    """Rows from one generation call, or the error that voided the call."""

    rows: List[GeneratedForceRow] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def load_case_names(self) -> List[str]:
        """Distinct load case names in the order they were emitted."""
        return list(dict.fromkeys(row.load_case for row in self.rows))


def joint_label(label: str, count: int, index: int) -> str:
    """Bare label for a single joint, otherwise label + 1-based index."""
    return label if count == 1 else f"{label}{index}"


def unfactored_label(label: str, case_number: int) -> str:
    """'2. NESC Heavy' -> '{case_number}. NESC Heavy UNFACT'."""
    return f"{case_number}. {strip_sequence_prefix(label)} {UNFACTORED_SUFFIX}"


class LoadCaseGenerator:
    """Generates joint force rows for a joint layout.

    Row numbers are contiguous across one ``generate`` call: factored rows
    for every load case first, then the unfactored rows.
    """

    def __init__(self, config: AnalysisConfig):
        self.config = config

    def joint_forces(self, record: LoadCaseRecord) -> Iterator[JointForces]:
        """Yield every joint's factored forces for one load case, in kips."""
        cfg = self.config

        for i in range(1, cfg.num_shields + 1):
            yield (
                joint_label(cfg.shield_label, cfg.num_shields, i),
                record.force("sw_v"),
                record.force("sw_t"),
                record.force("sw_l"),
            )

        for i in range(1, cfg.num_conductors + 1):
            yield (
                joint_label(cfg.conductor_label, cfg.num_conductors, i),
                record.force("c_v"),
                record.force("c_t"),
                record.force("c_l"),
            )

        for spec in cfg.custom_loads:
            if not spec.is_active:
                continue
            vertical = record.source_value(spec.vertical_source)
            transverse = record.source_value(spec.transverse_source)
            longitudinal = record.source_value(spec.longitudinal_source)
            for i in range(1, spec.num_joints + 1):
                yield (
                    joint_label(spec.joint_label, spec.num_joints, i),
                    vertical,
                    transverse,
                    longitudinal,
                )

    def _emit(
        self,
        rows: List[GeneratedForceRow],
        record: LoadCaseRecord,
        load_case: str,
        vertical_olf: float = 1,
        tension_olf: float = 1,
    ) -> None:
        # x / 1 is exact, so factored rows go through the same expression
        for label, vertical, transverse, longitudinal in self.joint_forces(record):
            rows.append(
                GeneratedForceRow(
                    row_number=len(rows) + 1,
                    load_case=load_case,
                    joint_label=label,
                    vertical=(vertical * KIPS_TO_LBS) / vertical_olf,
                    transverse=(transverse * KIPS_TO_LBS) / tension_olf,
                    longitudinal=(longitudinal * KIPS_TO_LBS) / tension_olf,
                )
            )

    def generate_rows(
        self,
        load_cases: Sequence[LoadCaseRecord],
        overload_factors: Optional[FactorLookup] = None,
    ) -> List[GeneratedForceRow]:
        """Build all rows for one call.

        Raises:
            ZeroOverloadFactorError: If an unfactored pass meets a zero OLF
        """
        rows: List[GeneratedForceRow] = []

        for record in load_cases:
            self._emit(rows, record, record.label)

        if not self.config.generate_unfactored:
            return rows

        factors: OverloadFactorTable = resolve_factor_lookup(overload_factors)
        unfactored_count = 0
        for record in load_cases:
            entry = factors.lookup(record.label)
            if entry is None:
                continue
            if entry.has_zero_factor:
                raise ZeroOverloadFactorError(record.label)
            if entry.is_identity:
                continue

            case_number = len(load_cases) + unfactored_count + 1
            self._emit(
                rows,
                record,
                unfactored_label(record.label, case_number),
                vertical_olf=entry.vertical_olf,
                tension_olf=entry.tension_olf,
            )
            unfactored_count += 1

        return rows

    @timed
    def generate(
        self,
        load_cases: Sequence[LoadCaseRecord],
        overload_factors: Optional[FactorLookup] = None,
    ) -> GenerationResult:
        """Generate factored (and optionally unfactored) rows.

        A zero overload factor voids the whole call: the result carries the
        error message and no rows.
        """
        try:
            rows = self.generate_rows(load_cases, overload_factors)
        except ZeroOverloadFactorError as e:
            log_event(
                logger,
                "generation.zero_olf",
                "Generation aborted: zero overload factor",
                level=logging.WARNING,
                load_case=e.load_case,
            )
            return GenerationResult(rows=[], error=str(e))

        result = GenerationResult(rows=rows)
        log_event(
            logger,
            "generation.complete",
            f"Generated {len(rows)} joint load rows",
            load_cases=len(load_cases),
            output_load_cases=len(result.load_case_names()),
            rows=len(rows),
            unfactored=self.config.generate_unfactored,
        )
        return result


def generate(
    config: AnalysisConfig,
    load_cases: Sequence[LoadCaseRecord],
    overload_factors: Optional[FactorLookup] = None,
) -> GenerationResult:
    """Functional entry point: LoadCaseGenerator(config).generate(...)."""
    return LoadCaseGenerator(config).generate(load_cases, overload_factors)
