"""Explicit recomputation stages from an extracted table to output tables.

The pipeline owns one snapshot of every input and derived table. Each
upstream change is a method call that recomputes exactly the stages that
depend on it, in order, so the overload factor table is always rebuilt
before generation reads it.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional

from config.analysis_config import AnalysisConfig, VectorTableConfig
from config.load_case_fields import LABEL_FIELD, resolve_mapped_column
from utils.data_utils import parse_numeric_safe

from .field_mapper import map_load_cases, number_load_cases
from .load_case_generator import GenerationResult, LoadCaseGenerator
from .overload_factors import OverloadFactorTable
from .table_models import GeneratedForceRow, LoadCaseRecord, RawRow, RawTable
from .vector_table_builder import VectorLoadCaseRow, build_vector_table

logger = logging.getLogger(__name__)

NO_LOAD_CASES_MESSAGE = "No valid load case data found. Please check your column mapping."


class LoadCasePipeline:
    """Holds the current tables and recomputes derived ones on demand."""

    def __init__(self, analysis: Optional[AnalysisConfig] = None):
        self.analysis = analysis or AnalysisConfig()
        self.pristine = RawTable()
        self.table = RawTable()
        self.field_mapping: Dict[str, str] = {}
        self.records: List[LoadCaseRecord] = []
        self.overload_factors = OverloadFactorTable()
        self.generation = GenerationResult()
        self.vector_config = VectorTableConfig()
        self.secondary: Optional[RawTable] = None
        self.vector_rows: List[VectorLoadCaseRow] = []

    # -- primary table -------------------------------------------------

    def load_table(self, table: RawTable) -> None:
        """Start over from a freshly extracted primary table."""
        self.pristine = RawTable(list(table.headers), [dict(row) for row in table.rows])
        self.table = RawTable(list(table.headers), [dict(row) for row in table.rows])
        self.field_mapping = {}
        self.records = []
        self.overload_factors = OverloadFactorTable()
        self.generation = GenerationResult()
        self.vector_config = VectorTableConfig()
        self.secondary = None
        self.vector_rows = []
        logger.info("Loaded primary table with %d rows", len(table.rows))

    def apply_mapping(self, mapping: Mapping[str, str]) -> None:
        """Confirm a field mapping.

        Labels of the pristine rows are numbered, records and the overload
        factor table are rebuilt, and the vector configuration is reset to
        the defaults implied by the mapping.
        """
        self.field_mapping = dict(mapping)
        label_column = resolve_mapped_column(self.field_mapping, LABEL_FIELD)
        rows = number_load_cases(self.pristine.rows, label_column)
        self.table = RawTable(list(self.pristine.headers), rows)
        self.vector_config = VectorTableConfig.from_field_mapping(self.field_mapping)
        self._remap()

    def update_rows(self, rows: List[RawRow]) -> None:
        """Replace the working rows after a user edit."""
        self.table = RawTable(list(self.table.headers), [dict(row) for row in rows])
        self._remap()

    def _remap(self) -> None:
        self.records = map_load_cases(self.table.rows, self.field_mapping)
        self.overload_factors = OverloadFactorTable.derive(self.records)

    # -- generation ----------------------------------------------------

    def set_overload_factors(
        self,
        load_case: str,
        vertical: Optional[float] = None,
        tension: Optional[float] = None,
    ) -> bool:
        return self.overload_factors.set_factors(load_case, vertical, tension)

    def replace_overload_factors(self, table: OverloadFactorTable) -> None:
        """Use an edited overload factor table until the next remap."""
        self.overload_factors = table

    def set_analysis(self, analysis: AnalysisConfig) -> None:
        self.analysis = analysis

    def generate(self) -> GenerationResult:
        if not self.records:
            self.generation = GenerationResult(rows=[], error=NO_LOAD_CASES_MESSAGE)
            return self.generation
        self.generation = LoadCaseGenerator(self.analysis).generate(self.records, self.overload_factors)
        return self.generation

    @property
    def generated_rows(self) -> List[GeneratedForceRow]:
        return self.generation.rows

    # -- vector table --------------------------------------------------

    def load_secondary(self, table: Optional[RawTable]) -> None:
        self.secondary = table

    def set_vector_config(self, config: VectorTableConfig) -> None:
        self.vector_config = config

    def reset_vector_config(self) -> None:
        self.vector_config = VectorTableConfig.from_field_mapping(self.field_mapping)

    def build_vector_table(self) -> List[VectorLoadCaseRow]:
        self.vector_rows = build_vector_table(
            self.vector_config,
            self.table,
            generated_rows=self.generated_rows,
            secondary=self.secondary,
        )
        return self.vector_rows

    def edit_vector_cell(self, row_index: int, header: str, text: str) -> None:
        """Hand-edit one vector cell; numeric cells stay numeric when the text parses.

        Raises:
            IndexError: If row_index is out of range
            KeyError: If header is not a vector table column
        """
        row = self.vector_rows[row_index]
        if header not in row:
            raise KeyError(f"Unknown vector table column: {header}")

        current = row[header]
        new_value = text
        if isinstance(current, (int, float)) and not isinstance(current, bool):
            parsed = parse_numeric_safe(text, default=None)
            if parsed is not None:
                new_value = parsed

        updated = dict(row)
        updated[header] = new_value
        self.vector_rows[row_index] = updated
