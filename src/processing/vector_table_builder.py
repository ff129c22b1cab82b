"""Derive the fixed-schema vector load case table.

Each distinct load case label becomes one row:
1. The matching primary-table row (by base name) supplies fallback values
2. A keyword template merged over the default rule fills engineering defaults
3. Mapped columns are taken from a joined secondary row when one matches,
   otherwise from the primary row, otherwise the template value stays
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from config.analysis_config import VectorTableConfig
from config.vector_templates import (
    DESCRIPTION,
    ICE_DENSITY,
    ICE_DENSITY_LBS_FT3,
    KEYWORD_RULES,
    MAPPABLE_TARGETS,
    ROW_NUMBER,
    VECTOR_LOAD_CASE_HEADERS,
    WIND_AREA_FACTOR,
    TemplateRule,
    resolve_template,
)
from utils.data_utils import cell_to_str
from utils.error_handling import timed
from utils.logging_utils import log_event

from .table_models import (
    CellValue,
    GeneratedForceRow,
    RawRow,
    RawTable,
    base_load_case_name,
    strip_sequence_prefix,
)

logger = logging.getLogger(__name__)

VectorLoadCaseRow = Dict[str, CellValue]


def _distinct(labels: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(label for label in labels if label and label.strip()))


def collect_labels(
    generated_rows: Optional[Sequence[GeneratedForceRow]],
    primary_rows: Sequence[RawRow],
    label_column: str,
) -> List[str]:
    """Generated load case names if any exist, else the primary table labels."""
    if generated_rows:
        return _distinct(row.load_case for row in generated_rows)
    if not label_column:
        return []
    return _distinct(cell_to_str(row.get(label_column)) for row in primary_rows)


class VectorTableBuilder:
    """Builds VectorLoadCaseRows for one configuration.

    Args:
        config: Vector mapping, join keys and global wind area factor
        rules: Keyword template rules in priority order
    """

    def __init__(self, config: VectorTableConfig, rules: Sequence[TemplateRule] = KEYWORD_RULES):
        self.config = config
        self.rules = tuple(rules)

    def _index_primary(self, rows: Sequence[RawRow]) -> Dict[str, RawRow]:
        label_column = self.config.mapping.load_case
        index: Dict[str, RawRow] = {}
        for row in rows:
            label = cell_to_str(row.get(label_column))
            if not label:
                continue
            index.setdefault(strip_sequence_prefix(label).strip(), row)
        return index

    def _index_secondary(self, secondary: Optional[RawTable]) -> Dict[str, RawRow]:
        keys = self.config.join_keys
        if not keys.is_configured or secondary is None or not secondary.rows:
            return {}
        index: Dict[str, RawRow] = {}
        for row in secondary.rows:
            key = cell_to_str(row.get(keys.secondary))
            if key:
                # later duplicates replace earlier ones
                index[key] = row
        return index

    def _join_value(self, original_row: RawRow) -> str:
        keys = self.config.join_keys
        value = original_row.get(keys.primary)
        probe = cell_to_str(value) if value not in (None, "", 0) else ""
        if keys.primary and keys.primary == self.config.mapping.load_case:
            probe = strip_sequence_prefix(probe)
        return probe

    def build_row(
        self,
        position: int,
        label: str,
        original_row: RawRow,
        primary_headers: Sequence[str],
        secondary_row: Optional[RawRow],
        secondary_headers: Sequence[str],
    ) -> VectorLoadCaseRow:
        values: Dict[str, CellValue] = resolve_template(label, self.rules)
        values[ROW_NUMBER] = position
        values[DESCRIPTION] = label
        values[WIND_AREA_FACTOR] = self.config.wind_area_factor
        values[ICE_DENSITY] = ICE_DENSITY_LBS_FT3

        for target, header in MAPPABLE_TARGETS.items():
            source = self.config.mapping.source_for(target)
            if not source:
                continue
            if secondary_row is not None and source in secondary_headers:
                values[header] = secondary_row.get(source, "")
            elif source in primary_headers:
                values[header] = original_row.get(source, "")

        return {header: values.get(header, "") for header in VECTOR_LOAD_CASE_HEADERS}

    @timed
    def build(
        self,
        labels: Sequence[str],
        primary: RawTable,
        secondary: Optional[RawTable] = None,
    ) -> List[VectorLoadCaseRow]:
        """One row per distinct label, numbered in first-appearance order."""
        primary_index = self._index_primary(primary.rows)
        secondary_index = self._index_secondary(secondary)
        secondary_headers = secondary.headers if secondary is not None else []

        output: List[VectorLoadCaseRow] = []
        joined = 0
        for label in _distinct(labels):
            original_row = primary_index.get(base_load_case_name(label), {})
            secondary_row = secondary_index.get(self._join_value(original_row)) if secondary_index else None
            if secondary_row is not None:
                joined += 1
            output.append(
                self.build_row(
                    len(output) + 1,
                    label,
                    original_row,
                    primary.headers,
                    secondary_row,
                    secondary_headers,
                )
            )

        log_event(
            logger,
            "vector_table.built",
            f"Built {len(output)} vector load case rows",
            rows=len(output),
            joined_rows=joined,
        )
        return output


def build_vector_table(
    config: VectorTableConfig,
    primary: RawTable,
    generated_rows: Optional[Sequence[GeneratedForceRow]] = None,
    secondary: Optional[RawTable] = None,
) -> List[VectorLoadCaseRow]:
    """Pick the label source, then build the table."""
    labels = collect_labels(generated_rows, primary.rows, config.mapping.load_case)
    if not labels:
        return []
    return VectorTableBuilder(config).build(labels, primary, secondary)
