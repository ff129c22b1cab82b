"""Processing module for load case generation and vector table derivation.

This module contains:
- Field mapping from extracted columns to canonical load case fields
- Column auto-mapping that proposes a field mapping from table headers
- Overload factor tables and the factored/unfactored joint load generator
- The vector load case table builder (templates + secondary table join)

Key components:
- LoadCaseGenerator: expands records into per-joint force rows
- VectorTableBuilder: derives the 26-column vector load case table
- LoadCasePipeline: explicit recomputation stages over one table snapshot
"""

from .column_automap import auto_map
from .field_mapper import FieldMapper, map_load_cases, number_load_cases
from .load_case_generator import GenerationResult, LoadCaseGenerator, generate
from .overload_factors import OverloadFactorTable
from .pipeline import LoadCasePipeline
from .table_models import GeneratedForceRow, LoadCaseRecord, OverloadFactorEntry, RawTable
from .vector_table_builder import VectorTableBuilder, build_vector_table

__all__ = [
    "FieldMapper",
    "GeneratedForceRow",
    "GenerationResult",
    "LoadCaseGenerator",
    "LoadCasePipeline",
    "LoadCaseRecord",
    "OverloadFactorEntry",
    "OverloadFactorTable",
    "RawTable",
    "VectorTableBuilder",
    "auto_map",
    "build_vector_table",
    "generate",
    "map_load_cases",
    "number_load_cases",
]
