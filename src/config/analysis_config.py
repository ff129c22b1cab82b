"""Configuration for load case generation and vector table derivation."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from config.load_case_fields import resolve_mapped_column
from config.vector_templates import MAPPABLE_TARGETS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CustomJointLoadSpec:
    """A user-defined extra joint whose forces come from named table columns."""

    joint_label: str
    """Joint label prefix (e.g., 'ARM'); numbered when num_joints > 1"""

    num_joints: int = 1
    """How many joints carry this load; specs with a count <= 0 are skipped"""

    vertical_source: str = ""
    """Record field supplying the vertical force in kips"""

    transverse_source: str = ""
    """Record field supplying the transverse force in kips"""

    longitudinal_source: str = ""
    """Record field supplying the longitudinal force in kips"""

    @property
    def is_active(self) -> bool:
        return bool(self.joint_label and self.joint_label.strip()) and self.num_joints > 0


@dataclass(frozen=True)
class AnalysisConfig:
    """Joint layout and options for a generation run."""

    num_shields: int = 1
    num_conductors: int = 3
    shield_label: str = "SW"
    conductor_label: str = "C"
    custom_loads: tuple[CustomJointLoadSpec, ...] = ()
    generate_unfactored: bool = False

    def __post_init__(self) -> None:
        if self.num_shields < 0:
            raise ValueError(f"num_shields must be >= 0, got {self.num_shields}")
        if self.num_conductors < 0:
            raise ValueError(f"num_conductors must be >= 0, got {self.num_conductors}")
        object.__setattr__(self, "custom_loads", tuple(self.custom_loads))


@dataclass(frozen=True)
class VectorMapping:
    """Primary-table columns feeding the vector load case table."""

    load_case: str = ""
    wind: str = ""
    dead_load: str = ""
    ice_thick: str = ""
    temp: str = ""

    def source_for(self, target: str) -> str:
        """Return the column mapped to a MAPPABLE_TARGETS key ('' if unset)."""
        if target not in MAPPABLE_TARGETS:
            raise KeyError(f"Unknown vector mapping target: {target}")
        return getattr(self, target)


@dataclass(frozen=True)
class JoinKeys:
    """Single-key equality join between the primary and secondary tables."""

    primary: str = ""
    secondary: str = ""

    @property
    def is_configured(self) -> bool:
        return bool(self.primary) and bool(self.secondary)


@dataclass(frozen=True)
class VectorTableConfig:
    mapping: VectorMapping = field(default_factory=VectorMapping)
    join_keys: JoinKeys = field(default_factory=JoinKeys)
    wind_area_factor: float = 1

    @classmethod
    def from_field_mapping(cls, field_mapping: Mapping[str, str]) -> "VectorTableConfig":
        """Default vector configuration derived from a confirmed field mapping."""
        load_case = resolve_mapped_column(dict(field_mapping), "load_case") or ""
        wind = resolve_mapped_column(dict(field_mapping), "wind_psf") or ""
        return cls(
            mapping=VectorMapping(load_case=load_case, wind=wind),
            join_keys=JoinKeys(primary=load_case, secondary=""),
            wind_area_factor=1,
        )

    def with_label_column(self, column: str) -> "VectorTableConfig":
        """Change the label column; the primary join key follows it."""
        return replace(
            self,
            mapping=replace(self.mapping, load_case=column),
            join_keys=replace(self.join_keys, primary=column),
        )


@dataclass(frozen=True)
class ProjectConfig:
    """Everything a CLI run needs besides the input tables."""

    field_mapping: Dict[str, str] = field(default_factory=dict)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    vector: Optional[VectorTableConfig] = None

    def vector_config(self) -> VectorTableConfig:
        """Explicit vector config, or the default derived from the field mapping."""
        if self.vector is not None:
            return self.vector
        return VectorTableConfig.from_field_mapping(self.field_mapping)


def _known(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - names)
    if unknown:
        logger.debug("Ignoring unknown %s keys: %s", cls.__name__, unknown)
    return {k: v for k, v in data.items() if k in names}


def _as_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be an integer, got {value!r}") from e


def _as_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false, got {value!r}")
    return value


def parse_custom_load(data: Mapping[str, Any]) -> CustomJointLoadSpec:
    values = _known(CustomJointLoadSpec, data)
    if "num_joints" in values:
        values["num_joints"] = _as_int("num_joints", values["num_joints"])
    for key in ("joint_label", "vertical_source", "transverse_source", "longitudinal_source"):
        if key in values:
            values[key] = "" if values[key] is None else str(values[key])
    return CustomJointLoadSpec(**values)


def parse_analysis_config(data: Mapping[str, Any]) -> AnalysisConfig:
    values = _known(AnalysisConfig, data)
    values["custom_loads"] = tuple(parse_custom_load(spec) for spec in values.get("custom_loads", []))
    for key in ("num_shields", "num_conductors"):
        if key in values:
            values[key] = _as_int(key, values[key])
    if "generate_unfactored" in values:
        values["generate_unfactored"] = _as_bool("generate_unfactored", values["generate_unfactored"])
    return AnalysisConfig(**values)


def parse_vector_config(data: Mapping[str, Any]) -> VectorTableConfig:
    return VectorTableConfig(
        mapping=VectorMapping(**_known(VectorMapping, data.get("mapping", {}))),
        join_keys=JoinKeys(**_known(JoinKeys, data.get("join_keys", {}))),
        wind_area_factor=float(data.get("wind_area_factor", 1)),
    )


def parse_project_config(data: Mapping[str, Any]) -> ProjectConfig:
    """Build a ProjectConfig from a JSON-like mapping."""
    vector_data = data.get("vector")
    return ProjectConfig(
        field_mapping={str(k): str(v) for k, v in data.get("field_mapping", {}).items()},
        analysis=parse_analysis_config(data.get("analysis", {})),
        vector=parse_vector_config(vector_data) if vector_data is not None else None,
    )


def load_project_config(path: Union[str, Path]) -> ProjectConfig:
    """Read a JSON project configuration file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the JSON is malformed or a value is out of range
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {config_path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{config_path.name} must contain a JSON object")
    return parse_project_config(data)


__all__: List[str] = [
    "AnalysisConfig",
    "CustomJointLoadSpec",
    "JoinKeys",
    "ProjectConfig",
    "VectorMapping",
    "VectorTableConfig",
    "load_project_config",
    "parse_project_config",
]
