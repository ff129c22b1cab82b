"""Vector load case table schema and keyword-driven default templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union

CellValue = Union[str, int, float]

ROW_NUMBER = "Row #"
DESCRIPTION = "Load Case Description"
DEAD_LOAD_FACTOR = "Dead Load Factor"
WIND_AREA_FACTOR = "Wind Area Factor"
TRANS_WIND_PRESSURE = "Trans. Wind Pressure (psf)"
ICE_THICKNESS = "Ice Thick. (in)"
ICE_DENSITY = "Ice Density (lbs/ft^3)"
TEMPERATURE = "Temperature (deg F)"

VECTOR_LOAD_CASE_HEADERS: Tuple[str, ...] = (
    ROW_NUMBER,
    DESCRIPTION,
    DEAD_LOAD_FACTOR,
    WIND_AREA_FACTOR,
    "SF for Steel Poles Arms and Towers",
    "SF for Wood Poles",
    "SF for Conc. Ult.",
    "SF for Conc. First Crack",
    "SF for Conc. Zero Tens.",
    "SF for Guys and Cables",
    "SF for Non Tubular Arms",
    "SF for Braces",
    "SF for Insuls.",
    "SF for Hardware",
    "SF For Found.",
    "SF For Climbing",
    "Point Loads",
    "Wind/Ice Model",
    TRANS_WIND_PRESSURE,
    "Longit. Wind Pressure (psf)",
    ICE_THICKNESS,
    ICE_DENSITY,
    TEMPERATURE,
    "Pole Deflection Check",
    "Pole Deflection Limit % or (ft)",
    "Joint Displ.",
)

ICE_DENSITY_LBS_FT3 = 57

# Vector mapping attribute -> output column it feeds.
MAPPABLE_TARGETS: Dict[str, str] = {
    "wind": TRANS_WIND_PRESSURE,
    "dead_load": DEAD_LOAD_FACTOR,
    "ice_thick": ICE_THICKNESS,
    "temp": TEMPERATURE,
}

DEFAULT_KEYWORD = "default"


@dataclass(frozen=True)
class TemplateRule:
    """Default column values applied when ``keyword`` occurs in a load case label."""

    keyword: str
    """Lower-case substring to look for, or 'default' for the base rule"""

    overrides: Mapping[str, CellValue] = field(default_factory=dict)
    """Target column -> default value"""

    def __post_init__(self) -> None:
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))

    @property
    def is_default(self) -> bool:
        return self.keyword == DEFAULT_KEYWORD

    def matches(self, label: str) -> bool:
        return not self.is_default and self.keyword in label.lower()


DEFAULT_RULE = TemplateRule(
    DEFAULT_KEYWORD,
    {
        DEAD_LOAD_FACTOR: 1,
        WIND_AREA_FACTOR: 1,
        "SF for Steel Poles Arms and Towers": 1,
        "SF for Wood Poles": 0,
        "SF for Conc. Ult.": 0,
        "SF for Conc. First Crack": 0,
        "SF for Conc. Zero Tens.": 0,
        "SF for Guys and Cables": 0.9,
        "SF for Non Tubular Arms": 1,
        "SF for Braces": 1,
        "SF for Insuls.": 1,
        "SF for Hardware": 1,
        "SF For Found.": 1,
        "SF For Climbing": 0,
        "Point Loads": "",
        "Wind/Ice Model": "Wind on All",
        "Longit. Wind Pressure (psf)": 0,
        ICE_THICKNESS: 0,
        ICE_DENSITY: ICE_DENSITY_LBS_FT3,
        TEMPERATURE: 0,
        "Pole Deflection Check": "No Limit",
        "Pole Deflection Limit % or (ft)": 0,
        "Joint Displ.": 0,
    },
)

# Evaluated in this order; the first keyword found in the label wins, so
# "b w/ olf" must stay ahead of the broader "rule b".
KEYWORD_RULES: Tuple[TemplateRule, ...] = (
    TemplateRule(
        "b w/ olf",
        {
            DEAD_LOAD_FACTOR: 1.5,
            WIND_AREA_FACTOR: 1.1,
            "Longit. Wind Pressure (psf)": 10,
            ICE_THICKNESS: 0.5,
            TEMPERATURE: 0,
        },
    ),
    TemplateRule("rule b", {DEAD_LOAD_FACTOR: 1.5, WIND_AREA_FACTOR: 1.1, TEMPERATURE: 30}),
    TemplateRule("rule c", {DEAD_LOAD_FACTOR: 1.1, WIND_AREA_FACTOR: 1.1, TEMPERATURE: 60}),
    TemplateRule(
        "rule d",
        {DEAD_LOAD_FACTOR: 1.1, WIND_AREA_FACTOR: 1.1, ICE_THICKNESS: 0.75, TEMPERATURE: 15},
    ),
    TemplateRule("asce", {DEAD_LOAD_FACTOR: 1, WIND_AREA_FACTOR: 1.1, ICE_THICKNESS: 1, TEMPERATURE: 32}),
)


def select_rule(label: str, rules: Tuple[TemplateRule, ...] = KEYWORD_RULES) -> Optional[TemplateRule]:
    """Return the first keyword rule matching ``label`` (case-insensitive)."""
    for rule in rules:
        if rule.matches(label):
            return rule
    return None


def resolve_template(
    label: str,
    rules: Tuple[TemplateRule, ...] = KEYWORD_RULES,
    default: TemplateRule = DEFAULT_RULE,
) -> Dict[str, CellValue]:
    """Merge the matching keyword rule (if any) on top of the default rule."""
    merged: Dict[str, CellValue] = dict(default.overrides)
    rule = select_rule(label, rules)
    if rule is not None:
        merged.update(rule.overrides)
    return merged
