"""Tests for vector table headers and keyword templates."""

import pytest

from config.vector_templates import (
    DEAD_LOAD_FACTOR,
    DEFAULT_RULE,
    ICE_THICKNESS,
    KEYWORD_RULES,
    TEMPERATURE,
    VECTOR_LOAD_CASE_HEADERS,
    WIND_AREA_FACTOR,
    TemplateRule,
    resolve_template,
    select_rule,
)


def test_header_schema():
    assert len(VECTOR_LOAD_CASE_HEADERS) == 26
    assert VECTOR_LOAD_CASE_HEADERS[0] == "Row #"
    assert VECTOR_LOAD_CASE_HEADERS[-1] == "Joint Displ."


def test_rule_order():
    assert [rule.keyword for rule in KEYWORD_RULES] == ["b w/ olf", "rule b", "rule c", "rule d", "asce"]


@pytest.mark.parametrize(
    "label,keyword",
    [
        ("2. Rule B w/ OLF", "b w/ olf"),
        ("3. NESC RULE B", "rule b"),
        ("Rule C Extreme Wind", "rule c"),
        ("rule d ice", "rule d"),
        ("ASCE 7 ice", "asce"),
        ("NESC Heavy", None),
    ],
)
def test_select_rule(label, keyword):
    rule = select_rule(label)
    assert (rule.keyword if rule else None) == keyword


def test_first_match_wins_when_several_keywords_occur():
    """'rule c' precedes 'asce' in the rule order."""
    assert select_rule("Rule C per ASCE").keyword == "rule c"


def test_resolve_template_merges_over_default():
    values = resolve_template("2. Rule B w/ OLF")

    assert values[DEAD_LOAD_FACTOR] == 1.5
    assert values[WIND_AREA_FACTOR] == 1.1
    assert values[ICE_THICKNESS] == 0.5
    assert values["SF for Guys and Cables"] == 0.9


def test_resolve_template_default_only():
    assert resolve_template("NESC Heavy") == dict(DEFAULT_RULE.overrides)


def test_resolve_template_is_deterministic():
    assert resolve_template("ASCE ice") == resolve_template("ASCE ice")
    assert resolve_template("ASCE ice")[TEMPERATURE] == 32


def test_custom_rule_order():
    rules = (TemplateRule("ice", {TEMPERATURE: -10}),)

    assert resolve_template("ASCE ice", rules)[TEMPERATURE] == -10


def test_overrides_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_RULE.overrides[TEMPERATURE] = 5
