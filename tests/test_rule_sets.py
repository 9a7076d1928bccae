"""Pytest tests for the named rule set registry."""
import pytest

from app.services.calculator import CalculationStatus, PayRuleEngine
from app.services.rule_sets import (
    RULE_SETS,
    UnknownRuleSetError,
    build_registry,
    get_engine,
)


def test_registry_has_named_rule_sets():
    assert set(RULE_SETS) == {"general", "ericsson", "two_tier"}
    assert all(isinstance(engine, PayRuleEngine) for engine in RULE_SETS.values())


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        RULE_SETS["other"] = PayRuleEngine("other")


def test_get_engine_returns_shared_instance():
    assert get_engine(RULE_SETS, "ericsson") is get_engine(RULE_SETS, "ericsson")


def test_ericsson_uses_general_rules():
    general = get_engine(RULE_SETS, "general")
    ericsson = get_engine(RULE_SETS, "ericsson")
    assert ericsson.parameters == general.parameters
    for base_pay, hours in [(7.5, 35), (8.2, 47), (10.0, 73), (0, 15)]:
        assert ericsson.evaluate(base_pay, hours) == general.evaluate(base_pay, hours)


def test_two_tier_rule_set_configuration():
    engine = get_engine(RULE_SETS, "two_tier")
    assert engine.overtime.kind == "two_tier"
    assert engine.overtime.tier_threshold_hours == 50
    assert engine.overtime.tier_multiplier == 2.0
    result = engine.evaluate(10.0, 55)
    assert result.status == CalculationStatus.ACCEPTED
    assert result.total_pay == pytest.approx(650.0)


def test_unknown_rule_set_raises():
    with pytest.raises(UnknownRuleSetError) as exc_info:
        get_engine(RULE_SETS, "acme")
    assert exc_info.value.name == "acme"
    assert "general" in str(exc_info.value)
    # Still a KeyError for callers that only know about mappings
    assert isinstance(exc_info.value, KeyError)


def test_build_registry_returns_fresh_engines():
    registry = build_registry()
    assert registry is not RULE_SETS
    assert registry["general"].parameters == RULE_SETS["general"].parameters
