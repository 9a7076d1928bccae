"""
Named rule sets, built once at startup and shared read-only.
"""
import logging
from types import MappingProxyType
from typing import Mapping

from app.services.calculator import OvertimeRule, PayRuleEngine, RuleParameters
from app.services.pay_rules import (
    GENERAL,
    ERICSSON,
    TWO_TIER,
    TIER_THRESHOLD_HOURS,
    TIER_MULTIPLIER,
)

logger = logging.getLogger(__name__)


class UnknownRuleSetError(KeyError):
    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown rule set {self.name!r}. Known rule sets: {', '.join(self.known)}"


def build_registry() -> Mapping[str, PayRuleEngine]:
    engines = [
        PayRuleEngine(GENERAL),
        # Ericsson pays by the general rules
        PayRuleEngine(ERICSSON, RuleParameters()),
        PayRuleEngine(
            TWO_TIER,
            RuleParameters(),
            OvertimeRule(
                kind="two_tier",
                tier_threshold_hours=TIER_THRESHOLD_HOURS,
                tier_multiplier=TIER_MULTIPLIER,
            ),
        ),
    ]
    registry = {engine.name: engine for engine in engines}
    logger.info("Built pay rule sets: %s", ", ".join(registry))
    return MappingProxyType(registry)


def get_engine(registry: Mapping[str, PayRuleEngine], name: str) -> PayRuleEngine:
    try:
        return registry[name]
    except KeyError:
        raise UnknownRuleSetError(name, sorted(registry)) from None


RULE_SETS = build_registry()
