from typing import Mapping

from fastapi import HTTPException, status

from app.services.calculator import PayRuleEngine
from app.services.rule_sets import RULE_SETS, UnknownRuleSetError, get_engine


def get_rule_sets() -> Mapping[str, PayRuleEngine]:
    """Shared registry of rule sets. Override in tests with app.dependency_overrides."""
    return RULE_SETS


def resolve_engine(registry: Mapping[str, PayRuleEngine], name: str) -> PayRuleEngine:
    try:
        return get_engine(registry, name)
    except UnknownRuleSetError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
