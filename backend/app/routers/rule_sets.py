from typing import Mapping

from fastapi import APIRouter, Depends

from app.dependencies import get_rule_sets, resolve_engine
from app.models.schemas import RuleSetResponse
from app.services.calculator import PayRuleEngine

router = APIRouter()


def _to_response(engine: PayRuleEngine) -> RuleSetResponse:
    params = engine.parameters
    overtime = engine.overtime
    return RuleSetResponse(
        name=engine.name,
        min_hourly_rate=params.min_hourly_rate,
        overtime_threshold_hours=params.overtime_threshold_hours,
        overtime_multiplier=params.overtime_multiplier,
        max_weekly_hours=params.max_weekly_hours,
        overtime_kind=overtime.kind,
        tier_threshold_hours=overtime.tier_threshold_hours,
        tier_multiplier=overtime.tier_multiplier,
    )


@router.get("/api/v1/rule-sets", response_model=list[RuleSetResponse])
async def list_rule_sets(
    registry: Mapping[str, PayRuleEngine] = Depends(get_rule_sets),
):
    return [_to_response(engine) for engine in registry.values()]


@router.get("/api/v1/rule-sets/{name}", response_model=RuleSetResponse)
async def get_rule_set(
    name: str,
    registry: Mapping[str, PayRuleEngine] = Depends(get_rule_sets),
):
    return _to_response(resolve_engine(registry, name))
