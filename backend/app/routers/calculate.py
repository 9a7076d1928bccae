from typing import Mapping

from fastapi import APIRouter, Depends

from app.config import settings
from app.dependencies import get_rule_sets, resolve_engine
from app.models.schemas import (
    WeeklyPayRequest,
    WeeklyPayResponse,
    ReportRequest,
    ReportResponse,
)
from app.services.calculator import PayRuleEngine
from app.services.report import format_table

router = APIRouter()


@router.post("/api/v1/calculate/weekly", response_model=WeeklyPayResponse)
async def calculate_weekly_pay(
    request: WeeklyPayRequest,
    registry: Mapping[str, PayRuleEngine] = Depends(get_rule_sets),
):
    """Out-of-range pay or hours come back as a status, not an HTTP error."""
    engine = resolve_engine(registry, request.rule_set or settings.default_rule_set)
    result = engine.evaluate(request.base_pay, request.hours)
    return WeeklyPayResponse(
        rule_set=engine.name,
        base_pay=request.base_pay,
        hours=request.hours,
        status=result.status,
        total_pay=result.total_pay,
    )


@router.post("/api/v1/calculate/report", response_model=ReportResponse)
async def calculate_report(
    request: ReportRequest,
    registry: Mapping[str, PayRuleEngine] = Depends(get_rule_sets),
):
    engine = resolve_engine(registry, request.rule_set or settings.default_rule_set)
    lines = format_table(engine, [(e.base_pay, e.hours) for e in request.entries])
    return ReportResponse(rule_set=engine.name, lines=lines)
