from pydantic import BaseModel, Field
from typing import Optional

from app.services.calculator import CalculationStatus


class WeeklyPayRequest(BaseModel):
    rule_set: Optional[str] = None           # falls back to settings.default_rule_set
    base_pay: float                          # hourly, in dollars
    hours: int


class WeeklyPayResponse(BaseModel):
    rule_set: str
    base_pay: float
    hours: int
    status: CalculationStatus
    total_pay: float


class ReportEntry(BaseModel):
    base_pay: float
    hours: int


class ReportRequest(BaseModel):
    rule_set: Optional[str] = None
    entries: list[ReportEntry] = Field(default_factory=list)


class ReportResponse(BaseModel):
    rule_set: str
    lines: list[str]


class RuleSetResponse(BaseModel):
    name: str
    min_hourly_rate: float
    overtime_threshold_hours: int
    overtime_multiplier: float
    max_weekly_hours: int
    overtime_kind: str                       # "standard" or "two_tier"
    tier_threshold_hours: Optional[int] = None
    tier_multiplier: Optional[float] = None


class HealthResponse(BaseModel):
    status: str
    environment: str
    default_rule_set: str
