"""
Weekly pay calculation engine.

Regular hours are paid at the base hourly salary and hours past the overtime
threshold at base salary times the overtime multiplier. Input is checked
against the rule set and a status code is returned with the pay:

    INVALID_INPUT        base pay or hours not positive; pay is always 0
    TOO_LOW_BASE_SALARY  base pay under the minimum; pay still calculated
    TOO_MANY_HOURS       hours over the weekly maximum; pay still calculated
    ACCEPTED             everything in range

If base pay is too low and hours too many at the same time, only
TOO_LOW_BASE_SALARY is reported. The salary check runs first.
"""
import logging
import math
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.services.pay_rules import (
    MIN_HOURLY_RATE,
    OVERTIME_THRESHOLD_HOURS,
    OVERTIME_MULTIPLIER,
    MAX_WEEKLY_HOURS,
)

logger = logging.getLogger(__name__)


class CalculationStatus(str, Enum):
    ACCEPTED = "ACCEPTED"
    TOO_MANY_HOURS = "TOO_MANY_HOURS"
    TOO_LOW_BASE_SALARY = "TOO_LOW_BASE_SALARY"
    INVALID_INPUT = "INVALID_INPUT"


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: CalculationStatus
    total_pay: float


class RuleParameters(BaseModel):
    """The four tunable numbers of a rule set. Defaults are the general rules."""

    model_config = ConfigDict(frozen=True)

    min_hourly_rate: float = Field(default=MIN_HOURLY_RATE, gt=0)
    overtime_threshold_hours: int = Field(default=OVERTIME_THRESHOLD_HOURS, gt=0)
    overtime_multiplier: float = Field(default=OVERTIME_MULTIPLIER, gt=0)
    max_weekly_hours: int = Field(default=MAX_WEEKLY_HOURS, gt=0)


class OvertimeRule(BaseModel):
    """Which pay formula a rule set uses, plus the second tier when there is one."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["standard", "two_tier"] = "standard"
    tier_threshold_hours: Optional[int] = Field(default=None, gt=0)
    tier_multiplier: Optional[float] = Field(default=None, gt=0)

    @model_validator(mode="after")
    def _check_tier(self) -> "OvertimeRule":
        has_tier = self.tier_threshold_hours is not None or self.tier_multiplier is not None
        if self.kind == "two_tier":
            if self.tier_threshold_hours is None or self.tier_multiplier is None:
                raise ValueError("two_tier overtime needs tier_threshold_hours and tier_multiplier")
        elif has_tier:
            raise ValueError("tier settings only apply to two_tier overtime")
        return self


def standard_overtime_pay(params: RuleParameters, base_pay: float, hours: int) -> float:
    """base_pay * hours, plus the extra (multiplier - 1) share for hours past the threshold."""
    pay = base_pay * hours
    if hours > params.overtime_threshold_hours:
        pay += (
            (hours - params.overtime_threshold_hours)
            * base_pay
            * (params.overtime_multiplier - 1.0)
        )
    return pay


def two_tier_overtime_pay(
    params: RuleParameters,
    base_pay: float,
    hours: int,
    tier_threshold_hours: int,
    tier_multiplier: float,
) -> float:
    """
    Standard pay up to the tier threshold. Hours past it are paid at
    base_pay * tier_multiplier, on top of the standard pay at the threshold.
    """
    if hours <= tier_threshold_hours:
        return standard_overtime_pay(params, base_pay, hours)
    pay = standard_overtime_pay(params, base_pay, tier_threshold_hours)
    pay += (hours - tier_threshold_hours) * base_pay * tier_multiplier
    return pay


def _is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float
        return False


class PayRuleEngine:
    """Rule parameters and overtime formula for one rule set. Safe to share."""

    def __init__(
        self,
        name: str,
        parameters: Optional[RuleParameters] = None,
        overtime: Optional[OvertimeRule] = None,
    ):
        self._name = name
        self._parameters = parameters or RuleParameters()
        self._overtime = overtime or OvertimeRule()

    @property
    def name(self) -> str:
        return self._name

    @property
    def parameters(self) -> RuleParameters:
        return self._parameters

    @property
    def overtime(self) -> OvertimeRule:
        return self._overtime

    def __repr__(self) -> str:
        return f"PayRuleEngine(name={self._name!r}, overtime={self._overtime.kind!r})"

    def validate(self, base_pay: float, hours: int) -> CalculationStatus:
        if not (_is_finite(base_pay) and _is_finite(hours)):
            return CalculationStatus.INVALID_INPUT
        if base_pay <= 0 or hours <= 0:
            return CalculationStatus.INVALID_INPUT

        # Order matters: low salary is reported over too many hours.
        if base_pay < self._parameters.min_hourly_rate:
            return CalculationStatus.TOO_LOW_BASE_SALARY
        if hours > self._parameters.max_weekly_hours:
            return CalculationStatus.TOO_MANY_HOURS
        return CalculationStatus.ACCEPTED

    def compute_pay(self, base_pay: float, hours: int) -> float:
        """Weekly pay for all hours worked. Hours are not capped at the weekly maximum."""
        if self._overtime.kind == "two_tier":
            return two_tier_overtime_pay(
                self._parameters,
                base_pay,
                hours,
                self._overtime.tier_threshold_hours,
                self._overtime.tier_multiplier,
            )
        return standard_overtime_pay(self._parameters, base_pay, hours)

    def evaluate(self, base_pay: float, hours: int) -> CalculationResult:
        status = self.validate(base_pay, hours)

        total = 0.0
        if status != CalculationStatus.INVALID_INPUT:
            total = self.compute_pay(base_pay, hours)
            # Finite inputs can still overflow
            if not math.isfinite(total):
                status, total = CalculationStatus.INVALID_INPUT, 0.0

        if status != CalculationStatus.ACCEPTED:
            logger.debug(
                "rule set %s: base_pay=%s hours=%s -> %s",
                self._name, base_pay, hours, status.value,
            )
        return CalculationResult(status=status, total_pay=total)
