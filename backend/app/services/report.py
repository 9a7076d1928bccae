"""Fixed-width console table for weekly pay results."""
from typing import Iterable

from app.services.calculator import CalculationResult, PayRuleEngine

_HEADER_FORMAT = "{:>10} {:>15} {:>15} {:>15} {:>25}"
_ROW_FORMAT = "{:>10d} {:>15.2f} {:>15d} {:>15.2f} {:>25}"


def format_header() -> str:
    return _HEADER_FORMAT.format(
        "Employee", "Base Pay", "Hours Worked", "Total To Pay", "Error Info"
    )


def format_row(order: int, base_pay: float, hours: int, result: CalculationResult) -> str:
    return _ROW_FORMAT.format(order, base_pay, hours, result.total_pay, result.status.value)


def format_table(engine: PayRuleEngine, entries: Iterable[tuple[float, int]]) -> list[str]:
    """Header plus one row per (base_pay, hours) entry, numbered from 1."""
    lines = [format_header()]
    for order, (base_pay, hours) in enumerate(entries, start=1):
        lines.append(format_row(order, base_pay, hours, engine.evaluate(base_pay, hours)))
    return lines
