# Add backend to path so "from app...." works when running pytest from project root
import sys
from pathlib import Path

import pytest

_backend = Path(__file__).resolve().parent.parent / "backend"
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))


@pytest.fixture
def general_engine():
    from app.services.calculator import PayRuleEngine
    return PayRuleEngine("general")


@pytest.fixture
def two_tier_engine():
    from app.services.calculator import OvertimeRule, PayRuleEngine, RuleParameters
    return PayRuleEngine(
        "two_tier",
        RuleParameters(),
        OvertimeRule(kind="two_tier", tier_threshold_hours=50, tier_multiplier=2.0),
    )
