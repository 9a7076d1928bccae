"""
Default weekly pay rules.
Employer rule sets start from these values and override what they need.
"""

# Hourly base salary below this is flagged TOO_LOW_BASE_SALARY
MIN_HOURLY_RATE = 8.0

# Hours beyond this are paid at the overtime multiplier
OVERTIME_THRESHOLD_HOURS = 40
OVERTIME_MULTIPLIER = 1.5

# Weekly hours above this are flagged TOO_MANY_HOURS (still paid)
MAX_WEEKLY_HOURS = 60

# Second overtime tier for the two-tier rule set.
# The multiplier applies directly to the hours past the tier, not as an increment.
TIER_THRESHOLD_HOURS = 50
TIER_MULTIPLIER = 2.0

# Rule set names
GENERAL = "general"
ERICSSON = "ericsson"
TWO_TIER = "two_tier"
