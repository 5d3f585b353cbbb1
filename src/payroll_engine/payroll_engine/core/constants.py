"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_MORNING_START = Decimal("8.0")
DEFAULT_MORNING_END = Decimal("12.0")
DEFAULT_AFTERNOON_START = Decimal("13.0")
DEFAULT_AFTERNOON_END = Decimal("17.0")
DEFAULT_GRACE_PERIOD_MINUTES = 30
DEFAULT_SESSION_CAP_HOURS = Decimal("4")
DEFAULT_MAX_DAILY_HOURS = Decimal("8")
# 12:01 and 12:59 expressed in decimal hours
DEFAULT_BREAK_START = Decimal(12) + Decimal(1) / Decimal(60)
DEFAULT_BREAK_END = Decimal(12) + Decimal(59) / Decimal(60)

MAX_GRACE_PERIOD_MINUTES = 60
MAX_SESSION_CAP_HOURS = Decimal("12")
MAX_DAILY_HOURS = Decimal("24")

STANDARD_DAY_HOURS = 8
DEFAULT_OVERTIME_TO_LEAVE_RATIO = Decimal("0.125")
DEFAULT_LATE_BLOCK_MINUTES = 15

HOURS_QUANTUM = Decimal("0.01")
MONEY_QUANTUM = Decimal("0.01")
LEAVE_DAYS_QUANTUM = Decimal("0.001")
