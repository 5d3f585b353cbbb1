from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

_MICROS_PER_HOUR = Decimal(3_600_000_000)
_ONE_HOUR = timedelta(hours=1)


def hours_to_timedelta(hours: Decimal) -> timedelta:
    micros = (Decimal(hours) * _MICROS_PER_HOUR).to_integral_value(rounding=ROUND_HALF_UP)
    return timedelta(microseconds=int(micros))


def timedelta_to_hours(value: timedelta) -> Decimal:
    """Exact decimal hours for a duration (no rounding besides Decimal context)."""
    return Decimal(value // timedelta(microseconds=1)) / _MICROS_PER_HOUR


def at_decimal_hour(day: date, hours: Decimal, tz: Optional[tzinfo] = None) -> datetime:
    """Combine a calendar day with a decimal hour (e.g. 8.5 -> 08:30), naive unless ``tz`` is given."""
    return datetime.combine(day, time.min, tzinfo=tz) + hours_to_timedelta(hours)


def ceil_to_hour(value: datetime) -> datetime:
    floor = value.replace(minute=0, second=0, microsecond=0)
    return floor if floor == value else floor + _ONE_HOUR


def whole_minutes(value: timedelta) -> int:
    if value <= timedelta(0):
        return 0
    return value // timedelta(minutes=1)


def decimal_hours_to_time_string(hours: Decimal) -> str:
    """8.5 -> '08:30'."""
    total_minutes = int((Decimal(hours) * 60).to_integral_value(rounding=ROUND_HALF_UP))
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def quantize(value: Decimal, quantum: Decimal) -> Decimal:
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
