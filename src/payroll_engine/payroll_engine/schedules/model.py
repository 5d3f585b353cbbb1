from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date, datetime, tzinfo
from decimal import Decimal
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..common.datetime_utils import at_decimal_hour, decimal_hours_to_time_string
from ..common.validators import to_bool, to_decimal, to_int
from ..core import constants
from ..core.enums import HalfDay, ViolationCode
from ..core.exceptions import ConfigurationError
from .validation import ConfigViolation, validate_schedule_config

_DECIMAL_FIELDS = (
    "morning_start",
    "morning_end",
    "afternoon_start",
    "afternoon_end",
    "session_cap_hours",
    "max_daily_hours",
    "break_start",
    "break_end",
)


@dataclass(frozen=True)
class Window:
    """One half-day window resolved onto a calendar day."""

    half: HalfDay
    start: datetime
    end: datetime


@dataclass(frozen=True)
class ScheduleConfig:
    """Cấu hình lịch làm việc chuẩn (bất biến).

    Times are decimal hours on a 24h clock (8.5 == 08:30). The instance is
    validated on construction and raises ``ConfigurationError`` listing every
    violated rule; once built it is shared read-only by all calculations.
    """

    morning_start: Decimal = constants.DEFAULT_MORNING_START
    morning_end: Decimal = constants.DEFAULT_MORNING_END
    afternoon_start: Decimal = constants.DEFAULT_AFTERNOON_START
    afternoon_end: Decimal = constants.DEFAULT_AFTERNOON_END
    grace_period_minutes: int = constants.DEFAULT_GRACE_PERIOD_MINUTES
    session_cap_hours: Decimal = constants.DEFAULT_SESSION_CAP_HOURS
    max_daily_hours: Decimal = constants.DEFAULT_MAX_DAILY_HOURS
    break_start: Decimal = constants.DEFAULT_BREAK_START
    break_end: Decimal = constants.DEFAULT_BREAK_END
    round_late_entry_to_hour: bool = True
    # IANA name; aware timestamps are converted to it. None keeps each timestamp's own wall clock.
    timezone: Optional[str] = None

    def __post_init__(self) -> None:
        violations: list[ConfigViolation] = []
        unparsed: set[str] = set()

        if self.timezone is not None:
            name = str(self.timezone).strip()
            try:
                ZoneInfo(name)
            except (ZoneInfoNotFoundError, ValueError, OSError):
                violations.append(ConfigViolation(ViolationCode.UNKNOWN_TIMEZONE, "timezone", self.timezone))
            else:
                object.__setattr__(self, "timezone", name)

        for name in _DECIMAL_FIELDS:
            raw = getattr(self, name)
            value = to_decimal(raw)
            if value is None:
                violations.append(ConfigViolation(ViolationCode.NOT_A_NUMBER, name, raw))
                unparsed.add(name)
            else:
                object.__setattr__(self, name, value)

        grace = to_int(self.grace_period_minutes)
        if grace is None:
            violations.append(ConfigViolation(ViolationCode.NOT_A_NUMBER, "grace_period_minutes", self.grace_period_minutes))
            unparsed.add("grace_period_minutes")
        else:
            object.__setattr__(self, "grace_period_minutes", grace)

        flag = to_bool(self.round_late_entry_to_hour)
        if flag is None:
            violations.append(
                ConfigViolation(ViolationCode.NOT_A_FLAG, "round_late_entry_to_hour", self.round_late_entry_to_hour)
            )
        else:
            object.__setattr__(self, "round_late_entry_to_hour", flag)

        violations.extend(validate_schedule_config(self, skip=unparsed))
        if violations:
            raise ConfigurationError(violations)

    @classmethod
    def option_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @property
    def zone(self) -> Optional[tzinfo]:
        return ZoneInfo(self.timezone) if self.timezone else None

    def localize(self, moment: datetime) -> datetime:
        """Aware timestamps move to the schedule's zone; naive ones are already local."""
        if moment.tzinfo is None or not self.timezone:
            return moment
        return moment.astimezone(self.zone)

    def window(self, half: HalfDay, day: date, tz: Optional[tzinfo] = None) -> Window:
        """Window on ``day``; ``tz`` must match the awareness of the timestamps it is compared with."""
        if half == HalfDay.MORNING:
            start, end = self.morning_start, self.morning_end
        else:
            start, end = self.afternoon_start, self.afternoon_end
        return Window(half, at_decimal_hour(day, start, tz), at_decimal_hour(day, end, tz))

    def in_break(self, moment: datetime) -> bool:
        moment = self.localize(moment)
        day = moment.date()
        return (
            at_decimal_hour(day, self.break_start, moment.tzinfo)
            <= moment
            <= at_decimal_hour(day, self.break_end, moment.tzinfo)
        )

    def describe(self) -> dict[str, str]:
        """Human-readable summary for settings screens and startup logs."""
        return {
            "morning_session": f"{decimal_hours_to_time_string(self.morning_start)} - {decimal_hours_to_time_string(self.morning_end)}",
            "afternoon_session": f"{decimal_hours_to_time_string(self.afternoon_start)} - {decimal_hours_to_time_string(self.afternoon_end)}",
            "grace_period": f"{self.grace_period_minutes} minutes",
            "session_cap": f"{self.session_cap_hours.normalize():f} hours",
            "max_daily": f"{self.max_daily_hours.normalize():f} hours",
            "break_period": f"{decimal_hours_to_time_string(self.break_start)} - {decimal_hours_to_time_string(self.break_end)}",
            "timezone": self.timezone or "local",
        }
