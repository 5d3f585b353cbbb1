"""Batch validation of a schedule configuration.

Rules are evaluated together so the operator sees every problem at once. Each
failure is a typed ``ConfigViolation``; rendering to text is a separate concern.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from ..core.constants import MAX_DAILY_HOURS, MAX_GRACE_PERIOD_MINUTES, MAX_SESSION_CAP_HOURS
from ..core.enums import ViolationCode

if TYPE_CHECKING:
    from .model import ScheduleConfig

TIME_FIELDS = (
    "morning_start",
    "morning_end",
    "afternoon_start",
    "afternoon_end",
    "break_start",
    "break_end",
)

_HOURS_IN_DAY = Decimal(24)


@dataclass(frozen=True)
class ConfigViolation:
    code: ViolationCode
    field: str
    value: Any = None
    params: Mapping[str, Any] = field(default_factory=dict)

    def describe(self) -> str:
        p = self.params
        if self.code == ViolationCode.NOT_A_NUMBER:
            return f"{self.field} must be a number (got {self.value!r})"
        if self.code == ViolationCode.NOT_A_FLAG:
            return f"{self.field} must be true or false (got {self.value!r})"
        if self.code == ViolationCode.UNKNOWN_OPTION:
            return f"{self.field} is not a recognised option"
        if self.code == ViolationCode.UNKNOWN_TIMEZONE:
            return f"{self.field} ({self.value!r}) is not a known IANA time zone"
        if self.code == ViolationCode.UNKNOWN_CHOICE:
            return f"{self.field} must be one of {', '.join(p.get('choices', ()))} (got {self.value!r})"
        if self.code == ViolationCode.NOT_ORDERED:
            relation = "at or before" if p.get("allow_equal") else "before"
            return f"{self.field} ({self.value}) must be {relation} {p.get('other')} ({p.get('other_value')})"
        if self.code == ViolationCode.BREAK_OUTSIDE_GAP:
            return f"break {self.field} ({self.value}) must lie between {p.get('min')} and {p.get('max')}"
        low = "(" if p.get("min_exclusive") else "["
        high = ")" if p.get("max_exclusive") else "]"
        return f"{self.field} ({self.value}) must be within {low}{p.get('min')}, {p.get('max')}{high}"


def _range(name: str, value, *, low, high, low_exclusive: bool = False, high_exclusive: bool = False):
    too_low = value <= low if low_exclusive else value < low
    too_high = value >= high if high_exclusive else value > high
    if too_low or too_high:
        return ConfigViolation(
            ViolationCode.OUT_OF_RANGE,
            name,
            value,
            {"min": low, "max": high, "min_exclusive": low_exclusive, "max_exclusive": high_exclusive},
        )
    return None


def _ordered(first: str, a, second: str, b, *, allow_equal: bool = False):
    ok = a <= b if allow_equal else a < b
    if ok:
        return None
    return ConfigViolation(ViolationCode.NOT_ORDERED, first, a, {"other": second, "other_value": b, "allow_equal": allow_equal})


def validate_schedule_config(config: "ScheduleConfig", *, skip: Iterable[str] = ()) -> list[ConfigViolation]:
    """Return every violated rule; fields listed in ``skip`` failed to parse and are not checked."""
    skip = set(skip)
    checks = []

    def usable(*names: str) -> bool:
        return not skip.intersection(names)

    for name in TIME_FIELDS:
        if usable(name):
            checks.append(_range(name, getattr(config, name), low=0, high=_HOURS_IN_DAY, high_exclusive=True))

    if usable("morning_start", "morning_end"):
        checks.append(_ordered("morning_start", config.morning_start, "morning_end", config.morning_end))
    if usable("morning_end", "afternoon_start"):
        checks.append(
            _ordered("morning_end", config.morning_end, "afternoon_start", config.afternoon_start, allow_equal=True)
        )
    if usable("afternoon_start", "afternoon_end"):
        checks.append(_ordered("afternoon_start", config.afternoon_start, "afternoon_end", config.afternoon_end))

    if usable("grace_period_minutes"):
        checks.append(_range("grace_period_minutes", config.grace_period_minutes, low=0, high=MAX_GRACE_PERIOD_MINUTES))
    if usable("session_cap_hours"):
        checks.append(
            _range("session_cap_hours", config.session_cap_hours, low=0, high=MAX_SESSION_CAP_HOURS, low_exclusive=True)
        )
    if usable("max_daily_hours"):
        checks.append(_range("max_daily_hours", config.max_daily_hours, low=0, high=MAX_DAILY_HOURS, low_exclusive=True))

    if usable("break_start", "break_end"):
        checks.append(_ordered("break_start", config.break_start, "break_end", config.break_end))

    # The break sits in the midday gap; a zero-width gap means the schedule has no break to check.
    if usable("break_start", "break_end", "morning_end", "afternoon_start") and config.morning_end < config.afternoon_start:
        for name in ("break_start", "break_end"):
            value = getattr(config, name)
            if not (config.morning_end <= value <= config.afternoon_start):
                checks.append(
                    ConfigViolation(
                        ViolationCode.BREAK_OUTSIDE_GAP,
                        name,
                        value,
                        {"min": config.morning_end, "max": config.afternoon_start},
                    )
                )

    return [c for c in checks if c is not None]
