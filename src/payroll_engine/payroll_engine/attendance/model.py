from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Iterable, Optional, Union

from ..common.datetime_utils import quantize, timedelta_to_hours
from ..core.anomalies import Anomaly
from ..core.constants import HOURS_QUANTUM
from ..core.enums import SessionLabel

logger = logging.getLogger(__name__)

_FIELD_BY_LABEL = {
    SessionLabel.MORNING_IN: "morning_in",
    SessionLabel.MORNING_OUT: "morning_out",
    SessionLabel.AFTERNOON_IN: "afternoon_in",
    SessionLabel.AFTERNOON_OUT: "afternoon_out",
}


@dataclass(frozen=True)
class ClockEvent:
    """Một lần chấm công thô do hệ thống thu thập gửi sang."""

    label: Union[SessionLabel, str]
    timestamp: datetime


@dataclass(frozen=True)
class SessionSet:
    """Thực thể miền (domain): Các mốc chấm công của một nhân viên trong một ngày.

    Any field may be missing; an unpaired clock-in is a valid partial day.
    """

    morning_in: Optional[datetime] = None
    morning_out: Optional[datetime] = None
    afternoon_in: Optional[datetime] = None
    afternoon_out: Optional[datetime] = None

    @classmethod
    def from_events(cls, events: Iterable[ClockEvent]) -> "SessionSet":
        """Collect labelled events; the last event seen for a label wins."""
        values: dict[str, datetime] = {}
        for event in events:
            try:
                label = SessionLabel.parse(event.label)
            except ValueError:
                logger.debug("ignoring clock event with unknown label %r", event.label)
                continue
            values[_FIELD_BY_LABEL[label]] = event.timestamp
        return cls(**values)

    @property
    def is_empty(self) -> bool:
        return not any((self.morning_in, self.morning_out, self.afternoon_in, self.afternoon_out))

    @property
    def work_date(self) -> Optional[date]:
        present = [t for t in (self.morning_in, self.morning_out, self.afternoon_in, self.afternoon_out) if t]
        return min(t.date() for t in present) if present else None


@dataclass(frozen=True)
class HoursBreakdown:
    """Kết quả tính giờ công của một ngày.

    Durations are exact; the ``*_hours`` properties round for display. Sum the
    durations, not the rounded hours, when aggregating a period.
    """

    morning_worked: timedelta = timedelta(0)
    afternoon_worked: timedelta = timedelta(0)
    total_worked: timedelta = timedelta(0)
    effective_morning_start: Optional[datetime] = None
    effective_morning_end: Optional[datetime] = None
    effective_afternoon_start: Optional[datetime] = None
    effective_afternoon_end: Optional[datetime] = None
    late_minutes: int = 0
    anomalies: tuple[Anomaly, ...] = ()

    @property
    def morning_hours(self) -> Decimal:
        return quantize(timedelta_to_hours(self.morning_worked), HOURS_QUANTUM)

    @property
    def afternoon_hours(self) -> Decimal:
        return quantize(timedelta_to_hours(self.afternoon_worked), HOURS_QUANTUM)

    @property
    def total_hours(self) -> Decimal:
        return quantize(timedelta_to_hours(self.total_worked), HOURS_QUANTUM)

    @property
    def is_working_day(self) -> bool:
        return self.total_worked > timedelta(0)


@dataclass(frozen=True)
class DailyHours:
    employee_id: int
    work_date: date
    breakdown: HoursBreakdown
