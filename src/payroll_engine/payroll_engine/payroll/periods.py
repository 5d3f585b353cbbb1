from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator

from ..core.constants import STANDARD_DAY_HOURS
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class PayPeriod:
    """Kỳ lương: khoảng ngày [start, end] (bao gồm cả hai đầu)."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValidationError(f"Pay period start {self.start} is after end {self.end}")

    @classmethod
    def monthly(cls, year: int, month: int) -> "PayPeriod":
        last_day = calendar.monthrange(year, month)[1]
        return cls(date(year, month, 1), date(year, month, last_day))

    @property
    def name(self) -> str:
        if self.start.day == 1 and self == PayPeriod.monthly(self.start.year, self.start.month):
            return self.start.strftime("%B %Y")
        return f"{self.start:%Y-%m-%d} to {self.end:%Y-%m-%d}"

    def days(self) -> Iterator[date]:
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    @property
    def calendar_days(self) -> int:
        return (self.end - self.start).days + 1

    @property
    def working_days(self) -> int:
        """Monday through Friday inside the period."""
        return sum(1 for d in self.days() if d.weekday() < 5)

    @property
    def expected_hours(self) -> int:
        return self.working_days * STANDARD_DAY_HOURS
