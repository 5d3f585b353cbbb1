from __future__ import annotations

import logging
from datetime import timedelta
from decimal import Decimal
from typing import Iterable, Sequence

from ..attendance.model import DailyHours
from ..common.datetime_utils import quantize
from ..core.constants import HOURS_QUANTUM, MONEY_QUANTUM
from .model import PayrollFigures, PeriodStatistics, PeriodTotals
from .periods import PayPeriod

logger = logging.getLogger(__name__)


class PeriodAggregator:
    """Sums daily breakdowns per employee, and payroll figures per period.

    Totals are built from exact durations, so the result does not depend on
    the order days arrive in (days may be computed concurrently).
    """

    def aggregate(self, employee_id: int, period: PayPeriod, days: Iterable[DailyHours]) -> PeriodTotals:
        total = timedelta(0)
        working_dates = set()
        late_by_date: dict = {}
        anomalies = []

        for day in days:
            if day.employee_id != employee_id:
                logger.debug("skipping day %s of employee %s while aggregating %s", day.work_date, day.employee_id, employee_id)
                continue
            if not period.contains(day.work_date):
                logger.debug("skipping day %s outside period %s", day.work_date, period.name)
                continue

            breakdown = day.breakdown
            total += breakdown.total_worked
            if breakdown.is_working_day:
                working_dates.add(day.work_date)
            if breakdown.late_minutes:
                late_by_date[day.work_date] = late_by_date.get(day.work_date, 0) + breakdown.late_minutes
            anomalies.extend(breakdown.anomalies)

        return PeriodTotals(
            employee_id=employee_id,
            period=period,
            total_worked=total,
            total_working_days=len(working_dates),
            daily_late_minutes=tuple(sorted(late_by_date.items())),
            anomalies=tuple(sorted(anomalies, key=lambda a: a.sort_key())),
        )

    def statistics(self, figures: Sequence[PayrollFigures]) -> PeriodStatistics:
        if not figures:
            return PeriodStatistics()

        count = len(figures)
        hours = sum((f.total_worked_hours for f in figures), Decimal(0))
        worked = sum(1 for f in figures if f.total_worked_hours > 0)

        return PeriodStatistics(
            total_employees=count,
            total_worked_hours=quantize(hours, HOURS_QUANTUM),
            total_gross_pay=quantize(sum((f.gross_pay for f in figures), Decimal(0)), MONEY_QUANTUM),
            total_deductions=quantize(sum((f.total_deductions for f in figures), Decimal(0)), MONEY_QUANTUM),
            total_benefits=quantize(sum((f.total_benefits for f in figures), Decimal(0)), MONEY_QUANTUM),
            total_net_pay=quantize(sum((f.net_pay for f in figures), Decimal(0)), MONEY_QUANTUM),
            average_hours=quantize(hours / count, HOURS_QUANTUM),
            completion_rate=quantize(Decimal(worked) / Decimal(count), HOURS_QUANTUM),
        )
