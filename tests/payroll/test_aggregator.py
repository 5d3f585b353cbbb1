from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from src.payroll_engine.payroll_engine.attendance.model import DailyHours, HoursBreakdown
from src.payroll_engine.payroll_engine.payroll.aggregator import PeriodAggregator
from src.payroll_engine.payroll_engine.payroll.deriver import PayrollDeriver
from src.payroll_engine.payroll_engine.payroll.model import PayrollTerms
from src.payroll_engine.payroll_engine.payroll.periods import PayPeriod

JANUARY = PayPeriod.monthly(2025, 1)


def _day(day: int, minutes: int, late: int = 0, employee_id: int = 1) -> DailyHours:
    worked = timedelta(minutes=minutes)
    return DailyHours(
        employee_id=employee_id,
        work_date=date(2025, 1, day),
        breakdown=HoursBreakdown(morning_worked=worked, total_worked=worked, late_minutes=late),
    )


def test_totals_sum_exact_durations():
    # 3 x 20 minutes: rounding each day first would give 0.99
    days = [_day(6, 20), _day(7, 20), _day(8, 20)]

    totals = PeriodAggregator().aggregate(1, JANUARY, days)

    assert totals.total_worked == timedelta(hours=1)
    assert totals.total_worked_hours == Decimal(1)
    assert totals.total_regular_hours == totals.total_worked_hours
    assert totals.total_working_days == 3
    assert totals.calendar_days == 31


def test_day_order_does_not_matter():
    days = [_day(6, 481, late=5), _day(9, 0), _day(7, 239, late=31), _day(8, 420)]
    aggregator = PeriodAggregator()

    assert aggregator.aggregate(1, JANUARY, days) == aggregator.aggregate(1, JANUARY, list(reversed(days)))


def test_zero_hour_days_are_not_working_days():
    totals = PeriodAggregator().aggregate(1, JANUARY, [_day(6, 480), _day(7, 0)])

    assert totals.total_working_days == 1


def test_days_outside_period_or_for_other_employees_are_skipped():
    outside = DailyHours(
        employee_id=1,
        work_date=date(2025, 2, 3),
        breakdown=HoursBreakdown(total_worked=timedelta(hours=8)),
    )
    days = [_day(6, 60), _day(7, 60, employee_id=2), outside]

    totals = PeriodAggregator().aggregate(1, JANUARY, days)

    assert totals.total_worked == timedelta(hours=1)
    assert totals.total_working_days == 1


def test_late_minutes_kept_per_day_in_date_order():
    totals = PeriodAggregator().aggregate(1, JANUARY, [_day(8, 400, late=12), _day(6, 400, late=31), _day(7, 480)])

    assert totals.daily_late_minutes == ((date(2025, 1, 6), 31), (date(2025, 1, 8), 12))
    assert totals.total_late_minutes == 43


def test_statistics_over_figures():
    aggregator = PeriodAggregator()
    deriver = PayrollDeriver()
    terms = PayrollTerms(base_salary=Decimal("16000"), expected_hours=Decimal("160"))
    figures = [
        deriver.derive(aggregator.aggregate(1, JANUARY, [_day(6, 80 * 60)]), terms),
        deriver.derive(aggregator.aggregate(2, JANUARY, []), terms),
    ]

    stats = aggregator.statistics(figures)

    assert stats.total_employees == 2
    assert stats.total_worked_hours == Decimal("80.00")
    assert stats.total_gross_pay == Decimal("8000.00")
    assert stats.total_net_pay == Decimal("8000.00")
    assert stats.average_hours == Decimal("40.00")
    assert stats.completion_rate == Decimal("0.50")


def test_statistics_of_nothing():
    stats = PeriodAggregator().statistics([])

    assert stats.total_employees == 0
    assert stats.average_hours == Decimal("0.00")
