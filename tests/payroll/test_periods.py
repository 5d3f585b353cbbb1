from datetime import date

import pytest

from src.payroll_engine.payroll_engine.core.exceptions import ValidationError
from src.payroll_engine.payroll_engine.payroll.periods import PayPeriod


def test_monthly_period_counts_weekdays():
    period = PayPeriod.monthly(2025, 1)

    assert period.start == date(2025, 1, 1)
    assert period.end == date(2025, 1, 31)
    assert period.calendar_days == 31
    assert period.working_days == 23
    assert period.expected_hours == 184
    assert period.name == "January 2025"


def test_february_working_days():
    assert PayPeriod.monthly(2025, 2).working_days == 20


def test_custom_range_name_and_membership():
    period = PayPeriod(date(2025, 1, 6), date(2025, 1, 12))

    assert period.name == "2025-01-06 to 2025-01-12"
    assert period.working_days == 5
    assert period.contains(date(2025, 1, 12))
    assert not period.contains(date(2025, 1, 13))


def test_inverted_period_rejected():
    with pytest.raises(ValidationError):
        PayPeriod(date(2025, 2, 1), date(2025, 1, 1))
