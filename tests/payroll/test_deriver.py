from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from src.payroll_engine.payroll_engine.core.enums import AnomalyCode
from src.payroll_engine.payroll_engine.core.exceptions import DataAnomalyWarning, ValidationError
from src.payroll_engine.payroll_engine.payroll.calculator.late_policies import (
    BlockLateDeduction,
    PerMinuteLateDeduction,
)
from src.payroll_engine.payroll_engine.payroll.deriver import PayrollDeriver
from src.payroll_engine.payroll_engine.payroll.model import BenefitRule, DeductionRule, PayrollTerms, PeriodTotals
from src.payroll_engine.payroll_engine.payroll.periods import PayPeriod

JANUARY = PayPeriod.monthly(2025, 1)


def _totals(hours=80, minutes=0, late=()):
    return PeriodTotals(
        employee_id=1,
        period=JANUARY,
        total_worked=timedelta(hours=hours, minutes=minutes),
        total_working_days=10,
        daily_late_minutes=tuple((date(2025, 1, 6 + i), m) for i, m in enumerate(late)),
    )


def test_gross_pay_is_prorated_by_worked_hours():
    figures = PayrollDeriver().derive(_totals(80), PayrollTerms(base_salary=Decimal("16000"), expected_hours=Decimal("160")))

    assert figures.gross_pay == Decimal("8000.00")
    assert figures.hourly_rate == Decimal("100.00")
    assert figures.net_pay == Decimal("8000.00")
    assert figures.working_days == 10


def test_expected_hours_default_to_the_period_working_days():
    figures = PayrollDeriver().derive(_totals(92), PayrollTerms(base_salary=Decimal("18400")))

    assert figures.expected_hours == Decimal("184.00")
    assert figures.gross_pay == Decimal("9200.00")


def test_configured_expected_hours_override_the_period():
    deriver = PayrollDeriver(default_expected_hours=Decimal("160"))

    figures = deriver.derive(_totals(80), PayrollTerms(base_salary=Decimal("16000")))

    assert figures.gross_pay == Decimal("8000.00")


def test_zero_expected_hours_pays_nothing():
    figures = PayrollDeriver().derive(_totals(80), PayrollTerms(base_salary=Decimal("16000"), expected_hours=0))

    assert figures.gross_pay == Decimal("0.00")
    assert figures.hourly_rate == Decimal("0.00")
    assert figures.anomalies == ()


def test_deductions_larger_than_gross_clamp_net_pay():
    terms = PayrollTerms(
        base_salary=Decimal("16000"),
        expected_hours=Decimal("160"),
        deductions=(DeductionRule("Loan", fixed_amount=Decimal("50000")),),
    )

    with pytest.warns(DataAnomalyWarning):
        figures = PayrollDeriver().derive(_totals(80), terms)

    assert figures.net_pay == Decimal("0.00")
    assert figures.total_deductions == Decimal("50000.00")
    assert [a.code for a in figures.anomalies] == [AnomalyCode.NEGATIVE_NET_PAY]


def test_overtime_converts_to_leave_days():
    terms = PayrollTerms(base_salary=Decimal("16000"), expected_hours=Decimal("160"), overtime_hours=Decimal("16"))

    figures = PayrollDeriver().derive(_totals(80), terms)

    assert figures.overtime_to_leave_days == Decimal("2.000")


def test_per_minute_late_deduction_is_summed_per_day():
    deriver = PayrollDeriver(late_policy=PerMinuteLateDeduction())
    terms = PayrollTerms(base_salary=Decimal("16000"), expected_hours=Decimal("160"))

    figures = deriver.derive(_totals(80, late=(10, 20)), terms)

    assert figures.late_minutes == 30
    assert figures.late_deductions == Decimal("50.00")
    assert figures.net_pay == Decimal("7950.00")


def test_late_deduction_never_exceeds_gross():
    deriver = PayrollDeriver(late_policy=PerMinuteLateDeduction())
    terms = PayrollTerms(base_salary=Decimal("16000"), expected_hours=Decimal("160"))

    figures = deriver.derive(_totals(0, minutes=6, late=(10, 20)), terms)

    assert figures.gross_pay == Decimal("10.00")
    assert figures.late_deductions == Decimal("10.00")
    assert figures.net_pay == Decimal("0.00")


def test_block_late_deduction_rounds_up_to_whole_blocks():
    deriver = PayrollDeriver(late_policy=BlockLateDeduction(block_minutes=15))
    terms = PayrollTerms(base_salary=Decimal("16000"), expected_hours=Decimal("160"))

    figures = deriver.derive(_totals(80, late=(16,)), terms)

    assert figures.late_deductions == Decimal("50.00")


def test_percentage_deductions_and_benefits():
    terms = PayrollTerms(
        base_salary=Decimal("16000"),
        expected_hours=Decimal("160"),
        deductions=(
            DeductionRule("SSS", percentage=Decimal("4.5")),
            DeductionRule("Unused", fixed_amount=Decimal("0")),
        ),
        benefits=(BenefitRule("Rice", Decimal("500")),),
    )

    figures = PayrollDeriver().derive(_totals(80), terms)

    assert [(line.name, line.amount) for line in figures.deductions] == [("SSS", Decimal("360.00"))]
    assert figures.total_benefits == Decimal("500.00")
    assert figures.net_pay == Decimal("8140.00")


def test_negative_base_salary_is_treated_as_zero():
    with pytest.warns(DataAnomalyWarning):
        figures = PayrollDeriver().derive(_totals(80), PayrollTerms(base_salary=Decimal("-100")))

    assert figures.gross_pay == Decimal("0.00")
    assert figures.anomalies[0].code == AnomalyCode.NEGATIVE_BASE_SALARY


def test_more_hours_never_lower_gross():
    deriver = PayrollDeriver()
    terms = PayrollTerms(base_salary=Decimal("20000"))

    grosses = [deriver.derive(_totals(h), terms).gross_pay for h in range(0, 200, 7)]

    assert grosses == sorted(grosses)


def test_deduction_rule_needs_exactly_one_amount():
    with pytest.raises(ValidationError):
        DeductionRule("Both", percentage=Decimal("1"), fixed_amount=Decimal("1"))
    with pytest.raises(ValidationError):
        DeductionRule("Neither")
