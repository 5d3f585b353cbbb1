from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import quantize
from ..common.validators import money_or_zero
from ..core.anomalies import Anomaly, report_anomaly
from ..core.constants import DEFAULT_OVERTIME_TO_LEAVE_RATIO, HOURS_QUANTUM, LEAVE_DAYS_QUANTUM, MONEY_QUANTUM
from ..core.enums import AnomalyCode
from .calculator.base import LateDeductionPolicy
from .calculator.late_policies import NoLateDeduction
from .model import DeductionLine, PayrollFigures, PayrollTerms, PeriodTotals

logger = logging.getLogger(__name__)

_ZERO = Decimal(0)
_HUNDRED = Decimal(100)


def _money(value: Decimal) -> Decimal:
    return quantize(value, MONEY_QUANTUM)


class PayrollDeriver:
    """Turns a period's aggregated hours and the employee's terms into pay.

    Gross pay is prorated: ``base_salary * worked / expected``. Each figure is
    computed exactly and quantised once; net pay is derived from the quantised
    lines so the payslip always adds up.
    """

    def __init__(
        self,
        *,
        late_policy: Optional[LateDeductionPolicy] = None,
        overtime_to_leave_ratio: Decimal = DEFAULT_OVERTIME_TO_LEAVE_RATIO,
        default_expected_hours: Optional[Decimal] = None,
    ):
        self._late_policy = late_policy or NoLateDeduction()
        self._ratio = Decimal(overtime_to_leave_ratio)
        # None: prorate from the period's working days
        self._default_expected = None if default_expected_hours is None else Decimal(default_expected_hours)

    @property
    def late_policy(self) -> LateDeductionPolicy:
        return self._late_policy

    @property
    def overtime_to_leave_ratio(self) -> Decimal:
        return self._ratio

    def derive(self, totals: PeriodTotals, terms: PayrollTerms) -> PayrollFigures:
        anomalies = list(totals.anomalies)
        employee_id = totals.employee_id

        base_salary = money_or_zero(terms.base_salary)
        if base_salary < _ZERO:
            anomalies.append(
                report_anomaly(
                    Anomaly(
                        code=AnomalyCode.NEGATIVE_BASE_SALARY,
                        message=f"base salary {base_salary} is negative, treated as 0",
                        employee_id=employee_id,
                        details={"base_salary": base_salary},
                    ),
                    logger,
                )
            )
            base_salary = _ZERO

        if terms.expected_hours is not None:
            expected = max(money_or_zero(terms.expected_hours), _ZERO)
        elif self._default_expected is not None:
            expected = max(self._default_expected, _ZERO)
        else:
            expected = Decimal(totals.period.expected_hours)

        worked = totals.total_worked_hours
        if expected == _ZERO:
            hourly_rate = _ZERO
            gross = _ZERO
        else:
            hourly_rate = base_salary / expected
            gross = base_salary * worked / expected
        gross = _money(gross)

        late_exact = sum(
            (self._late_policy.deduction(minutes, hourly_rate) for _, minutes in totals.daily_late_minutes),
            _ZERO,
        )
        late = min(_money(max(late_exact, _ZERO)), gross)

        lines = []
        for rule in terms.deductions:
            if rule.percentage is not None:
                amount = gross * money_or_zero(rule.percentage) / _HUNDRED
            else:
                amount = money_or_zero(rule.fixed_amount)
            amount = _money(amount)
            if amount > _ZERO:
                lines.append(DeductionLine(name=rule.name, amount=amount))

        total_deductions = _money(late + sum((line.amount for line in lines), _ZERO))
        total_benefits = _money(sum((max(money_or_zero(b.amount), _ZERO) for b in terms.benefits), _ZERO))

        overtime = max(money_or_zero(terms.overtime_hours), _ZERO)
        leave_days = quantize(overtime * self._ratio, LEAVE_DAYS_QUANTUM)

        net = gross - total_deductions + total_benefits
        if net < _ZERO:
            anomalies.append(
                report_anomaly(
                    Anomaly(
                        code=AnomalyCode.NEGATIVE_NET_PAY,
                        message=f"net pay {net} is negative, clamped to 0",
                        employee_id=employee_id,
                        details={"gross_pay": gross, "total_deductions": total_deductions, "total_benefits": total_benefits},
                    ),
                    logger,
                )
            )
            net = _money(_ZERO)

        figures = PayrollFigures(
            employee_id=employee_id,
            period=totals.period,
            total_worked_hours=quantize(worked, HOURS_QUANTUM),
            expected_hours=quantize(expected, HOURS_QUANTUM),
            hourly_rate=_money(hourly_rate),
            gross_pay=gross,
            late_minutes=totals.total_late_minutes,
            late_deductions=late,
            deductions=tuple(lines),
            total_deductions=total_deductions,
            total_benefits=total_benefits,
            overtime_hours=quantize(overtime, HOURS_QUANTUM),
            overtime_to_leave_days=leave_days,
            net_pay=net,
            working_days=totals.total_working_days,
            anomalies=tuple(anomalies),
        )
        logger.info(
            "payroll derived employee=%s period=%s gross=%s net=%s",
            employee_id,
            totals.period.name,
            figures.gross_pay,
            figures.net_pay,
        )
        return figures
