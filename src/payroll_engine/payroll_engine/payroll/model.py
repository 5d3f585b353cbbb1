from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import timedelta_to_hours
from ..common.validators import require_non_empty
from ..core.anomalies import Anomaly
from ..core.exceptions import ValidationError
from .periods import PayPeriod


@dataclass(frozen=True)
class PeriodTotals:
    """Tổng hợp giờ công của một nhân viên trong một kỳ lương."""

    employee_id: int
    period: PayPeriod
    total_worked: timedelta = timedelta(0)
    total_working_days: int = 0
    # (work_date, late minutes) ordered by date
    daily_late_minutes: tuple[tuple[date, int], ...] = ()
    anomalies: tuple[Anomaly, ...] = ()

    @property
    def calendar_days(self) -> int:
        return self.period.calendar_days

    @property
    def total_worked_hours(self) -> Decimal:
        return timedelta_to_hours(self.total_worked)

    @property
    def total_regular_hours(self) -> Decimal:
        # Overtime is classified downstream, so every worked hour is regular here.
        return self.total_worked_hours

    @property
    def total_late_minutes(self) -> int:
        return sum(minutes for _, minutes in self.daily_late_minutes)


@dataclass(frozen=True)
class DeductionRule:
    """Khoản khấu trừ: theo phần trăm lương gộp hoặc số tiền cố định."""

    name: str
    percentage: Optional[Decimal] = None
    fixed_amount: Optional[Decimal] = None

    def __post_init__(self) -> None:
        require_non_empty(self.name, "Deduction name")
        if (self.percentage is None) == (self.fixed_amount is None):
            raise ValidationError(f"Deduction {self.name!r} needs exactly one of percentage or fixed_amount")


@dataclass(frozen=True)
class BenefitRule:
    name: str
    amount: Decimal

    def __post_init__(self) -> None:
        require_non_empty(self.name, "Benefit name")


@dataclass(frozen=True)
class PayrollTerms:
    """Inputs the HR side supplies per employee and period."""

    base_salary: Decimal
    expected_hours: Optional[Decimal] = None
    overtime_hours: Decimal = Decimal(0)
    deductions: tuple[DeductionRule, ...] = ()
    benefits: tuple[BenefitRule, ...] = ()


@dataclass(frozen=True)
class DeductionLine:
    name: str
    amount: Decimal


REPORT_COLUMNS = (
    "employee_id",
    "period",
    "working_days",
    "total_worked_hours",
    "expected_hours",
    "hourly_rate",
    "gross_pay",
    "late_minutes",
    "late_deductions",
    "total_deductions",
    "total_benefits",
    "overtime_to_leave_days",
    "net_pay",
    "anomalies",
)


@dataclass(frozen=True)
class PayrollFigures:
    employee_id: int
    period: PayPeriod
    total_worked_hours: Decimal
    expected_hours: Decimal
    hourly_rate: Decimal
    gross_pay: Decimal
    late_minutes: int
    late_deductions: Decimal
    deductions: tuple[DeductionLine, ...]
    total_deductions: Decimal
    total_benefits: Decimal
    overtime_hours: Decimal
    overtime_to_leave_days: Decimal
    net_pay: Decimal
    working_days: int = 0
    anomalies: tuple[Anomaly, ...] = ()

    def as_row(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "period": self.period.name,
            "working_days": self.working_days,
            "total_worked_hours": self.total_worked_hours,
            "expected_hours": self.expected_hours,
            "hourly_rate": self.hourly_rate,
            "gross_pay": self.gross_pay,
            "late_minutes": self.late_minutes,
            "late_deductions": self.late_deductions,
            "total_deductions": self.total_deductions,
            "total_benefits": self.total_benefits,
            "overtime_to_leave_days": self.overtime_to_leave_days,
            "net_pay": self.net_pay,
            "anomalies": len(self.anomalies),
        }


@dataclass(frozen=True)
class PeriodStatistics:
    total_employees: int = 0
    total_worked_hours: Decimal = Decimal("0.00")
    total_gross_pay: Decimal = Decimal("0.00")
    total_deductions: Decimal = Decimal("0.00")
    total_benefits: Decimal = Decimal("0.00")
    total_net_pay: Decimal = Decimal("0.00")
    average_hours: Decimal = Decimal("0.00")
    completion_rate: Decimal = Decimal("0.00")
