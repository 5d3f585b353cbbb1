from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.repository import AttendanceRepository
from .attendance.service import HoursCalculator
from .core.exceptions import ConfigurationError
from .payroll.aggregator import PeriodAggregator
from .payroll.calculator.late_policies import build_late_policy
from .payroll.deriver import PayrollDeriver
from .payroll.service import PayrollRunService
from .payroll.settings import PayrollSettings, load_payroll_settings
from .schedules.loader import load_schedule_config
from .schedules.model import ScheduleConfig


@dataclass(frozen=True)
class Container:
    schedule: ScheduleConfig
    payroll_settings: PayrollSettings

    hours_calculator: HoursCalculator
    period_aggregator: PeriodAggregator
    payroll_deriver: PayrollDeriver
    payroll_run_service: Optional[PayrollRunService]


def _load_settings(schedule_config, payroll_config) -> tuple[ScheduleConfig, PayrollSettings]:
    # Schedule and payroll violations are reported together.
    violations = []
    schedule = settings = None
    try:
        schedule = load_schedule_config(schedule_config)
    except ConfigurationError as exc:
        violations.extend(exc.violations)
    try:
        settings = load_payroll_settings(payroll_config)
    except ConfigurationError as exc:
        violations.extend(exc.violations)
    if violations:
        raise ConfigurationError(violations)
    return schedule, settings


def build_container(
    *,
    schedule_config: Optional[Mapping[str, Any]] = None,
    payroll_config: Optional[Mapping[str, Any]] = None,
    attendance: Optional[AttendanceRepository] = None,
) -> Container:
    """Wire the engine once per process; schedule and payroll settings are validated here."""
    schedule, settings = _load_settings(schedule_config, payroll_config)

    hours_calculator = HoursCalculator(schedule)
    period_aggregator = PeriodAggregator()
    payroll_deriver = PayrollDeriver(
        late_policy=build_late_policy(settings.late_deduction_policy, block_minutes=settings.late_deduction_block_minutes),
        overtime_to_leave_ratio=settings.overtime_to_leave_ratio,
        default_expected_hours=settings.expected_monthly_hours,
    )

    payroll_run_service = None
    if attendance is not None:
        payroll_run_service = PayrollRunService(
            attendance,
            calculator=hours_calculator,
            aggregator=period_aggregator,
            deriver=payroll_deriver,
            max_workers=settings.max_workers,
        )

    return Container(
        schedule=schedule,
        payroll_settings=settings,
        hours_calculator=hours_calculator,
        period_aggregator=period_aggregator,
        payroll_deriver=payroll_deriver,
        payroll_run_service=payroll_run_service,
    )
