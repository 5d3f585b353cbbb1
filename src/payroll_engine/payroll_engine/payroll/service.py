from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Mapping, Optional

import pandas as pd

from ..attendance.model import DailyHours
from ..attendance.repository import AttendanceRepository
from ..attendance.service import HoursCalculator
from ..core.anomalies import Anomaly
from .aggregator import PeriodAggregator
from .deriver import PayrollDeriver
from .model import REPORT_COLUMNS, PayrollFigures, PayrollTerms, PeriodStatistics, PeriodTotals
from .periods import PayPeriod

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollRun:
    period: PayPeriod
    figures: tuple[PayrollFigures, ...]
    statistics: PeriodStatistics = field(default_factory=PeriodStatistics)

    @property
    def anomalies(self) -> tuple[Anomaly, ...]:
        return tuple(a for f in self.figures for a in f.anomalies)


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: dict


class PayrollRunService:
    """Runs payroll for a period: attendance -> daily hours -> totals -> figures.

    Employees are independent, so with ``max_workers > 1`` they are computed in
    a thread pool. Output order is always by employee id.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        calculator: HoursCalculator,
        aggregator: Optional[PeriodAggregator] = None,
        deriver: Optional[PayrollDeriver] = None,
        max_workers: int = 1,
    ):
        self._attendance = attendance
        self._calculator = calculator
        self._aggregator = aggregator or PeriodAggregator()
        self._deriver = deriver or PayrollDeriver()
        self._max_workers = max(1, int(max_workers))

    def employee_days(self, employee_id: int, period: PayPeriod) -> list[DailyHours]:
        sessions_by_date = self._attendance.get_session_sets(
            employee_id=employee_id, start_date=period.start, end_date=period.end
        )
        return [
            self._calculator.calculate_day(employee_id, work_date, sessions)
            for work_date, sessions in sorted(sessions_by_date.items())
            if not sessions.is_empty
        ]

    def employee_totals(self, employee_id: int, period: PayPeriod) -> PeriodTotals:
        return self._aggregator.aggregate(employee_id, period, self.employee_days(employee_id, period))

    def employee_payroll(self, employee_id: int, period: PayPeriod, terms: PayrollTerms) -> PayrollFigures:
        return self._deriver.derive(self.employee_totals(employee_id, period), terms)

    def run(
        self,
        period: PayPeriod,
        terms_by_employee: Mapping[int, PayrollTerms],
        *,
        max_workers: Optional[int] = None,
    ) -> PayrollRun:
        workers = self._max_workers if max_workers is None else max(1, int(max_workers))
        employee_ids = sorted(terms_by_employee)
        logger.info("payroll run %s: %d employee(s), %d worker(s)", period.name, len(employee_ids), workers)

        def compute(employee_id: int) -> PayrollFigures:
            return self.employee_payroll(employee_id, period, terms_by_employee[employee_id])

        if workers > 1 and len(employee_ids) > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                figures = list(executor.map(compute, employee_ids))
        else:
            figures = [compute(employee_id) for employee_id in employee_ids]

        run = PayrollRun(period=period, figures=tuple(figures), statistics=self._aggregator.statistics(figures))
        if run.anomalies:
            logger.warning("payroll run %s finished with %d anomaly(ies)", period.name, len(run.anomalies))
        return run

    def build_report(self, run: PayrollRun) -> ReportData:
        stats = run.statistics
        summary = {
            "period": run.period.name,
            "total_employees": stats.total_employees,
            "total_worked_hours": stats.total_worked_hours,
            "total_gross_pay": stats.total_gross_pay,
            "total_deductions": stats.total_deductions,
            "total_benefits": stats.total_benefits,
            "total_net_pay": stats.total_net_pay,
            "average_hours": stats.average_hours,
            "completion_rate": stats.completion_rate,
        }
        return ReportData(rows=[f.as_row() for f in run.figures], summary=summary)

    def to_dataframe(self, run: PayrollRun) -> pd.DataFrame:
        """Tabular view of a run for export (Excel/CSV writing stays with the caller)."""
        rows = self.build_report(run).rows
        df = pd.DataFrame(rows, columns=list(REPORT_COLUMNS))
        return df.sort_values("employee_id").reset_index(drop=True) if rows else df
