from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from ..common.datetime_utils import hours_to_timedelta
from ..core.anomalies import Anomaly, report_anomaly
from ..core.enums import AnomalyCode, HalfDay
from ..schedules.model import ScheduleConfig
from .factory import EntryStrategyFactory
from .model import ClockEvent, DailyHours, HoursBreakdown, SessionSet
from .strategies.base import EntryDecision

logger = logging.getLogger(__name__)

_ZERO = timedelta(0)
_SESSION_FIELDS = ("morning_in", "morning_out", "afternoon_in", "afternoon_out")


@dataclass(frozen=True)
class _HalfDayResult:
    worked: timedelta = _ZERO
    effective_start: Optional[datetime] = None
    effective_end: Optional[datetime] = None
    late_minutes: int = 0
    anomaly: Optional[Anomaly] = None


class HoursCalculator:
    """Maps one employee-day of clock events to credited hours.

    Pure and stateless apart from the read-only ScheduleConfig, so one instance
    can be shared across threads. Missing punches never raise: an incomplete
    in/out pair simply earns nothing for that half-day.
    """

    def __init__(self, config: ScheduleConfig, *, strategy_factory: Optional[EntryStrategyFactory] = None):
        self._config = config
        self._factory = strategy_factory or EntryStrategyFactory(round_late_entry_to_hour=config.round_late_entry_to_hour)
        self._session_cap = hours_to_timedelta(config.session_cap_hours)
        self._max_daily = hours_to_timedelta(config.max_daily_hours)

    @property
    def config(self) -> ScheduleConfig:
        return self._config

    def calculate(self, sessions: SessionSet, *, employee_id: Optional[int] = None) -> HoursBreakdown:
        sessions = self._localized(sessions)
        # Only the outer punches recorded: the employee stayed through the break.
        continuous = bool(
            sessions.morning_in and sessions.afternoon_out and not sessions.morning_out and not sessions.afternoon_in
        )

        morning = self._half_day(
            HalfDay.MORNING,
            entry=sessions.morning_in,
            clock_out=sessions.afternoon_out if continuous else sessions.morning_out,
            employee_id=employee_id,
        )
        if continuous:
            afternoon = self._half_day(
                HalfDay.AFTERNOON,
                entry=None,
                clock_out=sessions.afternoon_out,
                employee_id=employee_id,
                implied_entry=True,
            )
        else:
            afternoon = self._half_day(
                HalfDay.AFTERNOON,
                entry=sessions.afternoon_in,
                clock_out=sessions.afternoon_out,
                employee_id=employee_id,
            )

        total = min(morning.worked + afternoon.worked, self._max_daily)
        anomalies = tuple(a for a in (morning.anomaly, afternoon.anomaly) if a is not None)

        breakdown = HoursBreakdown(
            morning_worked=morning.worked,
            afternoon_worked=afternoon.worked,
            total_worked=total,
            effective_morning_start=morning.effective_start,
            effective_morning_end=morning.effective_end,
            effective_afternoon_start=afternoon.effective_start,
            effective_afternoon_end=afternoon.effective_end,
            late_minutes=morning.late_minutes + afternoon.late_minutes,
            anomalies=anomalies,
        )
        logger.debug(
            "hours calculated employee=%s date=%s morning=%s afternoon=%s total=%s",
            employee_id,
            sessions.work_date,
            breakdown.morning_hours,
            breakdown.afternoon_hours,
            breakdown.total_hours,
        )
        return breakdown

    def calculate_from_events(self, events: Iterable[ClockEvent], *, employee_id: Optional[int] = None) -> HoursBreakdown:
        return self.calculate(SessionSet.from_events(events), employee_id=employee_id)

    def calculate_day(self, employee_id: int, work_date: date, sessions: SessionSet) -> DailyHours:
        return DailyHours(
            employee_id=employee_id,
            work_date=work_date,
            breakdown=self.calculate(sessions, employee_id=employee_id),
        )

    def _localized(self, sessions: SessionSet) -> SessionSet:
        if not self._config.timezone:
            return sessions
        moved = {}
        for name in _SESSION_FIELDS:
            value = getattr(sessions, name)
            if value is not None and value.tzinfo is not None:
                moved[name] = self._config.localize(value)
        return replace(sessions, **moved) if moved else sessions

    def _flag(self, code: AnomalyCode, message: str, *, half: HalfDay, entry, clock_out, employee_id) -> Anomaly:
        return report_anomaly(
            Anomaly(
                code=code,
                message=message,
                work_date=(entry or clock_out).date(),
                employee_id=employee_id,
                details={"half": half.value, "entry": entry, "exit": clock_out},
            ),
            logger,
            stacklevel=5,
        )

    def _half_day(
        self,
        half: HalfDay,
        *,
        entry: Optional[datetime],
        clock_out: Optional[datetime],
        employee_id: Optional[int],
        implied_entry: bool = False,
    ) -> _HalfDayResult:
        if entry is None and not implied_entry:
            return _HalfDayResult()
        if clock_out is None:
            return _HalfDayResult()

        if entry is not None and (entry.tzinfo is None) != (clock_out.tzinfo is None):
            anomaly = self._flag(
                AnomalyCode.MIXED_TIMEZONE,
                f"{half.value} clock-in and clock-out mix naive and timezone-aware timestamps",
                half=half,
                entry=entry,
                clock_out=clock_out,
                employee_id=employee_id,
            )
            return _HalfDayResult(anomaly=anomaly)

        if entry is not None and clock_out < entry:
            anomaly = self._flag(
                AnomalyCode.EXIT_BEFORE_ENTRY,
                f"{half.value} clock-out {clock_out:%H:%M:%S} is earlier than clock-in {entry:%H:%M:%S}",
                half=half,
                entry=entry,
                clock_out=clock_out,
                employee_id=employee_id,
            )
            return _HalfDayResult(anomaly=anomaly)

        anchor = entry or clock_out
        window = self._config.window(half, anchor.date(), anchor.tzinfo)
        if entry is None:
            decision = EntryDecision(effective_start=window.start)
        else:
            strategy = self._factory.for_entry(entry=entry, window=window, grace_minutes=self._config.grace_period_minutes)
            decision = strategy.decide_entry(entry=entry, window=window, grace_minutes=self._config.grace_period_minutes)

        effective_end = min(clock_out, window.end)
        raw = max(_ZERO, effective_end - decision.effective_start)
        worked = min(raw, self._session_cap)
        if worked == _ZERO:
            return _HalfDayResult()

        return _HalfDayResult(
            worked=worked,
            effective_start=decision.effective_start,
            effective_end=effective_end,
            late_minutes=decision.late_minutes,
        )
