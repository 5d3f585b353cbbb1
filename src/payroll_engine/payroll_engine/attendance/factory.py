from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..schedules.model import Window
from .strategies.base import EntryStrategy
from .strategies.early_strategy import EarlyEntryStrategy
from .strategies.late_strategy import HourMarkLateEntryStrategy, LateEntryStrategy
from .strategies.normal_strategy import OnTimeEntryStrategy


@dataclass
class EntryStrategyFactory:
    """Factory Pattern: choose appropriate entry strategy based on rules."""

    round_late_entry_to_hour: bool = True

    def for_entry(self, *, entry: datetime, window: Window, grace_minutes: int) -> EntryStrategy:
        if entry < window.start:
            return EarlyEntryStrategy()
        if entry <= window.start + timedelta(minutes=grace_minutes):
            return OnTimeEntryStrategy()
        if self.round_late_entry_to_hour:
            return HourMarkLateEntryStrategy()
        return LateEntryStrategy()
