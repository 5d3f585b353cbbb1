from __future__ import annotations

from datetime import datetime, timedelta

from ...common.datetime_utils import ceil_to_hour, whole_minutes
from ...schedules.model import Window
from .base import EntryDecision, EntryStrategy


class LateEntryStrategy(EntryStrategy):
    """Late clock-in beyond the grace period: credit starts at the actual entry."""

    def decide_entry(self, *, entry: datetime, window: Window, grace_minutes: int) -> EntryDecision:
        return EntryDecision(effective_start=entry, late_minutes=whole_minutes(entry - window.start))


class HourMarkLateEntryStrategy(EntryStrategy):
    """Late clock-in, grace applied to every hour mark.

    Credit starts at the first whole hour at or after ``entry - grace``:
    with 30 minutes of grace, 08:31 starts at 09:00 and 09:20 also at 09:00.
    """

    def decide_entry(self, *, entry: datetime, window: Window, grace_minutes: int) -> EntryDecision:
        start = ceil_to_hour(entry - timedelta(minutes=grace_minutes))
        return EntryDecision(
            effective_start=max(start, window.start),
            late_minutes=whole_minutes(entry - window.start),
        )
