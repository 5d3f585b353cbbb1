from __future__ import annotations

from datetime import datetime

from ...schedules.model import Window
from .base import EntryDecision, EntryStrategy


class EarlyEntryStrategy(EntryStrategy):
    """Clock-in before the window opens: credit starts at the window start, no bonus."""

    def decide_entry(self, *, entry: datetime, window: Window, grace_minutes: int) -> EntryDecision:
        return EntryDecision(effective_start=window.start)
