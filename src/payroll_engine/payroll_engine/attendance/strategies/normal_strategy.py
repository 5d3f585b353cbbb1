from __future__ import annotations

from datetime import datetime

from ...schedules.model import Window
from .base import EntryDecision, EntryStrategy


class OnTimeEntryStrategy(EntryStrategy):
    """Clock-in within the grace period: treated as the window start, no penalty."""

    def decide_entry(self, *, entry: datetime, window: Window, grace_minutes: int) -> EntryDecision:
        return EntryDecision(effective_start=window.start)
