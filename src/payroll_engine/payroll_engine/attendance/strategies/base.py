from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from ...schedules.model import Window


@dataclass(frozen=True)
class EntryDecision:
    effective_start: datetime
    late_minutes: int = 0


class EntryStrategy(ABC):
    """Strategy Pattern: encapsulate how a clock-in maps to a credited start."""

    @abstractmethod
    def decide_entry(self, *, entry: datetime, window: Window, grace_minutes: int) -> EntryDecision:
        raise NotImplementedError
