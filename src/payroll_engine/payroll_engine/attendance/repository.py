from __future__ import annotations

from datetime import date
from typing import Mapping, Protocol

from .model import SessionSet


class AttendanceRepository(Protocol):
    """Source of clock events, implemented by the capture/persistence layer."""

    def get_session_sets(self, *, employee_id: int, start_date: date, end_date: date) -> Mapping[date, SessionSet]:
        """Session sets keyed by work date, inclusive range. Days without punches may be omitted."""

        raise NotImplementedError
