from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class LateDeductionPolicy(ABC):
    """Late-deduction interface (Strategy Pattern for payroll).

    Applied to one day's late minutes at a time; the period deduction is the
    sum over days. Implementations must be non-decreasing in ``late_minutes``.
    """

    @abstractmethod
    def deduction(self, late_minutes: int, hourly_rate: Decimal) -> Decimal:
        raise NotImplementedError
