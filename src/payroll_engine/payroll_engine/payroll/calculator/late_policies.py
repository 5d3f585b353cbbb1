from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ...core.constants import DEFAULT_LATE_BLOCK_MINUTES
from ...core.enums import LateDeductionKind
from ...core.exceptions import ValidationError
from .base import LateDeductionPolicy

_MINUTES_PER_HOUR = Decimal(60)


class NoLateDeduction(LateDeductionPolicy):
    """Lateness is only reflected in fewer credited hours."""

    def deduction(self, late_minutes: int, hourly_rate: Decimal) -> Decimal:
        return Decimal(0)


@dataclass(frozen=True)
class PerMinuteLateDeduction(LateDeductionPolicy):
    """Each late minute costs a minute of pay, times ``multiplier``."""

    multiplier: Decimal = Decimal(1)

    def deduction(self, late_minutes: int, hourly_rate: Decimal) -> Decimal:
        if late_minutes <= 0 or hourly_rate <= 0:
            return Decimal(0)
        return Decimal(late_minutes) * hourly_rate / _MINUTES_PER_HOUR * self.multiplier


@dataclass(frozen=True)
class BlockLateDeduction(LateDeductionPolicy):
    """Every started block of ``block_minutes`` is charged in full (15 late minutes -> 1 block, 16 -> 2)."""

    block_minutes: int = DEFAULT_LATE_BLOCK_MINUTES

    def __post_init__(self) -> None:
        if self.block_minutes <= 0:
            raise ValidationError("block_minutes must be positive")

    def deduction(self, late_minutes: int, hourly_rate: Decimal) -> Decimal:
        if late_minutes <= 0 or hourly_rate <= 0:
            return Decimal(0)
        blocks = -(-late_minutes // self.block_minutes)
        return Decimal(blocks * self.block_minutes) * hourly_rate / _MINUTES_PER_HOUR


def build_late_policy(kind: "LateDeductionKind | str", *, block_minutes: int = DEFAULT_LATE_BLOCK_MINUTES) -> LateDeductionPolicy:
    if not isinstance(kind, LateDeductionKind):
        try:
            kind = LateDeductionKind(str(kind).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown late deduction policy {kind!r}") from None
    if kind == LateDeductionKind.PER_MINUTE:
        return PerMinuteLateDeduction()
    if kind == LateDeductionKind.BLOCK:
        return BlockLateDeduction(block_minutes=int(block_minutes))
    return NoLateDeduction()
