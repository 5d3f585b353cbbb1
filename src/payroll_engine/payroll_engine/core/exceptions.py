from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..schedules.validation import ConfigViolation
    from .anomalies import Anomaly


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConfigurationError(DomainError):
    """Raised once at load time, listing every violated schedule or payroll setting."""

    def __init__(self, violations: Sequence["ConfigViolation"]):
        self.violations = tuple(violations)
        lines = "; ".join(v.describe() for v in self.violations)
        super().__init__(f"Invalid configuration ({len(self.violations)} violation(s)): {lines}")

    @property
    def codes(self) -> set:
        return {v.code for v in self.violations}


class DataAnomalyWarning(UserWarning):
    """Non-fatal: observed data is inconsistent, the result was clamped or zeroed."""

    def __init__(self, anomaly: "Anomaly"):
        self.anomaly = anomaly
        super().__init__(anomaly.message)
