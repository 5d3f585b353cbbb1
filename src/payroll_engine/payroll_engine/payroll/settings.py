from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.validators import option_key, to_decimal, to_int
from ..core.constants import DEFAULT_LATE_BLOCK_MINUTES, DEFAULT_OVERTIME_TO_LEAVE_RATIO
from ..core.enums import LateDeductionKind, ViolationCode
from ..core.exceptions import ConfigurationError
from ..schedules.validation import ConfigViolation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollSettings:
    """Thiết lập tính lương dùng chung cho cả tiến trình (bất biến)."""

    # None: prorate from the period's working days
    expected_monthly_hours: Optional[Decimal] = None
    overtime_to_leave_ratio: Decimal = DEFAULT_OVERTIME_TO_LEAVE_RATIO
    late_deduction_policy: LateDeductionKind = LateDeductionKind.NONE
    late_deduction_block_minutes: int = DEFAULT_LATE_BLOCK_MINUTES
    max_workers: int = 1


_OPTIONS = (
    "expected_monthly_hours",
    "overtime_to_leave_ratio",
    "late_deduction_policy",
    "late_deduction_block_minutes",
    "max_workers",
)


def _positive_decimal(name: str, raw: Any, violations: list) -> Optional[Decimal]:
    value = to_decimal(raw)
    if value is None:
        violations.append(ConfigViolation(ViolationCode.NOT_A_NUMBER, name, raw))
        return None
    if value <= 0:
        violations.append(ConfigViolation(ViolationCode.OUT_OF_RANGE, name, value, {"min": 0, "max": "inf", "min_exclusive": True}))
        return None
    return value


def _int_at_least(name: str, raw: Any, low: int, violations: list) -> Optional[int]:
    value = to_int(raw)
    if value is None:
        violations.append(ConfigViolation(ViolationCode.NOT_A_NUMBER, name, raw))
        return None
    if value < low:
        violations.append(ConfigViolation(ViolationCode.OUT_OF_RANGE, name, value, {"min": low, "max": "inf"}))
        return None
    return value


def load_payroll_settings(options: Optional[Mapping[str, Any]] = None) -> PayrollSettings:
    """Validate ``PAYROLL_CONFIG``; every bad option is reported in one ``ConfigurationError``.

    ``None`` or blank values keep the default.
    """
    values: dict[str, Any] = {}
    violations: list[ConfigViolation] = []

    for raw_key, raw in (options or {}).items():
        key = option_key(raw_key)
        if key not in _OPTIONS:
            violations.append(ConfigViolation(ViolationCode.UNKNOWN_OPTION, raw_key, raw))
            continue
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            continue

        if key in ("expected_monthly_hours", "overtime_to_leave_ratio"):
            value = _positive_decimal(key, raw, violations)
        elif key in ("late_deduction_block_minutes", "max_workers"):
            value = _int_at_least(key, raw, 1, violations)
        else:
            try:
                value = LateDeductionKind(str(raw).strip().lower())
            except ValueError:
                choices = tuple(kind.value for kind in LateDeductionKind)
                violations.append(ConfigViolation(ViolationCode.UNKNOWN_CHOICE, key, raw, {"choices": choices}))
                value = None
        if value is not None:
            values[key] = value

    if violations:
        raise ConfigurationError(violations)

    settings = PayrollSettings(**values)
    logger.info(
        "payroll settings loaded: policy=%s ratio=%s expected_hours=%s workers=%s",
        settings.late_deduction_policy.value,
        settings.overtime_to_leave_ratio,
        settings.expected_monthly_hours or "prorated",
        settings.max_workers,
    )
    return settings
