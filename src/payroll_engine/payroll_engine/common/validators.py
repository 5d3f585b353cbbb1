from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    return value.strip()


def to_decimal(value: Any) -> Optional[Decimal]:
    """Best-effort conversion of config/env input; None when it is not a finite number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        value = repr(value)
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not result.is_finite():
        return None
    return result


def to_int(value: Any) -> Optional[int]:
    number = to_decimal(value)
    if number is None or number != number.to_integral_value():
        return None
    return int(number)


def to_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off"}:
        return False
    return None


def money_or_zero(value: Any) -> Decimal:
    """Salaries and amounts coming from collaborators: unparsable -> 0."""
    number = to_decimal(value)
    return number if number is not None else Decimal(0)


_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def option_key(name: str) -> str:
    """``morningStart`` / ``MORNING_START`` / ``morning_start`` -> ``morning_start``."""
    name = name.strip()
    if not name.isupper():
        name = _CAMEL.sub("_", name)
    return name.lower()
