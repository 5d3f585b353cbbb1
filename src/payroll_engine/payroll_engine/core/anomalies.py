from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional

from .enums import AnomalyCode
from .exceptions import DataAnomalyWarning


@dataclass(frozen=True)
class Anomaly:
    """Bản ghi bất thường phục vụ kiểm tra (audit)."""

    code: AnomalyCode
    message: str
    work_date: Optional[date] = None
    employee_id: Optional[int] = None
    details: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def sort_key(self) -> tuple:
        return (self.employee_id or 0, self.work_date or date.min, self.code.value, self.message)


def report_anomaly(anomaly: Anomaly, logger: logging.Logger, *, stacklevel: int = 3) -> Anomaly:
    """Log the anomaly and emit a DataAnomalyWarning. Returns it for collection."""
    logger.warning(
        "data anomaly %s: %s",
        anomaly.code.value,
        anomaly.message,
        extra={"anomaly_code": anomaly.code.value, "work_date": anomaly.work_date, "employee_id": anomaly.employee_id},
    )
    warnings.warn(DataAnomalyWarning(anomaly), stacklevel=stacklevel)
    return anomaly
