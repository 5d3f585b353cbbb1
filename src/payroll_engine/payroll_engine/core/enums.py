from __future__ import annotations

from enum import Enum


class SessionLabel(str, Enum):
    """Nhãn mốc chấm công trong ngày (vào/ra ca sáng, vào/ra ca chiều)."""

    MORNING_IN = "morning-in"
    MORNING_OUT = "morning-out"
    AFTERNOON_IN = "afternoon-in"
    AFTERNOON_OUT = "afternoon-out"

    @classmethod
    def parse(cls, value: "str | SessionLabel") -> "SessionLabel":
        if isinstance(value, SessionLabel):
            return value
        return cls(str(value).strip().lower().replace("_", "-"))


class HalfDay(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"


class ViolationCode(str, Enum):
    """Mã lỗi cấu hình lịch làm việc (không phụ thuộc ngôn ngữ hiển thị)."""

    NOT_A_NUMBER = "NOT_A_NUMBER"
    NOT_A_FLAG = "NOT_A_FLAG"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    NOT_ORDERED = "NOT_ORDERED"
    BREAK_OUTSIDE_GAP = "BREAK_OUTSIDE_GAP"
    UNKNOWN_OPTION = "UNKNOWN_OPTION"
    UNKNOWN_TIMEZONE = "UNKNOWN_TIMEZONE"
    UNKNOWN_CHOICE = "UNKNOWN_CHOICE"


class AnomalyCode(str, Enum):
    """Loại bất thường dữ liệu: không làm dừng tính toán, chỉ ghi nhận để kiểm tra."""

    EXIT_BEFORE_ENTRY = "EXIT_BEFORE_ENTRY"
    NEGATIVE_NET_PAY = "NEGATIVE_NET_PAY"
    NEGATIVE_BASE_SALARY = "NEGATIVE_BASE_SALARY"
    MIXED_TIMEZONE = "MIXED_TIMEZONE"


class LateDeductionKind(str, Enum):
    NONE = "none"
    PER_MINUTE = "per_minute"
    BLOCK = "block"
