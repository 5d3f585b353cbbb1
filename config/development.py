import os

from config import schedule_options_from_env

SCHEDULE_CONFIG = schedule_options_from_env()

PAYROLL_CONFIG = {
    # Unset: expected hours are prorated from the period's working days (x 8h)
    "expected_monthly_hours": os.getenv("PAYROLL_EXPECTED_MONTHLY_HOURS"),
    "overtime_to_leave_ratio": os.getenv("PAYROLL_OVERTIME_TO_LEAVE_RATIO", "0.125"),
    "late_deduction_policy": os.getenv("PAYROLL_LATE_DEDUCTION_POLICY", "per_minute"),
    "late_deduction_block_minutes": os.getenv("PAYROLL_LATE_BLOCK_MINUTES", "15"),
    "max_workers": os.getenv("PAYROLL_MAX_WORKERS", "1"),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
