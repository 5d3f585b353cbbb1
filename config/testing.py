import os

# Tests run against the built-in defaults regardless of ATTENDANCE_* in the shell.
SCHEDULE_CONFIG = {}

PAYROLL_CONFIG = {
    "expected_monthly_hours": None,
    "overtime_to_leave_ratio": "0.125",
    "late_deduction_policy": "none",
    "max_workers": 1,
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
TESTING = True
