import os

def get_settings_module() -> str:
    # Lấy giá trị môi trường từ biến APP_ENV, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Kiểm tra môi trường Production
    if env in {"prod", "production"}:
        return "config.production"
    
    # 2. Kiểm tra môi trường Testing
    if env in {"test", "testing"}:
        return "config.testing"
    
    # 3. Mặc định trả về Development cho tất cả các trường hợp còn lại
    return "config.development"


def schedule_options_from_env() -> dict:
    """ATTENDANCE_* overrides; unset variables stay None and fall back to defaults."""
    return {
        "morning_start": os.getenv("ATTENDANCE_MORNING_START"),
        "morning_end": os.getenv("ATTENDANCE_MORNING_END"),
        "afternoon_start": os.getenv("ATTENDANCE_AFTERNOON_START"),
        "afternoon_end": os.getenv("ATTENDANCE_AFTERNOON_END"),
        "grace_period_minutes": os.getenv("ATTENDANCE_GRACE_PERIOD_MINUTES"),
        "session_cap_hours": os.getenv("ATTENDANCE_SESSION_CAP_HOURS"),
        "max_daily_hours": os.getenv("ATTENDANCE_MAX_DAILY_HOURS"),
        "break_start": os.getenv("ATTENDANCE_BREAK_START"),
        "break_end": os.getenv("ATTENDANCE_BREAK_END"),
        "round_late_entry_to_hour": os.getenv("ATTENDANCE_ROUND_LATE_ENTRY"),
        "timezone": os.getenv("ATTENDANCE_TIMEZONE"),
    }
