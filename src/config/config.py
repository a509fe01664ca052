import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    # Backend REST API
    API_BASE_URL = os.environ.get("API_BASE_URL", "http://localhost:8080/api")
    API_TIMEOUT_SECONDS = float(os.environ.get("API_TIMEOUT_SECONDS", "10"))

    # Fixed display offset from UTC, in hours (JST)
    DISPLAY_UTC_OFFSET_HOURS = float(os.environ.get("DISPLAY_UTC_OFFSET_HOURS", "9"))

    # Net hours per day above which time counts as overtime
    OVERTIME_DAILY_HOURS = int(os.environ.get("OVERTIME_DAILY_HOURS", "8"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
