import os

from .config import Config

SECRET_KEY = Config.SECRET_KEY

API_BASE_URL = Config.API_BASE_URL
API_TIMEOUT_SECONDS = Config.API_TIMEOUT_SECONDS

DISPLAY_UTC_OFFSET_HOURS = Config.DISPLAY_UTC_OFFSET_HOURS
OVERTIME_DAILY_HOURS = Config.OVERTIME_DAILY_HOURS

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
