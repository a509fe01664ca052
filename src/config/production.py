import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_BASE_URL = Config.API_BASE_URL
API_TIMEOUT_SECONDS = Config.API_TIMEOUT_SECONDS

DISPLAY_UTC_OFFSET_HOURS = Config.DISPLAY_UTC_OFFSET_HOURS
OVERTIME_DAILY_HOURS = Config.OVERTIME_DAILY_HOURS

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
