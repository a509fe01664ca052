SECRET_KEY = "test-secret"

# Never reached in tests: the HTTP session is replaced by a fake.
API_BASE_URL = "http://backend.test/api"
API_TIMEOUT_SECONDS = 10

DISPLAY_UTC_OFFSET_HOURS = 9
OVERTIME_DAILY_HOURS = 8

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
