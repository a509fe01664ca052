"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_API_BASE_URL = "http://localhost:8080/api"
DEFAULT_API_TIMEOUT_SECONDS = 10

# Display timezone is a fixed offset from UTC (JST by default).
DEFAULT_UTC_OFFSET_HOURS = 9

DEFAULT_OVERTIME_DAILY_HOURS = 8

DEFAULT_GANTT_START_HOUR = 0
DEFAULT_GANTT_END_HOUR = 24
MAX_GANTT_END_HOUR = 48

DEFAULT_API_ERROR_MESSAGE = "Could not reach the server. Please try again."

# Key under which the dependency container is stored in ``app.extensions``.
EXTENSION_KEY = "shift_manager"
