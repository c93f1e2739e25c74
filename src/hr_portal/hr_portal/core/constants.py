"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ISO_DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"

DEFAULT_EMPLOYEE_PASSWORD = "123456"
DEFAULT_LOAD_WORKERS = 4

DASHBOARD_UPCOMING_HOLIDAYS = 3
DASHBOARD_RECENT_LEAVES = 5
EMPLOYEE_ATTENDANCE_HISTORY = 7
TEAM_ATTENDANCE_HISTORY = 10
