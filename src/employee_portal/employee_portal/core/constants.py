"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

IDLE_TIMEOUT_MINUTES = 5

ADMIN_SESSION_KEY = "admin_session"
EMPLOYEE_SESSION_KEY = "employee_session"
LAST_ACTIVITY_SUFFIX = "_last_activity"

ADMIN_LOGIN_ROUTE = "/admin/login"
EMPLOYEE_LOGIN_ROUTE = "/employee/login"

MISSING_BIRTH_YEAR = "0000"

ADMIN_PASSWORD_MIN_LENGTH = 8
EMPLOYEE_PASSWORD_MIN_LENGTH = 6

NOTIFICATION_AUDIENCE_ALL = "All"
DEFAULT_NOTIFICATION_LIMIT = 5
DEFAULT_HISTORY_DAYS = 30

ALLOWED_DOCUMENT_EXTENSIONS = frozenset({"pdf"})
