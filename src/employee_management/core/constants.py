"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

API_PREFIX = "/api"
DEFAULT_SESSION_HOURS = 24
DEFAULT_POOL_SIZE = 10
POOL_NAME = "employee_management"

# MySQL server error numbers
ER_DUP_ENTRY = 1062
ER_ROW_IS_REFERENCED = 1451
ER_NO_REFERENCED_ROW = 1452

SERVER_ERROR_MESSAGE = "Server error"
NOT_READY_MESSAGE = "Database is initializing, please try again in a moment"

# Money columns are DECIMAL(12, 2)
AMOUNT_LIMIT = 10_000_000_000

# Seconds a request waits for a free pooled connection
POOL_WAIT_SECONDS = 30
