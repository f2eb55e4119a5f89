"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

API_PREFIX = "/api/v1/users"

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
CONTACT_FIELD_MAX_LENGTH = 255

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"

HEALTH_MESSAGE = "User Service is running"
GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."

# upper bound of the users.user_id column (signed 64-bit)
MAX_USER_ID = 2**63 - 1
