# pg_health/utils/constants.py
"""Constants for pg-health."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error code enumeration."""

    DB_CONNECTION_FAILED = "ERR_001"
    DB_CONNECTION_TIMEOUT = "ERR_002"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.DB_CONNECTION_FAILED: "Unable to connect to the configured database",
    ErrorCode.DB_CONNECTION_TIMEOUT: "Connection timeout",
}

HELLO_MESSAGE = "Hello World!"
STATUS_LABEL = "Database Status Check"
RECONNECT_SUCCESS_MESSAGE = "Database reconnection successful"
RECONNECT_FAILURE_PREFIX = "Reconnection failed"
