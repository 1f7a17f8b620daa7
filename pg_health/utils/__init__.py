"""Utility modules for pg-health."""

from pg_health.utils.constants import ErrorCode, ERROR_MESSAGES
from pg_health.utils.exceptions import (
    PgHealthError,
    DatabaseConnectionError,
    ConnectionTimeoutError,
)

__all__ = [
    "ErrorCode",
    "ERROR_MESSAGES",
    "PgHealthError",
    "DatabaseConnectionError",
    "ConnectionTimeoutError",
]
