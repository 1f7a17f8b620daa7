# pg_health/utils/exceptions.py
"""Exception classes for pg-health."""

from pg_health.utils.constants import ErrorCode, ERROR_MESSAGES


class PgHealthError(Exception):
    """Base exception class for pg-health."""

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        details: dict | None = None
    ):
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, "Unknown error")
        self.details = details or {}
        super().__init__(self.message)


class DatabaseConnectionError(PgHealthError):
    """Database connection error."""

    def __init__(self, message: str | None = None, code: ErrorCode = ErrorCode.DB_CONNECTION_FAILED):
        super().__init__(
            code=code,
            message=message
        )


class ConnectionTimeoutError(DatabaseConnectionError):
    """Opening a connection pool took longer than allowed."""

    def __init__(self, seconds: float):
        super().__init__(
            message=f"{ERROR_MESSAGES[ErrorCode.DB_CONNECTION_TIMEOUT]} after {seconds:g}s",
            code=ErrorCode.DB_CONNECTION_TIMEOUT
        )
        self.details = {"timeout_seconds": seconds}
