"""Tests for exception classes."""

from pg_health.utils import (
    ErrorCode,
    PgHealthError,
    DatabaseConnectionError,
    ConnectionTimeoutError,
)


class TestExceptions:
    """Exception hierarchy test suite."""

    def test_default_message(self):
        """Test that a missing message falls back to the code's default."""
        error = DatabaseConnectionError()
        assert error.code == ErrorCode.DB_CONNECTION_FAILED
        assert error.message == "Unable to connect to the configured database"
        assert str(error) == error.message

    def test_custom_message(self):
        """Test that an explicit message is kept."""
        error = DatabaseConnectionError("password authentication failed")
        assert error.message == "password authentication failed"

    def test_timeout_error(self):
        """Test the connection timeout error."""
        error = ConnectionTimeoutError(10.0)
        assert isinstance(error, DatabaseConnectionError)
        assert isinstance(error, PgHealthError)
        assert error.code == ErrorCode.DB_CONNECTION_TIMEOUT
        assert error.message == "Connection timeout after 10s"
        assert error.details == {"timeout_seconds": 10.0}

    def test_fractional_timeout(self):
        """Test formatting of a fractional timeout."""
        assert ConnectionTimeoutError(0.5).message == "Connection timeout after 0.5s"
