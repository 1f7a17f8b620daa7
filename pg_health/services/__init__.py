"""Service modules for pg-health."""

from pg_health.services.database import (
    create_pool,
    test_connection,
    close_pool,
)
from pg_health.services.connection_manager import (
    ConnectionManager,
    DatabaseConnectionManager,
)
from pg_health.services.resilience import with_timeout

__all__ = [
    # Database
    "create_pool",
    "test_connection",
    "close_pool",
    # Connection management
    "ConnectionManager",
    "DatabaseConnectionManager",
    # Resilience
    "with_timeout",
]
