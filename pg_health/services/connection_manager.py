"""Connection manager owning the service's PostgreSQL pool."""

import asyncio
import contextlib
import logging
from typing import Optional, Dict, Any, Protocol

import asyncpg

from pg_health.config import Settings
from pg_health.services.database import create_pool, test_connection, close_pool
from pg_health.services.resilience import with_timeout
from pg_health.utils.constants import RECONNECT_SUCCESS_MESSAGE, RECONNECT_FAILURE_PREFIX
from pg_health.utils.exceptions import DatabaseConnectionError, ConnectionTimeoutError

logger = logging.getLogger("connection-manager")


class ConnectionManager(Protocol):
    """Capability consumed by the health endpoints."""

    def status(self) -> Dict[str, Any]:
        """Return ``connected``, ``initialized`` and, when known,
        ``pool_size`` and ``active_connections``."""
        ...

    async def reconnect(self) -> Dict[str, Any]:
        """Tear down and re-open the connection; return ``success`` and ``message``."""
        ...


class DatabaseConnectionManager:
    """Manages the lifecycle of a single asyncpg connection pool.

    This class provides:
    - Pool startup with a smoke test (degraded mode on failure)
    - Read-only pool status reporting
    - Forced reconnection, coalescing concurrent requests into one attempt
    - Graceful shutdown
    """

    def __init__(self, settings: Settings):
        """Initialize the connection manager.

        Args:
            settings: Application settings.
        """
        self._settings = settings
        self._pool: Optional[asyncpg.Pool] = None
        self._reconnect_task: Optional[asyncio.Future] = None

    @property
    def pool(self) -> Optional[asyncpg.Pool]:
        """The current pool, or None when not initialized."""
        return self._pool

    async def initialize(self) -> bool:
        """Open the connection pool.

        Failures are logged rather than raised so the service can start in
        degraded mode and recover through a later reconnect.

        Returns:
            True if the pool was opened and answered a test query.
        """
        logger.info("Initializing connection pool for %s", self._settings.get_safe_dsn())
        try:
            await self._open_pool()
        except DatabaseConnectionError as e:
            logger.error("Failed to initialize connection pool: %s", e.message)
            return False
        logger.info("Connection pool initialized successfully")
        return True

    def status(self) -> Dict[str, Any]:
        """Report the current pool state without touching the database.

        Returns:
            Dictionary with ``connected`` and ``initialized``; pool metrics are
            included only while a pool exists.
        """
        pool = self._pool
        if pool is None:
            return {"connected": False, "initialized": False}

        return {
            "connected": not pool.is_closing(),
            "initialized": True,
            "pool_size": pool.get_max_size(),
            "active_connections": pool.get_size(),
        }

    async def reconnect(self) -> Dict[str, Any]:
        """Force a reconnection.

        Callers arriving while a reconnect is in flight wait for that attempt
        instead of starting another one.

        Returns:
            Dictionary with ``success`` and ``message``.
        """
        if self._reconnect_task is None or self._reconnect_task.done():
            self._reconnect_task = asyncio.ensure_future(self._reconnect())
        else:
            logger.info("Reconnect already in progress; joining it")
        return await asyncio.shield(self._reconnect_task)

    async def close(self) -> None:
        """Close the connection pool if it is open.

        A reconnect still in flight is cancelled first so it cannot install a
        new pool after shutdown.
        """
        task, self._reconnect_task = self._reconnect_task, None
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
            logger.info("Pending reconnect cancelled")

        pool, self._pool = self._pool, None
        if pool is not None:
            await close_pool(pool, timeout=self._settings.close_timeout)
            logger.info("Connection pool closed")

    async def _reconnect(self) -> Dict[str, Any]:
        """Destroy the existing pool, pause, then open a new one."""
        try:
            pool, self._pool = self._pool, None
            if pool is not None:
                await close_pool(pool, timeout=self._settings.close_timeout)
                logger.info("Existing connection pool closed")

            await asyncio.sleep(self._settings.reconnect_delay)
            await self._open_pool()
        except Exception as e:
            message = e.message if isinstance(e, DatabaseConnectionError) else str(e)
            logger.error("Database reconnection failed: %s", message)
            return {"success": False, "message": f"{RECONNECT_FAILURE_PREFIX}: {message}"}

        logger.info(RECONNECT_SUCCESS_MESSAGE)
        return {"success": True, "message": RECONNECT_SUCCESS_MESSAGE}

    async def _open_pool(self) -> None:
        """Create a pool, verify it with a test query and install it.

        Raises:
            ConnectionTimeoutError: If the pool could not be opened in time.
            DatabaseConnectionError: If the pool could not be opened or tested.
        """
        settings = self._settings
        opener = with_timeout(settings.connect_timeout)(create_pool)

        try:
            pool = await opener(
                dsn=settings.get_dsn(),
                min_size=settings.pool_min_size,
                max_size=settings.pool_max_size,
                ssl=settings.postgres_ssl,
                timeout=settings.command_timeout
            )
        except TimeoutError:
            raise ConnectionTimeoutError(settings.connect_timeout)
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, ValueError) as e:
            raise DatabaseConnectionError(str(e)) from e

        try:
            connected, latency_ms, error = await test_connection(pool)
        except asyncio.CancelledError:
            await close_pool(pool, timeout=settings.close_timeout)
            raise

        if not connected:
            await close_pool(pool, timeout=settings.close_timeout)
            raise DatabaseConnectionError(f"Connection test failed: {error}")

        logger.info(
            "Pool ready: min=%d, max=%d, test query %.2fms",
            settings.pool_min_size, settings.pool_max_size, latency_ms
        )
        self._pool = pool
