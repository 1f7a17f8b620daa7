# pg_health/api/health.py
"""Health probe endpoints."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Response, status
from fastapi.responses import PlainTextResponse

from pg_health.models.health import StatusReport, ReconnectResult
from pg_health.services.connection_manager import ConnectionManager
from pg_health.utils.constants import HELLO_MESSAGE, STATUS_LABEL, RECONNECT_FAILURE_PREFIX

logger = logging.getLogger("health-probe")


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g.
    ``2026-10-19T10:00:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class HealthProbeEndpoint:
    """Shapes connection manager replies into timestamped envelopes.

    Holds no state of its own; every call is independent and safe to repeat.
    """

    def __init__(self, manager: ConnectionManager):
        """Initialize the endpoint.

        Args:
            manager: The connection manager to proxy to.
        """
        self._manager = manager

    def ping(self) -> str:
        """Liveness greeting."""
        return HELLO_MESSAGE

    def get_status(self) -> StatusReport:
        """Build a status report from the connection manager.

        A failing manager yields a degraded report (not connected, not
        initialized, no pool metrics) instead of an exception.

        Returns:
            The status report.
        """
        try:
            db_status = self._manager.status()
            return StatusReport(
                status=STATUS_LABEL,
                timestamp=utc_timestamp(),
                connected=db_status["connected"],
                initialized=db_status["initialized"],
                pool_size=db_status.get("pool_size"),
                active_connections=db_status.get("active_connections"),
            )
        except Exception as e:
            logger.warning("Database status check failed: %s", e)
            return StatusReport(
                status=STATUS_LABEL,
                timestamp=utc_timestamp(),
                connected=False,
                initialized=False,
            )

    async def reconnect(self) -> ReconnectResult:
        """Force a reconnection and wait for it to finish.

        Returns:
            The reconnect result; unexpected faults become ``success=False``.
        """
        try:
            result = await self._manager.reconnect()
            success = bool(result["success"])
            message = str(result["message"])
        except Exception as e:
            logger.exception("Unexpected error during database reconnect")
            success = False
            message = f"{RECONNECT_FAILURE_PREFIX}: {e}"

        return ReconnectResult(
            timestamp=utc_timestamp(),
            success=success,
            message=message,
        )


def register_health_routes(
    app: FastAPI,
    endpoint: HealthProbeEndpoint
) -> None:
    """Register the health routes with the application.

    Args:
        app: The FastAPI application.
        endpoint: The health probe endpoint instance.
    """

    @app.get("/", response_class=PlainTextResponse)
    async def get_hello() -> str:
        return endpoint.ping()

    @app.get(
        "/health/database",
        response_model=StatusReport,
        response_model_exclude_none=True
    )
    async def get_database_status(response: Response) -> StatusReport:
        report = endpoint.get_status()
        if not report.connected:
            response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return report

    @app.post("/health/database/reconnect", response_model=ReconnectResult)
    async def force_reconnect(response: Response) -> ReconnectResult:
        result = await endpoint.reconnect()
        if not result.success:
            response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return result
