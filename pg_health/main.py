# pg_health/main.py
"""Main entry point for the pg-health server."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from pg_health import __version__
from pg_health.api.health import HealthProbeEndpoint, register_health_routes
from pg_health.api.openapi import load_openapi_document
from pg_health.config import Settings
from pg_health.services.connection_manager import ConnectionManager, DatabaseConnectionManager


logger = logging.getLogger("pg_health")


def create_app(
    settings: Optional[Settings] = None,
    manager: Optional[ConnectionManager] = None
) -> FastAPI:
    """Create and configure the HTTP application.

    When no manager is given, a DatabaseConnectionManager is built from the
    settings and its pool is opened on startup and closed on shutdown. A
    manager passed in is used as-is; its lifecycle belongs to the caller.

    Args:
        settings: Application settings.
        manager: Connection manager the health endpoints proxy to.

    Returns:
        Configured FastAPI instance.
    """
    settings = settings or Settings()
    owned_manager: Optional[DatabaseConnectionManager] = None
    if manager is None:
        owned_manager = DatabaseConnectionManager(settings)
        manager = owned_manager

    @asynccontextmanager
    async def app_lifespan(app: FastAPI):
        """Application lifespan manager for startup and shutdown."""
        if owned_manager is not None:
            if not await owned_manager.initialize():
                logger.warning(
                    "Database is not reachable; starting in degraded mode "
                    "(use POST /health/database/reconnect to retry)"
                )

        yield

        # Cleanup on shutdown
        if owned_manager is not None:
            await owned_manager.close()

    app = FastAPI(
        title="pg-health",
        version=__version__,
        docs_url="/api",
        redoc_url=None,
        lifespan=app_lifespan,
    )

    # The API description is maintained in openapi.json, not derived from the routes
    def custom_openapi() -> dict:
        if app.openapi_schema is None:
            app.openapi_schema = load_openapi_document(__version__)
        return app.openapi_schema

    app.openapi = custom_openapi

    register_health_routes(app, HealthProbeEndpoint(manager))

    return app


def main() -> None:
    """Main entry point for the server."""
    import argparse

    parser = argparse.ArgumentParser(description="PostgreSQL health probe server")
    parser.add_argument(
        "--dsn",
        type=str,
        help="Database DSN"
    )
    parser.add_argument(
        "--host",
        type=str,
        help="HTTP bind address"
    )
    parser.add_argument(
        "--port",
        type=int,
        help="HTTP port"
    )
    parser.add_argument(
        "--reconnect-delay",
        type=float,
        help="Seconds to wait between closing and reopening the pool"
    )

    args = parser.parse_args()

    # Load settings
    settings = Settings()
    if args.dsn:
        settings.postgres_dsn = args.dsn
    if args.host:
        settings.http_host = args.host
    if args.port is not None:
        settings.http_port = args.port
    if args.reconnect_delay is not None:
        settings.reconnect_delay = args.reconnect_delay

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    logger.info("Starting pg-health server on %s:%d", settings.http_host, settings.http_port)
    logger.info("Database: %s", settings.get_safe_dsn())

    uvicorn.run(
        create_app(settings),
        host=settings.http_host,
        port=settings.http_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
