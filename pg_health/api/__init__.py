"""HTTP API for pg-health."""

from pg_health.api.health import HealthProbeEndpoint, register_health_routes
from pg_health.api.openapi import load_openapi_document

__all__ = [
    "HealthProbeEndpoint",
    "register_health_routes",
    "load_openapi_document",
]
