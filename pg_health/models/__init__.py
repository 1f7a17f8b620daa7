"""Data models for pg-health."""

from pg_health.models.health import (
    StatusReport,
    ReconnectResult,
)

__all__ = [
    "StatusReport",
    "ReconnectResult",
]
