"""pg-health: PostgreSQL liveness and connection probe service."""

__version__ = "0.1.0"
