# pg_health/models/health.py
"""Health probe response models."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class StatusReport(BaseModel):
    """Database status envelope returned by the status probe."""

    model_config = ConfigDict(populate_by_name=True)

    status: str
    timestamp: str = Field(..., description="ISO-8601 UTC time the report was built")
    connected: bool
    initialized: bool
    pool_size: Optional[int] = Field(
        None,
        ge=0,
        alias="poolSize",
        description="Connection pool size limit"
    )
    active_connections: Optional[int] = Field(
        None,
        ge=0,
        alias="activeConnections",
        description="Number of connections currently held by the pool"
    )


class ReconnectResult(BaseModel):
    """Envelope returned by the forced reconnect."""

    timestamp: str = Field(..., description="ISO-8601 UTC time the reconnect finished")
    success: bool
    message: str
