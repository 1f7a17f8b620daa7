# pg_health/config.py
"""Configuration management for pg-health."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # PostgreSQL connection configuration
    postgres_dsn: str = ""
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_database: str = "postgres"
    postgres_user: str = "postgres"
    postgres_password: str = ""
    postgres_ssl: bool = False

    # Pool configuration
    pool_min_size: int = Field(default=1, ge=0)
    pool_max_size: int = Field(default=10, ge=1)
    command_timeout: int = 30
    connect_timeout: float = Field(default=10.0, gt=0)
    close_timeout: float = Field(default=10.0, gt=0)

    # Pause between tearing down the old pool and opening a new one
    reconnect_delay: float = Field(default=2.0, ge=0)

    # HTTP configuration
    http_host: str = "0.0.0.0"
    http_port: int = 4400

    # Observability configuration
    log_level: str = "INFO"

    class Config:
        env_prefix = "PG_HEALTH_"

    def get_dsn(self) -> str:
        """Get the database connection string.

        Returns:
            The DSN string for connecting to PostgreSQL.
        """
        if self.postgres_dsn and not self.postgres_dsn.startswith("${"):
            return self.postgres_dsn
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_database}"
        )

    def get_safe_dsn(self) -> str:
        """Get the DSN with credentials stripped, for logging."""
        return self.get_dsn().split("@")[-1]
