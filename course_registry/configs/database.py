"""
Course store connection settings.

Manages the connection parameters for SQLAlchemy. An explicit DATABASE_URL
wins; otherwise a PostgreSQL URL is assembled from the individual fields.

Dependencies: pydantic, pydantic_settings
System role: Engine URL and pool configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from course_registry.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Course store database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(
        default="sqlite+aiosqlite:///./course_registry.db",
        description="Full async SQLAlchemy URL; set empty to build a PostgreSQL URL",
    )

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="courses", description="PostgreSQL database name")

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    create_tables_on_startup: bool = Field(
        default=True,
        description="Create missing tables when the API starts",
    )

    @property
    def async_database_url(self) -> str:
        """
        Resolve the async SQLAlchemy connection URL.

        Returns:
            str: Explicit URL if configured, else an asyncpg PostgreSQL URL
        """
        if self.url:
            return self.url
        return (
            f"postgresql+asyncpg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}"
        )

    @property
    def is_sqlite(self) -> bool:
        return self.async_database_url.startswith("sqlite")
