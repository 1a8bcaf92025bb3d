"""
HTTP server configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Uvicorn bind address and CORS configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from course_registry.configs.base import BaseSettings


class ApiSettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="API_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=5000, description="Bind port")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")
