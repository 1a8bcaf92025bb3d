"""
Application settings.

Settings nests the database and API sections under one object; each
section reads its own prefixed environment variables when first built.

Dependencies: pydantic, course_registry.configs
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from course_registry.configs.api import ApiSettings
from course_registry.configs.base import BaseSettings
from course_registry.configs.database import DatabaseSettings


class Settings(BaseSettings):
    """All configuration sections of the course registration service."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Build settings once per process.

    Tests that change the environment call get_settings.cache_clear().
    """
    return Settings()
