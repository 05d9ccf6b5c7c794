"""
Configuration settings for the gradebook.

Uses Pydantic Settings to load environment variables for logging, report
rendering and the sample roster generator.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Reporting
    report_style: Literal["plain", "table"] = Field("plain", alias="REPORT_STYLE")

    # Sample roster defaults
    roster_students: int = Field(5, alias="ROSTER_STUDENTS", ge=0)
    roster_courses: int = Field(3, alias="ROSTER_COURSES", ge=0)
    roster_seed: int = Field(42, alias="ROSTER_SEED")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
