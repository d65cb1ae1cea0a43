"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DirectorySettings(BaseModel):
    base_url: AnyHttpUrl = Field(
        default="https://rickandmortyapi.com/api/",
        description="Root of the character directory REST API.",
    )
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)


class SearchSettings(BaseModel):
    debounce_ms: int = Field(default=300, ge=0, le=5000)

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHARSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"

    directory: DirectorySettings = Field(default_factory=DirectorySettings)
    search: SearchSettings = Field(default_factory=SearchSettings)


@lru_cache
def get_settings() -> AppSettings:
    """Return cached settings instance."""

    return AppSettings()


__all__ = [
    "AppSettings",
    "DirectorySettings",
    "SearchSettings",
    "get_settings",
]
