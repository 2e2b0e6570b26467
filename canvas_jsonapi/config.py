"""Deserializer settings loaded from the environment via pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from ``CANVAS_JSONAPI_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CANVAS_JSONAPI_", env_file=".env", extra="ignore", case_sensitive=False
    )

    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_decode_failures: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
