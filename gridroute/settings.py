"""Centralised environment-driven settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings sourced from ``GRIDROUTE_*`` environment variables."""

    INPUT_DIR: str = "./input"
    DAY: str = "15"
    HEURISTIC: str = "manhattan"
    TILE_FACTOR: int = 5
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="GRIDROUTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()

__all__ = ["Settings", "settings"]
