"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Stroke finalization policy
    stroke_tolerance: float = 2.0
    stroke_dense_threshold: int = 20

    # Cleaner
    id_prefix: str = "id-"
    reference_scan: Literal["structural", "textual"] = "structural"

    model_config = SettingsConfigDict(env_prefix="SVGBUILDER_", env_file=".env", env_file_encoding="utf-8")


settings = Settings()
