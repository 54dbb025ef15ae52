"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    kumiko_env: str = "development"
    kumiko_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Render defaults for requests that omit a config
    default_side_length: float = 100.0
    default_skeleton_color: str = "#633524ff"
    default_leaf_color: str = "#8d6e63"
    default_background_color: str = "#33312eff"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
