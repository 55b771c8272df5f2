"""Configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    exante_api_token: str
    exante_host: str = "https://api-demo.exante.eu"
    exante_api_path: str = "/md/1.0"
    exante_timeout_seconds: float | None = Field(default=None, gt=0)
    exante_strict_fields: bool = True

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
        "env_file": ".env",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings for the current process."""
    return Settings()
