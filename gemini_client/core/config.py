"""Client configuration via pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "gemini-client"
    app_version: str = "0.4.0"

    gemini_api_key: Optional[SecretStr] = None
    google_api_key: Optional[SecretStr] = None

    gemini_base_url: str = "https://generativelanguage.googleapis.com"
    gemini_api_version: str = "v1beta"

    request_timeout: float = 60.0
    connect_timeout: float = 10.0
    max_connections: int = 100
    max_keepalive_connections: int = 20

    log_level: str = "INFO"
    log_json: bool = False

    @property
    def gemini_key(self) -> Optional[SecretStr]:
        return self.gemini_api_key or self.google_api_key


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
