from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    api_title: str = "Calculator API"
    api_version: str = "0.1.0"
    log_level: str = "INFO"

    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ]
    )
    frontend_origin: str | None = Field(default=None, alias="FRONTEND_ORIGIN")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def resolved_cors_origins(self) -> List[str]:
        """
        Returns the configured CORS origins plus the optional frontend origin, deduped.
        """
        normalized: list[str] = []

        def _append(origin: str | None) -> None:
            if not origin:
                return
            cleaned = origin.rstrip("/")
            if cleaned not in normalized:
                normalized.append(cleaned)

        for origin in self.cors_origins:
            _append(origin)

        _append(self.frontend_origin)
        return normalized


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
