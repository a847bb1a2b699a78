"""Runtime configuration, read from environment variables."""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Self

DEFAULT_DATABASE_URL = "sqlite:///./checkers.db"
ENV_PREFIX = "CHECKERS_"


def _env(name: str, default: str) -> str:
    return os.environ.get(f"{ENV_PREFIX}{name}", default)


def _env_bool(name: str, default: bool) -> bool:
    value = _env(name, str(default))
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in _env(name, default).split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    sql_echo: bool = False
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    @classmethod
    def from_env(cls) -> Self:
        return cls(
            database_url=_env("DATABASE_URL", DEFAULT_DATABASE_URL),
            sql_echo=_env_bool("SQL_ECHO", False),
            cors_origins=_env_list("CORS_ORIGINS", "*"),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
            host=_env("HOST", "0.0.0.0"),
            port=int(_env("PORT", "8080")),
        )


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process. Call `get_settings.cache_clear()` to re-read the environment."""
    return Settings.from_env()
