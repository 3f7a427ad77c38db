"""Settings loaded from TASKIO_* environment variables."""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

ENV_PREFIX = "TASKIO"

BASE_DIR = Path(__file__).parent.parent


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_str(suffix: str, default: str) -> str:
    value = os.getenv(_k(suffix))
    return value.strip() if value and value.strip() else default


def _env_int(suffix: str, default: int) -> int:
    value = os.getenv(_k(suffix))
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{_k(suffix)} must be an integer, got {value!r}") from exc


def _env_bool(suffix: str, default: bool) -> bool:
    value = os.getenv(_k(suffix))
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(suffix: str, default: list[str]) -> list[str]:
    value = os.getenv(_k(suffix))
    if value is None or not value.strip():
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    db_path: Path
    cors_origins: tuple[str, ...]
    log_level: str
    host: str
    port: int
    reload: bool


def load_settings() -> Settings:
    """Read settings from the environment."""
    return Settings(
        db_path=Path(_env_str("DB_PATH", str(BASE_DIR / "tasks.db"))),
        cors_origins=tuple(_env_list("CORS_ORIGINS", ["http://localhost:3000"])),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
        host=_env_str("HOST", "0.0.0.0"),
        port=_env_int("PORT", 8000),
        reload=_env_bool("RELOAD", False),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
