"""
Configuration helpers for the proverbs backend.

Routers and services receive a Settings object instead of reading os.environ
directly, so the backing file path and server options are resolved once.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT = Path(__file__).resolve().parents[2]
DEFAULT_PROVERBS_FILE = ROOT / "data" / "proverbs.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    proverbs_file: Path
    host: str
    port: int
    log_level: str
    seed_on_startup: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        proverbs_file=Path(os.getenv("PROVERBS_FILE") or DEFAULT_PROVERBS_FILE),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        seed_on_startup=_bool(os.getenv("SEED_ON_STARTUP"), True),
    )
