"""
Configuration - Environment settings and logging setup.

Environment variables:
    LIFEPATH_ENV            development | production (default development)
    LIFEPATH_LOG_LEVEL      logging level name (default INFO)
    ALLOWED_ORIGINS         comma separated CORS origins (default *)
    LIFEPATH_SESSION_TTL    idle seconds before a session is dropped (default 3600)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _split_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    env: str = "development"
    log_level: str = "INFO"
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])
    session_ttl: int = 3600

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @classmethod
    def from_env(cls) -> Settings:
        """Read settings from the process environment."""
        return cls(
            env=os.getenv("LIFEPATH_ENV", "development"),
            log_level=os.getenv("LIFEPATH_LOG_LEVEL", "INFO").upper(),
            allowed_origins=_split_origins(os.getenv("ALLOWED_ORIGINS", "*")) or ["*"],
            session_ttl=_int_env("LIFEPATH_SESSION_TTL", 3600),
        )


def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure the root logger to write to stderr.

    stdout stays free for command output. Calling this again replaces the
    handler rather than stacking a second one.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    if root.hasHandlers():
        root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(handler)

    # uvicorn's access log is noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(max(level, logging.WARNING))
