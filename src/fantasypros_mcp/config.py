from __future__ import annotations

from dataclasses import dataclass
import os

from .exceptions import FantasyProsConfigError

DEFAULT_BASE_URL = "https://api.fantasypros.com/public/v2"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_float(key: str, default: float) -> float:
    val = os.getenv(key)
    if val is None or val.strip() == "":
        return default
    try:
        return float(val)
    except ValueError as e:
        raise FantasyProsConfigError(f"{key} must be a number, got {val!r}") from e


def _env_str(key: str, default: str) -> str:
    val = os.getenv(key)
    return default if val is None or val.strip() == "" else val.strip()


@dataclass(frozen=True)
class Settings:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 20.0
    log_level: str = "INFO"

    def __repr__(self) -> str:
        return (
            f"Settings(api_key='***', base_url={self.base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r}, log_level={self.log_level!r})"
        )

    @staticmethod
    def from_env() -> "Settings":
        api_key = os.getenv("FANTASYPROS_API_KEY", "").strip()
        if not api_key:
            raise FantasyProsConfigError(
                "FANTASYPROS_API_KEY environment variable is required (.env)"
            )

        log_level = _env_str("FANTASYPROS_LOG_LEVEL", "INFO").upper()
        if log_level not in _LOG_LEVELS:
            raise FantasyProsConfigError(
                f"FANTASYPROS_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r}"
            )

        return Settings(
            api_key=api_key,
            base_url=_env_str("FANTASYPROS_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout_seconds=_env_float("FANTASYPROS_TIMEOUT_SECONDS", 20.0),
            log_level=log_level,
        )
