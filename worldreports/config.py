"""Environment-driven settings.

Values are read from the process environment, optionally seeded from a
``.env`` file. Command-line flags in :mod:`worldreports.cli` take precedence.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "world.db"
DEFAULT_TIMEOUT = 5.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(slots=True)
class DatabaseSettings:
    path: Path = Path(DEFAULT_DB_PATH)
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "DatabaseSettings":
        source = os.environ if env is None else env
        raw_timeout = source.get("WORLD_DB_TIMEOUT", "")
        timeout = DEFAULT_TIMEOUT
        if raw_timeout.strip():
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigurationError(
                    f"WORLD_DB_TIMEOUT must be a number, got {raw_timeout!r}"
                ) from exc
            if timeout < 0:
                raise ConfigurationError("WORLD_DB_TIMEOUT cannot be negative")
        log_level = (source.get("WORLDREPORTS_LOG_LEVEL", "") or DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(
                f"WORLDREPORTS_LOG_LEVEL must be a logging level name, got {log_level!r}"
            )
        return cls(
            path=Path(source.get("WORLD_DB_PATH", "") or DEFAULT_DB_PATH),
            timeout=timeout,
            log_level=log_level,
        )


def load_settings(env_file: str | Path | None = None) -> DatabaseSettings:
    """Load ``.env`` (without overriding the real environment) and build settings."""
    if env_file is not None:
        if not Path(env_file).is_file():
            raise ConfigurationError(f"Environment file not found: {env_file}")
        load_dotenv(env_file, override=False)
    elif load_dotenv(find_dotenv(usecwd=True), override=False):
        logger.debug(".env loaded")
    return DatabaseSettings.from_env()


__all__ = ["DatabaseSettings", "load_settings"]
