"""Application configuration

Static settings for the web server and the logger. Nothing here is read
from the environment or the command line.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class ServerSettings:
    """Listener address."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


@dataclass(frozen=True)
class LogSettings:
    """Logger output settings."""

    level: int = logging.INFO
    log_file: Optional[str] = None
    json_format: bool = False


@dataclass(frozen=True)
class Settings:
    server: ServerSettings = field(default_factory=ServerSettings)
    log: LogSettings = field(default_factory=LogSettings)


_settings: Optional[Settings] = None


def get_settings(reload: bool = False) -> Settings:
    """Get the shared settings instance, creating it on first use."""
    global _settings
    if _settings is None or reload:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings instance."""
    global _settings
    _settings = None


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "ServerSettings",
    "LogSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
