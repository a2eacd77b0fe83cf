"""Unified application settings

Typed settings loaded from RADARCHART_* environment variables, with CLI
overrides applied by main_web before validate() is called.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from radarchart.exceptions import ConfigurationError

ENV_PREFIX = "RADARCHART"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_CACHE_TTL = 300
DEFAULT_SWEEP_INTERVAL = 600
DEFAULT_MAX_AGE = 3600
DEFAULT_THEME = "legacy"
DEFAULT_AXIS_MAX = 100.0

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(f"{ENV_PREFIX}_{name}", default)


def _env_int(name: str, default: int) -> int:
    raw = _env(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}_{name} must be an integer, got '{raw}'")


def _env_float(name: str, default: float) -> float:
    raw = _env(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}_{name} must be a number, got '{raw}'")


@dataclass
class ServerSettings:
    """HTTP listener settings"""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls) -> "ServerSettings":
        return cls(
            host=_env("HOST", DEFAULT_HOST) or DEFAULT_HOST,
            port=_env_int("PORT", DEFAULT_PORT),
        )


@dataclass
class CacheSettings:
    """Rendered-image cache timing"""

    ttl_seconds: int = DEFAULT_CACHE_TTL
    sweep_interval_seconds: int = DEFAULT_SWEEP_INTERVAL
    max_age_header: int = DEFAULT_MAX_AGE

    @classmethod
    def from_env(cls) -> "CacheSettings":
        return cls(
            ttl_seconds=_env_int("CACHE_TTL", DEFAULT_CACHE_TTL),
            sweep_interval_seconds=_env_int("CACHE_SWEEP_INTERVAL", DEFAULT_SWEEP_INTERVAL),
            max_age_header=_env_int("CACHE_MAX_AGE", DEFAULT_MAX_AGE),
        )


@dataclass
class RenderSettings:
    """Chart styling"""

    theme: str = DEFAULT_THEME
    axis_max: float = DEFAULT_AXIS_MAX

    @classmethod
    def from_env(cls) -> "RenderSettings":
        return cls(
            theme=_env("THEME", DEFAULT_THEME) or DEFAULT_THEME,
            axis_max=_env_float("AXIS_MAX", DEFAULT_AXIS_MAX),
        )


@dataclass
class LogSettings:
    level: str = "INFO"

    @classmethod
    def from_env(cls) -> "LogSettings":
        return cls(level=(_env("LOG_LEVEL", "INFO") or "INFO").upper())

    def get_level(self) -> int:
        """Numeric logging level for the configured name"""
        return getattr(logging, self.level.upper(), logging.INFO)


@dataclass
class Settings:
    """Complete service configuration"""

    server: ServerSettings = field(default_factory=ServerSettings)
    cache: CacheSettings = field(default_factory=CacheSettings)
    render: RenderSettings = field(default_factory=RenderSettings)
    log: LogSettings = field(default_factory=LogSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            server=ServerSettings.from_env(),
            cache=CacheSettings.from_env(),
            render=RenderSettings.from_env(),
            log=LogSettings.from_env(),
        )

    def validate(self) -> None:
        """
        Check settings for consistency

        Raises:
            ConfigurationError: If any value is out of range
        """
        from radarchart.themes import list_themes

        if not 0 < self.server.port < 65536:
            raise ConfigurationError(f"Port must be between 1 and 65535, got {self.server.port}")
        if self.cache.ttl_seconds <= 0:
            raise ConfigurationError("Cache TTL must be positive")
        if self.cache.sweep_interval_seconds <= 0:
            raise ConfigurationError("Cache sweep interval must be positive")
        if self.cache.max_age_header < 0:
            raise ConfigurationError("Cache-Control max-age cannot be negative")
        if self.render.axis_max <= 0:
            raise ConfigurationError("Axis max must be positive")
        if self.render.theme.lower() not in list_themes():
            available = ", ".join(list_themes())
            raise ConfigurationError(
                f"Unknown theme '{self.render.theme}'. Available themes: {available}"
            )
        if self.log.level.upper() not in _LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level '{self.log.level}'")


_settings: Optional[Settings] = None


def get_settings(reload: bool = False) -> Settings:
    """
    Get or create the settings instance used by the CLI entry points

    Args:
        reload: If True, reload settings from environment

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None or reload:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget the loaded settings (used by tests)"""
    global _settings
    _settings = None


__all__ = [
    "ServerSettings",
    "CacheSettings",
    "RenderSettings",
    "LogSettings",
    "Settings",
    "get_settings",
    "reset_settings",
    "DEFAULT_PORT",
]
