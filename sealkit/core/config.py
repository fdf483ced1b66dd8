"""
Secure Configuration Module
===========================

Provides immutable, environment-aware configuration with security-first defaults.

Security Features:
- Immutable configuration after initialization
- Environment variable override support
- Sensitive-looking keys are never read from the environment
- OS-aware path handling
"""

from __future__ import annotations

import hashlib
import os
import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final, Optional


_SENSITIVE_KEYS: Final[frozenset[str]] = frozenset({
    "password", "secret", "token", "private", "credential", "passphrase",
})

_VALID_LEVELS: Final[frozenset[str]] = frozenset({
    "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL",
})


def _is_sensitive_key(key: str) -> bool:
    """Check if a configuration key might contain sensitive data."""
    key_lower = key.lower()
    return any(sensitive in key_lower for sensitive in _SENSITIVE_KEYS)


_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def _parse_bool(value: str, env_name: str) -> bool:
    """Parse a boolean override; unknown spellings are an error, not False."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{env_name} must be a boolean (true/false), got {value!r}")


def _parse_int(value: str, env_name: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(f"{env_name} must be an integer, got {value!r}") from None


def _get_default_log_dir() -> Path:
    """Get OS-appropriate default log directory."""
    system = platform.system().lower()

    if system == "windows":
        base = Path(os.environ.get("LOCALAPPDATA", Path.home() / "AppData" / "Local"))
        return base / "SealKit" / "Logs"
    elif system == "darwin":
        return Path.home() / "Library" / "Logs" / "SealKit"
    else:
        return Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state")) / "sealkit" / "logs"


@dataclass(frozen=True, slots=True)
class PathConfig:
    """Immutable path configuration with OS-aware defaults."""

    log_dir: Path = field(default_factory=_get_default_log_dir)

    def __post_init__(self) -> None:
        if not self.log_dir.is_absolute():
            raise ValueError(f"log_dir must be an absolute path: {self.log_dir}")


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Immutable logging configuration."""

    level: str = "INFO"
    max_file_size_bytes: int = 10 * 1024 * 1024  # 10 MB
    backup_count: int = 5
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    enable_console: bool = True
    enable_file: bool = False

    def __post_init__(self) -> None:
        if self.level.upper() not in _VALID_LEVELS:
            raise ValueError(f"Invalid log level: {self.level}")
        if self.backup_count < 0:
            raise ValueError("backup_count cannot be negative")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Immutable application configuration."""

    app_name: str = "SealKit"
    version: str = "0.1.0"


class SecureConfig:
    """
    Centralized, immutable configuration loader with environment override support.

    Usage:
        config = SecureConfig.load()
        level = config.logging.level
        logger = get_secure_logger("sealkit")  # uses config.logging
    """

    __slots__ = ("_paths", "_logging", "_app", "_frozen", "_config_hash")

    _instance: Optional[SecureConfig] = None

    def __init__(
        self,
        paths: Optional[PathConfig] = None,
        logging: Optional[LoggingConfig] = None,
        app: Optional[AppConfig] = None,
    ) -> None:
        """Initialize configuration. Use SecureConfig.load() for standard initialization."""
        object.__setattr__(self, "_frozen", False)
        object.__setattr__(self, "_paths", paths or PathConfig())
        object.__setattr__(self, "_logging", logging or LoggingConfig())
        object.__setattr__(self, "_app", app or AppConfig())
        object.__setattr__(self, "_config_hash", self._compute_hash())
        object.__setattr__(self, "_frozen", True)

    def _compute_hash(self) -> str:
        """Compute a hash of the configuration for integrity checking."""
        config_str = f"{self._paths}|{self._logging}|{self._app}"
        return hashlib.sha256(config_str.encode()).hexdigest()[:16]

    @property
    def paths(self) -> PathConfig:
        return self._paths

    @property
    def logging(self) -> LoggingConfig:
        return self._logging

    @property
    def app(self) -> AppConfig:
        return self._app

    @property
    def config_hash(self) -> str:
        return self._config_hash

    @classmethod
    def load(cls, env_prefix: str = "SEALKIT") -> SecureConfig:
        """
        Load configuration with environment variable overrides.

        Environment variables are prefixed with SEALKIT_ and use double
        underscores between section and key.

        Examples:
            SEALKIT_LOGGING__LEVEL=DEBUG
            SEALKIT_LOGGING__ENABLE_FILE=true
            SEALKIT_PATHS__LOG_DIR=/var/log/sealkit

        Args:
            env_prefix: Prefix for environment variables (default: SEALKIT)

        Returns:
            Configured SecureConfig instance

        Raises:
            ValueError: If an override cannot be parsed; the message names
                the environment variable
        """
        env_overrides = cls._parse_env_overrides(env_prefix)

        def env_name(config_key: str) -> str:
            return f"{env_prefix.upper()}_{config_key.replace('.', '__').upper()}"

        paths_kwargs: dict[str, Any] = {}
        if "paths.log_dir" in env_overrides:
            paths_kwargs["log_dir"] = Path(env_overrides["paths.log_dir"])

        logging_kwargs: dict[str, Any] = {}
        if "logging.level" in env_overrides:
            level = env_overrides["logging.level"].strip().upper()
            if level not in _VALID_LEVELS:
                raise ValueError(
                    f"{env_name('logging.level')} must be one of "
                    f"{', '.join(sorted(_VALID_LEVELS))}, got {env_overrides['logging.level']!r}"
                )
            logging_kwargs["level"] = level
        for flag in ("enable_console", "enable_file"):
            config_key = f"logging.{flag}"
            if config_key in env_overrides:
                logging_kwargs[flag] = _parse_bool(env_overrides[config_key], env_name(config_key))
        if "logging.backup_count" in env_overrides:
            logging_kwargs["backup_count"] = _parse_int(
                env_overrides["logging.backup_count"], env_name("logging.backup_count")
            )

        return cls(
            paths=PathConfig(**paths_kwargs) if paths_kwargs else None,
            logging=LoggingConfig(**logging_kwargs) if logging_kwargs else None,
        )

    @staticmethod
    def _parse_env_overrides(prefix: str) -> dict[str, str]:
        """Parse environment variables with the given prefix."""
        overrides: dict[str, str] = {}
        prefix_upper = f"{prefix.upper()}_"

        for key, value in os.environ.items():
            if key.startswith(prefix_upper):
                # SEALKIT_SECTION__KEY -> section.key
                config_key = key[len(prefix_upper):].lower().replace("__", ".")

                # SECURITY: Skip sensitive keys from environment
                if _is_sensitive_key(config_key):
                    continue

                overrides[config_key] = value

        return overrides

    @classmethod
    def get_instance(cls) -> SecureConfig:
        """Get or create the singleton configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance. Use only for testing."""
        cls._instance = None

    def __repr__(self) -> str:
        """Safe string representation without sensitive data."""
        return f"SecureConfig(hash={self._config_hash}, app={self._app.app_name})"

    def __setattr__(self, name: str, value: Any) -> None:
        """Prevent modification after initialization."""
        if hasattr(self, "_frozen") and self._frozen:
            raise AttributeError("SecureConfig is immutable after initialization")
        super().__setattr__(name, value)
