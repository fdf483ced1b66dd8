"""
Secure Logging Module
=====================

Provides security-aware logging with key-material filtering.

Security Features:
- Automatic redaction of key-looking data (base64/hex runs, key=... pairs)
- Rotating log files with size limits
- Structured (JSON) output support
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Pattern

from sealkit.core.config import SecureConfig


_SENSITIVE_PATTERNS: Final[list[tuple[str, Pattern[str]]]] = [
    ("private_key", re.compile(r'(?i)(private[_-]?key|privkey)\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    ("secret", re.compile(r'(?i)(secret[_-]?key|secret|shared[_-]?key)\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    ("password", re.compile(r'(?i)(password|passwd|passphrase)\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    ("token", re.compile(r'(?i)(token|bearer)\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    # A base64 encoded 32-byte key is 44 characters
    ("base64_secret", re.compile(r'[A-Za-z0-9+/]{40,}={0,2}')),
    ("hex_secret", re.compile(r'(?i)(?:0x)?[a-f0-9]{32,}')),
]

_REDACTED_TEXT: Final[str] = "[REDACTED]"


class SecureLogFilter(logging.Filter):
    """
    Log filter that removes key material from log messages.

    Messages and string arguments are scanned for key-looking data
    and the matches are replaced with [REDACTED].
    """

    def __init__(self, name: str = "", additional_patterns: Optional[list[Pattern[str]]] = None) -> None:
        super().__init__(name)
        self._additional_patterns = additional_patterns or []

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact the record in place. Always keeps the record."""
        if record.msg and isinstance(record.msg, str):
            record.msg = self._sanitize(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._sanitize(v) if isinstance(v, str) else v
                               for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(
                    self._sanitize(arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )

        return True

    def _sanitize(self, text: str) -> str:
        result = text

        for name, pattern in _SENSITIVE_PATTERNS:
            result = pattern.sub(f"{name}={_REDACTED_TEXT}", result)

        for pattern in self._additional_patterns:
            result = pattern.sub(_REDACTED_TEXT, result)

        return result


class StructuredLogFormatter(logging.Formatter):
    """Formatter that outputs one JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class SecureRotatingFileHandler(RotatingFileHandler):
    """
    Rotating file handler that creates its directory and rejects
    path traversal in the log path.
    """

    def __init__(
        self,
        filename: str | Path,
        mode: str = "a",
        maxBytes: int = 10 * 1024 * 1024,
        backupCount: int = 5,
        encoding: str = "utf-8",
    ) -> None:
        if ".." in Path(filename).parts:
            raise ValueError("Log path cannot contain path traversal sequences")

        log_path = Path(filename).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        super().__init__(
            str(log_path),
            mode=mode,
            maxBytes=maxBytes,
            backupCount=backupCount,
            encoding=encoding,
        )


def get_secure_logger(
    name: str,
    log_dir: Optional[Path] = None,
    level: Optional[str] = None,
    enable_console: Optional[bool] = None,
    enable_file: Optional[bool] = None,
    enable_json: bool = False,
) -> logging.Logger:
    """
    Create a secure logger with automatic key-material filtering.

    Arguments left as None are taken from ``SecureConfig.get_instance()``.

    Args:
        name: Logger name (typically __name__)
        log_dir: Directory for log files
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Whether to output to stderr
        enable_file: Whether to output to a rotating file in log_dir
        enable_json: Whether to use JSON format for file output

    Returns:
        Configured secure logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times; a bare NullHandler does not count
    if any(not isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        return logger

    config = SecureConfig.get_instance()
    log_config = config.logging
    level = level or log_config.level
    enable_console = log_config.enable_console if enable_console is None else enable_console
    enable_file = log_config.enable_file if enable_file is None else enable_file
    log_dir = log_dir or config.paths.log_dir

    logger.setLevel(getattr(logging, level.upper()))

    secure_filter = SecureLogFilter()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        ))
        console_handler.addFilter(secure_filter)
        logger.addHandler(console_handler)

    if enable_file:
        file_handler = SecureRotatingFileHandler(
            filename=log_dir / f"{name.replace('.', '_')}.log",
            maxBytes=log_config.max_file_size_bytes,
            backupCount=log_config.backup_count,
        )
        file_handler.setLevel(logging.DEBUG)
        if enable_json:
            file_handler.setFormatter(StructuredLogFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(
                log_config.format, datefmt=log_config.date_format,
            ))
        file_handler.addFilter(secure_filter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger
