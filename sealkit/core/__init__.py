"""
Core module - Contains configuration, logging, and the crypto layer.
"""

from sealkit.core.config import SecureConfig
from sealkit.core.logging import get_secure_logger, SecureLogFilter

__all__ = ["SecureConfig", "get_secure_logger", "SecureLogFilter"]
