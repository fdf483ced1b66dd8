"""
Utils module - Argument validation helpers used by the crypto layer.
"""

from sealkit.utils.validators import (
    ValidationError,
    ensure_bytes,
    ensure_text,
    ensure_instance,
)

__all__ = [
    "ValidationError",
    "ensure_bytes",
    "ensure_text",
    "ensure_instance",
]
