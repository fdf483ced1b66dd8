"""
Validation Utilities
====================

Argument checks run before any cryptographic work starts.
"""

from __future__ import annotations

from typing import Any, Union

BytesLike = Union[bytes, bytearray, memoryview]


class ValidationError(TypeError):
    """Raised when an argument has the wrong type."""
    pass


def ensure_bytes(value: Any, field_name: str = "value") -> bytes:
    """
    Validate a bytes-like argument and return it as immutable bytes.

    Args:
        value: The value to validate
        field_name: Name of the argument for error messages

    Returns:
        The value as ``bytes``

    Raises:
        ValidationError: If value is not bytes-like (``str`` is rejected)
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise ValidationError(
        f"{field_name} must be bytes-like, not {type(value).__name__}"
    )


def ensure_text(value: Any, field_name: str = "value") -> str:
    """
    Validate a text argument.

    ASCII ``bytes`` are accepted and decoded, since base64 is often read
    straight from files or sockets.

    Raises:
        ValidationError: If value is neither str nor bytes
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("ascii", errors="replace")
    raise ValidationError(
        f"{field_name} must be str, not {type(value).__name__}"
    )


def ensure_instance(value: Any, expected: type, field_name: str = "value") -> Any:
    """
    Validate that value is an instance of the expected type.

    Key roles are distinct classes, so passing a public key where a private
    key is required fails here instead of inside the cipher.

    Raises:
        ValidationError: If value is not an instance of ``expected``
    """
    if not isinstance(value, expected):
        raise ValidationError(
            f"{field_name} must be {expected.__name__}, not {type(value).__name__}"
        )
    return value
