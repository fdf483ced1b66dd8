"""
SealKit Security Module
=======================

Holds the fixed sizes and identifiers of the wire format.
"""

from sealkit.security.constants import (
    KEY_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
    BOX_ALGORITHM,
    SECRETBOX_ALGORITHM,
    ERROR_CATEGORY,
)

__all__ = [
    "KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    "BOX_ALGORITHM",
    "SECRETBOX_ALGORITHM",
    "ERROR_CATEGORY",
]
