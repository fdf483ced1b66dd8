"""
Security Constants
==================

Sizes and algorithm names shared by the sealing and encryption layers.
These values define the wire format and must not change: existing sealed
and encrypted payloads depend on them.
"""

from typing import Final

# Key material
KEY_SIZE: Final[int] = 32  # Curve25519 keys and XSalsa20 keys (256 bits)

# Nonces
NONCE_SIZE: Final[int] = 24  # 192-bit XSalsa20 nonce
TAG_SIZE: Final[int] = 16  # 128-bit Poly1305 authenticator

# Algorithm identifiers
BOX_ALGORITHM: Final[str] = "Curve25519-XSalsa20-Poly1305"
SECRETBOX_ALGORITHM: Final[str] = "XSalsa20-Poly1305"

# Error category used for all crypto error codes
ERROR_CATEGORY: Final[str] = "crypto"
