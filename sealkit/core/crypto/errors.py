"""
Crypto Error Taxonomy
=====================

Every failure of the crypto layer is a ``CryptoError`` carrying a numeric
code and a category. Errors are raised fresh at the failure site with the
minimal context needed for diagnostics (lengths, never key bytes).

Codes:
    100  InvalidKeyLength     decoded/supplied key is not 32 bytes
    101  CantOpenSealedBytes  box authentication failed
    102  CantDecryptBytes     secretbox authentication failed
    103  InvalidEncoding      key text is not valid base64
    104  MessageTooShort      input shorter than the nonce
    105  InvalidPublicKey     recipient public key is a low-order point

Authentication failures never say why verification failed: tampering and
wrong keys are indistinguishable to the caller.
"""

from __future__ import annotations

from typing import Optional

from sealkit.security.constants import ERROR_CATEGORY, KEY_SIZE, NONCE_SIZE


class CryptoError(Exception):
    """Base class for all crypto layer errors."""

    code: int = 0
    default_message: str = "crypto failure"

    def __init__(self, message: Optional[str] = None) -> None:
        self.category = ERROR_CATEGORY
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.category}:{self.code}] {self.message}"


class InvalidKeyLength(CryptoError, ValueError):
    """Key material is not exactly KEY_SIZE bytes."""

    code = 100
    default_message = "invalid crypto key length"

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"{self.default_message}: got {length} bytes, expected {KEY_SIZE}"
        )


class AuthenticationFailure(CryptoError):
    """Authentication tag did not verify (tampered data or wrong key)."""

    default_message = "authentication failed"


class CantOpenSealedBytes(AuthenticationFailure):
    code = 101
    default_message = "unable to open/unseal bytes"


class CantDecryptBytes(AuthenticationFailure):
    code = 102
    default_message = "unable to decrypt bytes"


class InvalidEncoding(CryptoError, ValueError):
    """Key text is not standard base64."""

    code = 103
    default_message = "key text is not valid base64"


class MessageTooShort(CryptoError, ValueError):
    """Sealed or encrypted input cannot even hold a nonce."""

    code = 104
    default_message = "message too short"

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"{self.default_message}: got {length} bytes, need at least {NONCE_SIZE}"
        )


class InvalidPublicKey(CryptoError, ValueError):
    """Public key is a low-order Curve25519 point; key agreement is refused."""

    code = 105
    default_message = "public key cannot be used for key agreement"
