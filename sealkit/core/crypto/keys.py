"""
Key Material and Key Codec
==========================

Fixed-size value types for the sealing and encryption layers, and the
base64 codec used to move keys in and out of text.

Types:
    - PublicKey / PrivateKey: Curve25519 halves used by the box cipher
    - SecretKey: shared key used by the secretbox cipher
    - Nonce: 24-byte per-message value, generated internally only

Each role is its own class. Keys of different roles never compare equal,
and the ciphers reject a key of the wrong role with a ValidationError.

Security Notes:
    - repr() of private and secret keys never shows key bytes
    - Key equality uses a constant-time comparison
"""

from __future__ import annotations

import base64
import binascii
import hmac
import logging
import secrets
from dataclasses import dataclass
from typing import Iterator, Type, TypeVar

from sealkit.core.crypto.errors import InvalidEncoding, InvalidKeyLength
from sealkit.security.constants import KEY_SIZE, NONCE_SIZE
from sealkit.utils.validators import ensure_bytes, ensure_instance, ensure_text

logger = logging.getLogger(__name__)

K = TypeVar("K", bound="Key")


@dataclass(frozen=True, slots=True, eq=False)
class Key:
    """
    Immutable 32-byte key.

    Attributes:
        raw: The key bytes

    Raises:
        InvalidKeyLength: If raw is not exactly KEY_SIZE bytes
    """

    raw: bytes

    def __post_init__(self) -> None:
        raw = ensure_bytes(self.raw, "key")
        if len(raw) != KEY_SIZE:
            raise InvalidKeyLength(len(raw))
        object.__setattr__(self, "raw", raw)

    def __bytes__(self) -> bytes:
        return self.raw

    def __len__(self) -> int:
        return KEY_SIZE

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return hmac.compare_digest(self.raw, other.raw)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.raw))

    def __repr__(self) -> str:
        """Safe representation without exposing key material."""
        return f"{type(self).__name__}(len={KEY_SIZE}, redacted)"


class PublicKey(Key):
    """Curve25519 public key. Not secret, so repr shows it."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"PublicKey({base64.b64encode(self.raw).decode('ascii')})"


class PrivateKey(Key):
    """Curve25519 private key."""

    __slots__ = ()


class SecretKey(Key):
    """Shared secret key for symmetric encryption."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class KeyPair:
    """
    Public and private key produced together by generation.

    Nothing ties the two halves together beyond this container; the pairing
    is never persisted or checked. Unpacks as ``public, private``.
    """

    public: PublicKey
    private: PrivateKey

    def __iter__(self) -> Iterator[Key]:
        yield self.public
        yield self.private

    def __repr__(self) -> str:
        return f"KeyPair(public={self.public!r}, private=<redacted>)"


@dataclass(frozen=True, slots=True)
class Nonce:
    """
    24-byte number used once per (key, message).

    Callers never supply nonces; seal and encrypt draw a fresh one from
    the OS CSPRNG on every call.
    """

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != NONCE_SIZE:
            raise ValueError(f"Nonce must be exactly {NONCE_SIZE} bytes")

    @classmethod
    def random(cls) -> Nonce:
        return cls(secrets.token_bytes(NONCE_SIZE))

    def __bytes__(self) -> bytes:
        return self.raw


class KeyCodec:
    """
    Standard base64 (RFC 4648, padded) codec for keys.

    Usage:
        key = KeyCodec.decode("q83v...=", SecretKey)
        text = KeyCodec.encode(key)
    """

    __slots__ = ()

    @staticmethod
    def decode(text: str, key_type: Type[K] = SecretKey) -> K:  # type: ignore[assignment]
        """
        Decode base64 text into a key of the requested role.

        Args:
            text: Base64 text of exactly 32 bytes. Surrounding whitespace
                and line breaks anywhere are ignored; anything else outside
                the alphabet is rejected.
            key_type: Key class to build (SecretKey, PublicKey, PrivateKey)

        Returns:
            Key instance of ``key_type``

        Raises:
            InvalidEncoding: If text is not valid base64
            InvalidKeyLength: If the decoded length is not 32 bytes
        """
        if not (isinstance(key_type, type) and issubclass(key_type, Key)):
            raise TypeError("key_type must be a Key subclass")

        text = ensure_text(text, "text").strip()
        # Wrapped base64 (PEM-style lines) decodes like one line
        text = text.replace("\r", "").replace("\n", "")
        try:
            raw = base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError):
            logger.warning("Rejected key text: not valid base64 (code=%d)", InvalidEncoding.code)
            raise InvalidEncoding() from None

        if len(raw) != KEY_SIZE:
            logger.warning(
                "Rejected key text: decoded to %d bytes (code=%d)",
                len(raw),
                InvalidKeyLength.code,
            )
            raise InvalidKeyLength(len(raw))

        return key_type(raw)

    @staticmethod
    def encode(key: Key) -> str:
        """Encode a key as padded standard base64 text."""
        ensure_instance(key, Key, "key")
        return base64.b64encode(key.raw).decode("ascii")
