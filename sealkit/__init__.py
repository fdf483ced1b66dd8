"""
SealKit - Authenticated Encryption Primitives
=============================================

Seal messages for a recipient's public key (NaCl box) or encrypt them
under a shared key (NaCl secretbox).

Usage:
    import sealkit

    alice = sealkit.generate_key_pair()
    bob = sealkit.generate_key_pair()
    sealed = sealkit.seal(b"hello", bob.public, alice.private)
    assert sealkit.open_sealed(sealed, alice.public, bob.private) == b"hello"

    key = sealkit.generate_secret_key()
    assert sealkit.decrypt(sealkit.encrypt(b"secret", key), key) == b"secret"

Security Notice:
- No key material is logged
- Fail-closed design: tampering or a wrong key never yields plaintext
- Nonces are generated internally, never accepted from callers
"""

from __future__ import annotations

import logging
from typing import Type

from sealkit.core.config import SecureConfig
from sealkit.core.crypto import (
    AsymmetricCipher,
    AuthenticationFailure,
    CantDecryptBytes,
    CantOpenSealedBytes,
    CryptoError,
    InvalidEncoding,
    InvalidKeyLength,
    InvalidPublicKey,
    Key,
    KeyCodec,
    KeyPair,
    MessageTooShort,
    Nonce,
    PrivateKey,
    PublicKey,
    SecretKey,
    SymmetricCipher,
)
from sealkit.core.logging import get_secure_logger
from sealkit.security.constants import KEY_SIZE, NONCE_SIZE, TAG_SIZE

__version__ = "0.1.0"

# Library loggers stay silent until the host configures logging, e.g. with
# get_secure_logger("sealkit") or logging.basicConfig().
logging.getLogger(__name__).addHandler(logging.NullHandler())

_box = AsymmetricCipher()
_secretbox = SymmetricCipher()


def generate_key_pair() -> KeyPair:
    """Generate a Curve25519 key pair for sealing."""
    return _box.generate_key_pair()


def generate_secret_key() -> SecretKey:
    """Generate a random shared key for encrypt/decrypt."""
    return _secretbox.generate_key()


def decode_key(text: str, key_type: Type[Key] = SecretKey) -> Key:
    """Decode base64 key text. See KeyCodec.decode."""
    return KeyCodec.decode(text, key_type)


def encode_key(key: Key) -> str:
    return KeyCodec.encode(key)


def seal(plaintext: bytes, recipient_public_key: PublicKey, sender_private_key: PrivateKey) -> bytes:
    """Seal plaintext for a recipient. Returns nonce || ciphertext."""
    return _box.seal(plaintext, recipient_public_key, sender_private_key)


def open_sealed(sealed: bytes, sender_public_key: PublicKey, recipient_private_key: PrivateKey) -> bytes:
    """Open a sealed message. Raises CantOpenSealedBytes on any verification failure."""
    return _box.open(sealed, sender_public_key, recipient_private_key)


def encrypt(plaintext: bytes, key: SecretKey) -> bytes:
    """Encrypt plaintext under a shared key. Returns nonce || ciphertext."""
    return _secretbox.encrypt(plaintext, key)


def decrypt(encrypted: bytes, key: SecretKey) -> bytes:
    """Decrypt a message from encrypt(). Raises CantDecryptBytes on any verification failure."""
    return _secretbox.decrypt(encrypted, key)


__all__ = [
    "AsymmetricCipher",
    "SymmetricCipher",
    "KeyCodec",
    "Key",
    "KeyPair",
    "Nonce",
    "PrivateKey",
    "PublicKey",
    "SecretKey",
    "CryptoError",
    "AuthenticationFailure",
    "CantDecryptBytes",
    "CantOpenSealedBytes",
    "InvalidEncoding",
    "InvalidKeyLength",
    "InvalidPublicKey",
    "MessageTooShort",
    "SecureConfig",
    "get_secure_logger",
    "KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    "generate_key_pair",
    "generate_secret_key",
    "decode_key",
    "encode_key",
    "seal",
    "open_sealed",
    "encrypt",
    "decrypt",
    "__version__",
]
