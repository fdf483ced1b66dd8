"""
SealKit Cryptographic Core
==========================

Authenticated encryption in the two NaCl constructions:

    1. AsymmetricCipher: Curve25519-XSalsa20-Poly1305 ("box")
    2. SymmetricCipher: XSalsa20-Poly1305 ("secretbox")

Both produce ``nonce (24) || ciphertext || tag (16)`` and both fail closed:
tampering or a wrong key raises AuthenticationFailure and returns no
plaintext.

WARNING: This module handles sensitive cryptographic material.
         Incorrect usage can compromise security.
"""

from sealkit.core.crypto.box import AsymmetricCipher
from sealkit.core.crypto.errors import (
    AuthenticationFailure,
    CantDecryptBytes,
    CantOpenSealedBytes,
    CryptoError,
    InvalidEncoding,
    InvalidKeyLength,
    InvalidPublicKey,
    MessageTooShort,
)
from sealkit.core.crypto.keys import (
    Key,
    KeyCodec,
    KeyPair,
    Nonce,
    PrivateKey,
    PublicKey,
    SecretKey,
)
from sealkit.core.crypto.secretbox import SymmetricCipher

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
]
