"""
Shared-Key Authenticated Encryption (NaCl secretbox)
====================================================

XSalsa20 stream cipher with a Poly1305 authenticator, identical to
NaCl/libsodium ``crypto_secretbox``.

Wire Format:
    nonce (24 bytes) || ciphertext || Poly1305 tag (16 bytes)

Security Properties:
    - 256-bit key
    - 192-bit random nonce, drawn fresh for each message
    - 128-bit Poly1305 tag, verified before decryption output

WARNING:
    - Both parties must already share the key; this module does not
      exchange or store keys
"""

from __future__ import annotations

import logging
import secrets

from nacl import exceptions as nacl_exceptions
from nacl import secret as nacl_secret

from sealkit.core.crypto.errors import CantDecryptBytes, MessageTooShort
from sealkit.core.crypto.keys import Nonce, SecretKey
from sealkit.security.constants import KEY_SIZE, NONCE_SIZE, TAG_SIZE
from sealkit.utils.validators import ensure_bytes, ensure_instance

logger = logging.getLogger(__name__)


class SymmetricCipher:
    """
    XSalsa20-Poly1305 authenticated encryption under one shared key.

    Usage:
        cipher = SymmetricCipher()
        key = cipher.generate_key()

        encrypted = cipher.encrypt(b"secret", key)
        plaintext = cipher.decrypt(encrypted, key)
    """

    __slots__ = ()

    @staticmethod
    def generate_key() -> SecretKey:
        """
        Generate a cryptographically secure random shared key.

        Returns:
            SecretKey of 32 random bytes
        """
        return SecretKey(secrets.token_bytes(KEY_SIZE))

    def encrypt(self, plaintext: bytes, key: SecretKey) -> bytes:
        """
        Encrypt and authenticate plaintext under key.

        Args:
            plaintext: Data to encrypt (can be empty)
            key: Shared secret key

        Returns:
            nonce || ciphertext-with-tag

        Raises:
            ValidationError: If an argument has the wrong type
        """
        plaintext = ensure_bytes(plaintext, "plaintext")
        ensure_instance(key, SecretKey, "key")

        nonce = Nonce.random()
        box = nacl_secret.SecretBox(key.raw)
        return bytes(box.encrypt(plaintext, nonce.raw))

    def decrypt(self, encrypted: bytes, key: SecretKey) -> bytes:
        """
        Verify and decrypt a message produced by encrypt().

        Args:
            encrypted: nonce || ciphertext-with-tag
            key: Shared secret key used for encryption

        Returns:
            The original plaintext

        Raises:
            MessageTooShort: If encrypted is shorter than the nonce
            CantDecryptBytes: If authentication fails (tampered data or
                wrong key)
            ValidationError: If an argument has the wrong type
        """
        encrypted = ensure_bytes(encrypted, "encrypted")
        ensure_instance(key, SecretKey, "key")

        if len(encrypted) < NONCE_SIZE:
            raise MessageTooShort(len(encrypted))

        nonce = Nonce(encrypted[:NONCE_SIZE])
        ciphertext = encrypted[NONCE_SIZE:]
        if len(ciphertext) < TAG_SIZE:
            raise self._decrypt_failed(len(encrypted))

        box = nacl_secret.SecretBox(key.raw)
        try:
            return box.decrypt(ciphertext, nonce.raw)
        except nacl_exceptions.CryptoError:
            raise self._decrypt_failed(len(encrypted)) from None

    @staticmethod
    def _decrypt_failed(input_len: int) -> CantDecryptBytes:
        logger.warning(
            "Secretbox authentication failed (code=%d, input_len=%d)",
            CantDecryptBytes.code,
            input_len,
        )
        return CantDecryptBytes()
