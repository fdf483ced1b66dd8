"""
Public-Key Authenticated Encryption (NaCl box)
==============================================

Seals a message for one recipient and proves which sender sealed it.

Construction:
    Curve25519 key agreement between the sender's private key and the
    recipient's public key, HSalsa20 key derivation, then XSalsa20-Poly1305
    over the plaintext. Identical to NaCl/libsodium ``crypto_box``.

Wire Format:
    nonce (24 bytes) || ciphertext || Poly1305 tag (16 bytes)

Security Properties:
    - Fresh random 24-byte nonce on every seal (never caller supplied)
    - Tag verified before any plaintext is produced
    - Tampering and wrong keys fail the same way (fail-closed)

WARNING:
    - The box authenticates the sender only towards the recipient;
      it is not a signature a third party can verify.
"""

from __future__ import annotations

import logging

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey
from nacl import exceptions as nacl_exceptions
from nacl import public as nacl_public

from sealkit.core.crypto.errors import CantOpenSealedBytes, InvalidPublicKey, MessageTooShort
from sealkit.core.crypto.keys import KeyPair, Nonce, PrivateKey, PublicKey
from sealkit.security.constants import NONCE_SIZE, TAG_SIZE
from sealkit.utils.validators import ensure_bytes, ensure_instance

logger = logging.getLogger(__name__)


def _private_bytes(key: X25519PrivateKey) -> bytes:
    return key.private_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PrivateFormat.Raw,
        encryption_algorithm=serialization.NoEncryption(),
    )


def _public_bytes(key: X25519PrivateKey) -> bytes:
    return key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


class AsymmetricCipher:
    """
    Curve25519-XSalsa20-Poly1305 public-key authenticated encryption.

    Usage:
        cipher = AsymmetricCipher()
        alice = cipher.generate_key_pair()
        bob = cipher.generate_key_pair()

        sealed = cipher.seal(b"hello", bob.public, alice.private)
        plaintext = cipher.open(sealed, alice.public, bob.private)

    The cipher holds no state; one instance can be shared across threads.
    """

    __slots__ = ()

    @staticmethod
    def generate_key_pair() -> KeyPair:
        """
        Generate a random Curve25519 key pair.

        Returns:
            KeyPair with raw 32-byte public and private halves

        Security:
            Private scalar comes from the OS CSPRNG. If the random source
            is unavailable the underlying error propagates unchanged.
        """
        private = X25519PrivateKey.generate()
        return KeyPair(
            public=PublicKey(_public_bytes(private)),
            private=PrivateKey(_private_bytes(private)),
        )

    @staticmethod
    def public_key_from_private(private_key: PrivateKey) -> PublicKey:
        """Recompute the public half of a private key."""
        ensure_instance(private_key, PrivateKey, "private_key")
        private = X25519PrivateKey.from_private_bytes(private_key.raw)
        return PublicKey(_public_bytes(private))

    def seal(
        self,
        plaintext: bytes,
        recipient_public_key: PublicKey,
        sender_private_key: PrivateKey,
    ) -> bytes:
        """
        Encrypt and authenticate plaintext for a recipient.

        Args:
            plaintext: Data to seal (can be empty)
            recipient_public_key: Public key of the party that will open it
            sender_private_key: Private key of the sealing party

        Returns:
            nonce || ciphertext-with-tag

        Raises:
            InvalidPublicKey: If the recipient key is a low-order point
                (libsodium refuses the all-zero shared secret)
            ValidationError: If an argument has the wrong type or key role
        """
        plaintext = ensure_bytes(plaintext, "plaintext")
        ensure_instance(recipient_public_key, PublicKey, "recipient_public_key")
        ensure_instance(sender_private_key, PrivateKey, "sender_private_key")

        nonce = Nonce.random()
        try:
            box = nacl_public.Box(
                nacl_public.PrivateKey(sender_private_key.raw),
                nacl_public.PublicKey(recipient_public_key.raw),
            )
        except nacl_exceptions.CryptoError:
            logger.warning("Refused low-order recipient key (code=%d)", InvalidPublicKey.code)
            raise InvalidPublicKey() from None
        # EncryptedMessage is nonce || ciphertext
        return bytes(box.encrypt(plaintext, nonce.raw))

    def open(
        self,
        sealed: bytes,
        sender_public_key: PublicKey,
        recipient_private_key: PrivateKey,
    ) -> bytes:
        """
        Verify and decrypt a sealed message.

        Args:
            sealed: nonce || ciphertext-with-tag, as produced by seal()
            sender_public_key: Public key of the sealing party
            recipient_private_key: Private key of the receiving party

        Returns:
            The original plaintext

        Raises:
            MessageTooShort: If sealed is shorter than the nonce
            CantOpenSealedBytes: If authentication fails (tampered data or
                wrong keys; the cause is deliberately not reported)
            ValidationError: If an argument has the wrong type or key role

        Security:
            No plaintext bytes are returned unless the tag verifies.
        """
        sealed = ensure_bytes(sealed, "sealed")
        ensure_instance(sender_public_key, PublicKey, "sender_public_key")
        ensure_instance(recipient_private_key, PrivateKey, "recipient_private_key")

        if len(sealed) < NONCE_SIZE:
            raise MessageTooShort(len(sealed))

        nonce = Nonce(sealed[:NONCE_SIZE])
        ciphertext = sealed[NONCE_SIZE:]
        if len(ciphertext) < TAG_SIZE:
            raise self._open_failed(len(sealed))

        try:
            # Key agreement runs here too; low-order points fail like a bad tag
            box = nacl_public.Box(
                nacl_public.PrivateKey(recipient_private_key.raw),
                nacl_public.PublicKey(sender_public_key.raw),
            )
            return box.decrypt(ciphertext, nonce.raw)
        except nacl_exceptions.CryptoError:
            raise self._open_failed(len(sealed)) from None

    @staticmethod
    def _open_failed(input_len: int) -> CantOpenSealedBytes:
        logger.warning(
            "Box authentication failed (code=%d, input_len=%d)",
            CantOpenSealedBytes.code,
            input_len,
        )
        return CantOpenSealedBytes()
