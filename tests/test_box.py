"""Tests for public-key sealing (NaCl box)."""

import os

import pytest
from nacl.public import Box
from nacl.public import PrivateKey as NaclPrivateKey
from nacl.public import PublicKey as NaclPublicKey

from sealkit import (
    AsymmetricCipher,
    AuthenticationFailure,
    CantOpenSealedBytes,
    CryptoError,
    InvalidPublicKey,
    KeyPair,
    MessageTooShort,
    PrivateKey,
    PublicKey,
    SecretKey,
)
from sealkit.utils.validators import ValidationError


def test_generate_key_pair_shapes(box):
    pair = box.generate_key_pair()
    assert isinstance(pair, KeyPair)
    assert isinstance(pair.public, PublicKey)
    assert isinstance(pair.private, PrivateKey)
    assert len(pair.public.raw) == 32
    assert len(pair.private.raw) == 32


def test_generated_pairs_are_distinct(box):
    first, second = box.generate_key_pair(), box.generate_key_pair()
    assert first.public != second.public
    assert first.private != second.private


def test_key_pair_unpacks_public_then_private(alice):
    public, private = alice
    assert public is alice.public
    assert private is alice.private
    assert "redacted" in repr(alice)


def test_public_key_from_private_matches_generation(box, alice):
    assert box.public_key_from_private(alice.private) == alice.public


def test_seal_open_hello_scenario(box, alice, bob):
    """Alice seals for Bob; Bob opens with Alice's public key."""
    sealed = box.seal(b"hello", bob.public, alice.private)
    assert box.open(sealed, alice.public, bob.private) == b"hello"


@pytest.mark.parametrize("size", [0, 1, 15, 16, 17, 1024, 65536])
def test_round_trip_sizes(box, alice, bob, size):
    plaintext = os.urandom(size)
    sealed = box.seal(plaintext, bob.public, alice.private)
    assert len(sealed) == 24 + size + 16
    assert box.open(sealed, alice.public, bob.private) == plaintext


def test_accepts_bytearray_and_memoryview(box, alice, bob):
    sealed = box.seal(bytearray(b"data"), bob.public, alice.private)
    assert box.open(memoryview(sealed), alice.public, bob.private) == b"data"


def test_shared_key_is_symmetric(box, alice, bob):
    """Bob can also seal back to Alice with the same two pairs."""
    sealed = box.seal(b"reply", alice.public, bob.private)
    assert box.open(sealed, bob.public, alice.private) == b"reply"


def test_same_input_gives_different_output(box, alice, bob):
    first = box.seal(b"same", bob.public, alice.private)
    second = box.seal(b"same", bob.public, alice.private)
    assert first != second
    assert first[:24] != second[:24]


def test_every_single_bit_flip_is_rejected(box, alice, bob):
    sealed = box.seal(b"tamper me", bob.public, alice.private)
    for index in range(len(sealed)):
        for bit in range(8):
            tampered = bytearray(sealed)
            tampered[index] ^= 1 << bit
            with pytest.raises(CantOpenSealedBytes):
                box.open(bytes(tampered), alice.public, bob.private)


def test_truncation_is_rejected(box, alice, bob):
    sealed = box.seal(b"truncate me", bob.public, alice.private)
    with pytest.raises(AuthenticationFailure):
        box.open(sealed[:-1], alice.public, bob.private)


@pytest.mark.parametrize("substituted", ["sender_public", "recipient_private", "both"])
def test_open_with_unrelated_keys_fails(box, alice, bob, substituted):
    sealed = box.seal(b"hello", bob.public, alice.private)
    eve = box.generate_key_pair()
    sender_public = eve.public if substituted in ("sender_public", "both") else alice.public
    recipient_private = eve.private if substituted in ("recipient_private", "both") else bob.private
    with pytest.raises(CantOpenSealedBytes):
        box.open(sealed, sender_public, recipient_private)


@pytest.mark.parametrize("substituted", ["recipient_public", "sender_private"])
def test_seal_with_unrelated_keys_cannot_be_opened(box, alice, bob, substituted):
    eve = box.generate_key_pair()
    recipient_public = eve.public if substituted == "recipient_public" else bob.public
    sender_private = eve.private if substituted == "sender_private" else alice.private
    sealed = box.seal(b"hello", recipient_public, sender_private)
    with pytest.raises(CantOpenSealedBytes):
        box.open(sealed, alice.public, bob.private)


def test_failure_message_does_not_reveal_cause(box, alice, bob):
    sealed = box.seal(b"hello", bob.public, alice.private)
    eve = box.generate_key_pair()
    tampered = sealed[:-1] + bytes([sealed[-1] ^ 1])

    with pytest.raises(CantOpenSealedBytes) as wrong_key:
        box.open(sealed, eve.public, bob.private)
    with pytest.raises(CantOpenSealedBytes) as wrong_tag:
        box.open(tampered, alice.public, bob.private)

    assert str(wrong_key.value) == str(wrong_tag.value)
    assert wrong_key.value.code == 101
    assert wrong_key.value.__cause__ is None


def test_low_order_recipient_key_is_refused(box, alice, bob):
    """An all-zero public key yields an all-zero shared secret; sealing to it must fail typed."""
    with pytest.raises(InvalidPublicKey) as excinfo:
        box.seal(b"x", PublicKey(bytes(32)), alice.private)
    assert isinstance(excinfo.value, CryptoError)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.code == 105
    assert excinfo.value.__cause__ is None

    sealed = box.seal(b"x", bob.public, alice.private)
    with pytest.raises(CantOpenSealedBytes):
        box.open(sealed, PublicKey(bytes(32)), bob.private)


@pytest.mark.parametrize("size", [0, 1, 23])
def test_input_shorter_than_nonce_is_rejected(box, alice, bob, size):
    with pytest.raises(MessageTooShort) as excinfo:
        box.open(b"\x00" * size, alice.public, bob.private)
    assert excinfo.value.length == size


@pytest.mark.parametrize("size", [24, 30, 39])
def test_input_without_full_tag_fails_authentication(box, alice, bob, size):
    with pytest.raises(CantOpenSealedBytes):
        box.open(os.urandom(size), alice.public, bob.private)


def test_key_roles_are_enforced(box, alice, bob):
    with pytest.raises(ValidationError):
        box.seal(b"x", bob.private, alice.private)
    with pytest.raises(ValidationError):
        box.seal(b"x", bob.public, alice.public)
    with pytest.raises(ValidationError):
        box.seal(b"x", bob.public, SecretKey(alice.private.raw))
    sealed = box.seal(b"x", bob.public, alice.private)
    with pytest.raises(ValidationError):
        box.open(sealed, alice.private, bob.private)


def test_text_plaintext_is_rejected(box, alice, bob):
    with pytest.raises(TypeError):
        box.seal("hello", bob.public, alice.private)


def test_output_interoperates_with_pynacl(box, alice, bob):
    """Wire format is nonce || ciphertext exactly as NaCl produces it."""
    sealed = box.seal(b"interop", bob.public, alice.private)
    nacl_box = Box(NaclPrivateKey(bob.private.raw), NaclPublicKey(alice.public.raw))
    assert nacl_box.decrypt(sealed) == b"interop"

    foreign = bytes(
        Box(NaclPrivateKey(alice.private.raw), NaclPublicKey(bob.public.raw)).encrypt(b"from nacl")
    )
    assert box.open(foreign, alice.public, bob.private) == b"from nacl"


def test_cipher_is_stateless():
    assert AsymmetricCipher.__slots__ == ()
