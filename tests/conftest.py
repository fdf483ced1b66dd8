"""Shared fixtures: configuration isolation and key material."""

import os
from typing import Iterator

import pytest

from sealkit import AsymmetricCipher, KeyPair, SecretKey, SymmetricCipher
from sealkit.core.config import SecureConfig


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch) -> Iterator[None]:
    """Drop SEALKIT_* overrides and the cached configuration around each test."""
    for name in list(os.environ):
        if name.startswith("SEALKIT_"):
            monkeypatch.delenv(name, raising=False)
    SecureConfig.reset_instance()
    yield
    SecureConfig.reset_instance()


@pytest.fixture
def box() -> AsymmetricCipher:
    return AsymmetricCipher()


@pytest.fixture
def secretbox() -> SymmetricCipher:
    return SymmetricCipher()


@pytest.fixture
def alice(box) -> KeyPair:
    return box.generate_key_pair()


@pytest.fixture
def bob(box) -> KeyPair:
    return box.generate_key_pair()


@pytest.fixture
def shared_key(secretbox) -> SecretKey:
    return secretbox.generate_key()
