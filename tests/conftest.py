"""Shared test fixtures for the JWE service."""

from collections.abc import AsyncIterator

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from httpx import ASGITransport, AsyncClient

from jweapi.core.app import create_app
from jweapi.core.settings import EncryptSettings
from jweapi.crypto.pipeline import JWEEncryptor

TEST_MAX_PLAINTEXT_BYTES = 4096


@pytest.fixture(autouse=True)
def _set_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set environment variables for test settings."""
    monkeypatch.setenv("JWE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JWE_MAX_PLAINTEXT_BYTES", str(TEST_MAX_PLAINTEXT_BYTES))


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    """A 2048-bit RSA key shared by the whole session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def public_key_pem(rsa_private_key: rsa.RSAPrivateKey) -> str:
    """SubjectPublicKeyInfo PEM of the session key."""
    return (
        rsa_private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )


@pytest.fixture(scope="session")
def private_key_pem(rsa_private_key: rsa.RSAPrivateKey) -> bytes:
    """PKCS#8 PEM of the session key."""
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture
def encryptor() -> JWEEncryptor:
    """An encryptor with the test plaintext ceiling."""
    return JWEEncryptor(max_plaintext_bytes=TEST_MAX_PLAINTEXT_BYTES)


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Create an httpx test client against a fresh app."""
    app = create_app(EncryptSettings())
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
