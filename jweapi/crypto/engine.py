"""JWE encryption with RSA-OAEP-256 key wrapping and A256GCM content encryption."""

import json
import os
from collections.abc import Mapping

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from jweapi.crypto.b64 import b64url_encode
from jweapi.crypto.errors import (
    EncryptionError,
    EntropyError,
    InvalidKeyError,
    SerializationError,
    ValidationError,
)
from jweapi.crypto.types import JWEParts, RSAPublicKeyData

KEY_ALGORITHM = "RSA-OAEP-256"
CONTENT_ENCRYPTION = "A256GCM"
CEK_SIZE = 32
IV_SIZE = 12
TAG_SIZE = 16

# RFC 7515 / RFC 7516 registered header parameters
RESERVED_HEADERS = frozenset(
    {
        "alg",
        "enc",
        "zip",
        "crit",
        "jku",
        "jwk",
        "kid",
        "x5u",
        "x5c",
        "x5t",
        "x5t#S256",
        "typ",
        "cty",
    }
)

_OAEP_SHA256 = padding.OAEP(
    mgf=padding.MGF1(algorithm=hashes.SHA256()),
    algorithm=hashes.SHA256(),
    label=None,
)


def _random_bytes(size: int) -> bytes:
    """Read from the OS CSPRNG, failing loudly on any shortfall."""
    try:
        data = os.urandom(size)
    except (OSError, NotImplementedError) as exc:
        raise EntropyError(f"secure random source unavailable: {exc}") from exc
    if len(data) != size:
        raise EntropyError("secure random source returned too few bytes")
    return data


def build_protected_header(
    extra_headers: Mapping[str, str] | None = None,
) -> tuple[dict[str, str], str]:
    """Build the protected header and its base64url encoding."""
    header = {"alg": KEY_ALGORITHM, "enc": CONTENT_ENCRYPTION}
    for name, value in (extra_headers or {}).items():
        if not isinstance(name, str) or not isinstance(value, str):
            raise ValidationError("header extensions must map strings to strings")
        if name in RESERVED_HEADERS:
            raise ValidationError(f"header parameter {name!r} cannot be overridden")
        header[name] = value
    try:
        raw = json.dumps(header, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"failed to serialize protected header: {exc}") from exc
    return header, b64url_encode(raw)


def encrypt_jwe(
    plaintext: bytes,
    key: RSAPublicKeyData,
    extra_headers: Mapping[str, str] | None = None,
) -> JWEParts:
    """Encrypt plaintext to an RSA public key.

    A fresh 256-bit CEK is wrapped with RSA-OAEP-256 (SHA-256 for both
    the OAEP digest and MGF1), and the plaintext is sealed with AES-GCM
    under that CEK. The base64url protected header is the AAD.
    """
    header, protected = build_protected_header(extra_headers)

    try:
        public_key = key.to_public_key()
    except ValueError as exc:
        raise InvalidKeyError(f"invalid RSA public key: {exc}") from exc

    cek = bytearray(_random_bytes(CEK_SIZE))
    try:
        iv = _random_bytes(IV_SIZE)
        try:
            encrypted_key = public_key.encrypt(bytes(cek), _OAEP_SHA256)
        except (ValueError, TypeError) as exc:
            raise EncryptionError(f"error wrapping content key: {exc}") from exc
        try:
            sealed = AESGCM(cek).encrypt(iv, plaintext, protected.encode("ascii"))
        except (ValueError, TypeError, OverflowError) as exc:
            raise EncryptionError(f"error encrypting data: {exc}") from exc
    finally:
        for i in range(len(cek)):
            cek[i] = 0

    return JWEParts(
        header=header,
        protected=protected,
        encrypted_key=encrypted_key,
        iv=iv,
        ciphertext=sealed[:-TAG_SIZE],
        tag=sealed[-TAG_SIZE:],
    )
