"""JWE compact serialization."""

import binascii
import json

from jweapi.crypto.b64 import b64url_decode, b64url_encode
from jweapi.crypto.errors import InputError
from jweapi.crypto.types import JWEParts

COMPACT_SEGMENTS = 5


def serialize_compact(parts: JWEParts) -> str:
    """Render header.encryptedKey.iv.ciphertext.tag."""
    return ".".join(
        (
            parts.protected,
            b64url_encode(parts.encrypted_key),
            b64url_encode(parts.iv),
            b64url_encode(parts.ciphertext),
            b64url_encode(parts.tag),
        )
    )


def split_compact(token: str) -> list[str]:
    """Split a compact JWE into its five segments."""
    segments = token.split(".")
    if len(segments) != COMPACT_SEGMENTS:
        raise InputError(
            f"compact JWE must have {COMPACT_SEGMENTS} segments, got {len(segments)}"
        )
    return segments


def parse_protected_header(token: str) -> dict[str, str]:
    """Decode the protected header of a compact JWE without decrypting."""
    protected = split_compact(token)[0]
    try:
        header = json.loads(b64url_decode(protected))
    except (binascii.Error, ValueError) as exc:
        raise InputError(f"protected header is not valid base64url JSON: {exc}") from exc
    if not isinstance(header, dict):
        raise InputError("protected header must be a JSON object")
    return header
