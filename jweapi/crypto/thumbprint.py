"""JWK thumbprint computation per RFC 7638."""

import hashlib
import json

from jweapi.crypto.b64 import b64url_encode
from jweapi.crypto.errors import SerializationError
from jweapi.crypto.types import RSAJWK

RSA_THUMBPRINT_MEMBERS = ("e", "kty", "n")


def canonical_jwk_json(jwk: RSAJWK) -> bytes:
    """Serialize the required RSA members: sorted keys, no whitespace."""
    members = {}
    for name in RSA_THUMBPRINT_MEMBERS:
        value = getattr(jwk, name, None)
        if not isinstance(value, str) or not value:
            raise SerializationError(f"JWK member {name!r} is missing or not a string")
        members[name] = value
    try:
        text = json.dumps(
            members,
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"failed to serialize JWK: {exc}") from exc
    return text.encode("utf-8")


def jwk_thumbprint(jwk: RSAJWK) -> str:
    """Return the base64url SHA-256 thumbprint of an RSA JWK."""
    digest = hashlib.sha256(canonical_jwk_json(jwk)).digest()
    return b64url_encode(digest)
