"""End-to-end PEM-to-compact-JWE encryption."""

import logging
from collections.abc import Mapping

from jweapi.crypto.compact import serialize_compact
from jweapi.crypto.engine import RESERVED_HEADERS, encrypt_jwe
from jweapi.crypto.errors import ValidationError
from jweapi.crypto.jwk import rsa_public_key_to_jwk
from jweapi.crypto.pem import import_rsa_public_key
from jweapi.crypto.thumbprint import jwk_thumbprint

DEFAULT_KID_HEADER = "server_kid"

logger = logging.getLogger(__name__)


class JWEEncryptor:
    """Encrypts plaintext to a caller-supplied RSA public key.

    Built once at startup and never mutated, so one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        max_plaintext_bytes: int,
        kid_header: str = DEFAULT_KID_HEADER,
    ) -> None:
        if kid_header in RESERVED_HEADERS:
            raise ValueError(f"{kid_header!r} is a registered JWE header parameter")
        self._max_plaintext_bytes = max_plaintext_bytes
        self._kid_header = kid_header

    @property
    def max_plaintext_bytes(self) -> int:
        return self._max_plaintext_bytes

    @property
    def kid_header(self) -> str:
        return self._kid_header

    def encrypt(
        self,
        plaintext: str | bytes,
        public_key_pem: str | bytes,
        extra_headers: Mapping[str, str] | None = None,
    ) -> str:
        """Return the compact JWE of plaintext encrypted to the PEM key."""
        try:
            data = plaintext.encode("utf-8") if isinstance(plaintext, str) else plaintext
        except UnicodeEncodeError as exc:
            raise ValidationError("plaintext is not encodable as UTF-8") from exc
        if len(data) > self._max_plaintext_bytes:
            raise ValidationError(
                f"plaintext exceeds the maximum of {self._max_plaintext_bytes} bytes"
            )

        headers = dict(extra_headers or {})
        if self._kid_header in headers:
            raise ValidationError(
                f"header parameter {self._kid_header!r} cannot be overridden"
            )

        key = import_rsa_public_key(public_key_pem)
        thumbprint = jwk_thumbprint(rsa_public_key_to_jwk(key))
        headers[self._kid_header] = thumbprint

        parts = encrypt_jwe(data, key, headers)
        logger.info(
            "Encrypted %d bytes to RSA-%d key %s",
            len(data),
            key.key_size,
            thumbprint,
        )
        return serialize_compact(parts)
