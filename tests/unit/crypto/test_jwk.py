"""Tests for JWK conversion and thumbprints."""

import json

import pytest

from jweapi.crypto.b64 import b64url_decode, int_to_b64url
from jweapi.crypto.errors import InvalidKeyError, SerializationError
from jweapi.crypto.jwk import rsa_public_key_to_jwk
from jweapi.crypto.pem import import_rsa_public_key
from jweapi.crypto.thumbprint import canonical_jwk_json, jwk_thumbprint
from jweapi.crypto.types import RSAJWK, RSAPublicKeyData

# RFC 7638 section 3.1 example key
RFC7638_N = (
    "0vx7agoebGcQSuuPiLJXZptN9nndrQmbXEps2aiAFbWhM78LhWx4cbbfAAtVT86zwu1RK7aPFFxuhDR1"
    "L6tSoc_BJECPebWKRXjBZCiFV4n3oknjhMstn64tZ_2W-5JsGY4Hc5n9yBXArwl93lqt7_RN5w6Cf0h4"
    "QyQ5v-65YGjQR0_FDW2QvzqY368QQMicAtaSqzs8KJZgnYb9c7d0zgdAZHzu6qMQvRL5hajrn1n91CbO"
    "pbISD08qNLyrdkt-bFTWhAI4vMQFh6WeZu0fM4lFd2NcRwr3XPksINHaQ-G_xBniIqbw0Ls1jF44-csF"
    "Cur-kEgU8awapJzKnqDKgw"
)
RFC7638_THUMBPRINT = "NzbLsXh8uDCcd-6MNwXF4W_7noWXFZAfHkxZsRGC9Xs"


class TestIntEncoding:
    """Tests for minimal big-endian base64url integers."""

    def test_standard_exponent(self) -> None:
        assert int_to_b64url(65537) == "AQAB"

    def test_no_leading_zero_byte(self) -> None:
        assert b64url_decode(int_to_b64url(0x80)) == b"\x80"
        assert b64url_decode(int_to_b64url(0x0100)) == b"\x01\x00"


class TestConvertToJWK:
    """Tests for RSA public key to JWK conversion."""

    def test_produces_canonical_members(self, public_key_pem: str) -> None:
        key = import_rsa_public_key(public_key_pem)
        jwk = rsa_public_key_to_jwk(key)
        assert jwk.kty == "RSA"
        assert jwk.e == "AQAB"
        assert "=" not in jwk.n
        modulus = b64url_decode(jwk.n)
        assert len(modulus) == 256
        assert int.from_bytes(modulus, "big") == key.modulus

    def test_zero_exponent_rejected(self) -> None:
        with pytest.raises(InvalidKeyError):
            rsa_public_key_to_jwk(RSAPublicKeyData(modulus=3233, exponent=0))

    def test_zero_modulus_rejected(self) -> None:
        with pytest.raises(InvalidKeyError):
            rsa_public_key_to_jwk(RSAPublicKeyData(modulus=0, exponent=65537))

    def test_negative_modulus_rejected(self) -> None:
        with pytest.raises(InvalidKeyError):
            rsa_public_key_to_jwk(RSAPublicKeyData(modulus=-3233, exponent=65537))


class TestThumbprint:
    """Tests for RFC 7638 thumbprints."""

    def test_rfc7638_vector(self) -> None:
        jwk = RSAJWK(n=RFC7638_N, e="AQAB")
        assert jwk_thumbprint(jwk) == RFC7638_THUMBPRINT

    def test_canonical_json_has_sorted_members_without_whitespace(self) -> None:
        raw = canonical_jwk_json(RSAJWK(n="abc", e="AQAB"))
        assert raw == b'{"e":"AQAB","kty":"RSA","n":"abc"}'
        assert list(json.loads(raw)) == ["e", "kty", "n"]

    def test_deterministic(self, public_key_pem: str) -> None:
        jwk = rsa_public_key_to_jwk(import_rsa_public_key(public_key_pem))
        first = jwk_thumbprint(jwk)
        assert all(jwk_thumbprint(jwk) == first for _ in range(5))
        assert len(first) == 43
        assert len(b64url_decode(first)) == 32

    def test_missing_member_rejected(self) -> None:
        jwk = RSAJWK.model_construct(kty="RSA", n="abc")
        with pytest.raises(SerializationError):
            jwk_thumbprint(jwk)
