"""RSA public key to JWK conversion."""

from jweapi.crypto.b64 import int_to_b64url
from jweapi.crypto.errors import InvalidKeyError
from jweapi.crypto.types import RSAJWK, RSAPublicKeyData


def rsa_public_key_to_jwk(key: RSAPublicKeyData) -> RSAJWK:
    """Convert an imported RSA public key to its canonical JWK."""
    if key.modulus <= 0:
        raise InvalidKeyError("RSA modulus must be a positive integer")
    if key.exponent <= 0:
        raise InvalidKeyError("RSA public exponent must be a positive integer")
    return RSAJWK(
        n=int_to_b64url(key.modulus),
        e=int_to_b64url(key.exponent),
    )
