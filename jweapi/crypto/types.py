"""Type definitions for RSA keys, JWKs, and assembled JWE structures."""

from cryptography.hazmat.primitives.asymmetric.rsa import (
    RSAPublicKey,
    RSAPublicNumbers,
)
from pydantic import BaseModel, ConfigDict, Field


class RSAPublicKeyData(BaseModel):
    """An imported RSA public key."""

    model_config = ConfigDict(frozen=True)

    modulus: int
    exponent: int

    @property
    def key_size(self) -> int:
        """Modulus size in bits."""
        return self.modulus.bit_length()

    def to_public_key(self) -> RSAPublicKey:
        """Rebuild the cryptography key object for OAEP wrapping."""
        return RSAPublicNumbers(e=self.exponent, n=self.modulus).public_key()


class RSAJWK(BaseModel):
    """RSA public key in JSON Web Key form."""

    model_config = ConfigDict(frozen=True)

    kty: str = "RSA"
    n: str
    e: str


class JWEParts(BaseModel):
    """The five components of a JWE before compact serialization.

    ``protected`` is the base64url-encoded header exactly as it was fed
    to AES-GCM as additional authenticated data.
    """

    model_config = ConfigDict(frozen=True)

    header: dict[str, str] = Field(default_factory=dict)
    protected: str
    encrypted_key: bytes
    iv: bytes
    ciphertext: bytes
    tag: bytes
