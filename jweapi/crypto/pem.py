"""PEM import of RSA public keys."""

import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from jweapi.crypto.errors import KeyFormatError
from jweapi.crypto.types import RSAPublicKeyData

MIN_RSA_KEY_BITS = 2048
PEM_MARKER = b"-----BEGIN "

logger = logging.getLogger(__name__)


def import_rsa_public_key(pem: str | bytes) -> RSAPublicKeyData:
    """Parse a PEM-encoded RSA public key.

    Accepts SubjectPublicKeyInfo (``PUBLIC KEY``) and PKCS#1
    (``RSA PUBLIC KEY``) blocks. Rejects everything else, including
    private keys, certificates, non-RSA keys, and keys whose modulus is
    shorter than ``MIN_RSA_KEY_BITS``.
    """
    try:
        data = pem.encode("utf-8") if isinstance(pem, str) else pem
    except UnicodeEncodeError as exc:
        raise KeyFormatError("public key PEM is not valid UTF-8 text") from exc
    if PEM_MARKER not in data:
        raise KeyFormatError("failed to parse PEM block containing the public key")

    try:
        loaded = serialization.load_pem_public_key(data)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyFormatError(f"failed to parse public key: {exc}") from exc

    if not isinstance(loaded, RSAPublicKey):
        raise KeyFormatError("public key is not an RSA key")

    numbers = loaded.public_numbers()
    if loaded.key_size < MIN_RSA_KEY_BITS:
        raise KeyFormatError(
            f"RSA key size {loaded.key_size} is below the minimum of "
            f"{MIN_RSA_KEY_BITS} bits"
        )

    logger.debug("Imported RSA public key (%d bits)", loaded.key_size)
    return RSAPublicKeyData(modulus=numbers.n, exponent=numbers.e)
