"""Reference decryption used to check produced tokens."""

import json

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from jweapi.crypto.b64 import b64url_decode


def decode_header(token: str) -> dict:
    return json.loads(b64url_decode(token.split(".")[0]))


def decrypt_compact(token: str, private_key: rsa.RSAPrivateKey) -> bytes:
    """Decrypt an RSA-OAEP-256 / A256GCM compact JWE."""
    protected, encrypted_key, iv, ciphertext, tag = token.split(".")
    cek = private_key.decrypt(
        b64url_decode(encrypted_key),
        padding.OAEP(
            mgf=padding.MGF1(algorithm=hashes.SHA256()),
            algorithm=hashes.SHA256(),
            label=None,
        ),
    )
    return AESGCM(cek).decrypt(
        b64url_decode(iv),
        b64url_decode(ciphertext) + b64url_decode(tag),
        protected.encode("ascii"),
    )
