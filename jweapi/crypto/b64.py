"""Unpadded base64url encoding used throughout JOSE."""

import base64


def b64url_encode(data: bytes) -> str:
    """Encode bytes as base64url without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(text: str) -> bytes:
    """Decode unpadded base64url, restoring padding first."""
    padding = -len(text) % 4
    return base64.urlsafe_b64decode(text + "=" * padding)


def int_to_b64url(value: int) -> str:
    """Encode a non-negative integer as minimal big-endian base64url."""
    byte_length = max(1, (value.bit_length() + 7) // 8)
    raw = value.to_bytes(byte_length, byteorder="big")
    return b64url_encode(raw)
