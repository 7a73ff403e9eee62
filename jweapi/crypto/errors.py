"""Error taxonomy for the JWE encryption pipeline."""


class JWEServiceError(Exception):
    """Base class for all pipeline failures."""

    client_error = False


class InputError(JWEServiceError):
    """Request body is not valid JSON or carries unknown fields."""

    client_error = True


class ValidationError(JWEServiceError):
    """Request values violate a schema or size constraint."""

    client_error = True


class KeyFormatError(JWEServiceError):
    """PEM block is absent, malformed, not RSA, or below the size floor."""

    client_error = True


class InvalidKeyError(JWEServiceError):
    """Key material is cryptographically invalid."""

    client_error = True


class SerializationError(JWEServiceError):
    """Canonical JSON could not be produced."""


class EntropyError(JWEServiceError):
    """The secure random source could not supply enough bytes."""


class EncryptionError(JWEServiceError):
    """Key wrapping or AEAD encryption failed."""
