"""Pydantic schemas for the encryption API contract."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_core import PydanticCustomError


def _to_camel(name: str) -> str:
    """Convert snake_case to camelCase for JSON serialization."""
    parts = name.split("_")
    return parts[0] + "".join(p.capitalize() for p in parts[1:])


class EncryptPayload(BaseModel):
    """Request body for POST /encrypt. Unknown fields are rejected."""

    model_config = ConfigDict(
        alias_generator=_to_camel,
        extra="forbid",
        strict=True,
    )

    plaintext: str
    public_key_pem: str = Field(min_length=1)

    @model_validator(mode="before")
    @classmethod
    def _reject_unknown_keys(cls, data: Any) -> Any:
        """Only the camelCase wire names are accepted, not the Python names."""
        if isinstance(data, dict):
            allowed = {_to_camel(name) for name in cls.model_fields}
            unknown = sorted(k for k in data if k not in allowed)
            if unknown:
                raise PydanticCustomError(
                    "extra_forbidden",
                    "Unknown fields: {fields}",
                    {"fields": ", ".join(unknown)},
                )
        return data


class ErrorResponse(BaseModel):
    """Error body: {error: message}."""

    error: str


class HealthResponse(BaseModel):
    """Response for GET /health."""

    status: str = "ok"
