"""Encryption and liveness endpoints."""

from typing import Annotated

import pydantic
from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool
from starlette.responses import PlainTextResponse

from jweapi.api.deps import get_encryptor
from jweapi.api.schemas import EncryptPayload, HealthResponse
from jweapi.crypto.errors import InputError, ValidationError
from jweapi.crypto.pipeline import JWEEncryptor

router = APIRouter(tags=["jwe"])

INPUT_ERROR_TYPES = frozenset(
    {"json_invalid", "json_type", "model_type", "dict_type", "extra_forbidden"}
)


def parse_encrypt_payload(body: bytes) -> EncryptPayload:
    """Strictly decode the request body, then check field constraints."""
    try:
        return EncryptPayload.model_validate_json(body)
    except pydantic.ValidationError as exc:
        errors = exc.errors(include_url=False, include_input=False)
        if any(err["type"] in INPUT_ERROR_TYPES for err in errors):
            raise InputError("Invalid JSON or unknown field") from exc
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in errors
        )
        raise ValidationError(details) from exc


@router.post("/encrypt", response_class=PlainTextResponse)
async def encrypt_endpoint(
    request: Request,
    encryptor: Annotated[JWEEncryptor, Depends(get_encryptor)],
) -> PlainTextResponse:
    """POST /encrypt -- return the compact JWE of plaintext for publicKeyPem."""
    payload = parse_encrypt_payload(await request.body())
    serialized = await run_in_threadpool(
        encryptor.encrypt, payload.plaintext, payload.public_key_pem
    )
    return PlainTextResponse(serialized)


@router.get("/health")
async def health() -> HealthResponse:
    """GET /health -- liveness probe."""
    return HealthResponse()
