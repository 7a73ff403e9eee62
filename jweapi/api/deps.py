"""FastAPI dependencies and error mapping for the encryption API."""

import logging

from fastapi import Request, status
from starlette.responses import JSONResponse

from jweapi.api.schemas import ErrorResponse
from jweapi.crypto.errors import JWEServiceError
from jweapi.crypto.pipeline import JWEEncryptor

logger = logging.getLogger(__name__)


def get_encryptor(request: Request) -> JWEEncryptor:
    """Return the encryptor built once by the application factory."""
    return request.app.state.encryptor


async def handle_service_error(
    _request: Request, exc: JWEServiceError
) -> JSONResponse:
    """Map pipeline errors to 400 for caller faults and 500 otherwise."""
    if exc.client_error:
        logger.info("Rejected request: %s: %s", type(exc).__name__, exc)
        code = status.HTTP_400_BAD_REQUEST
    else:
        logger.error("Encryption failed: %s: %s", type(exc).__name__, exc, exc_info=exc)
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    body = ErrorResponse(error=str(exc))
    return JSONResponse(body.model_dump(), status_code=code)
