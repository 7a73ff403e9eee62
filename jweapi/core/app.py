"""FastAPI application factory for the JWE encryption service."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jweapi.api.deps import handle_service_error
from jweapi.api.router_encrypt import router as encrypt_router
from jweapi.core.log_config import configure_logging
from jweapi.core.settings import EncryptSettings
from jweapi.crypto.errors import JWEServiceError
from jweapi.crypto.pipeline import JWEEncryptor

logger = logging.getLogger(__name__)


def create_app(settings: EncryptSettings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    settings = settings or EncryptSettings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "JWE service ready (max plaintext %d bytes, kid header %r)",
            settings.max_plaintext_bytes,
            settings.kid_header,
        )
        yield

    app = FastAPI(
        title="JWE Encryption Service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.encryptor = JWEEncryptor(
        max_plaintext_bytes=settings.max_plaintext_bytes,
        kid_header=settings.kid_header,
    )

    origins = settings.get_cors_origin_list()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=False,
            allow_methods=["GET", "POST"],
            allow_headers=["Content-Type"],
        )

    app.add_exception_handler(JWEServiceError, handle_service_error)
    app.include_router(encrypt_router)

    return app
