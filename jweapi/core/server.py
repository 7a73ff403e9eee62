"""Console entry point serving the application with uvicorn."""

import uvicorn

from jweapi.core.app import create_app
from jweapi.core.settings import EncryptSettings


def main() -> None:
    """Run the JWE service on the configured host and port."""
    settings = EncryptSettings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
