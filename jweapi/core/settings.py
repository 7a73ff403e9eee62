"""Application settings loaded from environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MAX_PLAINTEXT_BYTES_DEFAULT = 1_048_576
PORT_DEFAULT = 8080
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class EncryptSettings(BaseSettings):
    """JWE encryption service settings."""

    model_config = SettingsConfigDict(env_prefix="JWE_")

    max_plaintext_bytes: int = MAX_PLAINTEXT_BYTES_DEFAULT
    kid_header: str = "server_kid"
    cors_origins: str = ""
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = PORT_DEFAULT

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        """Accept any case; reject names uvicorn would refuse at startup."""
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    def get_cors_origin_list(self) -> list[str]:
        """Parse comma-separated CORS origins."""
        if not self.cors_origins:
            return []
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
