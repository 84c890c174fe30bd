"""
Environment-driven configuration for the library catalog.

Settings are read once from environment variables into a Pydantic model so
that invalid values fail at startup rather than on the first request.
"""

import logging
import os
from enum import Enum
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StorageBackend(str, Enum):
    """Which entity store implementation backs the repositories."""

    MEMORY = "memory"
    MINIO = "minio"


class Settings(BaseModel):
    """Application settings."""

    storage_backend: StorageBackend = StorageBackend.MEMORY
    minio_endpoint: str = "localhost:9000"
    minio_access_key: str = "minioadmin"
    minio_secret_key: str = "minioadmin"
    minio_secure: bool = False
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_upper(cls, v: str) -> str:
        return v.strip().upper()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``

        Returns:
            Validated Settings instance
        """
        env = os.environ if environ is None else environ
        values = {
            "storage_backend": env.get("CATALOG_STORAGE_BACKEND", "memory"),
            "minio_endpoint": env.get("MINIO_ENDPOINT", "localhost:9000"),
            "minio_access_key": env.get("MINIO_ACCESS_KEY", "minioadmin"),
            "minio_secret_key": env.get("MINIO_SECRET_KEY", "minioadmin"),
            "minio_secure": env.get("MINIO_SECURE", "false"),
            "log_level": env.get("LOG_LEVEL", "INFO"),
            "log_format": env.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        }
        settings = cls(**values)
        logger.debug(
            "Settings loaded",
            extra={
                "storage_backend": settings.storage_backend.value,
                "minio_endpoint": settings.minio_endpoint,
                "log_level": settings.log_level,
            },
        )
        return settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure logging from settings (or the environment)."""
    settings = settings or Settings.from_env()

    numeric_level = getattr(logging, settings.log_level, None)
    if not isinstance(numeric_level, int):
        print(f"Invalid log level: {settings.log_level}, defaulting to INFO")
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format=settings.log_format,
        force=True,  # Override any existing configuration
    )

    logging.getLogger("library_catalog").setLevel(numeric_level)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
