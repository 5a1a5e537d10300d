"""Core configuration and factory functions."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI

from core.file_reader import LocalFileReader
from error_handling.handlers import ErrorHandler, ErrorHandlingMiddleware
from models.errors import ConfigurationError
from models.validation import DEFAULT_SAMPLE_SIZE, MAX_FALLBACK_NAME_LENGTH, UploadValidationConfig
from validation.sniffer import ContentSnifferAdapter, MagicTextSniffer, TextSniffer
from validation.validators import BatchValidator, MetadataResolver, UploadValidator

# Load environment variables
load_dotenv()

# Upload classification configuration constants
ALLOW_IMAGES = True
CONTENT_SAMPLE_SIZE = DEFAULT_SAMPLE_SIZE  # 8 KiB is enough for text/binary heuristics
FILE_STORAGE_DIR = "./data/files"
LOG_LEVEL = "INFO"


class AppConfig:
    """Application configuration settings."""

    def __init__(self):
        self.allow_images = os.getenv("ALLOW_IMAGES", str(ALLOW_IMAGES)).lower() == "true"
        self.content_sample_size = int(os.getenv("CONTENT_SAMPLE_SIZE", CONTENT_SAMPLE_SIZE))
        self.max_fallback_name_length = int(os.getenv("MAX_FALLBACK_NAME_LENGTH", MAX_FALLBACK_NAME_LENGTH))
        self.file_storage_dir = os.getenv("FILE_STORAGE_DIR", FILE_STORAGE_DIR)
        self.log_level = os.getenv("LOG_LEVEL", LOG_LEVEL)

        # Validate configuration
        if self.content_sample_size <= 0:
            raise ConfigurationError("CONTENT_SAMPLE_SIZE must be a positive number of bytes")
        if self.max_fallback_name_length <= 0:
            raise ConfigurationError("MAX_FALLBACK_NAME_LENGTH must be positive")

    def get_upload_validation_config(self) -> UploadValidationConfig:
        """Get upload classification configuration."""
        return UploadValidationConfig(
            allow_images=self.allow_images,
            sample_size=self.content_sample_size,
            max_fallback_name_length=self.max_fallback_name_length,
            storage_dir=self.file_storage_dir,
        )


def create_fastapi_app() -> FastAPI:
    """Create and configure FastAPI application instance."""
    app = FastAPI(
        title="Upload Classifier",
        description="Decides whether chat attachments may be uploaded, and why",
        version="1.0.0",
    )

    return app


def setup_middleware(app: FastAPI) -> None:
    """Configure FastAPI middleware."""
    error_handler = ErrorHandler()
    app.add_middleware(ErrorHandlingMiddleware, error_handler=error_handler)


def create_upload_validator(config: AppConfig, sniffer: Optional[TextSniffer] = None) -> UploadValidator:
    """Create upload validator instance with configuration."""
    validation_config = config.get_upload_validation_config()
    adapter = ContentSnifferAdapter(sniffer or MagicTextSniffer(), sample_size=validation_config.sample_size)
    return UploadValidator(adapter, validation_config)


def create_batch_validator(upload_validator: UploadValidator, file_reader=None) -> BatchValidator:
    """Create batch validator wired to a metadata resolver over local storage."""
    reader = file_reader or LocalFileReader(upload_validator.config.storage_dir)
    resolver = MetadataResolver(upload_validator, reader)
    return BatchValidator(upload_validator, resolver)


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
        ],
    )

    # Suppress some noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

