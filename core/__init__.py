"""Core configuration and utilities."""

from .config import (
    AppConfig,
    create_fastapi_app,
    setup_middleware,
    create_upload_validator,
    create_batch_validator,
    setup_logging
)
from .file_reader import FileReader, LocalFileReader

__all__ = [
    'AppConfig',
    'create_fastapi_app',
    'setup_middleware',
    'create_upload_validator',
    'create_batch_validator',
    'setup_logging',
    'FileReader',
    'LocalFileReader'
]
