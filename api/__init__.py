"""API endpoints and route handlers."""

from .endpoints import (
    get_supported_extensions,
    set_batch_validator,
    validate_metadata,
    validate_uploads,
)

__all__ = [
    "get_supported_extensions",
    "set_batch_validator",
    "validate_metadata",
    "validate_uploads",
]
