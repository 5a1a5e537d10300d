"""
Upload Classifier - decides whether chat attachments may be uploaded.

This is the main entry point for the FastAPI application.
"""

import logging
from fastapi import FastAPI

from core.config import (
    AppConfig,
    create_fastapi_app,
    setup_middleware,
    create_upload_validator,
    create_batch_validator,
    setup_logging
)
from api.endpoints import (
    get_supported_extensions,
    set_batch_validator,
    validate_metadata,
    validate_uploads,
)


def create_app(config: AppConfig = None, sniffer=None, file_reader=None) -> FastAPI:
    """Create and configure the FastAPI application."""

    # Initialize configuration
    config = config or AppConfig()

    # Setup logging
    setup_logging(config.log_level)

    # Create FastAPI app
    app = create_fastapi_app()

    # Setup middleware
    setup_middleware(app)

    # Create validators
    upload_validator = create_upload_validator(config, sniffer)
    batch_validator = create_batch_validator(upload_validator, file_reader)

    # Inject dependencies into endpoints
    set_batch_validator(batch_validator)

    # Register routes
    app.get("/files/supported-extensions")(get_supported_extensions)
    app.post("/files/validate")(validate_uploads)
    app.post("/files/validate-metadata")(validate_metadata)

    logging.info("FastAPI application created and configured successfully")
    logging.info(
        f"Configuration: allow_images={config.allow_images}, sample_size={config.content_sample_size}, "
        f"storage_dir={config.file_storage_dir}"
    )

    return app


if __name__ == "__main__":
    import uvicorn

    # Run the application
    uvicorn.run(
        "main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        log_level="info"
    )
