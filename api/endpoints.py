"""FastAPI route handlers for upload classification."""

import logging
from typing import List, Optional

from fastapi import File, Form, HTTPException, Query, UploadFile

from error_handling.handlers import ErrorMessageTranslator
from models.api import (
    FileVerdict,
    MetadataValidationRequest,
    SupportedExtensionsResponse,
    ValidationResponse,
)
from models.validation import BatchValidationResult, FileInput, RejectionKind
from validation import taxonomy
from validation.validators import BatchValidator

# Batch validator will be injected from main.py
batch_validator: Optional[BatchValidator] = None

message_translator = ErrorMessageTranslator()


def set_batch_validator(validator: BatchValidator) -> None:
    """Set the batch validator instance."""
    global batch_validator
    batch_validator = validator


def _check_validator_initialized() -> BatchValidator:
    if batch_validator is None:
        raise HTTPException(status_code=500, detail="Upload validator not initialized")
    return batch_validator


def _default_policy(allow_images: Optional[bool]) -> bool:
    if allow_images is not None:
        return allow_images
    return _check_validator_initialized().upload_validator.config.allow_images


def _to_verdict(filename: str, result: BatchValidationResult) -> FileVerdict:
    suggested_actions: List[str] = []
    if not result.allowed:
        rule = message_translator.describe_rejection(result.kind or RejectionKind.UNEXPECTED_FAILURE)
        suggested_actions = list(rule["suggested_actions"])
    return FileVerdict(
        filename=filename, allowed=result.allowed, reason=result.reason, suggested_actions=suggested_actions
    )


async def get_supported_extensions(allow_images: Optional[bool] = Query(None)) -> SupportedExtensionsResponse:
    """List the extensions trusted without content analysis."""
    policy = _default_policy(allow_images)
    return SupportedExtensionsResponse(allow_images=policy, extensions=taxonomy.supported_extensions(policy))


async def validate_uploads(
    files: List[UploadFile] = File(...),
    allow_images: Optional[bool] = Form(None),
) -> ValidationResponse:
    """Classify uploaded files; nothing is stored."""
    validator = _check_validator_initialized()
    logging.info(f"Validating {len(files)} uploaded file(s)")

    inputs = [FileInput.from_upload(upload) for upload in files]
    results = await validator.validate_all(inputs, allow_images)

    return ValidationResponse(
        results=[_to_verdict(result.file.name, result) for result in results]
    )


async def validate_metadata(request: MetadataValidationRequest) -> ValidationResponse:
    """Classify stored files by their metadata references."""
    validator = _check_validator_initialized()
    logging.info(f"Validating {len(request.files)} file reference(s)")

    refs = [payload.to_ref() for payload in request.files]
    results = await validator.resolve_all(refs, request.allow_images)

    return ValidationResponse(
        results=[_to_verdict(result.file.origin_name, result) for result in results]
    )
