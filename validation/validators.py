"""Upload validation pipeline: extension policy, content sniffing and metadata resolution."""

import asyncio
import logging
import re
from typing import List, Optional, Sequence

from models.errors import InvalidReferenceError, ReadFailureError
from models.validation import (
    MAX_FALLBACK_NAME_LENGTH,
    BatchValidationResult,
    FileInput,
    FileMetadataRef,
    RejectionKind,
    UploadValidationConfig,
    ValidationVerdict,
)
from validation import taxonomy
from validation.sniffer import ContentSnifferAdapter

AUDIO_VIDEO_REASON = "Audio and video files are not supported for upload"
CONTENT_ANALYSIS_REASON = "File detected as text content via content analysis"
UNSUPPORTED_REASON = "File type not supported. Supported extensions: {extensions}"
MISSING_IDENTIFIER_REASON = "Invalid file metadata: missing file identifier"
INVALID_PATH_REASON = "Invalid file path format"
READ_FAILURE_REASON = "Failed to read file: {message}"
UNEXPECTED_FAILURE_REASON = "Validation error: {message}"

# Base name of ASCII word characters, CJK ideographs, commas, whitespace, dots and
# hyphens, then a 1-10 character alphanumeric extension.
SAFE_FILENAME_PATTERN = re.compile(r"[A-Za-z0-9_一-龥,\s.\-]+\.[a-zA-Z0-9]{1,10}")


def normalize_extension(ext: str) -> str:
    ext = ext or ""
    return ext if ext.startswith(".") else f".{ext}"


def is_safe_filename(name: str, max_length: int = MAX_FALLBACK_NAME_LENGTH) -> bool:
    """Check the shape of a constructed filename; no filesystem access."""
    if len(name) > max_length:
        return False
    return SAFE_FILENAME_PATTERN.fullmatch(name) is not None


def build_fallback_path(ref: FileMetadataRef, max_length: int = MAX_FALLBACK_NAME_LENGTH) -> str:
    """
    Build ``id + ext`` for a reference that carries no path.

    Raises:
        InvalidReferenceError: If the id is blank or the name is unsafe
    """
    if not ref.id or not ref.id.strip():
        raise InvalidReferenceError(MISSING_IDENTIFIER_REASON)

    name = ref.id.strip() + normalize_extension(ref.ext)
    if not is_safe_filename(name, max_length):
        raise InvalidReferenceError(INVALID_PATH_REASON)
    return name


class UploadValidator:
    """Decides whether a named byte source may be uploaded."""

    def __init__(self, sniffer: ContentSnifferAdapter, config: Optional[UploadValidationConfig] = None):
        self.sniffer = sniffer
        self.config = config or UploadValidationConfig()

    def _policy(self, allow_images: Optional[bool]) -> bool:
        return self.config.allow_images if allow_images is None else allow_images

    async def validate(self, file: FileInput, allow_images: Optional[bool] = None) -> ValidationVerdict:
        """
        Run the upload decision chain.

        Known extensions are trusted without reading content. Audio and video
        are refused before any sniffing. Everything else is accepted only if
        its leading bytes look like text.

        Args:
            file: The file to classify
            allow_images: Image policy; defaults to the configured policy

        Returns:
            ValidationVerdict: The decision and, where relevant, its reason
        """
        allow_images = self._policy(allow_images)
        extension = taxonomy.extension_of(file.name)

        if taxonomy.is_supported(extension, allow_images):
            return ValidationVerdict.accept()

        if taxonomy.is_audio_or_video(extension):
            logging.info(f"Rejected audio/video upload: {file.name}")
            return ValidationVerdict.reject(RejectionKind.FORBIDDEN_CATEGORY, AUDIO_VIDEO_REASON)

        if await self.sniffer.looks_like_text(file.name, file):
            logging.info(f"Accepted {file.name} after content analysis")
            return ValidationVerdict.accept(CONTENT_ANALYSIS_REASON)

        extensions = ", ".join(taxonomy.supported_extensions(allow_images))
        logging.info(f"Rejected unsupported upload: {file.name}")
        return ValidationVerdict.reject(
            RejectionKind.UNSUPPORTED_TYPE, UNSUPPORTED_REASON.format(extensions=extensions)
        )


class MetadataResolver:
    """Validates a stored file from its metadata reference."""

    def __init__(self, upload_validator: UploadValidator, file_reader):
        self.upload_validator = upload_validator
        self.file_reader = file_reader

    async def _read(self, file_path: str) -> bytes:
        try:
            return await self.file_reader.read_file(file_path)
        except Exception as e:
            logging.error(f"Failed to read file {file_path}: {e}")
            raise ReadFailureError(READ_FAILURE_REASON.format(message=str(e) or "File not accessible")) from e

    async def resolve(self, ref: FileMetadataRef, allow_images: Optional[bool] = None) -> ValidationVerdict:
        """
        Locate, read and validate the referenced file.

        Never raises: malformed references, read failures and unexpected
        errors all come back as rejected verdicts.
        """
        try:
            max_length = self.upload_validator.config.max_fallback_name_length
            file_path = ref.path or build_fallback_path(ref, max_length)
            content = await self._read(file_path)
            return await self.upload_validator.validate(FileInput(ref.origin_name, content), allow_images)
        except InvalidReferenceError as e:
            logging.warning(f"Invalid file reference {ref.id!r}: {e}")
            return ValidationVerdict.reject(RejectionKind.INVALID_REFERENCE, str(e))
        except ReadFailureError as e:
            return ValidationVerdict.reject(RejectionKind.READ_FAILURE, str(e))
        except Exception as e:
            logging.error(f"File metadata validation error: {e}")
            return ValidationVerdict.reject(
                RejectionKind.UNEXPECTED_FAILURE,
                UNEXPECTED_FAILURE_REASON.format(message=str(e) or "Unknown error occurred"),
            )


class BatchValidator:
    """Validates many files concurrently, keeping input order."""

    def __init__(self, upload_validator: UploadValidator, metadata_resolver: Optional[MetadataResolver] = None):
        self.upload_validator = upload_validator
        self.metadata_resolver = metadata_resolver

    @staticmethod
    def _to_result(file, verdict: ValidationVerdict) -> BatchValidationResult:
        return BatchValidationResult(file=file, allowed=verdict.allowed, reason=verdict.reason, kind=verdict.kind)

    @staticmethod
    def _failure(file, error: Exception) -> BatchValidationResult:
        logging.error(f"Validation of {file!r} failed: {error}")
        reason = UNEXPECTED_FAILURE_REASON.format(message=str(error) or "Unknown error occurred")
        return BatchValidationResult(file=file, allowed=False, reason=reason, kind=RejectionKind.UNEXPECTED_FAILURE)

    async def _validate_one(self, file: FileInput, allow_images: Optional[bool]) -> BatchValidationResult:
        try:
            verdict = await self.upload_validator.validate(file, allow_images)
        except Exception as e:
            return self._failure(file, e)
        return self._to_result(file, verdict)

    async def _resolve_one(self, ref: FileMetadataRef, allow_images: Optional[bool]) -> BatchValidationResult:
        try:
            verdict = await self.metadata_resolver.resolve(ref, allow_images)
        except Exception as e:
            return self._failure(ref, e)
        return self._to_result(ref, verdict)

    async def validate_all(
        self, files: Sequence[FileInput], allow_images: Optional[bool] = None
    ) -> List[BatchValidationResult]:
        """Validate every file; one failing file never affects the others."""
        return list(await asyncio.gather(*(self._validate_one(file, allow_images) for file in files)))

    async def resolve_all(
        self, refs: Sequence[FileMetadataRef], allow_images: Optional[bool] = None
    ) -> List[BatchValidationResult]:
        """Resolve and validate every metadata reference concurrently."""
        if self.metadata_resolver is None:
            raise ValueError("BatchValidator was created without a metadata resolver")
        return list(await asyncio.gather(*(self._resolve_one(ref, allow_images) for ref in refs)))
