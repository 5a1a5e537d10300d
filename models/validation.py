"""Validation models and enums for upload classification."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


DEFAULT_SAMPLE_SIZE = 8192
MAX_FALLBACK_NAME_LENGTH = 260


class RejectionKind(Enum):
    """Why a file was refused."""
    UNSUPPORTED_TYPE = "unsupported_type"
    FORBIDDEN_CATEGORY = "forbidden_category"
    INVALID_REFERENCE = "invalid_reference"
    READ_FAILURE = "read_failure"
    UNEXPECTED_FAILURE = "unexpected_failure"


class SniffResult(Enum):
    """Verdict of a content sniffer on a byte sample."""
    TEXT = "text"
    BINARY = "binary"
    UNKNOWN = "unknown"


class FileInput:
    """
    A named byte source.

    The source is either raw ``bytes`` or any object exposing an async
    ``read(size)`` (a FastAPI ``UploadFile`` for instance). Readers are
    rewound after every read so the caller can consume them again.
    """

    def __init__(self, name: str, source: Union[bytes, bytearray, memoryview, Any]):
        self.name = name or ""
        self._source = source

    async def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes from the start of the source (all when negative)."""
        if isinstance(self._source, (bytes, bytearray, memoryview)):
            return bytes(self._source) if size < 0 else bytes(self._source[:size])

        content = await self._source.read(size)
        seek = getattr(self._source, "seek", None)
        if seek is not None:
            await seek(0)
        return content

    @classmethod
    def from_upload(cls, upload) -> "FileInput":
        return cls(upload.filename or "", upload)

    def __repr__(self) -> str:
        return f"FileInput(name={self.name!r})"


@dataclass
class FileMetadataRef:
    """Reference to a stored file that may not have been read yet."""
    id: str
    ext: str
    origin_name: str
    path: Optional[str] = None


@dataclass
class ValidationVerdict:
    """Allow/deny decision with an optional human-readable reason."""
    allowed: bool
    reason: Optional[str] = None
    kind: Optional[RejectionKind] = None

    @classmethod
    def accept(cls, reason: Optional[str] = None) -> "ValidationVerdict":
        return cls(allowed=True, reason=reason)

    @classmethod
    def reject(cls, kind: RejectionKind, reason: str) -> "ValidationVerdict":
        return cls(allowed=False, reason=reason, kind=kind)


@dataclass
class BatchValidationResult:
    """Per-file outcome of a batch validation."""
    file: Any
    allowed: bool
    reason: Optional[str] = None
    kind: Optional[RejectionKind] = None


@dataclass
class UploadValidationConfig:
    """Configuration for upload classification."""
    allow_images: bool = True
    sample_size: int = DEFAULT_SAMPLE_SIZE
    max_fallback_name_length: int = MAX_FALLBACK_NAME_LENGTH
    storage_dir: Optional[str] = None
