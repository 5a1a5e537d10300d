"""Request and response models for the upload classification API."""

from typing import List, Optional

from pydantic import BaseModel, Field

from models.validation import FileMetadataRef


class FileMetadataPayload(BaseModel):
    """Reference to a stored file, as sent by the client."""
    id: str = Field("", description="Stored file identifier")
    ext: str = Field("", description="File extension, with or without a leading dot")
    origin_name: str = Field(..., description="Original display name of the file")
    path: Optional[str] = Field(None, description="Absolute path or file:// URL; derived from id + ext when absent")

    def to_ref(self) -> FileMetadataRef:
        return FileMetadataRef(id=self.id, ext=self.ext, origin_name=self.origin_name, path=self.path)


class MetadataValidationRequest(BaseModel):
    """Request model for validating stored files by reference."""
    files: List[FileMetadataPayload] = Field(..., description="File references to validate")
    allow_images: Optional[bool] = Field(None, description="Image policy; server default when omitted")


class FileVerdict(BaseModel):
    """Validation outcome for one file."""
    filename: str = Field(..., description="Name the verdict refers to")
    allowed: bool = Field(..., description="Whether the file may be uploaded")
    reason: Optional[str] = Field(None, description="Why the file was rejected, or how it was accepted")
    suggested_actions: List[str] = Field(default_factory=list, description="What the user can do about a rejection")


class ValidationResponse(BaseModel):
    """Response model for batch validation, in request order."""
    results: List[FileVerdict] = Field(..., description="One verdict per submitted file")


class SupportedExtensionsResponse(BaseModel):
    """Extensions accepted without content analysis."""
    allow_images: bool = Field(..., description="Image policy the list was computed for")
    extensions: List[str] = Field(..., description="Dot-prefixed lowercase extensions")
