"""Error models and exception hierarchy for the upload classifier."""

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Any


# --- File Validation Exception Hierarchy ---

class FileValidationError(Exception):
    """Base exception for file validation errors."""
    pass


class InvalidReferenceError(FileValidationError):
    """File metadata reference is malformed or produces an unsafe path."""
    pass


class ReadFailureError(FileValidationError):
    """Underlying storage could not produce bytes for a resolved path."""
    pass


# --- Error Handling Enums ---

class ErrorSeverity(Enum):
    """Enumeration for error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Enumeration for error categories."""
    VALIDATION = "validation"
    STORAGE = "storage"
    CONFIGURATION = "configuration"
    SYSTEM = "system"


# --- Error Context and Result Models ---

@dataclass
class ErrorContext:
    """Captures contextual information about an error occurrence."""
    error_id: str
    timestamp: datetime.datetime
    endpoint: Optional[str]
    stack_trace: Optional[str]
    request_data: Dict[str, Any]


@dataclass
class ErrorResult:
    """Complete error processing result with context and user-friendly messages."""
    error_code: str
    severity: ErrorSeverity
    category: ErrorCategory
    technical_message: str
    user_message: str
    suggested_actions: List[str]
    context: ErrorContext


class ConfigurationError(Exception):
    """Configuration and environment errors."""
    pass
