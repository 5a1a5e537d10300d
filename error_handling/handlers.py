"""Error handling and user feedback for upload classification."""

import datetime
import json
import logging
import re
import traceback
import uuid
from typing import Dict, Optional, Any, Callable

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from models.errors import (
    ConfigurationError,
    ErrorCategory,
    ErrorContext,
    ErrorResult,
    ErrorSeverity,
)
from models.validation import RejectionKind


class ErrorMessageTranslator:
    """Translates rejections and technical errors to user-friendly messages with suggested actions."""

    def __init__(self):
        """Initialize the translator with predefined message mappings."""
        self._rejection_rules: Dict[RejectionKind, Dict[str, Any]] = {
            RejectionKind.UNSUPPORTED_TYPE: {
                "user_message": "This file type is not supported. Please select a supported file format.",
                "suggested_actions": [
                    "Check the list of supported file types",
                    "Convert your file to a supported format",
                ],
                "severity": ErrorSeverity.LOW,
                "category": ErrorCategory.VALIDATION,
            },
            RejectionKind.FORBIDDEN_CATEGORY: {
                "user_message": "Audio and video files cannot be attached.",
                "suggested_actions": [
                    "Attach a transcript or a text summary instead",
                ],
                "severity": ErrorSeverity.LOW,
                "category": ErrorCategory.VALIDATION,
            },
            RejectionKind.INVALID_REFERENCE: {
                "user_message": "The selected file reference is invalid.",
                "suggested_actions": [
                    "Select the file again",
                    "Rename the file using letters, digits, spaces or hyphens",
                ],
                "severity": ErrorSeverity.MEDIUM,
                "category": ErrorCategory.VALIDATION,
            },
            RejectionKind.READ_FAILURE: {
                "user_message": "The file could not be read.",
                "suggested_actions": [
                    "Check that the file still exists",
                    "Try attaching the file again",
                ],
                "severity": ErrorSeverity.MEDIUM,
                "category": ErrorCategory.STORAGE,
            },
            RejectionKind.UNEXPECTED_FAILURE: {
                "user_message": "The file could not be validated.",
                "suggested_actions": [
                    "Try again",
                    "Contact support if the problem persists",
                ],
                "severity": ErrorSeverity.HIGH,
                "category": ErrorCategory.SYSTEM,
            },
        }

        self._configuration_rule = {
            "user_message": "There's a configuration issue. Please contact support.",
            "suggested_actions": ["Contact technical support", "Report this error with the error ID"],
            "severity": ErrorSeverity.CRITICAL,
            "category": ErrorCategory.CONFIGURATION,
        }

    def describe_rejection(self, kind: RejectionKind) -> Dict[str, Any]:
        """Get the user-facing rule for a rejection kind."""
        return self._rejection_rules[kind]

    def translate_error(self, exception: Exception, context: ErrorContext) -> ErrorResult:
        """
        Translate a technical error to a user-friendly error result.

        Args:
            exception: The exception to translate
            context: Error context information

        Returns:
            ErrorResult: User-friendly error result
        """
        rule = self._get_translation_rule(exception)

        return ErrorResult(
            error_code=self._generate_error_code(exception),
            severity=rule["severity"],
            category=rule["category"],
            technical_message=self._sanitize_technical_message(str(exception)),
            user_message=rule["user_message"],
            suggested_actions=list(rule["suggested_actions"]),
            context=context,
        )

    def _get_translation_rule(self, exception: Exception) -> Dict[str, Any]:
        """Get the most specific translation rule for an exception."""
        if isinstance(exception, ConfigurationError):
            return self._configuration_rule

        return self._rejection_rules[RejectionKind.UNEXPECTED_FAILURE]

    def _generate_error_code(self, exception: Exception) -> str:
        """Generate an error code based on exception type."""
        exception_name = type(exception).__name__
        timestamp = int(datetime.datetime.now().timestamp())
        return f"{exception_name}_{timestamp}"

    def _sanitize_technical_message(self, message: str) -> str:
        """
        Keep technical messages safe for logging.

        File content that leaked into an exception message is truncated.
        """
        max_length = 500

        long_string_pattern = re.compile(r"\S{200,}")
        if long_string_pattern.search(message):
            message = long_string_pattern.sub("[LONG_CONTENT_TRUNCATED]", message)

        if len(message) > max_length:
            message = message[:max_length] + "... [TRUNCATED]"

        return message


class ErrorHandler:
    """Main error handler that orchestrates error processing."""

    def __init__(self):
        self.message_translator = ErrorMessageTranslator()

    def capture_context(
        self, request: Optional[Request] = None, additional_data: Optional[Dict[str, Any]] = None
    ) -> ErrorContext:
        """Capture request details and the current stack trace."""
        request_data = dict(additional_data or {})
        endpoint = None
        if request is not None:
            endpoint = request.url.path
            request_data.update({"method": request.method, "content_type": request.headers.get("content-type")})

        return ErrorContext(
            error_id=uuid.uuid4().hex,
            timestamp=datetime.datetime.now(),
            endpoint=endpoint,
            stack_trace=traceback.format_exc(),
            request_data=request_data,
        )

    async def handle_error(
        self,
        exception: Exception,
        request: Optional[Request] = None,
        additional_context: Optional[Dict[str, Any]] = None,
    ) -> ErrorResult:
        """
        Translate and log an error.

        Args:
            exception: The exception to handle
            request: FastAPI request object
            additional_context: Additional context data

        Returns:
            ErrorResult: Complete error handling result
        """
        context = self.capture_context(request, additional_context)
        error_result = self.message_translator.translate_error(exception, context)
        self._log_error(error_result)
        return error_result

    def _log_error(self, error_result: ErrorResult) -> None:
        """Log error with appropriate level based on severity."""
        log_data = {
            "error_id": error_result.context.error_id,
            "error_code": error_result.error_code,
            "category": error_result.category.value,
            "severity": error_result.severity.value,
            "endpoint": error_result.context.endpoint,
            "technical_message": error_result.technical_message,
        }

        if error_result.severity == ErrorSeverity.CRITICAL:
            logging.critical(f"Critical error: {json.dumps(log_data)}")
        elif error_result.severity == ErrorSeverity.HIGH:
            logging.error(f"High severity error: {json.dumps(log_data)}")
        elif error_result.severity == ErrorSeverity.MEDIUM:
            logging.warning(f"Medium severity error: {json.dumps(log_data)}")
        else:
            logging.info(f"Low severity error: {json.dumps(log_data)}")


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """FastAPI middleware for centralized error handling."""

    def __init__(self, app, error_handler: ErrorHandler):
        super().__init__(app)
        self.error_handler = error_handler

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            error_result = await self.error_handler.handle_error(e, request)
            return self._create_error_response(error_result)

    def _create_error_response(self, error_result: ErrorResult) -> JSONResponse:
        """Create appropriate HTTP response for error result."""
        response_data = {
            "error": True,
            "error_id": error_result.context.error_id,
            "error_code": error_result.error_code,
            "message": error_result.user_message,
            "suggested_actions": error_result.suggested_actions,
            "severity": error_result.severity.value,
            "category": error_result.category.value,
        }

        return JSONResponse(status_code=self._get_status_code(error_result), content=response_data)

    def _get_status_code(self, error_result: ErrorResult) -> int:
        """Map error categories to HTTP status codes."""
        category_status_map = {
            ErrorCategory.CONFIGURATION: 500,
            ErrorCategory.SYSTEM: 500,
        }

        return category_status_map.get(error_result.category, 500)
