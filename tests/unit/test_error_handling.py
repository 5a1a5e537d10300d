"""Tests for error translation and handling."""

import pytest

from error_handling.handlers import ErrorHandler, ErrorMessageTranslator
from models.errors import (
    ConfigurationError,
    ErrorCategory,
    ErrorSeverity,
)
from models.validation import RejectionKind


class TestErrorMessageTranslator:
    """Test translation of rejections and exceptions."""

    @pytest.mark.parametrize("kind", list(RejectionKind))
    def test_every_rejection_kind_described(self, kind):
        rule = ErrorMessageTranslator().describe_rejection(kind)

        assert rule["user_message"]
        assert rule["suggested_actions"]
        assert isinstance(rule["severity"], ErrorSeverity)

    def test_read_failure_is_storage_category(self):
        rule = ErrorMessageTranslator().describe_rejection(RejectionKind.READ_FAILURE)
        assert rule["category"] is ErrorCategory.STORAGE

    def test_translate_runtime_error(self):
        handler = ErrorHandler()
        context = handler.capture_context()

        result = handler.message_translator.translate_error(RuntimeError("sniffer crashed"), context)

        assert result.category is ErrorCategory.SYSTEM
        assert result.severity is ErrorSeverity.HIGH
        assert result.technical_message == "sniffer crashed"
        assert result.error_code.startswith("RuntimeError_")

    def test_translate_configuration_error(self):
        handler = ErrorHandler()
        result = handler.message_translator.translate_error(ConfigurationError("bad"), handler.capture_context())

        assert result.severity is ErrorSeverity.CRITICAL
        assert result.category is ErrorCategory.CONFIGURATION

    def test_translate_unknown_exception(self):
        handler = ErrorHandler()
        result = handler.message_translator.translate_error(KeyError("x"), handler.capture_context())

        assert result.category is ErrorCategory.SYSTEM

    def test_sanitize_long_content(self):
        translator = ErrorMessageTranslator()

        message = translator._sanitize_technical_message("payload " + "A" * 1000)

        assert "[LONG_CONTENT_TRUNCATED]" in message
        assert len(message) < 600


class TestErrorHandler:
    """Test the error handling pipeline."""

    @pytest.mark.asyncio
    async def test_handle_error_logs_and_returns_result(self, caplog):
        handler = ErrorHandler()

        result = await handler.handle_error(RuntimeError("disk went away"))

        assert result.category is ErrorCategory.SYSTEM
        assert result.context.error_id
        assert "disk went away" in caplog.text
