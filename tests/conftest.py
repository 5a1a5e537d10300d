"""
Test configuration and fixtures for the upload classifier.

This module provides common fixtures for all tests.
"""

import os
import sys
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Add the parent directory to the path so we can import main
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.validation import SniffResult, UploadValidationConfig
from tests.utils.fixtures import ContentSniffer, FakeFileReader, FakeSniffer
from validation.sniffer import ContentSnifferAdapter
from validation.validators import BatchValidator, MetadataResolver, UploadValidator


@pytest.fixture
def fake_sniffer() -> FakeSniffer:
    """Sniffer answering TEXT for everything."""
    return FakeSniffer(SniffResult.TEXT)


@pytest.fixture
def binary_sniffer() -> FakeSniffer:
    """Sniffer answering BINARY for everything."""
    return FakeSniffer(SniffResult.BINARY)


@pytest.fixture
def content_sniffer() -> ContentSniffer:
    """Sniffer deciding from the bytes themselves."""
    return ContentSniffer()


@pytest.fixture
def upload_validator(content_sniffer) -> UploadValidator:
    """Upload validator backed by the content-based sniffer."""
    return UploadValidator(ContentSnifferAdapter(content_sniffer), UploadValidationConfig())


@pytest.fixture
def fake_reader() -> FakeFileReader:
    """Empty in-memory file reader."""
    return FakeFileReader()


@pytest.fixture
def metadata_resolver(upload_validator, fake_reader) -> MetadataResolver:
    """Metadata resolver reading from the in-memory reader."""
    return MetadataResolver(upload_validator, fake_reader)


@pytest.fixture
def batch_validator(upload_validator, metadata_resolver) -> BatchValidator:
    """Batch validator over both entry points."""
    return BatchValidator(upload_validator, metadata_resolver)


@pytest.fixture
def test_client(content_sniffer, fake_reader, monkeypatch) -> Generator[TestClient, None, None]:
    """
    FastAPI test client fixture with deterministic collaborators.

    Yields:
        TestClient: Configured FastAPI test client
    """
    monkeypatch.setenv("ALLOW_IMAGES", "true")
    from core.config import AppConfig
    from main import create_app

    app = create_app(AppConfig(), sniffer=content_sniffer, file_reader=fake_reader)
    with TestClient(app) as client:
        yield client
