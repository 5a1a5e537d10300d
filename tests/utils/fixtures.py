"""
Common test doubles for the upload classifier.

Provides deterministic stand-ins for the content sniffer, the file reader
and FastAPI's UploadFile.
"""

import asyncio
from typing import Dict, List, Optional, Tuple

from models.validation import SniffResult


class FakeSniffer:
    """Sniffer returning a fixed verdict and recording every call."""

    def __init__(self, result: SniffResult = SniffResult.TEXT, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls: List[Tuple[str, bytes]] = []

    def is_text_like(self, filename: str, sample: bytes) -> SniffResult:
        self.calls.append((filename, sample))
        if self.error is not None:
            raise self.error
        return self.result


class ContentSniffer:
    """Sniffer that calls bytes text when they decode as UTF-8 without NUL bytes."""

    def is_text_like(self, filename: str, sample: bytes) -> SniffResult:
        if not sample:
            return SniffResult.UNKNOWN
        if b"\x00" in sample:
            return SniffResult.BINARY
        try:
            sample.decode("utf-8")
        except UnicodeDecodeError:
            return SniffResult.BINARY
        return SniffResult.TEXT


class FakeFileReader:
    """In-memory file reader keyed by path."""

    def __init__(self, files: Optional[Dict[str, bytes]] = None, errors: Optional[Dict[str, Exception]] = None,
                 delays: Optional[Dict[str, float]] = None):
        self.files = files or {}
        self.errors = errors or {}
        self.delays = delays or {}
        self.calls: List[str] = []

    async def read_file(self, path: str) -> bytes:
        self.calls.append(path)
        if path in self.delays:
            await asyncio.sleep(self.delays[path])
        if path in self.errors:
            raise self.errors[path]
        if path not in self.files:
            raise FileNotFoundError(f"No such file: {path}")
        return self.files[path]


class MockFileUpload:
    """Mock file upload that mimics FastAPI UploadFile."""

    def __init__(self, filename: str, content: bytes, content_type: str = "application/octet-stream"):
        self.filename = filename
        self.content = content
        self.content_type = content_type
        self._position = 0
        self.read_sizes: List[int] = []

    async def read(self, size: int = -1) -> bytes:
        """Read file content."""
        self.read_sizes.append(size)
        data = self.content[self._position:] if size < 0 else self.content[self._position:self._position + size]
        self._position += len(data)
        return data

    async def seek(self, position: int) -> None:
        """Seek to position in file."""
        self._position = position
