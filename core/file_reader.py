"""Reading stored file content for metadata-based validation."""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Protocol, Union
from urllib.parse import unquote, urlparse


class FileReader(Protocol):
    """Produces the raw bytes stored at a path."""

    async def read_file(self, path: str) -> bytes:
        ...


class LocalFileReader:
    """Reads files from the local filesystem without blocking the event loop."""

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        self.base_dir = Path(base_dir) if base_dir else None

    def resolve_path(self, path_or_url: str) -> Path:
        """
        Turn a plain path or ``file://`` URL into a filesystem path.

        Relative paths are resolved against ``base_dir`` when one is configured.
        """
        if path_or_url.startswith("file://"):
            return Path(unquote(urlparse(path_or_url).path))

        path = Path(path_or_url)
        if not path.is_absolute() and self.base_dir is not None:
            path = self.base_dir / path
        return path

    async def read_file(self, path: str) -> bytes:
        """
        Read the full content at ``path``.

        Raises:
            OSError: If the file is missing or unreadable
        """
        resolved = self.resolve_path(path)
        logging.debug(f"Reading file content from {resolved}")
        return await asyncio.get_event_loop().run_in_executor(None, resolved.read_bytes)
