"""Text/binary content sniffing for files with unrecognised extensions."""

import logging
import mimetypes
from typing import Protocol, Union

import magic

from models.validation import DEFAULT_SAMPLE_SIZE, FileInput, SniffResult

# Non text/* MIME types whose payload is still human-readable text.
TEXT_LIKE_MIME_TYPES = {
    "application/json",
    "application/ld+json",
    "application/xml",
    "application/javascript",
    "application/x-javascript",
    "application/ecmascript",
    "application/x-sh",
    "application/x-shellscript",
    "application/x-httpd-php",
    "application/x-perl",
    "application/x-ruby",
    "application/x-python",
    "application/sql",
    "application/toml",
    "application/x-yaml",
    "application/yaml",
    "application/x-tex",
    "application/x-subrip",
    "image/svg+xml",
}

UNDECIDED_MIME_TYPES = {"application/octet-stream", "application/x-empty", "inode/x-empty"}


class TextSniffer(Protocol):
    """Classifies a byte sample as text, binary or unknown."""

    def is_text_like(self, filename: str, sample: bytes) -> SniffResult:
        ...


def _is_textual_mime(mime_type: str) -> bool:
    return mime_type.startswith("text/") or mime_type in TEXT_LIKE_MIME_TYPES


class MagicTextSniffer:
    """Sniffs content with libmagic, using the filename only as a tie-breaker."""

    def __init__(self):
        self._magic = magic.Magic(mime=True)

    def is_text_like(self, filename: str, sample: bytes) -> SniffResult:
        mime_type = self._magic.from_buffer(sample) if sample else "application/x-empty"
        logging.debug(f"libmagic classified {filename!r} sample as {mime_type}")

        if _is_textual_mime(mime_type):
            return SniffResult.TEXT
        if mime_type not in UNDECIDED_MIME_TYPES:
            return SniffResult.BINARY

        # libmagic could not decide; fall back to what the name suggests
        guessed, _ = mimetypes.guess_type(filename or "")
        if sample and guessed and _is_textual_mime(guessed):
            return SniffResult.TEXT
        return SniffResult.UNKNOWN


class ContentSnifferAdapter:
    """Turns a file's leading bytes into a conservative text/binary decision."""

    def __init__(self, sniffer: TextSniffer, sample_size: int = DEFAULT_SAMPLE_SIZE):
        self.sniffer = sniffer
        self.sample_size = sample_size

    async def looks_like_text(self, name: str, content: Union[bytes, FileInput]) -> bool:
        """
        Decide whether the file content is text.

        Args:
            name: Advisory filename handed to the sniffer
            content: Raw bytes or a byte source to sample

        Returns:
            bool: True only when the sniffer answers TEXT; unknown content and
            sniffer failures count as binary.
        """
        try:
            if not isinstance(content, FileInput):
                content = FileInput(name, content)
            sample = await content.read(self.sample_size)
            return self.sniffer.is_text_like(name, sample[: self.sample_size]) is SniffResult.TEXT
        except Exception as e:
            logging.error(f"Error detecting file content type for {name!r}: {e}")
            return False
