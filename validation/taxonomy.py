"""Static extension categories used for upload decisions."""

from typing import FrozenSet, List

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp")

DOCUMENT_EXTENSIONS = (
    ".pdf",
    ".doc",
    ".docx",
    ".pptx",
    ".xlsx",
    ".odt",
    ".odp",
    ".ods",
)

TEXT_EXTENSIONS = (
    ".txt",
    ".md",
    ".markdown",
    ".rst",
    ".log",
    ".csv",
    ".tsv",
    ".json",
    ".jsonl",
    ".yaml",
    ".yml",
    ".toml",
    ".ini",
    ".cfg",
    ".conf",
    ".env",
    ".xml",
    ".html",
    ".htm",
    ".css",
    ".scss",
    ".less",
    ".js",
    ".jsx",
    ".mjs",
    ".cjs",
    ".ts",
    ".tsx",
    ".vue",
    ".py",
    ".ipynb",
    ".rb",
    ".php",
    ".java",
    ".kt",
    ".scala",
    ".go",
    ".rs",
    ".c",
    ".h",
    ".cpp",
    ".hpp",
    ".cc",
    ".cs",
    ".swift",
    ".m",
    ".r",
    ".lua",
    ".pl",
    ".sh",
    ".bash",
    ".zsh",
    ".ps1",
    ".bat",
    ".sql",
    ".graphql",
    ".proto",
    ".tex",
    ".srt",
    ".vtt",
    ".properties",
    ".gradle",
    ".dockerfile",
)

AUDIO_EXTENSIONS = (".mp3", ".wav", ".ogg", ".flac", ".aac", ".m4a", ".wma", ".opus")

VIDEO_EXTENSIONS = (".mp4", ".avi", ".mov", ".wmv", ".flv", ".mkv", ".webm", ".m4v", ".mpeg", ".mpg")

IMAGE: FrozenSet[str] = frozenset(IMAGE_EXTENSIONS)
DOCUMENT: FrozenSet[str] = frozenset(DOCUMENT_EXTENSIONS)
TEXT: FrozenSet[str] = frozenset(TEXT_EXTENSIONS)
AUDIO: FrozenSet[str] = frozenset(AUDIO_EXTENSIONS)
VIDEO: FrozenSet[str] = frozenset(VIDEO_EXTENSIONS)

_WITH_IMAGES = IMAGE | DOCUMENT | TEXT
_WITHOUT_IMAGES = DOCUMENT | TEXT


def extension_of(filename: str) -> str:
    """Lowercase, dot-prefixed text after the last dot; ``"."`` when there is none."""
    if "." not in filename:
        return "."
    return "." + filename.rsplit(".", 1)[1].lower()


def extensions_for(allow_images: bool = True) -> FrozenSet[str]:
    return _WITH_IMAGES if allow_images else _WITHOUT_IMAGES


def supported_extensions(allow_images: bool = True) -> List[str]:
    """Supported extensions in display order (images first when allowed)."""
    ordered = list(DOCUMENT_EXTENSIONS) + list(TEXT_EXTENSIONS)
    if allow_images:
        ordered = list(IMAGE_EXTENSIONS) + ordered
    return ordered


def is_supported(extension: str, allow_images: bool = True) -> bool:
    return extension.lower() in extensions_for(allow_images)


def is_audio_or_video(extension: str) -> bool:
    lowered = extension.lower()
    return lowered in AUDIO or lowered in VIDEO
