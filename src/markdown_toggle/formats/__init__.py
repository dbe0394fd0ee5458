"""Document format handlers for Markdown Toggle."""

from markdown_toggle.formats.base import FormatHandler
from markdown_toggle.formats.markdown_handler import MarkdownHandler
from markdown_toggle.formats.json_handler import JSONHandler

__all__ = [
    "FormatHandler",
    "MarkdownHandler",
    "JSONHandler",
]

# Map file extensions to handlers
HANDLER_MAP: dict[str, type[FormatHandler]] = {
    ".md": MarkdownHandler,
    ".markdown": MarkdownHandler,
    ".json": JSONHandler,
}

SUPPORTED_EXTENSIONS = tuple(HANDLER_MAP.keys())


def get_handler(extension: str) -> type[FormatHandler]:
    """Get the appropriate handler class for a file extension."""
    ext = extension.lower()
    if ext not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported file format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return HANDLER_MAP[ext]
