"""Markdown file handler."""

from pathlib import Path
from typing import Optional

from markdown_toggle.formats.base import FormatHandler
from markdown_toggle.formatting.ir import TextRun
from markdown_toggle.formatting.parser import MarkdownParser
from markdown_toggle.formatting.serializer import MarkdownSerializer


class MarkdownHandler(FormatHandler):
    """Handler for markdown (.md) files.

    Supports the inline syntax understood by MarkdownParser:
    - # / ## / ### for headers
    - **bold**, _italic_ and **_bold italic_**
    - `code`
    """

    def __init__(
        self,
        parser: Optional[MarkdownParser] = None,
        serializer: Optional[MarkdownSerializer] = None,
    ) -> None:
        self.parser = parser or MarkdownParser()
        self.serializer = serializer or MarkdownSerializer()

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".md", ".markdown")

    def read(self, path: Path) -> list[TextRun]:
        """Read markdown syntax from file and parse it."""
        return self.parser.parse(path.read_text(encoding="utf-8"))

    def write(self, runs: list[TextRun], path: Path) -> None:
        """Serialize runs to markdown syntax and write them."""
        path.write_text(self.serializer.serialize(runs), encoding="utf-8")
