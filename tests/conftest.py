"""Pytest fixtures for Markdown Toggle tests."""

import json

import pytest
from pathlib import Path

from markdown_toggle.config import Settings
from markdown_toggle.formatting.ir import BOLD_ITALIC, TextRun, TextStyle
from markdown_toggle.formatting.parser import MarkdownParser
from markdown_toggle.formatting.serializer import MarkdownSerializer
from markdown_toggle.formatting.style import StyleRegistry


@pytest.fixture
def settings() -> Settings:
    """Settings with default values."""
    return Settings()


@pytest.fixture
def registry(settings: Settings) -> StyleRegistry:
    """Style registry built from default settings."""
    return StyleRegistry.from_settings(settings)


@pytest.fixture
def parser() -> MarkdownParser:
    """Create a parser instance."""
    return MarkdownParser()


@pytest.fixture
def serializer() -> MarkdownSerializer:
    """Create a serializer instance."""
    return MarkdownSerializer()


@pytest.fixture
def sample_runs() -> list[TextRun]:
    """Runs using every supported style."""
    return [
        TextRun("Notes", TextStyle.HEADER1),
        TextRun("\nSome ", TextStyle.NONE),
        TextRun("bold", TextStyle.BOLD),
        TextRun(" and ", TextStyle.NONE),
        TextRun("very", TextStyle.BOLD),
        TextRun("important", BOLD_ITALIC),
        TextRun(" words, ", TextStyle.NONE),
        TextRun("quiet", TextStyle.ITALIC),
        TextRun(" and ", TextStyle.NONE),
        TextRun("print()", TextStyle.CODE),
        TextRun(".", TextStyle.NONE),
    ]


@pytest.fixture
def sample_markdown() -> str:
    """Markdown equivalent of sample_runs."""
    return (
        "# Notes\nSome **bold** and **very_important_** words, "
        "_quiet_ and `print()`."
    )


@pytest.fixture
def tmp_markdown_file(tmp_path: Path, sample_markdown: str) -> Path:
    """Create a temporary markdown file for testing."""
    file_path = tmp_path / "notes.md"
    file_path.write_text(sample_markdown, encoding="utf-8")
    return file_path


@pytest.fixture
def tmp_json_file(tmp_path: Path) -> Path:
    """Create a temporary JSON runs file for testing."""
    file_path = tmp_path / "runs.json"
    file_path.write_text(
        json.dumps([
            {"text": "Hi ", "style": ["bold"]},
            {"text": "there", "style": []},
        ]),
        encoding="utf-8",
    )
    return file_path
