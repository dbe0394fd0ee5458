"""Formatting utilities for converting between styled runs and markdown."""

from markdown_toggle.formatting.ir import (
    TextStyle,
    TextRun,
    StyledRange,
    BOLD_ITALIC,
    ATOMIC_STYLES,
    COMBINED_STYLES,
    VALID_STYLES,
    union,
    subtract,
    is_disjoint,
    is_valid,
    coalesce_runs,
)
from markdown_toggle.formatting.style import AttributeBundle, StyleRegistry
from markdown_toggle.formatting.syntax import (
    SyntaxSpec,
    SyntaxPatternError,
    SYNTAX_MAP,
)
from markdown_toggle.formatting.serializer import MarkdownSerializer
from markdown_toggle.formatting.parser import MarkdownParser

__all__ = [
    "TextStyle",
    "TextRun",
    "StyledRange",
    "BOLD_ITALIC",
    "ATOMIC_STYLES",
    "COMBINED_STYLES",
    "VALID_STYLES",
    "union",
    "subtract",
    "is_disjoint",
    "is_valid",
    "coalesce_runs",
    "AttributeBundle",
    "StyleRegistry",
    "SyntaxSpec",
    "SyntaxPatternError",
    "SYNTAX_MAP",
    "MarkdownSerializer",
    "MarkdownParser",
]
