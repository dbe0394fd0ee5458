"""Tests for the markdown serializer."""

from markdown_toggle.formatting.ir import (
    BOLD_ITALIC,
    StyledRange,
    TextRun,
    TextStyle,
)
from markdown_toggle.formatting.serializer import MarkdownSerializer
from markdown_toggle.formatting.syntax import SyntaxSpec


class TestMarkdownSerializer:
    """Tests for the MarkdownSerializer class."""

    def test_empty_input(self, serializer: MarkdownSerializer):
        assert serializer.serialize([]) == ""

    def test_plain_text(self, serializer: MarkdownSerializer):
        runs = [TextRun("Hello, world!", TextStyle.NONE)]
        assert serializer.serialize(runs) == "Hello, world!"

    def test_bold_then_plain(self, serializer: MarkdownSerializer):
        runs = [TextRun("Hi ", TextStyle.BOLD), TextRun("there", TextStyle.NONE)]
        assert serializer.serialize(runs) == "**Hi **there"

    def test_header(self, serializer: MarkdownSerializer):
        runs = [TextRun("Title", TextStyle.HEADER1)]
        assert serializer.serialize(runs) == "# Title"

    def test_header_levels(self, serializer: MarkdownSerializer):
        runs = [
            TextRun("A", TextStyle.HEADER2),
            TextRun("\n", TextStyle.NONE),
            TextRun("B", TextStyle.HEADER3),
        ]
        assert serializer.serialize(runs) == "## A\n### B"

    def test_header_suffix_adds_no_line_break(
        self, serializer: MarkdownSerializer
    ):
        runs = [TextRun("Title", TextStyle.HEADER1), TextRun("body", TextStyle.NONE)]
        assert serializer.serialize(runs) == "# Titlebody"

    def test_bold_italic_alone(self, serializer: MarkdownSerializer):
        runs = [TextRun("Hi", BOLD_ITALIC)]
        assert serializer.serialize(runs) == "**_Hi_**"

    def test_nested_italic_inside_bold(self, serializer: MarkdownSerializer):
        runs = [
            TextRun("a", TextStyle.BOLD),
            TextRun("b", BOLD_ITALIC),
            TextRun("c", TextStyle.BOLD),
        ]
        assert serializer.serialize(runs) == "**a_b_c**"

    def test_nested_bold_inside_italic(self, serializer: MarkdownSerializer):
        runs = [
            TextRun("a", TextStyle.ITALIC),
            TextRun("b", BOLD_ITALIC),
        ]
        assert serializer.serialize(runs) == "_a**b**_"

    def test_subset_closes_inner_scope(self, serializer: MarkdownSerializer):
        runs = [
            TextRun("a", BOLD_ITALIC),
            TextRun("b", TextStyle.ITALIC),
        ]
        assert serializer.serialize(runs) == "**_a_**_b_"

    def test_disjoint_styles(self, serializer: MarkdownSerializer):
        runs = [
            TextRun("a", TextStyle.ITALIC),
            TextRun("b", TextStyle.CODE),
            TextRun("c", TextStyle.BOLD),
        ]
        assert serializer.serialize(runs) == "_a_`b`**c**"

    def test_same_style_runs_share_delimiters(
        self, serializer: MarkdownSerializer
    ):
        runs = [TextRun("He", TextStyle.BOLD), TextRun("llo", TextStyle.BOLD)]
        assert serializer.serialize(runs) == "**Hello**"

    def test_sample_document(
        self,
        serializer: MarkdownSerializer,
        sample_runs: list[TextRun],
        sample_markdown: str,
    ):
        assert serializer.serialize(sample_runs) == sample_markdown

    def test_serialize_ranges(self, serializer: MarkdownSerializer):
        text = "\U0001F600 wow"
        ranges = [
            StyledRange(0, 2, TextStyle.CODE),
            StyledRange(2, 4, TextStyle.NONE),
        ]
        assert serializer.serialize_ranges(text, ranges) == "`\U0001F600` wow"

    def test_custom_syntax_map(self):
        serializer = MarkdownSerializer({
            TextStyle.NONE: SyntaxSpec("", ""),
            TextStyle.BOLD: SyntaxSpec("<b>", "</b>"),
        })
        runs = [TextRun("x", TextStyle.BOLD), TextRun("y", TextStyle.ITALIC)]
        # Styles without syntax contribute no delimiters
        assert serializer.serialize(runs) == "<b>x</b>y"
