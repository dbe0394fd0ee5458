"""Tests for the styled text buffer."""

import pytest

from markdown_toggle.core.models import StyledText
from markdown_toggle.formatting.ir import (
    BOLD_ITALIC,
    StyledRange,
    TextRun,
    TextStyle,
)


class TestStyledText:
    """Tests for the StyledText class."""

    @pytest.fixture
    def text(self) -> StyledText:
        return StyledText([
            TextRun("Hi ", TextStyle.BOLD),
            TextRun("there", TextStyle.NONE),
        ])

    def test_text_and_length(self, text: StyledText):
        assert text.text == "Hi there"
        assert text.length == 8
        assert len(text) == 8

    def test_ranges(self, text: StyledText):
        assert text.ranges() == [
            StyledRange(0, 3, TextStyle.BOLD),
            StyledRange(3, 5, TextStyle.NONE),
        ]

    def test_runs_are_coalesced(self):
        text = StyledText([
            TextRun("He", TextStyle.BOLD),
            TextRun("llo", TextStyle.BOLD),
        ])
        assert text.runs == [TextRun("Hello", TextStyle.BOLD)]

    def test_style_at(self, text: StyledText):
        assert text.style_at(0) == TextStyle.BOLD
        assert text.style_at(2) == TextStyle.BOLD
        assert text.style_at(3) == TextStyle.NONE

    @pytest.mark.parametrize("location", [-1, 8, 100])
    def test_style_at_out_of_bounds(self, text: StyledText, location: int):
        assert text.style_at(location) == TextStyle.NONE

    def test_append(self, text: StyledText):
        text.append("!", TextStyle.ITALIC)
        assert text.runs[-1] == TextRun("!", TextStyle.ITALIC)

    def test_insert_splits_run(self, text: StyledText):
        text.insert(1, "o", TextStyle.ITALIC)
        assert text.runs == [
            TextRun("H", TextStyle.BOLD),
            TextRun("o", TextStyle.ITALIC),
            TextRun("i ", TextStyle.BOLD),
            TextRun("there", TextStyle.NONE),
        ]

    def test_insert_same_style_merges(self, text: StyledText):
        text.insert(3, "you ", TextStyle.NONE)
        assert text.runs == [
            TextRun("Hi ", TextStyle.BOLD),
            TextRun("you there", TextStyle.NONE),
        ]

    def test_insert_at_end(self, text: StyledText):
        text.insert(8, "!", TextStyle.CODE)
        assert text.runs[-1] == TextRun("!", TextStyle.CODE)

    def test_insert_uses_utf16_offsets(self):
        text = StyledText([TextRun("\U0001F600b", TextStyle.NONE)])
        text.insert(2, "a", TextStyle.BOLD)
        assert text.runs == [
            TextRun("\U0001F600", TextStyle.NONE),
            TextRun("a", TextStyle.BOLD),
            TextRun("b", TextStyle.NONE),
        ]

    def test_insert_out_of_bounds(self, text: StyledText):
        with pytest.raises(IndexError):
            text.insert(9, "x")

    def test_clear(self, text: StyledText):
        text.clear()
        assert text.length == 0
        assert text.ranges() == []

    def test_styles_in(self):
        text = StyledText([
            TextRun("ab", TextStyle.BOLD),
            TextRun("cd", TextStyle.NONE),
            TextRun("ef", TextStyle.BOLD),
        ])
        assert text.styles_in(1, 4) == {
            TextStyle.BOLD: [(1, 1), (4, 1)],
            TextStyle.NONE: [(2, 2)],
        }

    def test_styles_in_outside_range(self, text: StyledText):
        assert text.styles_in(5, 10) == {}
        assert text.styles_in(-1, 2) == {}

    def test_markdown_round_trip(self):
        text = StyledText.from_markdown("**a_b_**c")
        assert text.runs == [
            TextRun("a", TextStyle.BOLD),
            TextRun("b", BOLD_ITALIC),
            TextRun("c", TextStyle.NONE),
        ]
        assert text.to_markdown() == "**a_b_**c"
