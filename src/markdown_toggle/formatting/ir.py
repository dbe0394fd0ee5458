"""Intermediate Representation for styled text.

This module defines the style model shared by the serializer, the parser
and the editing-side tracker: the markdown style flags, the set of valid
style combinations and the run/range types exchanged at the boundary
between styled text and markdown syntax.
"""

from dataclasses import dataclass
from enum import Flag, auto
from typing import Iterable


class TextStyle(Flag):
    """Markdown style flags (combinable with |).

    Only the combinations listed in VALID_STYLES may be assigned to a run.
    """

    NONE = 0
    HEADER1 = auto()
    HEADER2 = auto()
    HEADER3 = auto()
    BOLD = auto()
    ITALIC = auto()
    CODE = auto()


BOLD_ITALIC = TextStyle.BOLD | TextStyle.ITALIC

ATOMIC_STYLES: tuple[TextStyle, ...] = (
    TextStyle.HEADER1,
    TextStyle.HEADER2,
    TextStyle.HEADER3,
    TextStyle.BOLD,
    TextStyle.ITALIC,
    TextStyle.CODE,
)
COMBINED_STYLES: tuple[TextStyle, ...] = (BOLD_ITALIC,)
VALID_STYLES: frozenset[TextStyle] = frozenset(
    (TextStyle.NONE,) + ATOMIC_STYLES + COMBINED_STYLES
)

HEADER_STYLES: tuple[TextStyle, ...] = (
    TextStyle.HEADER1,
    TextStyle.HEADER2,
    TextStyle.HEADER3,
)


# =============================================================================
# Set algebra
# =============================================================================

def union(a: TextStyle, b: TextStyle) -> TextStyle:
    """Return the combination holding the flags of both a and b."""
    return a | b


def subtract(a: TextStyle, b: TextStyle) -> TextStyle:
    """Return the flags of a that are not in b."""
    return a & ~b


def is_disjoint(a: TextStyle, b: TextStyle) -> bool:
    """Check whether a and b share no flag."""
    return not (a & b)


def is_valid(style: TextStyle) -> bool:
    """Check whether style may be assigned to a run of text."""
    return style in VALID_STYLES


def combine(styles: Iterable[TextStyle]) -> TextStyle:
    """Fold styles together with union, starting from NONE."""
    result = TextStyle.NONE
    for style in styles:
        result = union(result, style)
    return result


def style_names(style: TextStyle) -> list[str]:
    """Return the lowercase names of the atomic flags set in style."""
    return [atom.name.lower() for atom in ATOMIC_STYLES if atom in style]


def style_from_names(names: Iterable[str]) -> TextStyle:
    """Build a style from atomic flag names (case-insensitive).

    Raises:
        KeyError: If a name is not an atomic style
    """
    result = TextStyle.NONE
    for name in names:
        key = name.strip().upper()
        if key == "NONE":
            continue
        result |= TextStyle[key]
    return result


# =============================================================================
# Runs and ranges
# =============================================================================

def utf16_length(text: str) -> int:
    """Length of text in UTF-16 code units."""
    return len(text.encode("utf-16-le", errors="surrogatepass")) // 2


@dataclass(frozen=True)
class TextRun:
    """A contiguous run of text with consistent styling.

    Attributes:
        text: The text content
        style: Combined style flags
    """

    text: str
    style: TextStyle = TextStyle.NONE

    @property
    def length(self) -> int:
        """Length of the run in UTF-16 code units."""
        return utf16_length(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class StyledRange:
    """A styled range over a text buffer, measured in UTF-16 code units.

    Attributes:
        start: Offset of the first code unit
        length: Number of code units covered
        style: Style carried by the range
    """

    start: int
    length: int
    style: TextStyle = TextStyle.NONE

    @property
    def end(self) -> int:
        return self.start + self.length


def coalesce_runs(runs: Iterable[TextRun]) -> list[TextRun]:
    """Merge adjacent runs that share a style and drop empty runs."""
    merged: list[TextRun] = []
    for run in runs:
        if not run.text:
            continue
        if merged and merged[-1].style == run.style:
            merged[-1] = TextRun(merged[-1].text + run.text, run.style)
        else:
            merged.append(run)
    return merged


def runs_to_ranges(runs: Iterable[TextRun]) -> list[StyledRange]:
    """Convert runs into contiguous ranges starting at offset 0."""
    ranges: list[StyledRange] = []
    offset = 0
    for run in runs:
        length = run.length
        ranges.append(StyledRange(offset, length, run.style))
        offset += length
    return ranges


def ranges_to_runs(text: str, ranges: Iterable[StyledRange]) -> list[TextRun]:
    """Slice text into runs following UTF-16 ranges.

    The ranges must be ordered and gap-free over text.
    """
    encoded = text.encode("utf-16-le", errors="surrogatepass")
    return [
        TextRun(
            encoded[r.start * 2 : r.end * 2].decode(
                "utf-16-le", errors="surrogatepass"
            ),
            r.style,
        )
        for r in ranges
    ]
