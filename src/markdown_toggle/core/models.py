"""Styled text buffer owned by an editing session."""

from typing import Optional

from markdown_toggle.formatting.ir import (
    StyledRange,
    TextRun,
    TextStyle,
    coalesce_runs,
    runs_to_ranges,
)
from markdown_toggle.formatting.parser import MarkdownParser
from markdown_toggle.formatting.serializer import MarkdownSerializer


def _split_at(text: str, offset: int) -> tuple[str, str]:
    """Split text at a UTF-16 offset."""
    encoded = text.encode("utf-16-le", errors="surrogatepass")
    head = encoded[: offset * 2].decode("utf-16-le", errors="surrogatepass")
    tail = encoded[offset * 2 :].decode("utf-16-le", errors="surrogatepass")
    return head, tail


class StyledText:
    """An ordered sequence of styled runs with UTF-16 addressing.

    This models the host's attributed text buffer: every character carries
    exactly one style, and offsets are counted in UTF-16 code units.
    """

    def __init__(self, runs: Optional[list[TextRun]] = None) -> None:
        self._runs: list[TextRun] = coalesce_runs(runs or [])

    @classmethod
    def from_markdown(
        cls, syntax: str, parser: Optional[MarkdownParser] = None
    ) -> "StyledText":
        """Build a buffer from a markdown syntax string."""
        parser = parser or MarkdownParser()
        return cls(parser.parse(syntax))

    @property
    def runs(self) -> list[TextRun]:
        return list(self._runs)

    @property
    def text(self) -> str:
        """Plain text content without styling."""
        return "".join(run.text for run in self._runs)

    @property
    def length(self) -> int:
        """Length in UTF-16 code units."""
        return sum(run.length for run in self._runs)

    def ranges(self) -> list[StyledRange]:
        """Contiguous, ordered ranges covering the whole text."""
        return runs_to_ranges(self._runs)

    def append(self, text: str, style: TextStyle = TextStyle.NONE) -> None:
        """Append text carrying style at the end of the buffer."""
        self._runs = coalesce_runs(self._runs + [TextRun(text, style)])

    def insert(
        self, location: int, text: str, style: TextStyle = TextStyle.NONE
    ) -> None:
        """Insert text carrying style at a UTF-16 location.

        Raises:
            IndexError: If location is outside [0, length]
        """
        if location < 0 or location > self.length:
            raise IndexError(f"Location {location} out of bounds")

        new_run = TextRun(text, style)
        result: list[TextRun] = []
        offset = 0
        inserted = False

        for run in self._runs:
            end = offset + run.length
            if not inserted and offset <= location < end:
                head, tail = _split_at(run.text, location - offset)
                result.extend([
                    TextRun(head, run.style),
                    new_run,
                    TextRun(tail, run.style),
                ])
                inserted = True
            else:
                result.append(run)
            offset = end

        if not inserted:
            result.append(new_run)

        self._runs = coalesce_runs(result)

    def clear(self) -> None:
        """Remove all text."""
        self._runs = []

    def style_at(self, location: int) -> TextStyle:
        """Return the style at a UTF-16 location.

        Locations outside the text, including the end of the text,
        have no style.
        """
        if location < 0:
            return TextStyle.NONE
        for r in self.ranges():
            if r.start <= location < r.end:
                return r.style
        return TextStyle.NONE

    def styles_in(
        self, start: int, length: int
    ) -> dict[TextStyle, list[tuple[int, int]]]:
        """Return the subranges of a range grouped by style.

        Adjacent subranges of the same style are unified. An empty dict is
        returned when the range is not contained in the text.

        Args:
            start: UTF-16 offset of the range
            length: UTF-16 length of the range

        Returns:
            Mapping of style to sorted (start, length) pairs
        """
        end = start + length
        if start < 0 or length < 0 or end > self.length:
            return {}

        result: dict[TextStyle, list[tuple[int, int]]] = {}
        for r in self.ranges():
            lo = max(r.start, start)
            hi = min(r.end, end)
            if lo >= hi:
                continue
            spans = result.setdefault(r.style, [])
            if spans and spans[-1][0] + spans[-1][1] >= lo:
                first = spans[-1][0]
                spans[-1] = (first, hi - first)
            else:
                spans.append((lo, hi - lo))
        return result

    def to_markdown(self, serializer: Optional[MarkdownSerializer] = None) -> str:
        """Serialize the buffer to markdown syntax."""
        serializer = serializer or MarkdownSerializer()
        return serializer.serialize(self._runs)

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return self.text
