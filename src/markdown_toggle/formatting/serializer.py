"""Serializer converting styled runs into markdown syntax."""

import logging
from typing import Iterable, Mapping, Optional

from markdown_toggle.formatting.ir import (
    StyledRange,
    TextRun,
    TextStyle,
    combine,
    is_disjoint,
    ranges_to_runs,
    subtract,
)
from markdown_toggle.formatting.syntax import SYNTAX_MAP, SyntaxSpec

logger = logging.getLogger(__name__)


class MarkdownSerializer:
    """Convert a sequence of styled runs into a markdown syntax string.

    Open styles are kept on a stack (innermost last). For each run:

    1. If the stack is empty, open the run's style and append the text.
    2. If the run's style equals the combined stack, append the text.
    3. If the run's style is disjoint from the combined stack, close the
       innermost style and repeat.
    4. Otherwise open only the flags the stack is missing; if nothing is
       missing the run is a strict subset of the stack, so close the
       innermost style and repeat.

    Whatever is still open at the end is closed innermost first.
    """

    def __init__(
        self, syntax_map: Optional[Mapping[TextStyle, SyntaxSpec]] = None
    ) -> None:
        self.syntax_map = dict(syntax_map or SYNTAX_MAP)

    def serialize(self, runs: Iterable[TextRun]) -> str:
        """Convert runs to markdown.

        Args:
            runs: Ordered, gap-free runs covering the source text

        Returns:
            The text with markdown delimiters inserted
        """
        stack: list[TextStyle] = []
        parts: list[str] = []

        for run in runs:
            self._place(run, stack, parts)

        while stack:
            parts.append(self._suffix(stack.pop()))

        return "".join(parts)

    def serialize_ranges(
        self, text: str, ranges: Iterable[StyledRange]
    ) -> str:
        """Convert a text buffer and its UTF-16 style ranges to markdown."""
        return self.serialize(ranges_to_runs(text, ranges))

    def _place(
        self, run: TextRun, stack: list[TextStyle], parts: list[str]
    ) -> None:
        """Emit one run, closing open styles until it fits."""
        while True:
            if not stack:
                self._push(run.style, run.text, stack, parts)
                return

            combined = combine(stack)

            if run.style == combined:
                parts.append(run.text)
                return

            if is_disjoint(combined, run.style):
                self._pop(stack, parts)
                continue

            unique = subtract(run.style, combined)
            if unique == TextStyle.NONE:
                self._pop(stack, parts)
                continue

            self._push(unique, run.text, stack, parts)
            return

    def _push(
        self,
        style: TextStyle,
        text: str,
        stack: list[TextStyle],
        parts: list[str],
    ) -> None:
        logger.debug("open %s", style)
        stack.append(style)
        parts.append(self._prefix(style))
        parts.append(text)

    def _pop(self, stack: list[TextStyle], parts: list[str]) -> None:
        style = stack.pop()
        logger.debug("close %s", style)
        parts.append(self._suffix(style))

    def _prefix(self, style: TextStyle) -> str:
        spec = self.syntax_map.get(style)
        return spec.prefix if spec else ""

    def _suffix(self, style: TextStyle) -> str:
        spec = self.syntax_map.get(style)
        return spec.suffix if spec else ""
