"""Markdown parser for converting syntax strings to styled runs."""

import logging
import re
from typing import Mapping, Optional

from markdown_toggle.formatting.ir import (
    StyledRange,
    TextRun,
    TextStyle,
    coalesce_runs,
    is_valid,
    runs_to_ranges,
)
from markdown_toggle.formatting.syntax import (
    MATCH_ORDER,
    SYNTAX_MAP,
    SyntaxSpec,
)

logger = logging.getLogger(__name__)

# Stands in for shielded characters; never part of a delimiter
_BLANK = "\x00"

# Delimiters of these styles are literal inside code spans
CODE_SHIELDED: tuple[TextStyle, ...] = (TextStyle.BOLD, TextStyle.ITALIC)


class Matcher:
    """Strips one style's delimiters from a text and tags its content."""

    def __init__(
        self,
        style: TextStyle,
        spec: SyntaxSpec,
        shield: Optional[re.Pattern] = None,
    ) -> None:
        """Compile the matcher.

        Args:
            style: Style given to matched content
            spec: Syntax definition holding the pattern
            shield: Pattern whose matches are hidden from this matcher
                (used to keep delimiters inside code spans literal)
        """
        self.style = style
        self.regex = spec.compile()
        self.shield = shield

    def _search_text(self, text: str) -> str:
        """Text to search, with shielded spans blanked out."""
        if self.shield is None:
            return text
        return self.shield.sub(lambda m: _BLANK * len(m.group(0)), text)

    def apply(
        self, text: str, styles: list[TextStyle]
    ) -> tuple[str, list[TextStyle]]:
        """Apply the matcher to text with one style per character.

        Returns the text with matched delimiters removed and the
        updated per-character styles.
        """
        out_text: list[str] = []
        out_styles: list[TextStyle] = []
        pos = 0

        for match in self.regex.finditer(self._search_text(text)):
            start, end = match.span()
            content_start, content_end = match.span("content")

            # Skip spans whose characters cannot also take this style
            if not all(is_valid(s | self.style) for s in styles[start:end]):
                logger.debug(
                    "skip %s match at %d: conflicts with existing style",
                    self.style, start,
                )
                continue

            out_text.append(text[pos:start])
            out_styles.extend(styles[pos:start])
            out_text.append(text[content_start:content_end])
            out_styles.extend(
                s | self.style for s in styles[content_start:content_end]
            )
            pos = end

        out_text.append(text[pos:])
        out_styles.extend(styles[pos:])
        return "".join(out_text), out_styles


class MarkdownParser:
    """Parse markdown syntax into styled runs.

    Matchers run in a fixed order (headers, bold, italic, code). Each one
    works on the output of the previous, so nested markers such as
    `**_text_**` accumulate into a combined style. Unterminated markers
    do not match and stay in the text as plain characters. Bold and
    italic delimiters inside a code span are left as literal code text.
    """

    def __init__(
        self,
        syntax_map: Optional[Mapping[TextStyle, SyntaxSpec]] = None,
        order: tuple[TextStyle, ...] = MATCH_ORDER,
    ) -> None:
        """Compile one matcher per style.

        Args:
            syntax_map: Syntax definitions to use (defaults to SYNTAX_MAP)
            order: Styles to match, in priority order

        Raises:
            SyntaxPatternError: If a pattern definition is malformed
        """
        syntax_map = syntax_map or SYNTAX_MAP
        code = (
            syntax_map[TextStyle.CODE].compile()
            if TextStyle.CODE in order
            else None
        )
        self.matchers = [
            Matcher(
                style,
                syntax_map[style],
                shield=code if style in CODE_SHIELDED else None,
            )
            for style in order
        ]

    def parse(self, syntax: str) -> list[TextRun]:
        """Convert a markdown syntax string to coalesced styled runs.

        Args:
            syntax: Text containing markdown delimiters

        Returns:
            Runs covering the text with the delimiters removed
        """
        text = syntax
        styles = [TextStyle.NONE] * len(text)

        for matcher in self.matchers:
            text, styles = matcher.apply(text, styles)

        return self._to_runs(text, styles)

    def parse_ranges(self, syntax: str) -> tuple[str, list[StyledRange]]:
        """Convert a syntax string to plain text and its UTF-16 ranges."""
        runs = self.parse(syntax)
        return "".join(run.text for run in runs), runs_to_ranges(runs)

    def _to_runs(self, text: str, styles: list[TextStyle]) -> list[TextRun]:
        runs: list[TextRun] = []
        start = 0
        for i in range(1, len(text) + 1):
            if i == len(text) or styles[i] != styles[start]:
                runs.append(TextRun(text[start:i], styles[start]))
                start = i
        return coalesce_runs(runs)

    def to_plain_text(self, syntax: str) -> str:
        """Strip recognised markdown delimiters from a syntax string."""
        return "".join(run.text for run in self.parse(syntax))
