"""Markdown syntax definitions for each style."""

import re
from dataclasses import dataclass
from typing import Optional

from markdown_toggle.formatting.ir import BOLD_ITALIC, TextStyle


class SyntaxPatternError(Exception):
    """A syntax pattern definition is malformed."""

    pass


@dataclass(frozen=True)
class SyntaxSpec:
    """Delimiters and matching pattern for one style.

    Attributes:
        prefix: Marker inserted before styled text
        suffix: Marker inserted after styled text
        pattern: Regex locating the style in a syntax string; the styled
            text must be captured in a group named `content`
        flags: Regex flags used to compile the pattern
    """

    prefix: str
    suffix: str
    pattern: Optional[str] = None
    flags: int = 0

    def compile(self) -> re.Pattern:
        """Compile the pattern.

        Raises:
            SyntaxPatternError: If the pattern is missing, does not compile
                or has no `content` group
        """
        if self.pattern is None:
            raise SyntaxPatternError(f"No pattern defined for {self.prefix!r}")
        try:
            regex = re.compile(self.pattern, self.flags)
        except re.error as e:
            raise SyntaxPatternError(
                f"Could not compile pattern {self.pattern!r}: {e}"
            ) from e
        if "content" not in regex.groupindex:
            raise SyntaxPatternError(
                f"Pattern {self.pattern!r} has no 'content' group"
            )
        return regex


HEADER1_PATTERN = r"^#{1}[\t ]+(?P<content>.*)$"
HEADER2_PATTERN = r"^#{2}[\t ]+(?P<content>.*)$"
HEADER3_PATTERN = r"^#{3}[\t ]+(?P<content>.*)$"
BOLD_PATTERN = r"\*{2}(?P<content>.+?)\*{2}"
ITALIC_PATTERN = r"_(?P<content>.+?)_"
CODE_PATTERN = r"`(?P<content>.+?)`"

# TODO: header suffixes should end the line, but only when the text does not
# already break there; until that check exists they stay empty.
SYNTAX_MAP: dict[TextStyle, SyntaxSpec] = {
    TextStyle.NONE: SyntaxSpec("", ""),
    TextStyle.HEADER1: SyntaxSpec("# ", "", HEADER1_PATTERN, re.MULTILINE),
    TextStyle.HEADER2: SyntaxSpec("## ", "", HEADER2_PATTERN, re.MULTILINE),
    TextStyle.HEADER3: SyntaxSpec("### ", "", HEADER3_PATTERN, re.MULTILINE),
    TextStyle.BOLD: SyntaxSpec("**", "**", BOLD_PATTERN, re.DOTALL),
    TextStyle.ITALIC: SyntaxSpec("_", "_", ITALIC_PATTERN, re.DOTALL),
    BOLD_ITALIC: SyntaxSpec("**_", "_**"),
    TextStyle.CODE: SyntaxSpec("`", "`", CODE_PATTERN, re.DOTALL),
}

# Order in which the parser applies matchers
MATCH_ORDER: tuple[TextStyle, ...] = (
    TextStyle.HEADER1,
    TextStyle.HEADER2,
    TextStyle.HEADER3,
    TextStyle.BOLD,
    TextStyle.ITALIC,
    TextStyle.CODE,
)
