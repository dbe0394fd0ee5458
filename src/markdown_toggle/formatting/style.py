"""Mapping between markdown styles and presentation attributes."""

from dataclasses import dataclass
from typing import Optional

from markdown_toggle.config import Settings
from markdown_toggle.formatting.ir import (
    BOLD_ITALIC,
    VALID_STYLES,
    TextStyle,
)


@dataclass(frozen=True)
class AttributeBundle:
    """Presentation attributes applied to a run of text.

    Attributes:
        markdown: Style this bundle was registered for (the discriminator)
        font_family: Font family name
        font_size: Point size
        bold: Whether the font is bold
        italic: Whether the font is italic/oblique
        monospace: Whether the font is fixed width
        color: Foreground color as a #RRGGBB string
    """

    markdown: Optional[TextStyle]
    font_family: str
    font_size: float
    bold: bool = False
    italic: bool = False
    monospace: bool = False
    color: str = "#000000"


class StyleRegistry:
    """Maps each valid style combination to its attribute bundle.

    A registry is built once per editing session and handed to the
    components that need it. By reading the `markdown` field of a bundle
    one can recover which style a set of attributes corresponds to.
    """

    def __init__(self, bundles: dict[TextStyle, AttributeBundle]) -> None:
        missing = VALID_STYLES - set(bundles)
        if missing:
            names = ", ".join(sorted(str(s) for s in missing))
            raise ValueError(f"No attributes registered for: {names}")
        self._bundles = dict(bundles)

    @classmethod
    def from_settings(cls, settings: Settings) -> "StyleRegistry":
        """Build the registry from configured fonts, sizes and colors."""
        family = settings.font_family
        size = settings.font_size
        color = settings.text_color

        return cls({
            TextStyle.NONE: AttributeBundle(
                TextStyle.NONE, family, size, color=color
            ),
            TextStyle.HEADER1: AttributeBundle(
                TextStyle.HEADER1, family, settings.header1_size,
                bold=True, color=color,
            ),
            TextStyle.HEADER2: AttributeBundle(
                TextStyle.HEADER2, family, settings.header2_size,
                bold=True, color=color,
            ),
            TextStyle.HEADER3: AttributeBundle(
                TextStyle.HEADER3, family, settings.header3_size,
                bold=True, color=color,
            ),
            TextStyle.BOLD: AttributeBundle(
                TextStyle.BOLD, family, size, bold=True, color=color
            ),
            TextStyle.ITALIC: AttributeBundle(
                TextStyle.ITALIC, family, size, italic=True, color=color
            ),
            BOLD_ITALIC: AttributeBundle(
                BOLD_ITALIC, family, size, bold=True, italic=True, color=color
            ),
            TextStyle.CODE: AttributeBundle(
                TextStyle.CODE, settings.code_font_family, size,
                monospace=True, color=color,
            ),
        })

    @property
    def default_attributes(self) -> AttributeBundle:
        """Attributes of unstyled text."""
        return self._bundles[TextStyle.NONE]

    def attributes_for(self, style: TextStyle) -> AttributeBundle:
        """Return the attributes for style.

        Anything that is not exactly a valid combination gets the
        default (unstyled) attributes.
        """
        return self._bundles.get(style, self.default_attributes)

    def style_for(self, attributes: Optional[AttributeBundle]) -> TextStyle:
        """Return the style a bundle of attributes was registered for."""
        if attributes is None or attributes.markdown is None:
            return TextStyle.NONE
        if attributes.markdown not in self._bundles:
            return TextStyle.NONE
        return attributes.markdown
