"""Editing-session state and file conversion."""

from markdown_toggle.core.models import StyledText
from markdown_toggle.core.tracker import (
    ActiveStyleTracker,
    ButtonState,
    button_states,
    header_level,
)
from markdown_toggle.core.converter import ConversionError, DocumentConverter

__all__ = [
    "StyledText",
    "ActiveStyleTracker",
    "ButtonState",
    "button_states",
    "header_level",
    "ConversionError",
    "DocumentConverter",
]
