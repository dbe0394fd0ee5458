"""Tracking of the active markdown style while the user edits."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from markdown_toggle.core.models import StyledText
from markdown_toggle.formatting.ir import (
    ATOMIC_STYLES,
    HEADER_STYLES,
    TextStyle,
    is_disjoint,
    is_valid,
    subtract,
    union,
)
from markdown_toggle.formatting.style import AttributeBundle, StyleRegistry

logger = logging.getLogger(__name__)

Observer = Callable[["ActiveStyleTracker", TextStyle, TextStyle], None]


@dataclass(frozen=True)
class ButtonState:
    """Toolbar state of one style button.

    Attributes:
        selected: Whether the button's style is part of the active style
        enabled: Whether pressing the button would produce a valid style
    """

    selected: bool
    enabled: bool


def button_states(active: TextStyle) -> dict[TextStyle, ButtonState]:
    """Compute the toolbar state of each atomic style for an active style."""
    states: dict[TextStyle, ButtonState] = {}
    for style in ATOMIC_STYLES:
        if is_disjoint(active, style):
            states[style] = ButtonState(
                selected=False, enabled=is_valid(union(active, style))
            )
        else:
            states[style] = ButtonState(selected=True, enabled=True)
    return states


def header_level(active: TextStyle) -> Optional[TextStyle]:
    """Return the header style contained in active, if any."""
    for style in HEADER_STYLES:
        if style in active:
            return style
    return None


class ActiveStyleTracker:
    """State machine for the style applied to newly typed text.

    Toggle events merge styles where the result is valid and replace the
    active style otherwise. Caret moves resynchronise with the style of
    the text under the caret. Observers are called synchronously whenever
    the active style changes.
    """

    def __init__(
        self,
        registry: StyleRegistry,
        text: Optional[StyledText] = None,
    ) -> None:
        """Initialize the tracker.

        Args:
            registry: Attributes used to derive typing attributes
            text: Styled text the caret moves over (a new empty buffer
                if not given)
        """
        self.registry = registry
        self.text = text if text is not None else StyledText()
        self._observers: list[Observer] = []
        self._active = TextStyle.NONE
        self._typing_attributes = registry.attributes_for(TextStyle.NONE)

    @property
    def active(self) -> TextStyle:
        """The style applied to the next typed character."""
        return self._active

    @active.setter
    def active(self, value: TextStyle) -> None:
        old = self._active
        self._active = value
        self._typing_attributes = self.registry.attributes_for(value)
        if old != value:
            logger.debug("active style %s -> %s", old, value)
            for observer in list(self._observers):
                observer(self, old, value)

    @property
    def typing_attributes(self) -> AttributeBundle:
        """Attributes the host should apply to newly typed text."""
        return self._typing_attributes

    def add_observer(self, observer: Observer) -> None:
        """Register a callback invoked as observer(tracker, old, new)."""
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Unregister a callback; unknown callbacks are ignored."""
        if observer in self._observers:
            self._observers.remove(observer)

    def toggle_on(self, candidate: TextStyle) -> TextStyle:
        """Select a style, replacing the active one if they can't combine."""
        combined = union(self._active, candidate)
        if is_valid(combined):
            self.active = combined
        elif is_valid(candidate):
            self.active = candidate
        else:
            logger.debug("ignoring invalid style %s", candidate)
        return self._active

    def toggle_off(self, candidate: TextStyle) -> TextStyle:
        """Deselect a style."""
        self.active = subtract(self._active, candidate)
        return self._active

    def caret_moved(self, location: int) -> TextStyle:
        """Resynchronise with the style of the text at location."""
        self.active = self.text.style_at(location)
        return self._active

    def reset(self) -> None:
        """Clear the text and the active style."""
        self.text.clear()
        self.active = TextStyle.NONE

    def type_text(self, text: str, location: Optional[int] = None) -> None:
        """Insert text carrying the active style.

        Args:
            text: Typed characters
            location: UTF-16 insertion point (end of text if not given)
        """
        style = self.registry.style_for(self._typing_attributes)
        if location is None:
            self.text.append(text, style)
        else:
            self.text.insert(location, text, style)

    def button_states(self) -> dict[TextStyle, ButtonState]:
        """Toolbar state for the current active style."""
        return button_states(self._active)
