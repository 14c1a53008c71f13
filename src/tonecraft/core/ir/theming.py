"""
Closed key sets for the theme cascade tree.

Four levels: ComponentType → ThemeVariant → ComponentState → StyleProperty.
Enum values are the kebab-case names used in CSS output. ``ordinal`` gives
the declaration index used for list-based node storage.
"""

from __future__ import annotations

from enum import StrEnum
from functools import cached_property


class _OrdinalEnum(StrEnum):
    """StrEnum with a stable declaration index."""

    @cached_property
    def ordinal(self) -> int:
        return type(self)._member_names_.index(self.name)

    @classmethod
    def count(cls) -> int:
        return len(cls._member_names_)

    @classmethod
    def from_key(cls, key: str) -> _OrdinalEnum:
        """
        Look up a member by value or by name, ignoring case and separators.

        Raises:
            ValueError: If no member matches.
        """
        normalized = key.strip().lower().replace("_", "-").replace(" ", "-")
        for member in cls:
            if member.value == normalized or member.name.lower() == key.strip().lower():
                return member
        raise ValueError(f"Unknown {cls.__name__}: {key!r}")


# =============================================================================
# Level 1: Components
# =============================================================================


class ComponentType(_OrdinalEnum):
    """Styled component kinds."""

    GLOBAL_BODY = "global-body"
    GLOBAL_FOCUS = "global-focus"
    GLOBAL_HTML = "global-html"
    BODY = "body"
    BODY_VARIANT = "body-variant"
    HEADING_1 = "heading-1"
    HEADING_2 = "heading-2"
    HEADING_3 = "heading-3"
    HEADING_4 = "heading-4"
    HEADING_5 = "heading-5"
    HEADING_6 = "heading-6"
    LINK = "link"
    LINK_VARIANT = "link-variant"
    SURFACE = "surface"
    SURFACE_VARIANT = "surface-variant"
    TEXT = "text"


# =============================================================================
# Level 2: Variants
# =============================================================================


class ThemeVariant(_OrdinalEnum):
    """Theme variants (color schemes)."""

    LIGHT = "light"
    DARK = "dark"
    HIGH_CONTRAST_LIGHT = "high-contrast-light"
    HIGH_CONTRAST_DARK = "high-contrast-dark"

    @property
    def is_high_contrast(self) -> bool:
        return self in (ThemeVariant.HIGH_CONTRAST_LIGHT, ThemeVariant.HIGH_CONTRAST_DARK)

    @property
    def is_dark(self) -> bool:
        return self in (ThemeVariant.DARK, ThemeVariant.HIGH_CONTRAST_DARK)


# =============================================================================
# Level 3: Interaction states
# =============================================================================


class ComponentState(_OrdinalEnum):
    """Interaction states."""

    DEFAULT = "default"
    HOVERED = "hovered"
    FOCUSED = "focused"
    PRESSED = "pressed"
    DISABLED = "disabled"
    DRAGGED = "dragged"
    VISITED = "visited"


# =============================================================================
# Level 4: Style properties
# =============================================================================


class StyleProperty(_OrdinalEnum):
    """CSS properties a theme leaf can carry. Values are CSS property names."""

    ACCENT_COLOR = "accent-color"
    ALIGN_CONTENT = "align-content"
    ALIGN_ITEMS = "align-items"
    ALIGN_SELF = "align-self"
    BACKGROUND_COLOR = "background-color"
    BORDER_COLOR = "border-color"
    BORDER_RADIUS = "border-radius"
    BORDER_STYLE = "border-style"
    BORDER_WIDTH = "border-width"
    BOX_SIZING = "box-sizing"
    CARET_COLOR = "caret-color"
    COLOR = "color"
    COLOR_SCHEME = "color-scheme"
    DISPLAY = "display"
    FONT_FAMILY = "font-family"
    FONT_SIZE = "font-size"
    FONT_STYLE = "font-style"
    FONT_WEIGHT = "font-weight"
    HEIGHT = "height"
    HYPHENS = "hyphens"
    JUSTIFY_CONTENT = "justify-content"
    JUSTIFY_ITEMS = "justify-items"
    JUSTIFY_SELF = "justify-self"
    LETTER_SPACING = "letter-spacing"
    LINE_BREAK = "line-break"
    LINE_HEIGHT = "line-height"
    MARGIN = "margin"
    MAX_HEIGHT = "max-height"
    MAX_WIDTH = "max-width"
    MIN_HEIGHT = "min-height"
    MIN_WIDTH = "min-width"
    OUTLINE_COLOR = "outline-color"
    OUTLINE_OFFSET = "outline-offset"
    OUTLINE_STYLE = "outline-style"
    OUTLINE_WIDTH = "outline-width"
    OVERFLOW_WRAP = "overflow-wrap"
    OVERFLOW_X = "overflow-x"
    OVERFLOW_Y = "overflow-y"
    OVERSCROLL_BEHAVIOR_X = "overscroll-behavior-x"
    OVERSCROLL_BEHAVIOR_Y = "overscroll-behavior-y"
    PADDING = "padding"
    POSITION = "position"
    SCROLL_BEHAVIOR = "scroll-behavior"
    TEXT_ALIGN = "text-align"
    TEXT_DECORATION_COLOR = "text-decoration-color"
    TEXT_DECORATION_LINE = "text-decoration-line"
    TEXT_DECORATION_STYLE = "text-decoration-style"
    TEXT_DECORATION_THICKNESS = "text-decoration-thickness"
    TEXT_ORIENTATION = "text-orientation"
    TEXT_OVERFLOW = "text-overflow"
    TEXT_SIZE_ADJUST = "text-size-adjust"
    TEXT_TRANSFORM = "text-transform"
    UNICODE_BIDI = "unicode-bidi"
    VERTICAL_ALIGN = "vertical-align"
    WEBKIT_TAP_HIGHLIGHT_COLOR = "-webkit-tap-highlight-color"
    WEBKIT_TEXT_SIZE_ADJUST = "-webkit-text-size-adjust"
    WHITE_SPACE = "white-space"
    WIDTH = "width"
    WORD_BREAK = "word-break"
    WORD_SPACING = "word-spacing"
    WRITING_MODE = "writing-mode"
    Z_INDEX = "z-index"

    @property
    def is_color(self) -> bool:
        return self in COLOR_PROPERTIES


# Properties whose values are colors
COLOR_PROPERTIES: frozenset[StyleProperty] = frozenset(
    {
        StyleProperty.ACCENT_COLOR,
        StyleProperty.BACKGROUND_COLOR,
        StyleProperty.BORDER_COLOR,
        StyleProperty.CARET_COLOR,
        StyleProperty.COLOR,
        StyleProperty.OUTLINE_COLOR,
        StyleProperty.TEXT_DECORATION_COLOR,
        StyleProperty.WEBKIT_TAP_HIGHLIGHT_COLOR,
    }
)

# Colors re-contrasted against the background whenever a color is set
CONTRAST_TRACKED_PROPERTIES: tuple[StyleProperty, ...] = (
    StyleProperty.ACCENT_COLOR,
    StyleProperty.BORDER_COLOR,
    StyleProperty.CARET_COLOR,
    StyleProperty.COLOR,
    StyleProperty.OUTLINE_COLOR,
    StyleProperty.TEXT_DECORATION_COLOR,
)
