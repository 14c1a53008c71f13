"""
Leaf values stored in the theme cascade tree.
"""

from __future__ import annotations

from dataclasses import dataclass

from tonecraft.core.color import Color, try_parse_color
from tonecraft.core.ir.theming import StyleProperty


@dataclass(frozen=True)
class StyleValue:
    """
    A CSS value. Color values keep the parsed Color alongside their
    canonical ``#RRGGBBAA`` text.
    """

    value: str
    color: Color | None = None

    def __str__(self) -> str:
        return self.value

    @property
    def is_color(self) -> bool:
        return self.color is not None

    @property
    def is_blank(self) -> bool:
        return not self.value.strip()

    @classmethod
    def of(cls, value: str) -> StyleValue:
        """Plain (non-color) CSS text."""
        return cls(value.strip())

    @classmethod
    def from_color(cls, color: Color) -> StyleValue:
        return cls(color.to_string(), color)

    @classmethod
    def parse_color(cls, text: str) -> StyleValue:
        """
        Raises:
            InvalidColorFormat: If ``text`` is not a color.
        """
        return cls.from_color(Color.parse(text))

    @classmethod
    def try_parse_color(cls, text: str | None) -> tuple[bool, StyleValue | None]:
        ok, color = try_parse_color(text)
        if not ok:
            return False, None
        return True, cls.from_color(color)

    @classmethod
    def for_property(
        cls, prop: StyleProperty, value: StyleValue | Color | str | None
    ) -> StyleValue:
        """
        Coerce raw input for ``prop``.

        Color properties store parsed colors when the text is a color;
        keywords such as ``currentColor`` stay plain text.
        """
        if value is None:
            return cls("")
        if isinstance(value, StyleValue):
            return value
        if isinstance(value, Color):
            return cls.from_color(value)
        if prop.is_color:
            ok, parsed = cls.try_parse_color(value)
            if ok and parsed is not None:
                return parsed
        return cls.of(value)
