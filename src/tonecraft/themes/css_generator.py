"""
CSS generator for tonecraft themes.

CssBuilder collects declarations (first write wins) and renders them as
``name:value;`` with no inserted whitespace, or as ``--prefix-name:value;``
custom properties when a prefix is given.

generate_theme_css renders a whole stylesheet from a ThemeTree: ``:root``
for the light variant plus ``[data-theme="..."]`` blocks for the others.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tonecraft.core.ir.theming import ThemeVariant
from tonecraft.core.strings import join_css_name, to_css_name

if TYPE_CHECKING:
    from .cascade import ThemeTree


class CssBuilder:
    """Ordered, de-duplicating CSS declaration collector."""

    def __init__(self) -> None:
        self._declarations: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._declarations)

    def __str__(self) -> str:
        return self.to_string()

    def add(self, name: str | None, value: str | None, var_prefix: str | None = None) -> CssBuilder:
        """
        Add one declaration; blank names or values are ignored.

        Args:
            name: CSS property name
            value: CSS value
            var_prefix: If set, emit ``--{prefix}-{name}`` instead of ``name``
        """
        if not name or not name.strip() or value is None or not value.strip():
            return self

        prefix = to_css_name(var_prefix) if var_prefix else ""
        if prefix:
            prop = f"--{join_css_name(prefix, name)}"
        else:
            prop = name.strip().lower()

        self._declarations.setdefault(prop, value.strip())
        return self

    def add_declarations(self, css: str | None) -> CssBuilder:
        """Add ``a:b;c:d`` text; malformed items are skipped."""
        if not css:
            return self
        for item in css.split(";"):
            name, sep, value = item.partition(":")
            if sep:
                self.add(name, value)
        return self

    def items(self) -> list[tuple[str, str]]:
        return list(self._declarations.items())

    def to_string(self) -> str:
        return "".join(f"{name}:{value};" for name, value in self._declarations.items())


def generate_theme_css(
    tree: ThemeTree, var_prefix: str | None = None, name: str | None = None
) -> str:
    """
    Generate a stylesheet of custom properties from a ThemeTree.

    Variable names carry component and state but not the variant, so a
    ``[data-theme="dark"]`` block overrides the ``:root`` values in place.

    Args:
        tree: Populated theme tree
        var_prefix: Custom-property prefix (defaults to the tree's)
        name: Optional theme name for the header comment

    Returns:
        CSS string with :root and variant selectors
    """
    lines: list[str] = []

    lines.append(f"/* tonecraft theme: {name or 'default'} */")
    lines.append("/* Auto-generated - do not edit */")
    lines.append("")

    for variant in ThemeVariant:
        declarations = tree.variant_declarations(variant, var_prefix)
        if not declarations:
            continue
        lines.append(f"{_variant_selector(variant)} {{")
        lines.extend(f"  {prop}: {value};" for prop, value in declarations)
        lines.append("}")
        lines.append("")

    return "\n".join(lines)


def _variant_selector(variant: ThemeVariant) -> str:
    """
    Get CSS selector for a variant.

    Args:
        variant: Theme variant

    Returns:
        CSS selector string
    """
    if variant is ThemeVariant.LIGHT:
        return ":root"
    return f'[data-theme="{variant.value}"]'
