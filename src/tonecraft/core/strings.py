"""
String utility functions for tonecraft.

Provides the key normalization used for CSS property and custom-property
names.
"""

from __future__ import annotations

import re

_SEPARATOR_RUN = re.compile(r"[\s_\-]+")


def to_css_name(name: str) -> str:
    """
    Normalize a key into a kebab-case CSS name.

    Runs of whitespace, underscores and hyphens collapse to a single hyphen,
    leading/trailing hyphens are trimmed, and the result is lowercased.

    Args:
        name: Raw key (e.g. an enum value or a user supplied prefix)

    Returns:
        Normalized CSS name

    Examples:
        >>> to_css_name("Background  Color")
        'background-color'
        >>> to_css_name("__tc--Surface_")
        'tc-surface'
    """
    if not name:
        return ""
    return _SEPARATOR_RUN.sub("-", name).strip("-").lower()


def join_css_name(prefix: str | None, key: str) -> str:
    """Append ``key`` to ``prefix`` and normalize; a missing prefix yields ``key``."""
    if not prefix:
        return to_css_name(key)
    return to_css_name(f"{prefix}-{key}")
