"""
Error types for tonecraft color parsing, contrast math, and theme configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


class TonecraftError(Exception):
    """Base exception for all tonecraft errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class InvalidColorFormat(TonecraftError, ValueError):
    """
    Raised when color text cannot be parsed.

    Examples:
    - Unknown color name
    - Malformed hex / rgb() / hsv() syntax
    - Channel, percentage or alpha outside its range

    The offending text is kept on ``value``.
    """

    def __init__(self, value: Any, reason: str | None = None):
        self.value = value
        message = f"Invalid color string: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidArgumentRange(TonecraftError, ValueError):
    """
    Raised when a numeric argument falls outside its documented bounds.

    Examples:
    - Minimum contrast ratio outside [1, 21]
    - Normalized channel outside [0, 1]
    - Byte channel outside [0, 255]
    """

    def __init__(
        self,
        name: str,
        value: Any,
        minimum: float | None = None,
        maximum: float | None = None,
    ):
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        if minimum is not None and maximum is not None:
            message = f"{name} must be between {minimum} and {maximum}, got {value!r}"
        else:
            message = f"{name} is out of range: {value!r}"
        super().__init__(message)


class InvalidOperation(TonecraftError):
    """
    Raised when a computation produces a non-finite result.

    Only reachable through values that bypassed validation, e.g. a
    luminance or contrast ratio evaluating to NaN or infinity.
    """

    pass


class ThemeConfigError(TonecraftError):
    """
    Raised when a theme configuration cannot be loaded or validated.

    Examples:
    - YAML syntax errors
    - Unknown component, variant, state or property names
    - Color values that fail to parse
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside a theme configuration file.

    Attributes:
        file: Path to the configuration file
        key_path: Dotted path to the offending entry (e.g. "overrides.2.value")
    """

    file: Path
    key_path: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "tonecraft.yaml at overrides.2.value"
        """
        if self.key_path:
            return f"{self.file} at {self.key_path}"
        return str(self.file)


def make_config_error(
    message: str,
    file: Path | None = None,
    key_path: str | None = None,
) -> ThemeConfigError:
    """
    Helper to create a ThemeConfigError with optional context.

    Args:
        message: Error description
        file: Optional configuration file path
        key_path: Optional dotted key path inside the file

    Returns:
        ThemeConfigError with context if a file was provided
    """
    if file is not None:
        return ThemeConfigError(message, ErrorContext(file=file, key_path=key_path))
    return ThemeConfigError(message)
