"""
Theme configuration persistence layer.

Handles reading and writing ThemeConfig to tonecraft.yaml in a project
directory. Unknown top-level keys are logged and ignored; invalid YAML or
schema violations raise ThemeConfigError with the file as context.

Default location: {project_root}/tonecraft.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import make_config_error
from .ir.themeconfig import OverrideRule, PaletteConfig, ThemeConfig
from .ir.theming import ComponentState, ComponentType, StyleProperty, ThemeVariant

logger = logging.getLogger(__name__)

THEMECONFIG_FILE = "tonecraft.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_theme_config_path(project_root: Path) -> Path:
    """Get the tonecraft.yaml file path."""
    return project_root / THEMECONFIG_FILE


def theme_config_exists(project_root: Path) -> bool:
    """Check if a tonecraft.yaml exists in the project."""
    return get_theme_config_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def _key_path(error: dict[str, Any]) -> str:
    return ".".join(str(part) for part in error.get("loc", ()))


def _parse_theme_config_data(data: dict[str, Any], source: Path | None = None) -> ThemeConfig:
    """Validate raw YAML data into a ThemeConfig.

    Unknown top-level keys are reported with a warning and dropped.
    """
    known = set(ThemeConfig.model_fields)
    for key in data:
        if key not in known:
            logger.warning(f"Ignoring unknown key {key!r} in {source or THEMECONFIG_FILE}")

    cleaned = {key: value for key, value in data.items() if key in known}

    try:
        return ThemeConfig.model_validate(cleaned)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        raise make_config_error(
            f"Invalid theme configuration: {e}",
            file=source,
            key_path=_key_path(first) or None,
        ) from e


def load_theme_config(project_root: Path, *, use_defaults: bool = True) -> ThemeConfig:
    """Load ThemeConfig from tonecraft.yaml.

    Args:
        project_root: Directory containing tonecraft.yaml.
        use_defaults: If True, return a default ThemeConfig when the file
            doesn't exist or is empty.

    Returns:
        ThemeConfig instance.

    Raises:
        ThemeConfigError: If the file is missing (when use_defaults=False),
            is not valid YAML, or fails validation.
    """
    config_path = get_theme_config_path(project_root)
    return load_theme_config_file(config_path, use_defaults=use_defaults)


def load_theme_config_file(config_path: Path, *, use_defaults: bool = True) -> ThemeConfig:
    """Load a ThemeConfig from an explicit file path."""
    if not config_path.exists():
        if use_defaults:
            logger.debug("No tonecraft.yaml found, using defaults")
            return ThemeConfig()
        raise make_config_error(f"Theme configuration not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise make_config_error(f"Invalid YAML: {e}", file=config_path) from e

    if not data:
        if use_defaults:
            logger.warning(f"Empty {config_path.name} at {config_path}, using defaults")
            return ThemeConfig()
        raise make_config_error("Empty or invalid YAML", file=config_path)

    if not isinstance(data, dict):
        raise make_config_error("Top level must be a mapping", file=config_path)

    return _parse_theme_config_data(data, source=config_path)


# =============================================================================
# Saving
# =============================================================================


def save_theme_config(project_root: Path, config: ThemeConfig) -> Path:
    """Save ThemeConfig to tonecraft.yaml.

    Args:
        project_root: Directory to write into.
        config: ThemeConfig to save.

    Returns:
        Path to the saved tonecraft.yaml file.
    """
    config_path = get_theme_config_path(project_root)
    data = config.model_dump(mode="json", exclude_none=True)

    config_path.write_text(
        yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True),
        encoding="utf-8",
    )

    logger.info(f"Saved theme configuration to {config_path}")
    return config_path


# =============================================================================
# Defaults
# =============================================================================


def create_example_theme_config(name: str = "my-theme") -> ThemeConfig:
    """Example configuration written by ``tonecraft init``."""
    return ThemeConfig(
        name=name,
        description="Generated by tonecraft init",
        palettes={
            ThemeVariant.LIGHT: PaletteConfig(background="#FFFFFF", accent="#3A6FD8"),
            ThemeVariant.DARK: PaletteConfig(background="#121212", accent="#82AAFF"),
        },
        components=[
            ComponentType.GLOBAL_BODY,
            ComponentType.SURFACE,
            ComponentType.TEXT,
            ComponentType.LINK,
        ],
        overrides=[
            OverrideRule(
                components=[ComponentType.LINK],
                states=[ComponentState.HOVERED],
                properties=[StyleProperty.TEXT_DECORATION_LINE],
                value="underline",
            ),
            OverrideRule(
                properties=[StyleProperty.BORDER_RADIUS],
                components=[ComponentType.SURFACE],
                value="0.5rem",
            ),
        ],
    )
