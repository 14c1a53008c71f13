"""Single source of truth for the tonecraft version."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

PACKAGE_NAME = "tonecraft"


def get_version() -> str:
    """Installed distribution version, or ``0.0.0`` when running from a bare checkout."""
    try:
        return _metadata_version(PACKAGE_NAME)
    except PackageNotFoundError:
        return "0.0.0"
