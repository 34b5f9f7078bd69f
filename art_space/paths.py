"""Paths to resources bundled with the package."""
from pathlib import Path

PACKAGE_ROOT = Path(__file__).parent


def get_resource_path(relative_path: str) -> Path:
    """
    Get absolute path to a bundled resource.

    Args:
        relative_path: Path relative to the assets directory (e.g. "strings.json")

    Returns:
        Absolute Path to the resource
    """
    return PACKAGE_ROOT / "assets" / relative_path


def default_artwork_dir() -> Path:
    """Get the bundled artwork image directory."""
    return get_resource_path("images")
