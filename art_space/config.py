"""Configuration and settings management."""
import json
import logging
from pathlib import Path
from dataclasses import dataclass, asdict
from typing import Optional

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""
    pass


@dataclass
class AppSettings:
    """Application settings."""
    window_width: int = 480
    window_height: int = 800
    outer_padding: int = 24
    image_padding: int = 32
    descriptor_background: str = "#ECEBF4"
    border_color: str = "lightgray"
    title_font_size: int = 24
    caption_font_size: int = 16
    artwork_dir: Optional[str] = None
    keyboard_navigation: bool = True

    def to_dict(self) -> dict:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'AppSettings':
        """Create settings from dictionary."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


def get_config_path() -> Path:
    """
    Get the path to the configuration file.

    Returns:
        Path to settings.json
    """
    config_dir = Path(user_config_dir("ArtSpace"))
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / "settings.json"


def load_settings() -> AppSettings:
    """
    Load settings from disk.

    Returns:
        AppSettings object with loaded settings
    """
    config_path = get_config_path()

    if not config_path.exists():
        logger.info("No settings file found, using defaults")
        return AppSettings()

    try:
        with open(config_path, 'r') as f:
            data = json.load(f)
        settings = AppSettings.from_dict(data)
        logger.info(f"Loaded settings from {config_path}")
        return settings
    except Exception as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return AppSettings()


def save_settings(settings: AppSettings) -> None:
    """
    Save settings to disk.

    Args:
        settings: AppSettings object to save

    Raises:
        ConfigError: If save fails
    """
    config_path = get_config_path()

    try:
        with open(config_path, 'w') as f:
            json.dump(settings.to_dict(), f, indent=2)
        logger.info(f"Saved settings to {config_path}")
    except Exception as e:
        logger.error(f"Failed to save settings: {e}")
        raise ConfigError(f"Failed to save settings: {str(e)}") from e


def remember_window_size(settings: AppSettings, width: int, height: int) -> bool:
    """
    Store a new window size so the next launch opens at the same size.

    Args:
        settings: Settings to update in place
        width: Window width in pixels
        height: Window height in pixels

    Returns:
        True if the size changed and was saved

    Raises:
        ConfigError: If save fails
    """
    # Unmapped windows report 1x1
    if width <= 1 or height <= 1:
        return False
    if (width, height) == (settings.window_width, settings.window_height):
        return False

    settings.window_width = width
    settings.window_height = height
    save_settings(settings)
    return True
