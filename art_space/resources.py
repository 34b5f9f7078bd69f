"""Resolution of artwork references to display text and images."""
import json
import logging
from pathlib import Path
from typing import Dict, Optional

from PIL import Image, ImageDraw, ImageFont

from .config import AppSettings
from .paths import get_resource_path, default_artwork_dir

logger = logging.getLogger(__name__)

PLACEHOLDER_SIZE = (600, 800)
PLACEHOLDER_BACKGROUND = (236, 235, 244)
PLACEHOLDER_FOREGROUND = (96, 96, 112)


class ResourceError(Exception):
    """Raised when a display resource cannot be resolved."""
    pass


def load_strings(path: Optional[Path] = None) -> Dict[str, str]:
    """
    Load the string resource table.

    Args:
        path: JSON file to read (defaults to the bundled strings.json)

    Returns:
        Mapping of string keys to display text

    Raises:
        ResourceError: If the file is missing or malformed
    """
    path = path or get_resource_path("strings.json")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except Exception as e:
        logger.error(f"Error loading strings from {path}: {e}")
        raise ResourceError(f"Error loading strings: {str(e)}") from e

    if not isinstance(data, dict):
        raise ResourceError(f"String table in {path} must be a JSON object")

    return {str(k): str(v) for k, v in data.items()}


def make_placeholder(label: str = "", size=PLACEHOLDER_SIZE) -> Image.Image:
    """
    Draw a framed placeholder for an artwork whose image is unavailable.

    Args:
        label: Text drawn in the middle of the placeholder
        size: Placeholder size (width, height) in pixels

    Returns:
        RGB PIL image
    """
    image = Image.new('RGB', size, PLACEHOLDER_BACKGROUND)
    draw = ImageDraw.Draw(image)
    width, height = size
    inset = max(4, min(width, height) // 12)
    draw.rectangle(
        [inset, inset, width - inset - 1, height - inset - 1],
        outline=PLACEHOLDER_FOREGROUND,
        width=3
    )
    if label:
        font = ImageFont.load_default()
        left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
        draw.text(
            ((width - (right - left)) // 2, (height - (bottom - top)) // 2),
            label,
            fill=PLACEHOLDER_FOREGROUND,
            font=font
        )
    return image


class ResourceResolver:
    """Turns the catalog's opaque references into text and images."""

    def __init__(self, settings: AppSettings = None, strings: Dict[str, str] = None):
        """
        Initialize the resolver.

        Args:
            settings: Application settings (artwork_dir is read from here)
            strings: String table (defaults to the bundled one)
        """
        self.settings = settings or AppSettings()
        self.strings = strings if strings is not None else load_strings()
        self._image_cache: Dict[str, Image.Image] = {}

    @property
    def artwork_dir(self) -> Path:
        """Directory artwork images are read from."""
        if self.settings.artwork_dir:
            return Path(self.settings.artwork_dir).expanduser()
        return default_artwork_dir()

    def get_string(self, key: str) -> str:
        """
        Get display text for a string resource key.

        Raises:
            ResourceError: If the key is unknown
        """
        try:
            return self.strings[key]
        except KeyError as e:
            raise ResourceError(f"Unknown string resource: {key}") from e

    def image_path(self, image_ref: str) -> Path:
        """Get the file path for an image reference."""
        return self.artwork_dir / image_ref

    def load_image(self, image_ref: str, label: str = "") -> Image.Image:
        """
        Load the image for an image reference.

        Missing or unreadable files are replaced by a placeholder.

        Args:
            image_ref: Image reference from the catalog
            label: Text for the placeholder, usually the artwork title

        Returns:
            RGB PIL image
        """
        if image_ref in self._image_cache:
            return self._image_cache[image_ref]

        path = self.image_path(image_ref)
        try:
            with Image.open(path) as img:
                image = img.convert('RGB')
            logger.debug(f"Loaded artwork image {path}")
        except FileNotFoundError:
            logger.warning(f"Artwork image not found: {path}, using placeholder")
            image = make_placeholder(label)
        except Exception as e:
            logger.warning(f"Failed to load artwork image {path}: {e}, using placeholder")
            image = make_placeholder(label)

        self._image_cache[image_ref] = image
        return image
