"""Headless rendering of the gallery screen with Pillow."""
import logging
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont, ImageOps

from .config import AppSettings
from .resources import ResourceResolver
from .view_model import GalleryViewModel

logger = logging.getLogger(__name__)

BUTTON_HEIGHT = 48
BUTTON_GAP = 72
BUTTON_COLOR = "#6750A4"
BUTTON_TEXT_COLOR = "white"
DESCRIPTOR_PADDING = 16
TITLE_SPACING = 8
BORDER_WIDTH = 2
WALL_MARGIN = 16
WALL_SHADOW = 8
SHADOW_COLOR = "#c8c8c8"


class PreviewError(Exception):
    """Raised when a preview cannot be rendered or saved."""
    pass


def fit_image(image: Image.Image, width: int, height: int) -> Image.Image:
    """Scale an image to fit inside width x height, preserving aspect ratio."""
    return ImageOps.contain(image, (max(1, width), max(1, height)), Image.LANCZOS)


def _text_size(draw: ImageDraw.ImageDraw, text: str, font) -> Tuple[int, int]:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    return right - left, bottom - top


def render_preview(
    view_model: GalleryViewModel,
    resolver: ResourceResolver,
    settings: AppSettings = None,
    size: Optional[Tuple[int, int]] = None
) -> Image.Image:
    """
    Compose the gallery screen for the current artwork.

    Args:
        view_model: View-model providing the current display references
        resolver: Resolver for the references
        settings: Application settings (layout and colours)
        size: Screen size (width, height); defaults to the window size setting

    Returns:
        RGB PIL image of the screen
    """
    settings = settings or resolver.settings
    width, height = size or (settings.window_width, settings.window_height)
    pad = settings.outer_padding

    image_ref, title_ref, artist_year_ref = view_model.current_display()
    title = resolver.get_string(title_ref)
    artist_year = resolver.get_string(artist_year_ref)

    screen = Image.new('RGB', (width, height), "white")
    draw = ImageDraw.Draw(screen)
    title_font = ImageFont.load_default(size=settings.title_font_size)
    caption_font = ImageFont.load_default(size=settings.caption_font_size)
    button_font = ImageFont.load_default(size=settings.caption_font_size)

    _, title_h = _text_size(draw, title, title_font)
    _, caption_h = _text_size(draw, artist_year, caption_font)
    descriptor_h = DESCRIPTOR_PADDING * 2 + title_h + TITLE_SPACING + caption_h

    # Bottom-up: buttons, descriptor, then whatever is left for the wall
    right = max(pad + 1, width - pad)
    buttons_top = height - pad - BUTTON_HEIGHT
    descriptor_top = buttons_top - pad - descriptor_h
    wall_left = wall_top = pad + WALL_MARGIN
    wall_box = (
        wall_left,
        wall_top,
        max(wall_left + 1, right - WALL_MARGIN - WALL_SHADOW),
        max(wall_top + 1, descriptor_top - pad - WALL_MARGIN - WALL_SHADOW)
    )

    # Artwork wall, shadow drawn first so the frame sits on top of it
    draw.rectangle(
        (wall_box[0] + WALL_SHADOW, wall_box[1] + WALL_SHADOW, wall_box[2] + WALL_SHADOW, wall_box[3] + WALL_SHADOW),
        fill=SHADOW_COLOR
    )
    draw.rectangle(wall_box, fill="white", outline=settings.border_color, width=BORDER_WIDTH)
    wall_w = wall_box[2] - wall_box[0]
    wall_h = wall_box[3] - wall_box[1]
    artwork = fit_image(
        resolver.load_image(image_ref, label=title),
        wall_w - 2 * settings.image_padding,
        wall_h - 2 * settings.image_padding
    )
    screen.paste(
        artwork,
        (wall_box[0] + (wall_w - artwork.width) // 2, wall_box[1] + (wall_h - artwork.height) // 2)
    )

    # Descriptor
    draw.rectangle(
        (pad, descriptor_top, right, descriptor_top + descriptor_h),
        fill=settings.descriptor_background
    )
    text_x = pad + DESCRIPTOR_PADDING
    text_y = descriptor_top + DESCRIPTOR_PADDING
    draw.text((text_x, text_y), title, font=title_font, fill="black")
    draw.text((text_x, text_y + title_h + TITLE_SPACING), artist_year, font=caption_font, fill="black")

    # Display controller
    button_w = max(1, (right - pad - BUTTON_GAP) // 2)
    labels = (resolver.get_string("previous_button"), resolver.get_string("next_button"))
    for i, label in enumerate(labels):
        left = pad + i * (button_w + BUTTON_GAP)
        draw.rounded_rectangle(
            (left, buttons_top, left + button_w, buttons_top + BUTTON_HEIGHT),
            radius=min(BUTTON_HEIGHT, button_w) // 2,
            fill=BUTTON_COLOR
        )
        label_w, label_h = _text_size(draw, label, button_font)
        draw.text(
            (left + (button_w - label_w) // 2, buttons_top + (BUTTON_HEIGHT - label_h) // 2),
            label,
            font=button_font,
            fill=BUTTON_TEXT_COLOR
        )

    counter = view_model.position_label()
    counter_w, counter_h = _text_size(draw, counter, button_font)
    draw.text(
        ((width - counter_w) // 2, buttons_top + (BUTTON_HEIGHT - counter_h) // 2),
        counter,
        font=button_font,
        fill="black"
    )

    return screen


def save_preview(
    view_model: GalleryViewModel,
    resolver: ResourceResolver,
    output_path: Path,
    settings: AppSettings = None,
    size: Optional[Tuple[int, int]] = None
) -> Path:
    """
    Render the gallery screen and write it to disk.

    Args:
        view_model: View-model providing the current display references
        resolver: Resolver for the references
        output_path: Destination image file (format from the suffix)
        settings: Application settings
        size: Screen size (width, height)

    Returns:
        The path written

    Raises:
        PreviewError: If rendering or saving fails
    """
    output_path = Path(output_path)
    try:
        screen = render_preview(view_model, resolver, settings, size)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        screen.save(output_path)
        logger.info(f"Saved preview of artwork {view_model.current_artwork_id} to {output_path}")
        return output_path
    except Exception as e:
        logger.error(f"Error saving preview: {e}")
        raise PreviewError(f"Failed to save preview: {str(e)}") from e
