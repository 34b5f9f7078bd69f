from pathlib import Path

import pytest
from PIL import Image

from art_space.config import AppSettings
from art_space.preview import PreviewError, fit_image, render_preview, save_preview
from art_space.resources import ResourceResolver
from art_space.view_model import GalleryViewModel


@pytest.fixture
def resolver(tmp_path: Path) -> ResourceResolver:
    for i, colour in enumerate(["red", "green", "blue"], start=1):
        Image.new("RGB", (300, 200), colour).save(tmp_path / f"art_{i}.png")
    return ResourceResolver(AppSettings(artwork_dir=str(tmp_path)))


def test_fit_image_preserves_aspect_ratio() -> None:
    fitted = fit_image(Image.new("RGB", (300, 200)), 150, 150)
    assert fitted.size == (150, 100)


def test_fit_image_handles_degenerate_box() -> None:
    assert fit_image(Image.new("RGB", (30, 20)), -5, 0).size[0] >= 1


def test_render_uses_window_size(resolver: ResourceResolver) -> None:
    screen = render_preview(GalleryViewModel(), resolver)
    assert screen.size == (480, 800)


def test_render_shows_current_artwork(resolver: ResourceResolver) -> None:
    vm = GalleryViewModel()
    first = render_preview(vm, resolver, size=(400, 700))
    center = (200, 260)
    red, green, blue = first.getpixel(center)
    assert red > 245 and green < 10 and blue < 10

    vm.go_previous()
    third = render_preview(vm, resolver, size=(400, 700))
    red, green, blue = third.getpixel(center)
    assert blue > 245 and red < 10 and green < 10


def test_render_is_repeatable(resolver: ResourceResolver) -> None:
    vm = GalleryViewModel()
    vm.go_next()
    assert render_preview(vm, resolver).tobytes() == render_preview(vm, resolver).tobytes()


def test_save_preview_writes_file(resolver: ResourceResolver, tmp_path: Path) -> None:
    output = save_preview(GalleryViewModel(), resolver, tmp_path / "out" / "screen.png")
    assert output.exists()
    with Image.open(output) as image:
        assert image.size == (480, 800)


def test_save_preview_wraps_errors(resolver: ResourceResolver, tmp_path: Path) -> None:
    with pytest.raises(PreviewError):
        save_preview(GalleryViewModel(), resolver, tmp_path / "screen.unknown-format")


@pytest.mark.parametrize("size", [(1, 1), (40, 40), (60, 200), (119, 400), (480, 120)])
def test_render_survives_small_screens(resolver: ResourceResolver, size) -> None:
    screen = render_preview(GalleryViewModel(), resolver, size=size)
    assert screen.size == size


def test_snapshot_with_narrow_window_setting(tmp_path: Path) -> None:
    settings = AppSettings(window_width=50, window_height=90, artwork_dir=str(tmp_path))
    output = save_preview(GalleryViewModel(), ResourceResolver(settings), tmp_path / "narrow.png", settings)
    with Image.open(output) as image:
        assert image.size == (50, 90)


def test_wall_casts_shadow(resolver: ResourceResolver) -> None:
    screen = render_preview(GalleryViewModel(), resolver)
    # Wall frame ends at x=432 (480 - 24 padding - 16 margin - 8 shadow)
    assert screen.getpixel((436, 200)) == (200, 200, 200)
    assert screen.getpixel((20, 200)) == (255, 255, 255)
