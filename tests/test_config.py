import json
from pathlib import Path

import pytest

from art_space import config
from art_space.config import AppSettings, ConfigError, load_settings, remember_window_size, save_settings


def test_defaults_when_no_settings_file() -> None:
    settings = load_settings()
    assert settings == AppSettings()
    assert settings.descriptor_background == "#ECEBF4"
    assert settings.artwork_dir is None


def test_save_then_load(_isolated_config: Path) -> None:
    save_settings(AppSettings(window_width=640, artwork_dir="/tmp/art"))

    assert json.loads(_isolated_config.read_text())["window_width"] == 640
    loaded = load_settings()
    assert loaded.window_width == 640
    assert loaded.artwork_dir == "/tmp/art"


def test_unknown_keys_are_ignored(_isolated_config: Path) -> None:
    _isolated_config.write_text(json.dumps({"title_font_size": 30, "current_artwork_id": 3}))
    settings = load_settings()
    assert settings.title_font_size == 30
    assert not hasattr(settings, "current_artwork_id")


def test_corrupt_file_falls_back_to_defaults(_isolated_config: Path) -> None:
    _isolated_config.write_text("{ not json")
    assert load_settings() == AppSettings()


def test_save_failure_raises_config_error(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config, "get_config_path", lambda: tmp_path / "missing-dir" / "settings.json")
    with pytest.raises(ConfigError):
        save_settings(AppSettings())


def test_remember_window_size_saves_new_size(_isolated_config: Path) -> None:
    settings = AppSettings()
    assert remember_window_size(settings, 640, 900) is True

    assert settings.window_width == 640
    loaded = load_settings()
    assert (loaded.window_width, loaded.window_height) == (640, 900)


@pytest.mark.parametrize("width, height", [(480, 800), (1, 1), (0, 500)])
def test_remember_window_size_skips_unchanged_or_unmapped(_isolated_config: Path, width: int, height: int) -> None:
    settings = AppSettings()
    assert remember_window_size(settings, width, height) is False
    assert not _isolated_config.exists()
    assert (settings.window_width, settings.window_height) == (480, 800)
