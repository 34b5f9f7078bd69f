import sys
from pathlib import Path

import pytest

# Allow importing art_space from repository root
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from art_space import config  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep settings reads and writes inside the test's temp directory."""
    config_path = tmp_path / "config" / "settings.json"
    config_path.parent.mkdir(parents=True)
    monkeypatch.setattr(config, "get_config_path", lambda: config_path)
    return config_path
