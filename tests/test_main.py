"""Boot-time loading of configs and sheets."""
from __future__ import annotations

import json

import pytest

from pixel_scroller import main
from pixel_scroller.config import ConfigError


@pytest.fixture
def no_sheets(monkeypatch, tmp_path):
    """Skip image loading; every sheet is a 64px grid. Overrides come from tmp_path."""
    monkeypatch.setattr(main, "load_sheet", lambda cfg: (cfg.name, cfg.with_frame_size(64, 64)))
    monkeypatch.setattr(main, "_CONFIG_DIR", tmp_path)
    return tmp_path


def test_boot_without_overrides(no_sheets):
    sheets, hero_cfg, goblin_cfg = main.boot()
    assert set(sheets) == {"hero", "goblin"}
    assert hero_cfg.frame_w == 64 and goblin_cfg.frame_h == 64


def test_boot_applies_override_files(no_sheets):
    (no_sheets / "goblin.json").write_text(json.dumps({"speed": 90, "hp": 5}), encoding="utf-8")
    _, _, goblin_cfg = main.boot()
    assert goblin_cfg.speed == 90 and goblin_cfg.hp == 5


def test_boot_ignores_renamed_config(no_sheets):
    (no_sheets / "hero.json").write_text(json.dumps({"name": "knight"}), encoding="utf-8")
    sheets, hero_cfg, _ = main.boot()
    assert hero_cfg.name == "hero"
    assert "hero" in sheets


def test_boot_rejects_bad_override(no_sheets):
    (no_sheets / "hero.json").write_text(json.dumps({"gravity": "1800"}), encoding="utf-8")
    with pytest.raises(ConfigError):
        main.boot()
