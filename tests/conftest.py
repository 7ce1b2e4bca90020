"""Shared fixtures: 64px cells (what the default boxes are drawn for) and a flat floor."""
from __future__ import annotations

import pytest

from pixel_scroller.config import CFG, HERO, GOBLIN
from pixel_scroller.physics import Platform
from pixel_scroller.simulation import Simulation, World

CELL = 64


@pytest.fixture
def hero_cfg():
    return HERO.with_frame_size(CELL, CELL)


@pytest.fixture
def goblin_cfg():
    return GOBLIN.with_frame_size(CELL, CELL)


@pytest.fixture
def flat_world():
    return World(platforms=[Platform(0, CFG.GROUND_Y, CFG.CANVAS_W, 120)])


@pytest.fixture
def make_sim(hero_cfg, goblin_cfg, flat_world):
    def _make(hero_x=80.0, goblin_xs=(700.0,)):
        return Simulation(hero_cfg=hero_cfg, goblin_cfg=goblin_cfg, world=flat_world,
                          hero_x=hero_x, goblin_xs=goblin_xs)
    return _make
