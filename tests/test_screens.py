"""Screen stack routing and the pause menu, without opening a window."""
from __future__ import annotations

import pygame as pg
import pytest

from pixel_scroller.screen.screen_pause import PauseScreen
from pixel_scroller.screen.screens import ROUTES, ScreenManager


class FakeGame:
    def __init__(self, manager, **kwargs):
        self.m = manager
        self.kwargs = kwargs
        self.events, self.ticks, self.restarts = [], [], 0

    def handle_event(self, e):
        self.events.append(e)

    def update(self, dt):
        self.ticks.append(dt)

    def restart(self):
        self.restarts += 1


@pytest.fixture
def manager():
    m = ScreenManager(screen=None, clock=None, fonts={}, size=(960, 540),
                      routes={"game": FakeGame, "pause": PauseScreen})
    m.goto("game", level=1)
    return m


def _key(code):
    return pg.event.Event(pg.KEYDOWN, key=code)


def test_default_routes():
    assert set(ROUTES) == {"game", "pause"}


def test_goto_builds_screen_with_kwargs(manager):
    assert isinstance(manager.current(), FakeGame)
    assert manager.current().kwargs == {"level": 1}


def test_unknown_route_raises(manager):
    with pytest.raises(KeyError):
        manager.push("shop")


def test_pause_freezes_the_game(manager):
    game = manager.current()
    manager.push("pause")
    assert manager.below() is game
    manager.update(16)
    manager.handle_event(_key(pg.K_LEFT))
    assert game.ticks == [] and game.events == []


def test_escape_resumes(manager):
    game = manager.current()
    manager.push("pause")
    manager.handle_event(_key(pg.K_ESCAPE))
    assert manager.current() is game
    assert game.restarts == 0


def test_restart_option(manager):
    game = manager.current()
    manager.push("pause")
    manager.handle_event(_key(pg.K_DOWN))
    manager.handle_event(_key(pg.K_RETURN))
    assert manager.current() is game
    assert game.restarts == 1


def test_selection_wraps(manager):
    manager.push("pause")
    pause = manager.current()
    manager.handle_event(_key(pg.K_UP))
    assert pause.selected == 1
    manager.handle_event(_key(pg.K_DOWN))
    assert pause.selected == 0


def test_pop_keeps_the_bottom_screen(manager):
    game = manager.current()
    manager.pop()
    assert manager.current() is game
