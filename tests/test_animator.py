"""Animator: frame cursor, looping vs one-shot, finished flag."""
from __future__ import annotations

import random

import pytest

from pixel_scroller.animator import Animator
from pixel_scroller.config import AnimDef, ConfigError, HERO, CFG

EPS = 1e-6


def _anims():
    return {
        "idle": AnimDef(0, 0, 5, 8),
        "walk": AnimDef(1, 0, 7, 12),
        "attack": AnimDef(3, 0, 7, 14),
        "hurt": AnimDef(5, 2, 2, 10),
        "death": AnimDef(6, 1, 4, 10),
    }


# ── Cursor bounds ───────────────────────────────────────────────────

@pytest.mark.parametrize("name", sorted(HERO.anims))
def test_cursor_stays_in_range_for_clamped_dt(name):
    rng = random.Random(7)
    anim = Animator(HERO.anims, name)
    for _ in range(2000):
        anim.update(rng.uniform(0.0, CFG.MAX_DT))
        assert anim.start <= anim.col <= anim.end


def test_large_step_consumes_every_period():
    anim = Animator(_anims(), "walk")
    anim.update(3 * anim.rate + EPS)
    assert anim.col == 3


def test_fps_is_floored_at_one():
    anim = Animator({"idle": AnimDef(0, 0, 3, 0.25)}, "idle")
    assert anim.rate == pytest.approx(1.0)


def test_out_of_range_cursor_is_clamped_and_logged(caplog):
    anim = Animator(_anims(), "idle")
    anim.col = 42
    with caplog.at_level("WARNING"):
        anim.update(0.0)
    assert anim.col == anim.end
    assert "outside" in caplog.text


# ── set() ───────────────────────────────────────────────────────────

def test_set_same_name_is_noop():
    anim = Animator(_anims(), "walk")
    anim.update(2 * anim.rate + 0.01)
    col, timer = anim.col, anim.timer
    anim.set("walk")
    assert (anim.col, anim.timer) == (col, timer)


def test_set_new_name_resets_cursor():
    anim = Animator(_anims(), "walk")
    anim.update(0.3)
    anim.set("death")
    assert anim.row == 6
    assert anim.col == 1
    assert anim.timer == 0.0
    assert not anim.done


def test_unknown_animation_fails_loudly():
    anim = Animator(_anims(), "idle")
    with pytest.raises(ConfigError):
        anim.set("cartwheel")


# ── Looping vs one-shot ─────────────────────────────────────────────

def test_looping_animation_cycles_and_never_finishes():
    anim = Animator(_anims(), "walk")
    seen = []
    for _ in range(24):
        anim.update(anim.rate)
        seen.append(anim.col)
        assert not anim.done
    assert seen[:9] == [1, 2, 3, 4, 5, 6, 7, 0, 1]


def test_one_shot_finishes_exactly_once_and_pins_at_end():
    anim = Animator(_anims(), "attack")
    finished = 0
    for _ in range(100):
        anim.update(1 / 60)
        finished += anim.just_finished
    assert finished == 1
    assert anim.done
    assert anim.col == anim.end


def test_single_frame_one_shot_finishes_on_first_period():
    anim = Animator(_anims(), "hurt")
    anim.update(anim.rate / 2)
    assert not anim.done
    anim.update(anim.rate / 2 + EPS)
    assert anim.done and anim.col == 2


def test_replay_rewinds_current_animation():
    anim = Animator(_anims(), "attack")
    anim.update(2.0)
    assert anim.done
    anim.replay()
    assert anim.col == anim.start and not anim.done


def test_progress():
    anim = Animator(_anims(), "death")
    assert anim.progress == 0.0
    anim.update(3 * anim.rate + EPS)
    assert anim.progress == pytest.approx(1.0)
