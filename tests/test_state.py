"""The single transition table."""
from __future__ import annotations

import pytest

from pixel_scroller.state import State, next_state

GROUNDED = dict(hp=3, grounded=True, moving=False)


@pytest.mark.parametrize("current", list(State))
def test_zero_hp_forces_death(current):
    assert next_state(current, hp=0, grounded=True, moving=True, attack_pressed=True,
                      can_attack=True) is State.DEATH


def test_death_is_absorbing():
    assert next_state(State.DEATH, hp=3, grounded=True, moving=True, attack_pressed=True,
                      can_attack=True) is State.DEATH


@pytest.mark.parametrize("grounded,moving,crouching,expected", [
    (True, False, False, State.IDLE),
    (True, True, False, State.WALK),
    (False, False, False, State.JUMP),
    (False, True, True, State.JUMP),
    (True, False, True, State.CROUCH),
    (True, True, True, State.WALK),
])
def test_movement_states(grounded, moving, crouching, expected):
    assert next_state(State.IDLE, hp=3, grounded=grounded, moving=moving,
                      crouching=crouching) is expected


def test_attack_needs_cooldown():
    assert next_state(State.IDLE, **GROUNDED, attack_pressed=True, can_attack=True) is State.ATTACK
    assert next_state(State.IDLE, **GROUNDED, attack_pressed=True, can_attack=False) is State.IDLE


def test_attack_holds_until_animation_done():
    kw = dict(hp=3, grounded=False, moving=True)
    assert next_state(State.ATTACK, **kw, anim_done=False) is State.ATTACK
    assert next_state(State.ATTACK, **kw, anim_done=True) is State.JUMP


def test_attack_overrides_hurt():
    assert next_state(State.HURT, **GROUNDED, hurt_active=True, attack_pressed=True,
                      can_attack=True) is State.ATTACK


def test_hurt_holds_while_timer_runs():
    assert next_state(State.HURT, **GROUNDED, hurt_active=True) is State.HURT
    assert next_state(State.HURT, **GROUNDED, hurt_active=False) is State.IDLE


def test_victory_only_when_standing_still():
    assert next_state(State.IDLE, **GROUNDED, victorious=True) is State.VICTORY
    assert next_state(State.VICTORY, hp=3, grounded=True, moving=True,
                      victorious=True) is State.WALK


def test_state_value_is_animation_name():
    assert State.ATTACK.value == "attack"
    assert State("walk") is State.WALK
