# pixel_scroller/state.py
from __future__ import annotations
from enum import Enum


class State(str, Enum):
    """Entity states; the value doubles as the animation name."""
    IDLE = "idle"
    WALK = "walk"
    JUMP = "jump"
    CROUCH = "crouch"
    ATTACK = "attack"
    HURT = "hurt"
    DEATH = "death"
    VICTORY = "victory"


def movement_state(*, grounded: bool, moving: bool, crouching: bool = False,
                   victorious: bool = False) -> State:
    """State implied purely by the entity's physical condition."""
    if not grounded:
        return State.JUMP
    if moving:
        return State.WALK
    if crouching:
        return State.CROUCH
    if victorious:
        return State.VICTORY
    return State.IDLE


def next_state(current: State, *, hp: int, grounded: bool, moving: bool,
               crouching: bool = False, attack_pressed: bool = False,
               can_attack: bool = False, anim_done: bool = False,
               hurt_active: bool = False, victorious: bool = False) -> State:
    """
    One decision table for every entity, highest priority first:
      1. death (absorbing; hp <= 0 forces it)
      2. an unfinished attack
      3. a new attack (input + cooldown ready)
      4. hurt while its recovery timer runs
      5. movement: jump / walk / crouch / victory / idle
    """
    if current is State.DEATH or hp <= 0:
        return State.DEATH
    if current is State.ATTACK and not anim_done:
        return State.ATTACK
    if attack_pressed and can_attack:
        return State.ATTACK
    if current is State.HURT and hurt_active:
        return State.HURT
    return movement_state(grounded=grounded, moving=moving,
                          crouching=crouching, victorious=victorious)
