# pixel_scroller/input.py
from __future__ import annotations
from dataclasses import dataclass

import pygame as pg

# logical input -> keys that trigger it
KEYMAP = {
    "left":   (pg.K_LEFT, pg.K_a),
    "right":  (pg.K_RIGHT, pg.K_d),
    "jump":   (pg.K_SPACE, pg.K_UP, pg.K_w),
    "attack": (pg.K_k, pg.K_j),
    "crouch": (pg.K_DOWN, pg.K_s),
}


@dataclass(frozen=True)
class InputState:
    """Held state of the logical inputs, sampled once per tick."""
    left: bool = False
    right: bool = False
    jump: bool = False
    attack: bool = False
    crouch: bool = False

    @property
    def horizontal(self) -> int:
        """-1, 0 or +1. Right wins when both are held."""
        if self.right:
            return 1
        if self.left:
            return -1
        return 0

    @classmethod
    def from_pressed(cls, keys) -> "InputState":
        """Build from ``pg.key.get_pressed()`` (anything indexable by key code)."""
        return cls(**{name: any(keys[k] for k in codes) for name, codes in KEYMAP.items()})
