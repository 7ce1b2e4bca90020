# pixel_scroller/animator.py
from __future__ import annotations
import logging
from typing import Dict

from pixel_scroller.config import AnimDef, ConfigError

logger = logging.getLogger(__name__)

# Played once and held on the last frame; everything else loops.
ONE_SHOT = frozenset({"attack", "hurt", "death"})


class Animator:
    """
    Frame cursor over one row of a sprite sheet.
      - set(name): switch animation (no-op when already active)
      - update(dt): step frames from elapsed seconds
    ``done`` latches once a one-shot animation reaches its end frame;
    ``just_finished`` is True only on the update that got it there.
    """

    def __init__(self, anims: Dict[str, AnimDef], initial: str = "idle"):
        self._anims = anims
        self.name: str | None = None
        self.row = 0
        self.start = 0
        self.end = 0
        self.col = 0
        self.timer = 0.0
        self.rate = 1 / 8
        self.done = False
        self.just_finished = False
        self.set(initial)

    # --- state & animation ---
    def set(self, name: str) -> None:
        if name == self.name:
            return
        a = self._anims.get(name)
        if a is None:
            raise ConfigError(f"unknown animation '{name}' (have {sorted(self._anims)})")
        self.name = name
        self.row, self.start, self.end = a.row, a.start, a.end
        self.col = a.start
        self.timer = 0.0
        self.rate = 1.0 / max(1.0, a.fps)
        self.done = False
        self.just_finished = False

    def replay(self) -> None:
        """Rewind the active animation (a second swing of the same attack)."""
        self.col = self.start
        self.timer = 0.0
        self.done = False
        self.just_finished = False

    @property
    def looping(self) -> bool:
        return self.name not in ONE_SHOT

    def update(self, dt: float) -> None:
        self.just_finished = False
        self.timer += dt
        while self.timer >= self.rate:
            self.timer -= self.rate
            if self.col < self.end:
                self.col += 1
            elif self.looping:
                self.col = self.start
            else:
                self.col = self.end
                if not self.done:
                    self.done = True
                    self.just_finished = True
        self._check_cursor()

    @property
    def progress(self) -> float:
        """0.0 at the start frame, 1.0 at the end frame."""
        return (self.col - self.start) / max(1, self.end - self.start)

    def _check_cursor(self) -> None:
        if self.start <= self.col <= self.end:
            return
        logger.warning("Frame cursor %d outside [%d, %d] for '%s', clamping",
                       self.col, self.start, self.end, self.name)
        self.col = max(self.start, min(self.end, self.col))
