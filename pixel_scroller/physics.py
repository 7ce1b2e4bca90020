# pixel_scroller/physics.py
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from pixel_scroller.config import CFG, Box

if TYPE_CHECKING:
    from pixel_scroller.entities import Entity


# --------- Utilities ---------
def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def aabb_overlap(a: Box, b: Box) -> bool:
    return a.overlaps(b)


def sanitize_dt(dt) -> float:
    """Seconds since the last frame, made safe to step with: NaN/inf/negative -> 0, capped at MAX_DT."""
    try:
        dt = float(dt)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(dt) or dt < 0:
        return 0.0
    return min(dt, CFG.MAX_DT)


# --------- Static geometry ---------
@dataclass(frozen=True)
class Platform:
    x: float
    y: float
    w: float
    h: float
    color: tuple = CFG.COL_LEDGE

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.w


def default_platforms(world_w: float = CFG.CANVAS_W, ground_y: float = CFG.GROUND_Y) -> list[Platform]:
    """Ground block plus three ledges."""
    return [
        Platform(0, ground_y, world_w, CFG.CANVAS_H - ground_y, CFG.COL_GROUND),
        Platform(180, 340, 160, 20),
        Platform(420, 300, 140, 20),
        Platform(680, 260, 160, 20),
    ]


# --------- Integration & collision ---------
def integrate(e: "Entity", dt: float, gravity: float) -> None:
    """Semi-implicit Euler: velocity first, then position."""
    e.vy += gravity * dt
    e.x += e.vx * dt
    e.y += e.vy * dt


def resolve_landing(e: "Entity", prev_bottom: float, platforms: Iterable[Platform],
                    inset: float = CFG.FEET_INSET) -> bool:
    """
    Land a falling entity on the highest platform whose top its feet crossed this step.
    Only downward landings are resolved (no ceilings, no side walls).
    Returns the new on-ground flag.
    """
    e.on_ground = False
    if e.vy < 0:
        return False

    bottom = e.y + e.height
    feet_l = e.x + inset
    feet_r = e.x + e.width - inset
    best: float | None = None
    for p in platforms:
        if prev_bottom <= p.top <= bottom and feet_l < p.right and feet_r > p.x:
            if best is None or p.top < best:
                best = p.top

    if best is not None:
        e.y = best - e.height
        e.vy = 0.0
        e.on_ground = True
    return e.on_ground


def clamp_world(e: "Entity", world_w: float) -> None:
    e.x = clamp(e.x, 0.0, max(0.0, world_w - e.width))
