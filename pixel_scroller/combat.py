# pixel_scroller/combat.py
from __future__ import annotations
import logging

from pixel_scroller.config import CFG, Box
from pixel_scroller.entities import Entity, FACE_LEFT
from pixel_scroller.physics import aabb_overlap, clamp
from pixel_scroller.state import State

logger = logging.getLogger(__name__)


# =====================  Boxes  =====================
def _scaled_box(e: Entity, rect: Box) -> Box:
    """
    Map a frame-space rect to world space. Sheets are drawn facing right,
    so a left-facing entity gets the rect mirrored inside its frame.
    """
    s = e.cfg.scale
    if e.facing == FACE_LEFT:
        x = e.x + e.width - (rect.x + rect.w) * s
    else:
        x = e.x + rect.x * s
    return Box(x, e.y + rect.y * s, rect.w * s, rect.h * s)


def hurt_box(e: Entity) -> Box:
    return _scaled_box(e, e.cfg.hitbox)


def attack_box(e: Entity) -> Box:
    return _scaled_box(e, e.cfg.attack_box)


# =====================  Hit window  =====================
def hit_window_active(e: Entity, window: tuple[float, float] = CFG.HIT_WINDOW) -> bool:
    """True while the attack animation is inside the (exclusive) strike fraction."""
    if e.state is not State.ATTACK:
        return False
    lo, hi = window
    return lo < e.animator.progress < hi


# =====================  Resolution  =====================
def can_be_hit(defender: Entity) -> bool:
    return not defender.dead and defender.iframes <= 0


def try_strike(attacker: Entity, defender: Entity, world_w: float = CFG.CANVAS_W) -> bool:
    """
    Land at most one hit per swing per target.
    Requires: active hit window, defender alive and out of iframes,
    and attack box overlapping the defender's hurt box.
    """
    if not hit_window_active(attacker):
        return False
    if defender.name in attacker.attack_hits or not can_be_hit(defender):
        return False
    if not aabb_overlap(attack_box(attacker), hurt_box(defender)):
        return False

    attacker.attack_hits.add(defender.name)
    apply_damage(defender, source_x=attacker.center_x, world_w=world_w)
    return True


def apply_damage(defender: Entity, source_x: float, amount: int = 1,
                 knockback: float = CFG.KNOCKBACK, world_w: float = CFG.CANVAS_W) -> None:
    hp = defender.hp - amount
    if hp < 0:
        logger.warning("%s: hp would go negative (%d), clamping to 0", defender.name, hp)
        hp = 0
    defender.hp = hp
    defender.iframes = defender.cfg.iframes

    if hp == 0:
        defender.hurt_timer = 0.0
        defender.vx = 0.0
        defender.set_state(State.DEATH)
        logger.info("%s: defeated", defender.name)
    else:
        defender.hurt_timer = CFG.HURT_RECOVER
        if defender.state is State.HURT:
            defender.animator.replay()
        defender.set_state(State.HURT)

    if knockback:
        away = 1 if defender.center_x >= source_x else -1
        defender.x = clamp(defender.x + away * knockback, 0.0, max(0.0, world_w - defender.width))
