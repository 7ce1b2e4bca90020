# pixel_scroller/config.py
from __future__ import annotations
import json
import logging
import math
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Tuple

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Malformed entity config or an animation name the entity type does not define."""


@dataclass
class _CFG:
    # --- Window ---
    CANVAS_W: int = 960
    CANVAS_H: int = 540
    FPS: int = 60

    # global UI palette
    COL_TEXT: tuple = (255, 255, 255)
    COL_SKY: tuple = (123, 200, 246)
    COL_CLOUD: tuple = (168, 224, 255)
    COL_GROUND: tuple = (58, 42, 22)
    COL_LEDGE: tuple = (93, 59, 26)
    COL_HEART: tuple = (220, 60, 70)

    # --- World ---
    GRAVITY: float = 1800.0
    GROUND_Y: float = 420.0
    FEET_INSET: float = 10.0   # feet span = body width minus this on each side

    # --- Timing ---
    MAX_DT: float = 1 / 30     # clamp after slow frames / window drags

    # --- Combat ---
    HIT_WINDOW: Tuple[float, float] = (0.3, 0.8)  # attack progress, exclusive
    HURT_RECOVER: float = 0.35
    KNOCKBACK: float = 16.0

    # --- AI ---
    CHASE_RANGE: float = 260.0

    # --- Spawns ---
    HERO_START_X: float = 80.0
    GOBLIN_START_X: Tuple[float, ...] = (640.0,)

    # message
    MSG_LOG_MS: int = 1400

    # --- Debug & control toggles ---
    DEBUG: bool = False            # log per-tick decisions at DEBUG level
    SHOW_BOXES: bool = False       # draw hurt/attack boxes over sprites


CFG = _CFG()


# -----------------------------------------------------------------------------
# Per entity-type config
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Box:
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def overlaps(self, other: "Box") -> bool:
        return (self.x < other.right and self.right > other.x
                and self.y < other.bottom and self.bottom > other.y)


@dataclass(frozen=True)
class AnimDef:
    """One sheet row played from ``start`` to ``end`` (inclusive) at ``fps``."""
    row: int
    start: int
    end: int
    fps: float = 8

    def __post_init__(self):
        if self.start < 0 or self.row < 0:
            raise ConfigError(f"negative frame index in {self}")
        if self.start > self.end:
            raise ConfigError(f"start {self.start} > end {self.end} in {self}")
        if self.fps <= 0:
            raise ConfigError(f"fps must be positive, got {self.fps}")


# Animations every entity needs; the hero additionally jumps.
BASE_ANIMS = ("idle", "walk", "attack", "hurt", "death")


def _is_number(v) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _is_int(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


@dataclass(frozen=True)
class EntityConfig:
    name: str
    anims: Dict[str, AnimDef]
    hitbox: Box
    attack_box: Box
    speed: float
    jump_velocity: float = 0.0
    gravity: float = 0.0          # 0 -> patrol kinematics on the ground line
    scale: float = 2.0
    hp: int = 3
    iframes: float = 0.4
    attack_cooldown: float = 0.5
    # sheet slicing
    url: str = ""
    frame_w: int | None = None
    frame_h: int | None = None
    margin_x: int = 0
    margin_y: int = 0
    spacing_x: int = 0
    spacing_y: int = 0
    required: Tuple[str, ...] = BASE_ANIMS

    def __post_init__(self):
        for key in ("name", "url"):
            if not isinstance(getattr(self, key), str):
                raise ConfigError(f"{key} must be a string, got {getattr(self, key)!r}")
        missing = [a for a in self.required if a not in self.anims]
        if missing:
            raise ConfigError(f"{self.name}: missing animations {missing}")

        # JSON numbers arrive as int or float; store them all as float
        for key in ("speed", "jump_velocity", "gravity", "scale", "iframes", "attack_cooldown"):
            v = getattr(self, key)
            if not _is_number(v) or not math.isfinite(v) or v < 0:
                raise ConfigError(f"{self.name}: {key} must be a number >= 0, got {v!r}")
            object.__setattr__(self, key, float(v))
        if self.scale == 0:
            raise ConfigError(f"{self.name}: scale must be > 0")

        if not _is_int(self.hp) or self.hp <= 0:
            raise ConfigError(f"{self.name}: hp must be a whole number > 0, got {self.hp!r}")
        for key in ("frame_w", "frame_h"):
            v = getattr(self, key)
            if v is not None and (not _is_int(v) or v <= 0):
                raise ConfigError(f"{self.name}: {key} must be a whole number > 0, got {v!r}")
        for key in ("margin_x", "margin_y", "spacing_x", "spacing_y"):
            v = getattr(self, key)
            if not _is_int(v) or v < 0:
                raise ConfigError(f"{self.name}: {key} must be a whole number >= 0, got {v!r}")
        for label, b in (("hitbox", self.hitbox), ("attack_box", self.attack_box)):
            if b.w <= 0 or b.h <= 0:
                raise ConfigError(f"{self.name}: {label} needs a positive size")

    def anim(self, name: str) -> AnimDef:
        try:
            return self.anims[name]
        except KeyError:
            raise ConfigError(f"{self.name}: no animation named '{name}'") from None

    def with_frame_size(self, frame_w: int, frame_h: int) -> "EntityConfig":
        return replace(self, frame_w=frame_w, frame_h=frame_h)


# -----------------------------------------------------------------------------
# Defaults (sheet rows: [row, start, end], fps per animation)
# -----------------------------------------------------------------------------
def _anims(rows: dict, fps: dict) -> Dict[str, AnimDef]:
    return {k: AnimDef(r, s, e, fps.get(k, 8)) for k, (r, s, e) in rows.items()}


HERO = EntityConfig(
    name="hero",
    url="assets/hero.png",
    anims=_anims(
        {"idle": (0, 0, 7), "walk": (1, 0, 7), "jump": (2, 0, 5), "attack": (3, 0, 7),
         "crouch": (4, 0, 3), "hurt": (5, 0, 3), "death": (6, 0, 7), "victory": (7, 0, 5)},
        {"idle": 8, "walk": 12, "jump": 8, "attack": 14, "crouch": 8, "hurt": 10,
         "death": 10, "victory": 8},
    ),
    speed=220, jump_velocity=650, gravity=CFG.GRAVITY,
    hitbox=Box(12, 10, 28, 44),
    attack_box=Box(30, 10, 34, 40),
    iframes=0.8, attack_cooldown=0.5,
    required=BASE_ANIMS + ("jump",),
)

GOBLIN = EntityConfig(
    name="goblin",
    url="assets/goblin.png",
    anims=_anims(
        {"idle": (0, 0, 5), "walk": (1, 0, 5), "attack": (2, 0, 5),
         "hurt": (3, 0, 3), "death": (4, 0, 5)},
        {"idle": 8, "walk": 10, "attack": 10, "hurt": 10, "death": 10},
    ),
    speed=120,
    hitbox=Box(12, 8, 28, 40),
    attack_box=Box(24, 8, 30, 36),
    iframes=0.4, attack_cooldown=0.8,
)


# -----------------------------------------------------------------------------
# JSON overrides
# -----------------------------------------------------------------------------
# camelCase keys are accepted too
_ALIASES = {
    "jumpV": "jump_velocity",
    "jumpVelocity": "jump_velocity",
    "attackBox": "attack_box",
    "attackCooldown": "attack_cooldown",
    "frameW": "frame_w",
    "frameH": "frame_h",
    "marginX": "margin_x",
    "marginY": "margin_y",
    "spacingX": "spacing_x",
    "spacingY": "spacing_y",
}

_SCALARS = {"url", "speed", "jump_velocity", "gravity", "scale", "hp", "iframes",
            "attack_cooldown", "frame_w", "frame_h", "margin_x", "margin_y",
            "spacing_x", "spacing_y"}


def _box(raw, label: str) -> Box:
    try:
        return Box(float(raw["x"]), float(raw["y"]), float(raw["w"]), float(raw["h"]))
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigError(f"{label}: expected {{x,y,w,h}}, got {raw!r}") from e


def _anim(raw, fps, label: str) -> AnimDef:
    """Accept ``[row, start, end]`` or ``{row, startFrame, endFrame, fps}``."""
    try:
        if isinstance(raw, dict):
            return AnimDef(int(raw["row"]),
                           int(raw.get("startFrame", raw.get("start"))),
                           int(raw.get("endFrame", raw.get("end"))),
                           float(raw.get("fps", fps)))
        row, start, end = raw
        return AnimDef(int(row), int(start), int(end), float(fps))
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigError(f"animation '{label}': cannot read {raw!r}") from e


def entity_config_from_dict(data: dict, base: EntityConfig) -> EntityConfig:
    """Overlay a plain dict (already parsed JSON) onto ``base``."""
    if not isinstance(data, dict):
        raise ConfigError(f"{base.name}: config must be an object, got {type(data).__name__}")
    data = {_ALIASES.get(k, k): v for k, v in data.items()}
    changes: dict = {}

    for k in _SCALARS & data.keys():
        changes[k] = data[k]
    for k in ("hitbox", "attack_box"):
        if k in data:
            changes[k] = _box(data[k], f"{base.name}.{k}")

    fps = data.get("fps", {})
    if "anim" in data or fps:
        anims = dict(base.anims)
        for name, raw in data.get("anim", {}).items():
            anims[name] = _anim(raw, fps.get(name, 8), name)
        # fps-only override keeps the row layout
        for name, rate in fps.items():
            if name in anims and name not in data.get("anim", {}):
                a = anims[name]
                anims[name] = AnimDef(a.row, a.start, a.end, float(rate))
        changes["anims"] = anims

    unknown = set(data) - _SCALARS - {"hitbox", "attack_box", "anim", "fps", "cols", "rows"}
    if unknown:
        logger.warning("%s: ignoring unknown config keys %s", base.name, sorted(unknown))

    try:
        return replace(base, **changes)
    except TypeError as e:
        raise ConfigError(f"{base.name}: {e}") from e


def load_entity_config(path: str | Path, base: EntityConfig) -> EntityConfig:
    """Read a JSON file of overrides for one entity type."""
    p = Path(path)
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"cannot read entity config {p}: {e}") from e
    cfg = entity_config_from_dict(data, base)
    logger.info("Loaded %s config from %s", cfg.name, p)
    return cfg
