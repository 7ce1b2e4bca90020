# pixel_scroller/entities.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Set

from pixel_scroller.animator import Animator
from pixel_scroller.config import EntityConfig, ConfigError
from pixel_scroller.state import State

logger = logging.getLogger(__name__)

FACE_LEFT = -1
FACE_RIGHT = 1


@dataclass
class Entity:
    """
    Runtime record for the hero or a goblin.
    Position is the top-left of the scaled frame, in world pixels.
    """
    name: str
    cfg: EntityConfig
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    facing: int = FACE_RIGHT
    hp: int = 0
    state: State = State.IDLE
    on_ground: bool = False
    # timers (seconds, floored at 0)
    attack_cooldown: float = 0.0
    iframes: float = 0.0
    hurt_timer: float = 0.0
    # names struck by the current swing
    attack_hits: Set[str] = field(default_factory=set)
    animator: Animator = field(init=False)

    def __post_init__(self):
        if self.cfg.frame_w is None or self.cfg.frame_h is None:
            raise ConfigError(f"{self.name}: frame size unknown; load the sheet first")
        if self.hp <= 0:
            self.hp = self.cfg.hp
        self.animator = Animator(self.cfg.anims, self.state.value)

    # --- geometry ---
    @property
    def width(self) -> float:
        return self.cfg.frame_w * self.cfg.scale

    @property
    def height(self) -> float:
        return self.cfg.frame_h * self.cfg.scale

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    # --- state ---
    @property
    def dead(self) -> bool:
        return self.state is State.DEATH

    @property
    def attacking(self) -> bool:
        """Mid-swing: attack state whose animation has not finished."""
        return self.state is State.ATTACK and not self.animator.done

    def set_state(self, state: State) -> None:
        """Switch state and animation together."""
        if state is not self.state:
            logger.debug("%s: %s -> %s", self.name, self.state.value, state.value)
        self.state = state
        self.animator.set(state.value)

    def start_attack(self) -> None:
        """Begin a fresh swing: new hit list, cooldown armed, animation from its first frame."""
        self.attack_hits.clear()
        self.attack_cooldown = self.cfg.attack_cooldown
        if self.state is State.ATTACK:
            self.animator.replay()
        self.set_state(State.ATTACK)

    def tick_timers(self, dt: float) -> None:
        self.attack_cooldown = max(0.0, self.attack_cooldown - dt)
        self.iframes = max(0.0, self.iframes - dt)
        self.hurt_timer = max(0.0, self.hurt_timer - dt)

    def place_on_ground(self, x: float, ground_y: float) -> None:
        self.x = x
        self.y = ground_y - self.height
        self.vx = self.vy = 0.0
        self.on_ground = True


def spawn(name: str, cfg: EntityConfig, x: float, ground_y: float,
          state: State = State.IDLE, facing: int = FACE_RIGHT) -> Entity:
    e = Entity(name=name, cfg=cfg, state=state, facing=facing)
    e.place_on_ground(x, ground_y)
    return e
