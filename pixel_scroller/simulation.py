# pixel_scroller/simulation.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence

from pixel_scroller.combat import attack_box, hurt_box, try_strike
from pixel_scroller.config import CFG, HERO, GOBLIN, EntityConfig
from pixel_scroller.entities import Entity, spawn, FACE_LEFT, FACE_RIGHT
from pixel_scroller.input import InputState
from pixel_scroller.physics import (Platform, aabb_overlap, default_platforms, integrate,
                                    resolve_landing, clamp_world, sanitize_dt)
from pixel_scroller.state import State, next_state

logger = logging.getLogger(__name__)

MSG_HELP = "Arrow keys to move, Space to jump, K to attack"
MSG_WIN = "You win!"
MSG_LOSE = "You were defeated..."


class Outcome(str, Enum):
    PLAYING = "playing"
    WIN = "win"
    LOSE = "lose"


@dataclass
class World:
    """Static level geometry; read-only while ticking."""
    width: float = CFG.CANVAS_W
    ground_y: float = CFG.GROUND_Y
    platforms: List[Platform] = field(default_factory=default_platforms)


class Simulation:
    """
    Hero vs goblins on a platform layout.
    One call to tick(dt, inputs) runs a whole frame in this order:
      hero (input -> physics -> state -> strikes),
      each goblin (AI -> movement -> state -> strikes),
      animators, outcome.
    Rendering reads the entities afterwards.
    """

    def __init__(self, hero_cfg: EntityConfig = HERO, goblin_cfg: EntityConfig = GOBLIN,
                 world: World | None = None, hero_x: float = CFG.HERO_START_X,
                 goblin_xs: Sequence[float] = CFG.GOBLIN_START_X):
        self.world = world or World()
        self.hero_cfg = hero_cfg
        self.goblin_cfg = goblin_cfg
        self.hero_x = hero_x
        self.goblin_xs = tuple(goblin_xs)
        self.events: list[dict] = []
        self.restart()

    # ---------- lifecycle ----------
    def restart(self) -> None:
        ground = self.world.ground_y
        self.hero = spawn("hero", self.hero_cfg, self.hero_x, ground)
        self.goblins = [
            spawn("goblin" if i == 0 else f"goblin-{i + 1}", self.goblin_cfg, x, ground,
                  state=State.WALK, facing=FACE_LEFT)
            for i, x in enumerate(self.goblin_xs)
        ]
        self.outcome = Outcome.PLAYING
        self.time = 0.0
        self.events.clear()
        self._dbg("restart")

    @property
    def entities(self) -> list[Entity]:
        return [*self.goblins, self.hero]

    @property
    def message(self) -> str:
        return {Outcome.WIN: MSG_WIN, Outcome.LOSE: MSG_LOSE}.get(self.outcome, MSG_HELP)

    # ---------- debug print ----------
    def _dbg(self, msg: str):
        if logger.isEnabledFor(logging.DEBUG):
            h = self.hero
            gob = " ".join(f"G({g.x:.0f},{g.y:.0f})" for g in self.goblins)
            logger.debug("[%7.0fms] H(%.0f,%.0f) %s | %s", self.time * 1000, h.x, h.y, gob, msg)

    def _log_event(self, text: str, color=(230, 230, 230)):
        self.events.append({"text": text, "color": color, "t": self.time})

    def drain_events(self) -> list[dict]:
        out, self.events = self.events, []
        return out

    # =====================  Update  =====================
    def tick(self, dt, inputs: InputState | None = None) -> Outcome:
        dt = sanitize_dt(dt)
        inputs = inputs or InputState()
        self.time += dt

        self._update_hero(dt, inputs)
        for g in self.goblins:
            self._update_goblin(g, dt)

        for e in self.entities:
            e.animator.update(dt)

        self._update_outcome()
        return self.outcome

    def _move(self, e: Entity, dt: float) -> None:
        prev_bottom = e.bottom
        integrate(e, dt, e.cfg.gravity)
        clamp_world(e, self.world.width)
        # gravity-free entities stay on their ground line
        if e.cfg.gravity > 0:
            resolve_landing(e, prev_bottom, self.world.platforms)

    def _enter(self, e: Entity, state: State, was_attacking: bool) -> None:
        # a finished swing that stays in attack is a fresh swing
        if state is State.ATTACK and (not was_attacking or e.animator.done):
            e.start_attack()
            self._dbg(f"{e.name} attack")
        else:
            e.set_state(state)

    # ---------- hero ----------
    def _update_hero(self, dt: float, inp: InputState) -> None:
        h = self.hero
        h.tick_timers(dt)
        if h.dead:
            return

        hurt = h.state is State.HURT and h.hurt_timer > 0
        direction = 0 if hurt else inp.horizontal
        h.vx = direction * h.cfg.speed
        if direction:
            h.facing = direction

        if inp.jump and h.on_ground and not hurt:
            h.vy = -h.cfg.jump_velocity
            h.on_ground = False
            self._dbg("jump")

        self._move(h, dt)

        was_attacking = h.attacking
        state = next_state(
            h.state, hp=h.hp, grounded=h.on_ground, moving=direction != 0,
            crouching=inp.crouch, attack_pressed=inp.attack,
            can_attack=h.attack_cooldown <= 0, anim_done=h.animator.done,
            hurt_active=hurt, victorious=self.outcome is Outcome.WIN,
        )
        self._enter(h, state, was_attacking)

        for g in self.goblins:
            if try_strike(h, g, self.world.width):
                self._dbg(f"hero hit {g.name}")
                self._log_event(f"Hero hit {g.name} ({g.hp} left)", (240, 200, 120))

    # ---------- goblin ----------
    def _update_goblin(self, g: Entity, dt: float) -> None:
        """Chase the hero when close, swing when its reach touches the hero, else idle."""
        g.tick_timers(dt)
        if g.dead:
            return

        hero = self.hero
        dx = hero.x - g.x
        g.facing = FACE_RIGHT if dx >= 0 else FACE_LEFT

        was_attacking = g.attacking
        hurt = g.state is State.HURT and g.hurt_timer > 0
        moving = wants_attack = False
        g.vx = 0.0
        if not was_attacking and not hurt and abs(dx) < CFG.CHASE_RANGE and not hero.dead:
            if aabb_overlap(attack_box(g), hurt_box(hero)):
                wants_attack = True
            else:
                g.vx = g.cfg.speed * g.facing
                moving = True
        self._move(g, dt)

        state = next_state(
            g.state, hp=g.hp, grounded=g.cfg.gravity <= 0 or g.on_ground, moving=moving,
            attack_pressed=wants_attack, can_attack=g.attack_cooldown <= 0,
            anim_done=g.animator.done, hurt_active=hurt,
        )
        self._enter(g, state, was_attacking)

        if try_strike(g, hero, self.world.width):
            self._dbg(f"{g.name} hit hero")
            self._log_event(f"{g.name} hit you ({hero.hp} left)", (240, 120, 120))

    # ---------- outcome ----------
    def _update_outcome(self) -> None:
        if self.outcome is not Outcome.PLAYING:
            return
        if self.hero.dead:
            self.outcome = Outcome.LOSE
        elif self.goblins and all(g.dead and g.animator.done for g in self.goblins):
            self.outcome = Outcome.WIN
        else:
            return
        logger.info("Encounter over: %s", self.outcome.value)
        self._log_event(self.message, (255, 255, 255))
