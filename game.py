# game.py
# ──────────────────────────────────────────────────────────────
# Simulation core for the portfolio runner.
# Owns the player, world, camera and life state; knows nothing about
# pygame surfaces. The UI subscribes with add_listener() and gets the
# PanelOpened / PanelClosed / DeathScreen* events synchronously.
# ──────────────────────────────────────────────────────────────

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

import config
from config import DOOR_IDS, HEIGHT, SEED, WIDTH
from entities import Platform, Player, require
from game_state import DEAD, GameStateMachine, RunStats
from input_state import InputState
from logging_utils import log_debug
from managers import Camera, InteractionDetector
from physics import PhysicsEngine
from world import WorldGenerator, WorldState

NO_INPUT = InputState()


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything the renderer reads for one frame."""

    active: bool
    state: str
    active_door: Optional[str]
    world: WorldState
    player: Player
    camera_offset: float
    stats: RunStats
    frame: int
    prompt: Optional[Platform]
    width: int
    height: int


class Game:
    def __init__(self, width: int = WIDTH, height: int = HEIGHT, *,
                 seed: Optional[int] = SEED, rng=None, doors=DOOR_IDS) -> None:
        require(width > 0 and height > 0, "viewport size must be positive")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random(seed)
        self.doors = frozenset(doors)

        self.physics = PhysicsEngine()
        self.generator = WorldGenerator(self.rng)
        self.camera = Camera(width)
        self.interaction = InteractionDetector()
        self.machine = GameStateMachine(self.rng)
        self.player = Player()

        self.active = False
        self.frame = 0
        self._listeners: List[Callable[[object], None]] = []
        self.world = self.generator.build_initial()

    # ──────────────────────────────────────────────────────
    # Read-only views
    @property
    def state(self) -> str:
        return self.machine.state

    @property
    def stats(self) -> RunStats:
        return self.machine.stats

    @property
    def active_door(self) -> Optional[str]:
        return self.machine.active_door

    def snapshot(self) -> FrameSnapshot:
        prompt = None
        if self.state != DEAD:
            prompt = self.interaction.door_under(self.player, self.world.platforms)
        return FrameSnapshot(
            active=self.active,
            state=self.state,
            active_door=self.active_door,
            world=self.world,
            player=self.player,
            camera_offset=self.camera.offset_x,
            stats=replace(self.stats),
            frame=self.frame,
            prompt=prompt,
            width=self.width,
            height=self.height,
        )

    # ──────────────────────────────────────────────────────
    # Observers
    def add_listener(self, listener: Callable[[object], None]) -> None:
        self._listeners.append(listener)

    def _emit(self, events: List[object]) -> List[object]:
        for event in events:
            for listener in self._listeners:
                listener(event)
        return events

    # ──────────────────────────────────────────────────────
    # Lifecycle
    def start(self) -> None:
        if self.active:
            return
        self.active = True
        if config.LOG_ENABLED:
            log_debug("Game.start")

    def stop(self) -> List[object]:
        if not self.active:
            return []
        self.active = False
        if config.LOG_ENABLED:
            log_debug("Game.stop")
        return self._emit(self.machine.close_panel())

    def resize(self, width: int, height: int) -> None:
        require(width > 0 and height > 0, "viewport size must be positive")
        self.width, self.height = width, height
        self.camera.viewport_width = width
        if config.LOG_ENABLED:
            log_debug(f"Game.resize {width}x{height}")

    # ──────────────────────────────────────────────────────
    # Commands (also reachable from UI buttons)
    def interact(self) -> List[object]:
        if not self.active or self.machine.is_dead:
            return []
        if self.machine.panel_open:
            return self._emit(self.machine.close_panel())
        platform = self.interaction.can_interact(self.player, self.world.platforms)
        if platform is None:
            return []
        if platform.door not in self.doors:
            if config.LOG_ENABLED:
                log_debug(f"Game.interact unknown door={platform.door}")
            return []
        return self._emit(self.machine.open_panel(platform.door))

    def close_info(self) -> List[object]:
        return self._emit(self.machine.close_panel())

    def respawn(self) -> List[object]:
        if not self.active or not self.machine.is_dead:
            return []
        self.player.reset()
        self.camera.reset()
        self.world = self.generator.build_initial()
        return self._emit(self.machine.respawn())

    # ──────────────────────────────────────────────────────
    # Per-frame update
    def tick(self, inp: InputState = NO_INPUT) -> List[object]:
        if not self.active:
            return []

        events: List[object] = []
        if inp.respawn:
            events += self.respawn()
        if self.machine.is_dead:
            return events
        if inp.interact:
            events += self.interact()
        if inp.jump:
            self.physics.jump(self.player)

        player, world = self.player, self.world
        self.physics.move(player, inp, self.stats)
        self.camera.update(player.x)
        self.physics.fall(player)
        self.physics.land(player, world.platforms)
        self.physics.collect(player, world.coins, self.stats)

        self.generator.ensure_generated(world, self.camera.offset_x, self.width)
        self.generator.update_clouds(world, self.camera.offset_x, self.width)

        self.physics.clamp_left(player, self.camera.offset_x)
        self.frame += 1

        if self.physics.has_fallen(player, self.height):
            events += self._emit(self.machine.die())
        return events
