"""Procedural level: tutorial doors up front, random platforms beyond."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import config
from background import Cloud, spawn_cloud
from config import (
    CLOUD_COUNT, CLOUD_PARALLAX, CLOUD_TARGET, COIN_ABOVE_CHANCE,
    COIN_ABOVE_OFFSET, COIN_ARC_CEILING, COIN_ARC_CHANCE, COIN_ARC_MIN_GAP,
    COIN_ARC_OFFSET, COIN_SIZE, GENERATION_BATCH, GENERATION_MARGIN, GRAVITY,
    INITIAL_RANDOM_STEPS, JUMP_POWER, PLATFORM_GAP, PLATFORM_HEIGHT, PLATFORM_WIDTH,
    PLATFORM_Y, SCATTERED_COINS, TUTORIAL_FRONTIER,
)
from entities import (
    BRICK, COIN, GROUND, PIPE, QUESTION, RANDOM_KINDS, Coin, Platform, require,
)
from logging_utils import log_debug

# Extended safe ground plus one platform per info panel.
TUTORIAL_LAYOUT = (
    Platform(0, 550, 600, 50, kind=GROUND),
    Platform(250, 480, 100, 150, kind=PIPE, door="about", label="ABOUT"),
    Platform(420, 480, 120, 40, kind=QUESTION, door="skills", label="SKILLS"),
    Platform(620, 480, 140, 40, kind=BRICK, door="experience", label="EXP"),
    Platform(840, 480, 120, 40, kind=COIN, door="projects", label="PROJECTS"),
)


def jump_apex(jump_power: float, gravity: float) -> float:
    """Height gained by a jump from rest: v^2 / (2g)."""
    return jump_power * jump_power / (2 * gravity)


@dataclass
class WorldState:
    platforms: List[Platform] = field(default_factory=list)
    coins: List[Coin] = field(default_factory=list)
    clouds: List[Cloud] = field(default_factory=list)
    frontier_x: float = 0.0

    def advance_frontier(self, x: float) -> None:
        require(x >= self.frontier_x, f"frontier cannot move back ({x} < {self.frontier_x})")
        self.frontier_x = x

    @property
    def coins_collected(self) -> int:
        return sum(1 for c in self.coins if c.collected)

    def visible_platforms(self, camera_offset: float, viewport_width: float, pad: float = 100):
        left, right = camera_offset - pad, camera_offset + viewport_width + pad
        return [p for p in self.platforms if p.right > left and p.x < right]

    def visible_coins(self, camera_offset: float, viewport_width: float, pad: float = 50):
        left, right = camera_offset - pad, camera_offset + viewport_width + pad
        return [c for c in self.coins if not c.collected and left < c.x < right]


class WorldGenerator:
    """Builds and extends a WorldState from an injected random source.

    ``rng`` only needs ``random()`` and ``choice()``; tests pass a seeded
    ``random.Random``.
    """

    def __init__(self, rng, *, margin: float = GENERATION_MARGIN,
                 batch: int = GENERATION_BATCH,
                 initial_steps: int = INITIAL_RANDOM_STEPS,
                 parallax: float = CLOUD_PARALLAX,
                 jump_power: float = JUMP_POWER,
                 gravity: float = GRAVITY) -> None:
        require(margin >= 0, "generation margin must be >= 0")
        require(batch > 0, "generation batch must be > 0")
        self.rng = rng
        self.margin = margin
        self.batch = batch
        self.initial_steps = initial_steps
        self.parallax = parallax
        # coin above a platform must stay inside the jump arc
        self.coin_lift = min(COIN_ABOVE_OFFSET, jump_apex(jump_power, gravity) - COIN_SIZE)

    def _uniform(self, span) -> float:
        lo, hi = span
        return lo + self.rng.random() * (hi - lo)

    # ──────────────────────────────────────────────────────
    # Initial world
    def build_initial(self) -> WorldState:
        world = WorldState(platforms=list(TUTORIAL_LAYOUT))
        world.advance_frontier(TUTORIAL_FRONTIER)

        for i in range(CLOUD_COUNT):
            world.clouds.append(spawn_cloud(self.rng, i * 300 + self.rng.random() * 150))

        for i in range(SCATTERED_COINS):
            world.coins.append(Coin(
                i * 250 + 200 + self.rng.random() * 100,
                200 + self.rng.random() * 200,
            ))

        for _ in range(self.initial_steps):
            self.step(world)

        if config.LOG_ENABLED:
            log_debug(f"WorldGenerator.build_initial platforms={len(world.platforms)} "
                      f"coins={len(world.coins)} frontier={world.frontier_x:.1f}")
        return world

    # ──────────────────────────────────────────────────────
    # One synthesis step
    def step(self, world: WorldState) -> Platform:
        gap = self._uniform(PLATFORM_GAP)
        x = world.frontier_x + gap
        y = self._uniform(PLATFORM_Y)
        width = self._uniform(PLATFORM_WIDTH)
        kind = self.rng.choice(RANDOM_KINDS)

        platform = Platform(x, y, width, PLATFORM_HEIGHT, kind=kind)
        world.platforms.append(platform)
        world.advance_frontier(platform.right)

        # above the platform, low enough to grab mid-jump
        if self.rng.random() < COIN_ABOVE_CHANCE:
            world.coins.append(Coin(x + width / 2 - COIN_SIZE / 2, y - self.coin_lift))

        # over the gap, at the height of a typical jump arc
        if self.rng.random() < COIN_ARC_CHANCE and gap > COIN_ARC_MIN_GAP:
            world.coins.append(Coin(x - gap / 2 - COIN_SIZE / 2,
                                    min(y, COIN_ARC_CEILING) - COIN_ARC_OFFSET))
        return platform

    # ──────────────────────────────────────────────────────
    # Camera-driven top-up
    def ensure_generated(self, world: WorldState, camera_offset: float,
                         viewport_width: float) -> int:
        """Extend the world until it reaches ``viewport_width + margin`` past the camera.

        Returns the number of platforms added.
        """
        require(viewport_width > 0, "viewport width must be > 0")
        added = 0
        while world.frontier_x - camera_offset < viewport_width + self.margin:
            for _ in range(self.batch):
                self.step(world)
                added += 1
        if added and config.LOG_ENABLED:
            log_debug(f"WorldGenerator.ensure_generated added={added} frontier={world.frontier_x:.1f}")
        return added

    def update_clouds(self, world: WorldState, camera_offset: float,
                      viewport_width: float) -> None:
        view_left = camera_offset * self.parallax
        world.clouds = [c for c in world.clouds if c.x + c.width >= view_left]
        if len(world.clouds) < CLOUD_TARGET:
            world.clouds.append(spawn_cloud(
                self.rng, view_left + viewport_width + self.rng.random() * 200))
