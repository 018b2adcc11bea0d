"""Fixed-step platformer physics: one call per frame, no dt."""

from __future__ import annotations

from config import (
    DEATH_MARGIN, DISTANCE_PER_TICK, GRAVITY, JUMP_POWER, LANDING_BAND,
    PLAYER_SPEED,
)
from entities import rects_overlap, spans_overlap


class PhysicsEngine:
    def __init__(self, *, speed: float = PLAYER_SPEED, gravity: float = GRAVITY,
                 jump_power: float = JUMP_POWER,
                 distance_step: float = DISTANCE_PER_TICK,
                 landing_band: float = LANDING_BAND,
                 death_margin: float = DEATH_MARGIN) -> None:
        self.speed = speed
        self.gravity = gravity
        self.jump_power = jump_power
        self.distance_step = distance_step
        self.landing_band = landing_band
        self.death_margin = death_margin

    def move(self, player, inp, stats) -> None:
        """Horizontal step for held directions. Only rightward steps add distance."""
        dx = 0.0
        if inp.left:
            dx -= self.speed
            player.facing = "left"
        if inp.right:
            dx += self.speed
            player.facing = "right"
            stats.distance += self.distance_step
        player.x = player.x + dx
        player.vel[0] = dx

    def jump(self, player) -> bool:
        if not player.grounded:
            return False
        player.velocity_y = self.jump_power
        player.grounded = False
        return True

    def fall(self, player) -> None:
        player.velocity_y = player.velocity_y + self.gravity
        player.y = player.y + player.velocity_y

    def land(self, player, platforms) -> None:
        """Snap a falling player onto any platform whose top band holds its feet.

        Every platform is checked and the last hit wins.
        """
        player.grounded = False
        for p in platforms:
            bottom = player.bottom
            if (spans_overlap(player.x, player.x + player.width, p.x, p.right)
                    and p.y < bottom < p.y + self.landing_band
                    and player.velocity_y > 0):
                player.y = p.y - player.height
                player.velocity_y = 0.0
                player.grounded = True

    def collect(self, player, coins, stats) -> int:
        picked = 0
        for coin in coins:
            if not coin.collected and rects_overlap(player, coin):
                coin.collect()
                picked += 1
        stats.coins += picked
        return picked

    @staticmethod
    def clamp_left(player, camera_offset) -> None:
        if player.x < camera_offset:
            player.x = camera_offset

    def has_fallen(self, player, viewport_height) -> bool:
        return player.y > viewport_height + self.death_margin
