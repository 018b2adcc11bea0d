# entities_player.py
#
# The runner controlled by the visitor. Position and velocity are kept as
# numpy vectors; the horizontal velocity only records the step applied on
# the current tick since movement speed is constant.
# ------------------------------------------------------

import pygame
import numpy as np
from config import PLAYER_SPAWN, PLAYER_WIDTH, PLAYER_HEIGHT

# ──────────────────────────────────────────────────────────
# Palette (pixel-art plumber)
# ──────────────────────────────────────────────────────────
SHIRT = (229, 37, 33)
OVERALLS = (0, 102, 204)
BUTTONS = (255, 215, 0)
SKIN = (255, 204, 153)
BROWN = (74, 37, 17)

# (x, y, w, h, colour) in a 32x48 sprite facing right
SPRITE = [
    (0, 20, 32, 20, SHIRT),
    (6, 24, 20, 24, OVERALLS),
    (12, 26, 4, 4, BUTTONS),
    (16, 26, 4, 4, BUTTONS),
    (8, 8, 16, 16, SKIN),
    (6, 4, 20, 8, SHIRT),
    (10, 0, 12, 6, SHIRT),
    (14, 2, 4, 4, (255, 255, 255)),
    (12, 14, 3, 3, (0, 0, 0)),
    (18, 14, 3, 3, (0, 0, 0)),
    (10, 18, 12, 3, BROWN),
    (4, 44, 10, 4, BROWN),
    (18, 44, 10, 4, BROWN),
]


# ──────────────────────────────────────────────────────────
# Player entity
# ──────────────────────────────────────────────────────────
class Player:
    def __init__(self, spawn=PLAYER_SPAWN, width=PLAYER_WIDTH, height=PLAYER_HEIGHT):
        self.spawn = (float(spawn[0]), float(spawn[1]))
        self.width = width
        self.height = height
        self.reset()

    def reset(self):
        """Put the player back on the spawn point, at rest and airborne."""
        self.pos = np.array(self.spawn, dtype=float)
        self.vel = np.array([0.0, 0.0], dtype=float)
        self.grounded = False
        self.facing = "right"

    # Rectangle accessors used by collision and interaction checks
    @property
    def x(self):
        return float(self.pos[0])

    @x.setter
    def x(self, value):
        self.pos[0] = value

    @property
    def y(self):
        return float(self.pos[1])

    @y.setter
    def y(self, value):
        self.pos[1] = value

    @property
    def velocity_y(self):
        return float(self.vel[1])

    @velocity_y.setter
    def velocity_y(self, value):
        self.vel[1] = value

    @property
    def bottom(self):
        return self.y + self.height

    @property
    def center_x(self):
        return self.x + self.width / 2

    def draw(self, surf, camera_offset):
        sx = int(self.x - camera_offset)
        sy = int(self.y)
        for px, py, w, h, color in SPRITE:
            if self.facing == "left":
                px = self.width - px - w
            pygame.draw.rect(surf, color, (sx + px, sy + py, w, h))
