# entities_pickups.py
import pygame

from config import COIN_SIZE

# Horizontal squash per animation phase (spinning coin)
SPIN = (1.0, 0.7, 0.3, 0.7)


class Coin:
    """Floating coin. ``collected`` only ever goes from False to True."""

    def __init__(self, x, y, size=COIN_SIZE):
        self.x, self.y = float(x), float(y)
        self.width = self.height = size
        self.collected = False

    def collect(self):
        if self.collected:
            return False
        self.collected = True
        return True

    def draw(self, surf, camera_offset, frame=0):
        if self.collected:
            return
        draw_coin(surf, (self.x - camera_offset, self.y), self.width, frame)


def draw_coin(surf, pos, size, frame=0):
    scale = SPIN[(frame // 10) % len(SPIN)]
    w = max(2, int(size * scale))
    rect = pygame.Rect(0, 0, w, size)
    rect.center = (int(pos[0] + size / 2), int(pos[1] + size / 2))
    pygame.draw.ellipse(surf, (255, 215, 0), rect)
    pygame.draw.ellipse(surf, (255, 165, 0), rect, 2)
