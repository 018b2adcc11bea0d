# background.py

from dataclasses import dataclass

import pygame
from config import CLOUD_PARALLAX

SKY = (92, 148, 252)
CLOUD = (255, 255, 255)


@dataclass
class Cloud:
    x: float
    y: float
    width: float
    height: float


def spawn_cloud(rng, x):
    """Cloud with randomised height and size whose left edge sits at ``x``."""
    return Cloud(
        x=x,
        y=50 + rng.random() * 100,
        width=100 + rng.random() * 40,
        height=40 + rng.random() * 20,
    )


class Background:
    def __init__(self, parallax=CLOUD_PARALLAX):
        self.parallax = parallax

    def screen_x(self, cloud, camera_offset):
        return cloud.x - camera_offset * self.parallax

    def draw(self, surf, clouds, camera_offset):
        surf.fill(SKY)
        width = surf.get_width()
        for c in clouds:
            cx = self.screen_x(c, camera_offset)
            if cx + c.width < -100 or cx > width + 100:
                continue
            x, y, w, h = int(cx), int(c.y), int(c.width), int(c.height)
            pygame.draw.rect(surf, CLOUD, (x + 10, y, w - 20, h - 10))
            pygame.draw.rect(surf, CLOUD, (x, y + 10, w, h - 20))
            pygame.draw.rect(surf, CLOUD, (x + 5, y + 5, 10, 10))
            pygame.draw.rect(surf, CLOUD, (x + w - 15, y + 5, 10, 10))
