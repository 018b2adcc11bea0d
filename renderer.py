# renderer.py
# Paints a FrameSnapshot. Purely cosmetic: reads the snapshot, never mutates it.

import pygame

from background import Background
from entities import draw_coin
from game_state import RUNNING

GOLD = (255, 215, 0)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
PAGE = (24, 26, 38)


class Renderer:
    def __init__(self):
        self.background = Background()
        self._fonts = {}

    def font(self, size):
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont("Arial", size, bold=True)
        return self._fonts[size]

    # ──────────────────────────────────────────────────────
    def draw(self, surf, snap):
        if not snap.active:
            self.draw_idle(surf)
            return

        offset = snap.camera_offset
        self.background.draw(surf, snap.world.clouds, offset)
        for platform in snap.world.visible_platforms(offset, snap.width):
            platform.draw(surf, offset, self.font(14))
        for coin in snap.world.visible_coins(offset, snap.width):
            coin.draw(surf, offset, snap.frame)
        snap.player.draw(surf, offset)

        if snap.prompt is not None and snap.state == RUNNING:
            p = snap.prompt
            self.draw_prompt(surf, p.x - offset + p.width / 2, p.y - 40)
        self.draw_hud(surf, snap)

    def draw_prompt(self, surf, x, y):
        box = pygame.Rect(int(x) - 30, int(y), 60, 30)
        pygame.draw.rect(surf, GOLD, box)
        pygame.draw.rect(surf, BLACK, box, 3)
        pygame.draw.polygon(surf, GOLD, [(x - 5, y + 30), (x, y + 40), (x + 5, y + 30)])
        small = self.font(10)
        for i, word in enumerate(("PRESS", "E")):
            text = small.render(word, True, BLACK)
            surf.blit(text, text.get_rect(center=(box.centerx, box.y + 9 + i * 11)))

    def draw_hud(self, surf, snap):
        width = surf.get_width()
        stats = snap.stats

        # coin counter, top right
        box = pygame.Rect(width - 150, 15, 135, 45)
        pygame.draw.rect(surf, BLACK, box)
        pygame.draw.rect(surf, GOLD, box, 3)
        draw_coin(surf, (box.x + 10, box.y + 12), 20, snap.frame)
        surf.blit(self.font(18).render(f"x {stats.coins}", True, GOLD), (box.x + 40, box.y + 12))

        # distance + coins, top left
        box = pygame.Rect(20, 15, 250, 65)
        pygame.draw.rect(surf, BLACK, box)
        pygame.draw.rect(surf, GOLD, box, 3)
        surf.blit(self.font(14).render(f"DISTANCE: {int(stats.distance)}m", True, GOLD),
                  (box.x + 10, box.y + 10))
        draw_coin(surf, (box.x + 10, box.y + 35), 15, snap.frame)
        surf.blit(self.font(16).render(f"x {stats.coins}", True, GOLD), (box.x + 35, box.y + 35))

        if stats.distance < 100 and snap.frame % 60 < 30:
            hint = self.font(16).render("RUN RIGHT! ->", True, GOLD)
            surf.blit(hint, hint.get_rect(center=(width // 2, 100)))

    def draw_idle(self, surf):
        surf.fill(PAGE)
        cx, cy = surf.get_width() // 2, surf.get_height() // 2
        title = self.font(48).render("PORTFOLIO", True, WHITE)
        surf.blit(title, title.get_rect(center=(cx, cy - 40)))
        hint = self.font(20).render("Press G for Game Mode", True, GOLD)
        surf.blit(hint, hint.get_rect(center=(cx, cy + 30)))
