# entities_platforms.py
from dataclasses import dataclass
from typing import Optional

import pygame

# Platform categories
GROUND = "ground"
BLOCK = "block"
QUESTION = "question"
BRICK = "brick"
COIN = "coin"
PIPE = "pipe"

RANDOM_KINDS = (BLOCK, QUESTION, BRICK)

COLORS = {
    GROUND: (139, 69, 19),
    BLOCK: (160, 82, 45),
    QUESTION: (255, 215, 0),
    BRICK: (192, 64, 0),
    COIN: (255, 215, 0),
    PIPE: (72, 187, 120),
}


@dataclass(frozen=True)
class Platform:
    """Static, solid-from-above rectangle. ``door`` links to an info panel."""

    x: float
    y: float
    width: float
    height: float
    kind: str = BLOCK
    door: Optional[str] = None
    label: Optional[str] = None

    @property
    def right(self):
        return self.x + self.width

    def draw(self, surf, camera_offset, font=None):
        sx = int(self.x - camera_offset)
        rect = pygame.Rect(sx, int(self.y), int(self.width), int(self.height))
        base = COLORS.get(self.kind, COLORS[BLOCK])

        if self.kind == GROUND:
            pygame.draw.rect(surf, base, rect)
            pygame.draw.rect(surf, (34, 139, 34), (rect.x, rect.y, rect.w, 10))
            for i in range(0, rect.w, 20):
                pygame.draw.rect(surf, (50, 205, 50), (rect.x + i, rect.y + 2, 8, 4))
        elif self.kind == PIPE:
            pygame.draw.rect(surf, base, (rect.x + 10, rect.y, rect.w - 20, rect.h))
            pygame.draw.rect(surf, (95, 214, 138), (rect.x, rect.y - 10, rect.w, 20))
            pygame.draw.rect(surf, (45, 134, 89), (rect.x + 15, rect.y + 5, rect.w - 30, rect.h - 10))
        elif self.kind == QUESTION:
            pygame.draw.rect(surf, base, rect)
            pygame.draw.rect(surf, (255, 165, 0), rect, 4)
            if font is not None:
                mark = font.render("?", True, (0, 0, 0))
                surf.blit(mark, mark.get_rect(center=rect.center))
        elif self.kind == BRICK:
            pygame.draw.rect(surf, base, rect)
            brick_w, brick_h = 35, 15
            for row in range(0, rect.h, brick_h):
                shift = (row // brick_h % 2) * (brick_w // 2)
                for col in range(0, rect.w, brick_w):
                    cell = pygame.Rect(rect.x + col + shift, rect.y + row, brick_w, brick_h)
                    pygame.draw.rect(surf, (139, 0, 0), cell.clip(rect), 2)
        elif self.kind == COIN:
            pygame.draw.rect(surf, base, rect)
            pygame.draw.rect(surf, (255, 237, 78), (rect.x + 5, rect.y + 5, rect.w - 10, rect.h // 2 - 5))
            pygame.draw.rect(surf, (255, 165, 0), rect, 3)
        else:
            pygame.draw.rect(surf, base, rect)
            pygame.draw.rect(surf, (210, 105, 30), (rect.x + 3, rect.y + 3, rect.w - 6, 8))

        if self.label and font is not None:
            text = font.render(self.label, True, (255, 215, 0))
            surf.blit(text, text.get_rect(midbottom=(rect.centerx, rect.y - 12)))
