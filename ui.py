# ui.py
# Info panel / death screen overlay. Listens to Game events and maps its
# buttons back onto Game.close_info() and Game.respawn().
import copy
import json

import pygame

import config
from config import HEIGHT, WIDTH
from entities import require
from events import DeathScreenHidden, DeathScreenShown, PanelClosed, PanelOpened
from logging_utils import log_debug
from panels import PANELS


def load_panel_content(path=None):
    """Door -> panel content.

    Without ``path`` the bundled ``panels.PANELS`` is returned. A JSON file
    at ``path`` overrides it; when that file is unreadable the bundled
    content is used instead.
    """
    if path is None:
        return copy.deepcopy(PANELS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        if config.LOG_ENABLED:
            log_debug(f"load_panel_content fallback: {exc}")
        return copy.deepcopy(PANELS)

    require(isinstance(data, dict), "panel content must be an object keyed by door id")
    for door, panel in data.items():
        require(isinstance(panel, dict) and "title" in panel,
                f"panel '{door}' needs a title")
        require(isinstance(panel.get("sections", []), list),
                f"panel '{door}' sections must be a list")
    return data


class Button:
    def __init__(self, rect, text, font_size):
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font_size = font_size
        self.font = None

    def draw(self, surf):
        if self.font is None:
            self.font = pygame.font.SysFont("Arial", self.font_size)
        pygame.draw.rect(surf, (100, 100, 100), self.rect)
        txt = self.font.render(self.text, True, (255, 215, 0))
        surf.blit(txt, (self.rect.centerx - txt.get_width()/2,
                        self.rect.centery - txt.get_height()/2))

    def is_hovered(self, pos):
        return self.rect.collidepoint(pos)


class PanelOverlay:
    def __init__(self, game, content, size=(WIDTH, HEIGHT)):
        self.game = game
        self.content = content
        self.mode = None        # None | "panel" | "death"
        self.door = None
        self.death = None
        self.layout(size)

    def layout(self, size):
        w, h = size
        self.rect = pygame.Rect(w // 2 - 320, h // 2 - 220, 640, 440)
        button = (self.rect.centerx - 140, self.rect.bottom - 60, 280, 40)
        self.close_button = Button(button, "PRESS E TO CLOSE", 20)
        self.retry_button = Button(button, "PRESS R TO RETRY", 20)

    # ──────────────────────────────────────────────────────
    # Game listener
    def handle_event(self, event):
        if isinstance(event, PanelOpened):
            self.mode, self.door = "panel", event.door
        elif isinstance(event, DeathScreenShown):
            self.mode, self.door, self.death = "death", None, event.stats
        elif isinstance(event, (PanelClosed, DeathScreenHidden)):
            self.mode, self.door = None, None

    def handle_click(self, pos):
        if self.mode == "panel" and self.close_button.is_hovered(pos):
            return self.game.close_info()
        if self.mode == "death" and self.retry_button.is_hovered(pos):
            return self.game.respawn()
        return []

    # ──────────────────────────────────────────────────────
    def lines(self):
        """(text, style) pairs for the current overlay; style is title/heading/body."""
        if self.mode == "panel":
            panel = self.content.get(self.door, {})
            out = [(panel.get("title", self.door.upper()), "title")]
            for section in panel.get("sections", []):
                out.append((section.get("heading", ""), "heading"))
                out.extend((line, "body") for line in section.get("lines", []))
            return out
        if self.mode == "death":
            d = self.death
            out = [(line, "title") for line in d.message.split("\n")]
            out += [
                ("Your Stats:", "heading"),
                (f"Distance: {d.distance}m", "body"),
                (f"Coins: {d.coins}", "body"),
                (f"Final Score: {d.score}", "heading"),
            ]
            return out
        return []

    def draw(self, surf):
        if self.mode is None:
            return
        pygame.draw.rect(surf, (0, 0, 0), self.rect)
        pygame.draw.rect(surf, (255, 215, 0), self.rect, 4)
        fonts = {
            "title": pygame.font.SysFont("Arial", 28, bold=True),
            "heading": pygame.font.SysFont("Arial", 20, bold=True),
            "body": pygame.font.SysFont("Arial", 16),
        }
        colors = {"title": (255, 215, 0), "heading": (255, 215, 0), "body": (255, 255, 255)}
        y = self.rect.y + 20
        for text, style in self.lines():
            rendered = fonts[style].render(text, True, colors[style])
            surf.blit(rendered, (self.rect.x + 24, y))
            y += rendered.get_height() + 6
        button = self.close_button if self.mode == "panel" else self.retry_button
        button.draw(surf)
