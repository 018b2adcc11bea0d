# managers.py

from config import INTERACT_TOLERANCE, WIDTH
from entities import require


class Camera:
    """Horizontal scroll locked to the player once it passes mid-screen."""

    def __init__(self, viewport_width=WIDTH):
        require(viewport_width > 0, "viewport width must be > 0")
        self.viewport_width = viewport_width
        self.offset_x = 0.0

    def update(self, player_x):
        self.offset_x = max(0.0, player_x - self.viewport_width / 2)
        return self.offset_x

    def reset(self):
        self.offset_x = 0.0


class InteractionDetector:
    def __init__(self, tolerance=INTERACT_TOLERANCE):
        self.tolerance = tolerance

    def door_under(self, player, platforms):
        """Door platform the player is standing on, or None.

        The player's horizontal centre must be strictly inside the platform
        and its feet within ``tolerance`` of the top. Later platforms win.
        """
        center = player.center_x
        found = None
        for p in platforms:
            if p.door is None:
                continue
            if p.x < center < p.right and abs(player.bottom - p.y) < self.tolerance:
                found = p
        return found

    def can_interact(self, player, platforms):
        if not player.grounded:
            return None
        return self.door_under(player, platforms)
