"""Run bookkeeping and the running / panel_open / dead state machine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

import config
from config import COIN_SCORE
from events import (
    DeathScreenHidden, DeathScreenShown, DeathStats, PanelClosed, PanelOpened,
)
from logging_utils import log_debug

RUNNING = "running"
PANEL_OPEN = "panel_open"
DEAD = "dead"

DEATH_MESSAGES = (
    "GAME OVER!\nYou fell into the void!",
    "OOPS!\nWatch your step!",
    "OH NO!\nGravity wins!",
    "YIKES!\nThat's a long fall!",
    "WHOOPS!\nBetter luck next jump!",
    "UH OH!\nThe abyss got you!",
    "DANG IT!\nSo close!",
    "OUCH!\nThat had to hurt!",
)


@dataclass
class RunStats:
    distance: float = 0.0
    coins: int = 0


def compute_score(distance: float, coins: int, coin_score: int = COIN_SCORE) -> int:
    return math.floor(distance + coins * coin_score)


class GameStateMachine:
    """Owns the life state and stats; every transition returns the UI events it causes."""

    def __init__(self, rng, messages=DEATH_MESSAGES) -> None:
        self.rng = rng
        self.messages = tuple(messages)
        self.state = RUNNING
        self.active_door: Optional[str] = None
        self.stats = RunStats()
        self.last_death: Optional[DeathStats] = None

    @property
    def is_dead(self) -> bool:
        return self.state == DEAD

    @property
    def panel_open(self) -> bool:
        return self.state == PANEL_OPEN

    def open_panel(self, door: str) -> List[object]:
        if self.state != RUNNING:
            return []
        self.state = PANEL_OPEN
        self.active_door = door
        if config.LOG_ENABLED:
            log_debug(f"GameStateMachine.open_panel door={door}")
        return [PanelOpened(door)]

    def close_panel(self) -> List[object]:
        if self.state != PANEL_OPEN:
            return []
        door = self.active_door
        self.state = RUNNING
        self.active_door = None
        if config.LOG_ENABLED:
            log_debug(f"GameStateMachine.close_panel door={door}")
        return [PanelClosed(door)]

    def die(self) -> List[object]:
        if self.state == DEAD:
            return []
        events = self.close_panel()
        self.state = DEAD
        self.last_death = DeathStats(
            distance=math.floor(self.stats.distance),
            coins=self.stats.coins,
            score=compute_score(self.stats.distance, self.stats.coins),
            message=self.rng.choice(self.messages),
        )
        if config.LOG_ENABLED:
            log_debug(f"GameStateMachine.die stats={self.last_death}")
        events.append(DeathScreenShown(self.last_death))
        return events

    def respawn(self) -> List[object]:
        if self.state != DEAD:
            return []
        self.state = RUNNING
        self.stats = RunStats()
        if config.LOG_ENABLED:
            log_debug("GameStateMachine.respawn")
        return [DeathScreenHidden()]
