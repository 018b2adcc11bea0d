"""Commands the simulation hands to the panel / death-screen UI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeathStats:
    distance: int
    coins: int
    score: int
    message: str


@dataclass(frozen=True)
class PanelOpened:
    door: str


@dataclass(frozen=True)
class PanelClosed:
    door: str


@dataclass(frozen=True)
class DeathScreenShown:
    stats: DeathStats


@dataclass(frozen=True)
class DeathScreenHidden:
    pass
