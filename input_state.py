"""Per-tick input snapshot and the pygame key mapper that produces it."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from config import KEY_BINDINGS


@dataclass(frozen=True)
class InputState:
    left: bool = False
    right: bool = False
    jump: bool = False       # edge: true only on the tick the key went down
    interact: bool = False   # edge
    respawn: bool = False    # edge


def resolve_key(name: str) -> int:
    code = getattr(pygame, f"K_{name}", None)
    if code is None:
        code = getattr(pygame, f"K_{name.upper()}")
    return code


class InputMapper:
    """Collects key events between ticks; ``sample()`` returns and clears the edges."""

    def __init__(self, bindings=KEY_BINDINGS) -> None:
        self.actions = {}
        for action, names in bindings.items():
            for name in names:
                self.actions[resolve_key(name)] = action
        self.held_keys = set()
        self._edges = set()

    def action_for(self, key):
        return self.actions.get(key)

    def is_held(self, action) -> bool:
        return any(self.actions[key] == action for key in self.held_keys)

    def handle_event(self, event) -> str | None:
        """Record a KEYDOWN/KEYUP; returns the bound action name, if any."""
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return None
        action = self.action_for(event.key)
        if action is None:
            return None
        if event.type == pygame.KEYDOWN:
            if event.key not in self.held_keys:
                self._edges.add(action)
            self.held_keys.add(event.key)
        else:
            self.held_keys.discard(event.key)
        return action

    def clear(self) -> None:
        self.held_keys.clear()
        self._edges.clear()

    def sample(self) -> InputState:
        edges = self._edges
        self._edges = set()
        return InputState(
            left=self.is_held("left"),
            right=self.is_held("right"),
            jump="jump" in edges,
            interact="interact" in edges,
            respawn="respawn" in edges,
        )
