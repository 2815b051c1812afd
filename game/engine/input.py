"""Keyboard state tracking that turns pygame events into input snapshots."""

from __future__ import annotations

from typing import Dict, List

import pygame as pg

from .player import InputSnapshot
from .world import Direction

KEY_BINDINGS: Dict[int, Direction] = {
    pg.K_w: Direction.UP,
    pg.K_UP: Direction.UP,
    pg.K_s: Direction.DOWN,
    pg.K_DOWN: Direction.DOWN,
    pg.K_a: Direction.LEFT,
    pg.K_LEFT: Direction.LEFT,
    pg.K_d: Direction.RIGHT,
    pg.K_RIGHT: Direction.RIGHT,
}
INTERACT_KEYS = (pg.K_SPACE,)


class KeyboardInput:
    """Level-triggered directions, edge-triggered interact."""

    def __init__(self) -> None:
        self._held: List[int] = []
        self._interact = False
        self._close_dialog = False

    def handle_event(self, event: pg.event.Event) -> None:
        if event.type == pg.KEYDOWN:
            if event.key in KEY_BINDINGS:
                if event.key in self._held:
                    self._held.remove(event.key)
                self._held.append(event.key)
            elif event.key in INTERACT_KEYS:
                self._interact = True
        elif event.type == pg.KEYUP:
            if event.key in self._held:
                self._held.remove(event.key)
        elif event.type == pg.WINDOWFOCUSLOST:
            # KEYUP never arrives for keys released while unfocused.
            self.release_all()

    def request_close(self) -> None:
        self._close_dialog = True

    def release_all(self) -> None:
        self._held.clear()

    def snapshot(self) -> InputSnapshot:
        """Sample the held keys and consume pending edges."""

        directions: List[Direction] = []
        for key in self._held:
            direction = KEY_BINDINGS[key]
            if direction in directions:
                directions.remove(direction)
            directions.append(direction)
        snapshot = InputSnapshot(tuple(directions), self._interact, self._close_dialog)
        self._interact = False
        self._close_dialog = False
        return snapshot
