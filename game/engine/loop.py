"""Per-frame update and render scheduling."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

import pygame as pg

from .camera import Camera
from .dialogue import DialogueState, attempt_interact
from .entities import NPC, Player
from .player import InputSnapshot, PlayerController
from .render import Renderer
from .tilemap import Grid


class LoopState(Enum):
    RUNNING = "running"
    PAUSED = "paused"


class GameLoop:
    """Owns the world state and advances it one frame at a time.

    While a dialog is open the loop is paused: timers and movement freeze but
    frames keep rendering so the world stays visible behind the overlay.
    """

    def __init__(
        self,
        grid: Grid,
        npcs: List[NPC],
        player: Player,
        renderer: Renderer,
        viewport: Tuple[int, int],
        move_delay: float = 0.2,
        anim_frame_duration: float = 0.5,
    ) -> None:
        self.grid = grid
        self.npcs = npcs
        self.player = player
        self.renderer = renderer
        self.viewport = viewport
        self.controller = PlayerController(player, move_delay, anim_frame_duration)
        self.dialogue = DialogueState()
        self.camera = self._follow()

    @property
    def state(self) -> LoopState:
        return LoopState.PAUSED if self.dialogue.open else LoopState.RUNNING

    def tick(self, dt: float, snapshot: InputSnapshot) -> Optional[str]:
        """Apply one frame of input; return dialog text if one just opened."""

        opened: Optional[str] = None
        if snapshot.close_dialog and self.dialogue.open:
            self.dialogue.close()
        elif snapshot.interact:
            opened = attempt_interact(self.dialogue, self.player, self.npcs)

        if self.state is LoopState.RUNNING:
            self.controller.update(dt, snapshot, self.grid, self.npcs)
            self.camera = self._follow()
        return opened

    def frame(self, surface: pg.Surface, dt: float, snapshot: InputSnapshot) -> Optional[str]:
        opened = self.tick(dt, snapshot)
        self.renderer.render(surface, self.grid, self.camera, self.player, self.npcs)
        return opened

    def _follow(self) -> Camera:
        tile_size = self.renderer.tile_size
        return Camera.follow(
            self.player.position,
            self.grid.pixel_size(tile_size),
            self.viewport,
            tile_size,
        )
