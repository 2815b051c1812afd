"""Player controller: rate-limited grid steps and the walk animation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .entities import NPC, Player
from .tilemap import Grid
from .world import Direction, try_move


@dataclass(frozen=True)
class InputSnapshot:
    """Input sampled once per frame.

    ``directions`` holds the currently held directions in press order.
    ``interact`` and ``close_dialog`` are edges: true only on the frame the
    press (or overlay click) happened.
    """

    directions: Tuple[Direction, ...] = ()
    interact: bool = False
    close_dialog: bool = False

    @property
    def direction(self) -> Optional[Direction]:
        # The most recently pressed key wins when several are held.
        return self.directions[-1] if self.directions else None


class PlayerController:
    """Drive a :class:`Player` from input snapshots and elapsed time."""

    def __init__(
        self,
        player: Player,
        move_delay: float = 0.2,
        anim_frame_duration: float = 0.5,
    ) -> None:
        self.player = player
        self.move_delay = move_delay
        self.anim_frame_duration = anim_frame_duration
        self.move_timer = 0.0
        self.anim_timer = 0.0

    # ------------------------------------------------------------------ movement
    def update(self, dt: float, snapshot: InputSnapshot, grid: Grid, npcs: Sequence[NPC]) -> bool:
        """Advance timers by ``dt`` seconds; return True if the player stepped."""

        if dt < 0.0:
            return False

        self.move_timer += dt
        direction = snapshot.direction
        if direction is None:
            self.player.anim_frame = 0
            self.anim_timer = 0.0
            return False

        self.player.facing = direction
        self._update_animation(dt)

        if self.move_timer < self.move_delay:
            return False
        self.move_timer = 0.0
        target = try_move(grid, npcs, self.player, direction)
        if target is None:
            return False
        self.player.move_to(target)
        return True

    def _update_animation(self, dt: float) -> None:
        self.anim_timer += dt
        if self.anim_timer >= self.anim_frame_duration:
            self.anim_timer = 0.0
            self.player.anim_frame = (self.player.anim_frame + 1) % 2
