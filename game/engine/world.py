"""Grid movement and collision rules for the overworld."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

from .tilemap import Grid

if TYPE_CHECKING:  # pragma: no cover - import cycle guard for type checking
    from .entities import NPC, Player


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def is_blocked(grid: Grid, npcs: Iterable["NPC"], x: int, y: int) -> bool:
    """Return True when ``(x, y)`` cannot be entered."""

    if not grid.in_bounds(x, y):
        return True
    if grid.is_solid(x, y):
        return True
    # NPCs never move, but content can change between runs so scan the live list.
    return any(npc.x == x and npc.y == y for npc in npcs)


def try_move(
    grid: Grid,
    npcs: Iterable["NPC"],
    player: "Player",
    direction: Direction,
) -> Optional[Tuple[int, int]]:
    """Resolve one step of ``player`` towards ``direction``.

    The player always turns to face ``direction``, even when the step is
    rejected. Returns the destination cell, or ``None`` when blocked; the
    caller is responsible for applying the new position.
    """

    player.facing = direction
    target_x = player.x + direction.dx
    target_y = player.y + direction.dy
    if is_blocked(grid, npcs, target_x, target_y):
        return None
    return target_x, target_y
