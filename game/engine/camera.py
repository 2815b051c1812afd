"""Viewport offset that keeps the player centred without leaving the map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


def _axis_offset(player_px: int, extent_px: int, viewport_px: int) -> int:
    # When the viewport is wider than the world the upper bound would drop
    # below zero; pin it so the clamp range never inverts.
    upper = max(0, extent_px - viewport_px)
    return max(0, min(player_px - viewport_px // 2, upper))


@dataclass(frozen=True)
class Camera:
    x: int = 0
    y: int = 0

    @classmethod
    def follow(
        cls,
        player_pos: Tuple[int, int],
        map_extent_px: Tuple[int, int],
        viewport_px: Tuple[int, int],
        tile_size: int,
    ) -> "Camera":
        return cls(
            _axis_offset(player_pos[0] * tile_size, map_extent_px[0], viewport_px[0]),
            _axis_offset(player_pos[1] * tile_size, map_extent_px[1], viewport_px[1]),
        )

    def to_screen(self, world_px: Tuple[int, int]) -> Tuple[int, int]:
        return world_px[0] - self.x, world_px[1] - self.y
