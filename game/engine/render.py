"""Top-down renderer that paints tiles and characters from layer templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator, Sequence, Tuple

import pygame as pg

from .camera import Camera
from .dialogue import nearby_npc
from .entities import NPC, Appearance, Player
from .proc_templates import TemplateError, draw_layers, load_catalog
from .tilemap import TILESET, Grid

Template = Dict[str, Any]

BACKGROUND = (0, 0, 0)
PLAYER_SPRITE = "player"
WALK_FRAMES = 2
NPC_FACE = "npc_face"
INDICATOR = "indicator"


def player_templates(sprite: str) -> Tuple[str, Tuple[str, ...]]:
    """Return the body template and walk-cycle frame templates for a player sprite id."""

    return f"{sprite}_body", tuple(f"{sprite}_frame_{i}" for i in range(WALK_FRAMES))


def visible_tiles(
    grid: Grid,
    camera: Camera,
    tile_size: int,
    viewport: Tuple[int, int],
) -> Iterator[Tuple[int, int, int, int]]:
    """Yield ``(x, y, screen_x, screen_y)`` for each tile that overlaps the viewport.

    Tiles are opaque and uniform, so a plain bounding-box test is enough;
    partially visible tiles are left to the surface clip.
    """

    view_w, view_h = viewport
    for y in range(grid.height):
        screen_y = y * tile_size - camera.y
        if screen_y < -tile_size or screen_y > view_h:
            continue
        for x in range(grid.width):
            screen_x = x * tile_size - camera.x
            if screen_x < -tile_size or screen_x > view_w:
                continue
            yield x, y, screen_x, screen_y


class Renderer:
    """Draws the grid, NPCs and the player onto a pygame surface each frame."""

    def __init__(
        self,
        templates: Dict[str, Template],
        tile_size: int = 48,
        character_size: int = 32,
    ) -> None:
        self.tile_size = tile_size
        self.character_size = character_size
        self.templates = templates
        self._check_catalog()

    @classmethod
    def from_directory(cls, templates_dir: str | Path, tile_size: int = 48, character_size: int = 32) -> "Renderer":
        templates_dir = Path(templates_dir)
        templates: Dict[str, Template] = {}
        for name in ("tiles.yaml", "sprites.yaml"):
            templates.update(load_catalog(templates_dir / name))
        return cls(templates, tile_size, character_size)

    def _check_catalog(self) -> None:
        required = [definition.template for definition in TILESET.values()]
        body, frames = player_templates(PLAYER_SPRITE)
        required += [body, *frames, NPC_FACE, INDICATOR]
        required += [appearance.template for appearance in Appearance]
        missing = sorted(name for name in required if name not in self.templates)
        if missing:
            raise TemplateError(f"Missing templates: {', '.join(missing)}")

    # ------------------------------------------------------------------- drawing
    def render(
        self,
        surface: pg.Surface,
        grid: Grid,
        camera: Camera,
        player: Player,
        npcs: Sequence[NPC],
    ) -> None:
        surface.fill(BACKGROUND)
        self._draw_tiles(surface, grid, camera)
        self._draw_npcs(surface, camera, player, npcs)
        self._draw_player(surface, camera, player)

    def _draw_tiles(self, surface: pg.Surface, grid: Grid, camera: Camera) -> None:
        viewport = surface.get_size()
        for x, y, screen_x, screen_y in visible_tiles(grid, camera, self.tile_size, viewport):
            definition = grid.definition_at(x, y)
            if definition is None:
                continue
            self._draw(surface, definition.template, (screen_x, screen_y), self.tile_size)

    def _draw_npcs(self, surface: pg.Surface, camera: Camera, player: Player, npcs: Sequence[NPC]) -> None:
        for npc in npcs:
            tile_origin = self.tile_origin(camera, npc.position)
            origin = self.character_origin(tile_origin)
            self._draw(surface, npc.appearance.template, origin, self.character_size)
            self._draw(surface, NPC_FACE, origin, self.character_size)
            if nearby_npc(player, (npc,)) is not None:
                self._draw(surface, INDICATOR, tile_origin, self.tile_size)

    def _draw_player(self, surface: pg.Surface, camera: Camera, player: Player) -> None:
        origin = self.character_origin(self.tile_origin(camera, player.position))
        body, frames = player_templates(player.sprite)
        self._draw(surface, body, origin, self.character_size)
        self._draw(surface, frames[player.anim_frame % len(frames)], origin, self.character_size)

    # ------------------------------------------------------------------ helpers
    def tile_origin(self, camera: Camera, position: Tuple[int, int]) -> Tuple[int, int]:
        return camera.to_screen((position[0] * self.tile_size, position[1] * self.tile_size))

    def character_origin(self, tile_origin: Tuple[int, int]) -> Tuple[int, int]:
        # Centre horizontally, stand on the bottom edge of the tile.
        offset_x = (self.tile_size - self.character_size) // 2
        offset_y = self.tile_size - self.character_size
        return tile_origin[0] + offset_x, tile_origin[1] + offset_y

    def _draw(self, surface: pg.Surface, name: str, origin: Tuple[int, int], target_size: int) -> None:
        template = self.templates.get(name)
        if template is None:
            raise TemplateError(f"Unknown template {name!r}")
        scale = target_size / template["size"][0]
        draw_layers(surface, template, origin, scale)
