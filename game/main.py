"""Entry point for Resume Quest, the walk-around portfolio game."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple

import pygame as pg

# When the game is launched via ``python game/main.py`` the repository root is
# not automatically importable.  Inject it explicitly so ``config`` can be
# imported without requiring the package to be installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import quest_config as CFG
from engine.entities import NPC, ContentError, Player, load_npcs, validate_npcs
from engine.input import KeyboardInput
from engine.loop import GameLoop, LoopState
from engine.proc_templates import TemplateError
from engine.render import Renderer
from engine.tilemap import generate_grid
from engine.ui import DialogBox
import settings as S

CONTENT_DIR = Path(__file__).resolve().parent / "content"


@dataclass
class GameConfig:
    resolution: tuple[int, int]
    fps_limit: int
    tile_size: int
    character_size: int
    world_size: tuple[int, int]
    seed: int | None
    tree_chance: float
    stone_chance: float
    clearings: tuple[tuple[int, int], ...]
    spawn: tuple[int, int]
    move_delay: float
    anim_frame_duration: float
    content_dir: Path = CONTENT_DIR


def build_world(config: GameConfig) -> GameLoop:
    """Load content, generate the grid and assemble the frame loop.

    Raises :class:`ContentError` or :class:`TemplateError` for bad content.
    """

    npcs: List[NPC] = load_npcs(config.content_dir / "npcs.yaml")
    seed = config.seed
    if seed is None:
        # Pick the seed here so it can be logged and replayed.
        seed = random.randrange(2**32)
    clearings: Tuple[Tuple[int, int], ...] = config.clearings + tuple((npc.y, npc.x) for npc in npcs)
    width, height = config.world_size
    grid = generate_grid(
        width,
        height,
        seed=seed,
        clearings=clearings,
        tree_chance=config.tree_chance,
        stone_chance=config.stone_chance,
    )
    validate_npcs(npcs, grid)
    spawn_x, spawn_y = config.spawn
    if not grid.in_bounds(spawn_x, spawn_y) or grid.is_solid(spawn_x, spawn_y):
        raise ContentError(f"Player spawn {config.spawn} is not a walkable cell")

    renderer = Renderer.from_directory(
        config.content_dir / "templates",
        tile_size=config.tile_size,
        character_size=config.character_size,
    )
    CFG.log_info(f"Generated {width}x{height} map with seed {seed}; {len(npcs)} NPCs loaded")
    return GameLoop(
        grid,
        npcs,
        Player(spawn_x, spawn_y),
        renderer,
        config.resolution,
        move_delay=config.move_delay,
        anim_frame_duration=config.anim_frame_duration,
    )


class GameApp:
    """High-level application wrapper providing lifecycle management."""

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self.loop = build_world(config)

        pg.init()
        pg.font.init()
        pg.display.set_caption("Resume Quest")
        self.screen = pg.display.set_mode(config.resolution)
        self.clock = pg.time.Clock()

        self.input = KeyboardInput()
        self.dialog_box = DialogBox(pg.font.SysFont("arial", 18), pg.font.SysFont("georgia", 22, bold=True))

    # ----------------------------------------------------------------- lifecycle
    def run(self) -> None:
        try:
            while True:
                dt = self.clock.tick(self.config.fps_limit) / 1000.0
                if not self._process_events():
                    break
                self.loop.frame(self.screen, dt, self.input.snapshot())
                self.dialog_box.draw(self.screen, self.loop.dialogue)
                pg.display.flip()
                fps = self.clock.get_fps()
                paused = " (reading)" if self.loop.state is LoopState.PAUSED else ""
                pg.display.set_caption(f"Resume Quest :: FPS {fps:5.1f}{paused}")
        finally:
            pg.quit()

    def _process_events(self) -> bool:
        for event in pg.event.get():
            if event.type == pg.QUIT:
                return False
            if event.type == pg.KEYDOWN and event.key == pg.K_ESCAPE:
                if self.loop.dialogue.open:
                    self.input.request_close()
                    continue
                return False
            if event.type == pg.MOUSEBUTTONDOWN and event.button == 1 and self.dialog_box.hit_test(event.pos):
                self.input.request_close()
                continue
            self.input.handle_event(event)
        return True


def build_config() -> GameConfig:
    resolution = (getattr(S, "WINDOW_W", 960), getattr(S, "WINDOW_H", 576))
    return GameConfig(
        resolution=resolution,
        fps_limit=getattr(S, "FPS", 60),
        tile_size=getattr(S, "TILE_SIZE", 48),
        character_size=getattr(S, "CHARACTER_SIZE", 32),
        world_size=(getattr(S, "WORLD_W", 32), getattr(S, "WORLD_H", 24)),
        seed=CFG.get_seed(getattr(S, "SEED", None)),
        tree_chance=getattr(S, "TREE_CHANCE", 0.1),
        stone_chance=getattr(S, "STONE_CHANCE", 0.05),
        clearings=tuple(tuple(c) for c in getattr(S, "CLEARINGS", ())),
        spawn=tuple(getattr(S, "PLAYER_SPAWN", (8, 12))),
        move_delay=getattr(S, "MOVE_DELAY", 0.2),
        anim_frame_duration=getattr(S, "ANIM_FRAME_DURATION", 0.5),
    )


def main(argv: Iterable[str] | None = None) -> int:
    config = build_config()
    try:
        app = GameApp(config)
    except (ContentError, TemplateError) as exc:
        CFG.log_error(f"Content configuration error: {exc}")
        print(f"Resume Quest cannot start: {exc}", file=sys.stderr)
        return 2
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
