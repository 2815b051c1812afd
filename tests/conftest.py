"""Shared fixtures: headless pygame, import paths and small worlds."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterator

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame as pg
import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
GAME_ROOT = REPO_ROOT / "game"
for path in (GAME_ROOT, REPO_ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from engine.entities import NPC, Appearance
from engine.render import Renderer
from engine.tilemap import Grid, TileType

CONTENT_DIR = GAME_ROOT / "content"
TEMPLATES_DIR = CONTENT_DIR / "templates"


@pytest.fixture(scope="session")
def pygame_headless() -> Iterator[None]:
    """Initialise pygame in headless mode for the duration of the session."""

    pg.init()
    try:
        yield
    finally:
        pg.quit()


@pytest.fixture(scope="session")
def renderer(pygame_headless: None) -> Renderer:
    return Renderer.from_directory(TEMPLATES_DIR)


def open_grid(width: int = 10, height: int = 8) -> Grid:
    """Water-bordered grid with an all-grass interior."""

    grid = Grid(width, height)
    for x, y, _ in list(grid.cells()):
        if grid.is_border(x, y):
            grid.set_tile(x, y, TileType.WATER)
    return grid


def make_npc(x: int, y: int, name: str = "Sage", dialog: str = "Hello") -> NPC:
    return NPC(x, y, Appearance.ROBED, name, dialog)
