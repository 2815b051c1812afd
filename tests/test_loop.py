"""Frame loop: running/paused transitions and camera follow."""

from __future__ import annotations

import pygame as pg

from conftest import make_npc, open_grid
from engine.camera import Camera
from engine.entities import Player
from engine.loop import GameLoop, LoopState
from engine.player import InputSnapshot
from engine.render import Renderer
from engine.world import Direction

VIEWPORT = (240, 192)
HOLD_RIGHT = InputSnapshot((Direction.RIGHT,))
INTERACT = InputSnapshot(interact=True)


def _loop(renderer: Renderer) -> GameLoop:
    grid = open_grid(20, 12)
    npcs = [make_npc(6, 3, name="Keeper", dialog="Work history")]
    return GameLoop(grid, npcs, Player(6, 4), renderer, VIEWPORT, move_delay=0.25, anim_frame_duration=0.5)


def test_interact_pauses_and_second_interact_resumes(renderer: Renderer) -> None:
    loop = _loop(renderer)
    assert loop.state is LoopState.RUNNING
    assert loop.tick(0.0, INTERACT) == "Work history"
    assert loop.state is LoopState.PAUSED
    assert loop.tick(0.0, INTERACT) is None
    assert loop.state is LoopState.RUNNING


def test_paused_loop_freezes_movement_and_timers(renderer: Renderer) -> None:
    loop = _loop(renderer)
    loop.tick(0.0, INTERACT)
    for _ in range(8):
        loop.tick(0.25, HOLD_RIGHT)
    assert loop.player.position == (6, 4)
    assert loop.player.facing is Direction.DOWN
    assert loop.controller.move_timer == 0.0
    assert loop.controller.anim_timer == 0.0


def test_overlay_click_closes_without_reopening(renderer: Renderer) -> None:
    loop = _loop(renderer)
    loop.tick(0.0, INTERACT)
    loop.tick(0.0, InputSnapshot(interact=True, close_dialog=True))
    assert loop.state is LoopState.RUNNING


def test_close_request_without_open_dialog_is_ignored(renderer: Renderer) -> None:
    loop = _loop(renderer)
    loop.tick(0.0, InputSnapshot(close_dialog=True))
    assert loop.state is LoopState.RUNNING


def test_camera_starts_on_the_spawn(renderer: Renderer) -> None:
    loop = _loop(renderer)
    assert loop.camera == Camera.follow((6, 4), (20 * 48, 12 * 48), VIEWPORT, 48)


def test_camera_follows_the_player(renderer: Renderer) -> None:
    loop = _loop(renderer)
    for _ in range(4):
        loop.tick(0.25, HOLD_RIGHT)
    assert loop.player.position == (10, 4)
    assert loop.camera == Camera.follow((10, 4), (20 * 48, 12 * 48), VIEWPORT, 48)
    assert loop.camera.x == 10 * 48 - VIEWPORT[0] // 2


def test_frame_renders_while_paused(renderer: Renderer) -> None:
    loop = _loop(renderer)
    surface = pg.Surface(VIEWPORT)
    loop.tick(0.0, INTERACT)
    surface.fill((255, 0, 255))
    loop.frame(surface, 0.016, InputSnapshot())
    assert loop.state is LoopState.PAUSED
    assert surface.get_at((0, 0))[:3] != (255, 0, 255)
