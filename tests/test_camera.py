"""Camera follow and clamping."""

from __future__ import annotations

import pytest

from engine.camera import Camera


def test_centres_on_the_player_inside_the_map() -> None:
    camera = Camera.follow((16, 12), (1536, 1152), (960, 576), 48)
    assert camera == Camera(16 * 48 - 480, 12 * 48 - 288)


def test_clamps_at_the_top_left() -> None:
    assert Camera.follow((1, 1), (1536, 1152), (960, 576), 48) == Camera(0, 0)


def test_clamps_at_the_bottom_right() -> None:
    assert Camera.follow((31, 23), (1536, 1152), (960, 576), 48) == Camera(1536 - 960, 1152 - 576)


def test_viewport_larger_than_map_pins_to_zero() -> None:
    assert Camera.follow((9, 9), (480, 480), (960, 960), 48) == Camera(0, 0)


@pytest.mark.parametrize("viewport", [(960, 576), (400, 2000), (2000, 300), (1536, 1152)])
def test_offset_stays_in_range_for_every_cell(viewport: tuple[int, int]) -> None:
    extent = (1536, 1152)
    for x in range(32):
        for y in range(24):
            camera = Camera.follow((x, y), extent, viewport, 48)
            for offset, ext, view in ((camera.x, extent[0], viewport[0]), (camera.y, extent[1], viewport[1])):
                if ext > view:
                    assert 0 <= offset <= ext - view
                else:
                    assert offset == 0


def test_to_screen() -> None:
    assert Camera(100, 50).to_screen((148, 98)) == (48, 48)
