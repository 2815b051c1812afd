"""Startup wiring: seed selection, logging and content failures."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from config import quest_config as CFG
from engine.entities import ContentError
from engine.loop import LoopState
from engine.tilemap import TileType
import main


@pytest.fixture(autouse=True)
def log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "quest.log"
    monkeypatch.setattr(CFG, "LOG_PATH", path)
    return path


def test_seed_comes_from_the_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CFG.SEED_ENV, " 1234 ")
    assert CFG.get_seed() == 1234


def test_unset_seed_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CFG.SEED_ENV, raising=False)
    assert CFG.get_seed(7) == 7
    assert CFG.get_seed() is None


def test_bad_seed_is_logged_and_ignored(monkeypatch: pytest.MonkeyPatch, log_file: Path) -> None:
    monkeypatch.setenv(CFG.SEED_ENV, "forest")
    assert CFG.get_seed(5) == 5
    assert "ERROR" in log_file.read_text(encoding="utf-8")


def test_log_lines_are_appended(log_file: Path) -> None:
    CFG.log_info("first")
    CFG.log_error("second")
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith("INFO: first")
    assert lines[1].endswith("ERROR: second")


def _config(seed: int | None = 99) -> main.GameConfig:
    return replace(main.build_config(), seed=seed)


def test_build_world_clears_spawn_and_npc_cells(log_file: Path) -> None:
    loop = main.build_world(_config())
    grid = loop.grid
    assert (grid.width, grid.height) == (32, 24)
    assert grid.tile_at(*loop.player.position) is TileType.GRASS
    for npc in loop.npcs:
        assert grid.tile_at(npc.x, npc.y) is TileType.GRASS
    assert loop.state is LoopState.RUNNING
    assert "seed 99" in log_file.read_text(encoding="utf-8")


def test_build_world_is_reproducible_for_a_seed() -> None:
    first = main.build_world(_config(seed=42)).grid
    second = main.build_world(_config(seed=42)).grid
    assert list(first.cells()) == list(second.cells())


def test_unseeded_world_logs_the_chosen_seed(log_file: Path) -> None:
    main.build_world(_config(seed=None))
    assert "with seed " in log_file.read_text(encoding="utf-8")


def test_missing_content_is_reported(tmp_path: Path) -> None:
    with pytest.raises(ContentError):
        main.build_world(replace(_config(), content_dir=tmp_path))


def test_main_exits_with_code_2_on_bad_content(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    log_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    broken = replace(_config(), content_dir=tmp_path)
    monkeypatch.setattr(main, "build_config", lambda: broken)
    assert main.main([]) == 2
    assert "cannot start" in capsys.readouterr().err
    assert "Content configuration error" in log_file.read_text(encoding="utf-8")
