"""Entity records and the loader for NPC content definitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Sequence, Tuple

import yaml

from .tilemap import Grid
from .world import Direction


class ContentError(ValueError):
    """Raised when the NPC content file is malformed."""


class Appearance(str, Enum):
    ROBED = "robed"
    TUNIC = "tunic"
    ROBED_CROWN = "robed_crown"
    HOODED = "hooded"

    @property
    def template(self) -> str:
        return f"npc_{self.value}"


@dataclass(slots=True)
class Entity:
    x: int
    y: int

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y


@dataclass(slots=True)
class Player(Entity):
    sprite: str = "player"
    facing: Direction = Direction.DOWN
    anim_frame: int = 0

    def move_to(self, position: Tuple[int, int]) -> None:
        self.x, self.y = position


@dataclass(slots=True)
class NPC(Entity):
    appearance: Appearance
    name: str
    dialog: str


def _parse_npc(index: int, entry: object) -> NPC:
    if not isinstance(entry, dict):
        raise ContentError(f"NPC #{index} must be a mapping")

    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ContentError(f"NPC #{index} is missing a name")

    dialog = entry.get("dialog")
    if not isinstance(dialog, str) or not dialog.strip():
        raise ContentError(f"NPC {name!r} is missing dialog text")

    position = entry.get("position")
    if not (
        isinstance(position, (list, tuple))
        and len(position) == 2
        and all(isinstance(v, int) and not isinstance(v, bool) for v in position)
    ):
        raise ContentError(f'NPC {name!r} "position" must be [int, int]')

    try:
        appearance = Appearance(entry.get("appearance"))
    except ValueError:
        choices = ", ".join(a.value for a in Appearance)
        raise ContentError(
            f"NPC {name!r} has unknown appearance {entry.get('appearance')!r} (expected one of {choices})"
        ) from None

    return NPC(int(position[0]), int(position[1]), appearance, name.strip(), dialog.rstrip())


def parse_npcs(data: object) -> List[NPC]:
    if not isinstance(data, dict) or not isinstance(data.get("npcs"), list):
        raise ContentError('NPC content must contain an "npcs" list')
    return [_parse_npc(i, entry) for i, entry in enumerate(data["npcs"])]


def load_npcs(path: str | Path) -> List[NPC]:
    """Read the NPC roster from a YAML content file."""

    path = Path(path)
    if not path.exists():
        raise ContentError(f"NPC content file not found: {path}")
    with open(path, "r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    return parse_npcs(data)


def validate_npcs(npcs: Sequence[NPC], grid: Grid) -> None:
    """Check NPC placement against the generated grid."""

    seen: set[Tuple[int, int]] = set()
    for npc in npcs:
        if not grid.in_bounds(npc.x, npc.y) or grid.is_border(npc.x, npc.y):
            raise ContentError(f"NPC {npc.name!r} at {npc.position} lies outside the walkable map")
        if npc.position in seen:
            raise ContentError(f"Two NPCs share the cell {npc.position}")
        seen.add(npc.position)
