"""Proximity-triggered dialog state shared by the loop and the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .entities import NPC, Player
from .world import manhattan


@dataclass
class DialogueState:
    open: bool = False
    text: str = ""
    speaker: str = ""

    def show(self, npc: NPC) -> None:
        self.open = True
        self.text = npc.dialog
        self.speaker = npc.name

    def close(self) -> None:
        self.open = False
        self.text = ""
        self.speaker = ""


def nearby_npc(player: Player, npcs: Iterable[NPC], radius: int = 1) -> Optional[NPC]:
    """Return the first NPC (in list order) within ``radius`` steps of the player."""

    for npc in npcs:
        if manhattan(player.position, npc.position) <= radius:
            return npc
    return None


def attempt_interact(state: DialogueState, player: Player, npcs: Iterable[NPC]) -> Optional[str]:
    """Toggle the dialog: close it if open, otherwise open the nearest NPC's text.

    NPCs are spaced apart in practice, so the first match in list order is
    used without any tie-break.
    """

    if state.open:
        state.close()
        return None

    npc = nearby_npc(player, npcs)
    if npc is None:
        return None
    state.show(npc)
    return npc.dialog
