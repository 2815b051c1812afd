"""Dialog overlay drawn on top of the world."""

from __future__ import annotations

from typing import List, Optional, Tuple

import pygame as pg

from .dialogue import DialogueState


def wrap_text(text: str, max_width: int, font: pg.font.Font) -> List[str]:
    """Word-wrap ``text`` to ``max_width`` pixels, keeping explicit line breaks."""

    lines: List[str] = []
    for paragraph in text.split("\n"):
        words = paragraph.split(" ")
        if not paragraph.strip():
            lines.append("")
            continue
        # Keep leading spaces so indented bullet lines stay indented.
        current = words[0]
        for word in words[1:]:
            candidate = f"{current} {word}"
            if font.size(candidate)[0] <= max_width:
                current = candidate
            else:
                lines.append(current)
                current = word
        lines.append(current)
    return lines


class DialogBox:
    """Render a :class:`DialogueState` as a translucent panel."""

    def __init__(
        self,
        font: pg.font.Font,
        title_font: Optional[pg.font.Font] = None,
        margin: int = 40,
        padding: int = 14,
    ) -> None:
        self.font = font
        self.title_font = title_font or font
        self.margin = margin
        self.padding = padding
        self.rect: Optional[pg.Rect] = None
        self.hint = "Press SPACE or click to close"

    def hit_test(self, pos: Tuple[int, int]) -> bool:
        """Return True when a click at ``pos`` landed on the visible panel."""

        return self.rect is not None and self.rect.collidepoint(pos)

    def draw(self, surface: pg.Surface, state: DialogueState) -> None:
        if not state.open:
            self.rect = None
            return

        width = surface.get_width() - self.margin * 2
        lines = wrap_text(state.text, width - self.padding * 2, self.font)
        line_height = self.font.get_linesize()
        title_height = self.title_font.get_linesize() + 6 if state.speaker else 0
        max_height = surface.get_height() - self.margin * 2
        height = min(max_height, title_height + line_height * (len(lines) + 1) + self.padding * 2)

        self.rect = pg.Rect(self.margin, surface.get_height() - height - self.margin, width, height)
        overlay = pg.Surface(self.rect.size, pg.SRCALPHA)
        overlay.fill((10, 12, 24, 215))
        pg.draw.rect(overlay, (255, 255, 255, 230), overlay.get_rect(), width=3, border_radius=10)
        surface.blit(overlay, self.rect)

        x = self.rect.left + self.padding
        y = self.rect.top + self.padding
        bottom = self.rect.bottom - self.padding - line_height
        if state.speaker:
            title = self.title_font.render(state.speaker, True, (255, 230, 120))
            surface.blit(title, (x, y))
            y += title_height
        for line in lines:
            if y > bottom - line_height:
                break
            if line:
                surface.blit(self.font.render(line, True, (235, 235, 245)), (x, y))
            y += line_height

        hint = self.font.render(self.hint, True, (150, 155, 180))
        surface.blit(hint, hint.get_rect(bottomright=(self.rect.right - self.padding, self.rect.bottom - self.padding // 2)))
