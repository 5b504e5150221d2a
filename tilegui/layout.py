"""Immediate-mode layout: box cursors, spacing and text alignment."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tilegui.geometry import GridPos, GridRect, _trunc_div


class LayoutMode(Enum):
    NONE = "none"
    HBOX = "hbox"
    VBOX = "vbox"


class Align(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass
class Layout:
    """Cursor state that places auto-positioned elements one after another."""

    mode: LayoutMode = LayoutMode.NONE
    cursor_x: int = 0
    cursor_y: int = 0
    container_w: int = 0
    container_h: int = 0
    spacing: int = 0
    h_align: Align = Align.LEFT
    v_align: Align = Align.TOP

    def _start(self, mode: LayoutMode, rect: GridRect) -> None:
        self.mode = mode
        self.cursor_x = max(rect.x, 0)
        self.cursor_y = max(rect.y, 0)

    def vbox(self, rect: GridRect) -> None:
        """Start stacking elements downward from ``rect``'s origin."""
        self._start(LayoutMode.VBOX, rect)
        self.container_w = rect.w

    def hbox(self, rect: GridRect) -> None:
        """Start placing elements rightward from ``rect``'s origin."""
        self._start(LayoutMode.HBOX, rect)
        self.container_h = rect.h

    def next_cell(self, w: int, h: int) -> GridRect:
        """Return the rectangle at the cursor and advance past it."""
        cell = GridRect(self.cursor_x, self.cursor_y, w, h)
        if self.mode is LayoutMode.HBOX:
            self.cursor_x += w + self.spacing
        elif self.mode is LayoutMode.VBOX:
            self.cursor_y += h + self.spacing
        return cell

    def align(self, horizontal: Align | None = None, vertical: Align | None = None) -> None:
        """Set text alignment; ``None`` keeps the current setting."""
        if horizontal is not None:
            self.h_align = horizontal
        if vertical is not None:
            self.v_align = vertical

    def align_text_pos(self, container: GridRect, text_w: int, text_h: int) -> GridPos:
        """Starting cell of a ``text_w`` by ``text_h`` block inside ``container``."""
        x, y = container.x, container.y
        if self.h_align is Align.CENTER:
            x = container.x + _trunc_div(container.w - text_w, 2)
        elif self.h_align is Align.RIGHT:
            x = container.x + container.w - text_w - 1
        if self.v_align is Align.CENTER:
            y = container.y + _trunc_div(container.h - text_h, 2)
        elif self.v_align is Align.BOTTOM:
            y = container.y + container.h - text_h
        return GridPos(x, y)

    def resolve(self, rect: GridRect, w: int, h: int) -> GridRect:
        """Final rectangle of size ``w`` by ``h``: from the layout when
        ``rect`` has no position, otherwise at ``rect``'s origin."""
        if rect.x < 0 and rect.y < 0:
            return self.next_cell(w, h)
        return GridRect(rect.x, rect.y, w, h)