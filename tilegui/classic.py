"""The first-generation tile GUI: fixed 8-pixel cells and a stack of box cursors."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

import pygame

from tilegui.geometry import AtlasPos, GridRect, pixels_to_cells
from tilegui.layout import LayoutMode
from tilegui.style import DARKGRAY, GRAY, LIGHTGRAY, Color

TILE_SIZE = 8
GRID_WIDTH = 80
GRID_HEIGHT = 45
FRAME_WIDTH = GRID_WIDTH * TILE_SIZE
FRAME_HEIGHT = GRID_HEIGHT * TILE_SIZE
TILES_PER_ROW = 16
MAX_LAYOUT_STACK = 16

TILE_A = AtlasPos(13, 13)
TILE_B = AtlasPos(14, 15)
TILE_C = AtlasPos(15, 15)


@dataclass(frozen=True)
class ClassicStyle:
    """Colours and border width shared by every element."""

    background: Color = DARKGRAY
    foreground: Color = LIGHTGRAY
    border: Color = GRAY
    border_width: int = 1


class ClassicGui:
    """Draws rectangles, labels, buttons and atlas tiles on a fixed cell grid.

    Buttons placed inside a vertical or horizontal box ignore their own
    coordinates and follow the box cursor instead.
    """

    def __init__(
        self,
        surface: pygame.Surface,
        font: Any = None,
        atlas: pygame.Surface | None = None,
    ) -> None:
        if font is None:
            pygame.font.init()
            font = pygame.font.Font(None, TILE_SIZE)
        self.surface = surface
        self.font = font
        self.atlas = atlas
        self.style = ClassicStyle()
        self.cursor = GridRect(0, 0, 0, 0)
        self.mode = LayoutMode.NONE
        self._stack: list[GridRect] = []

    @property
    def depth(self) -> int:
        """Number of saved cursors on the layout stack."""
        return len(self._stack)

    def set_style(self, style: ClassicStyle) -> None:
        """Make ``style`` the active style."""
        self.style = style

    def set_font(self, font: Any) -> None:
        """Use ``font`` for all text."""
        self.font = font

    def push_layout(self, cursor: GridRect) -> None:
        """Save the current cursor and start from ``cursor``; ignored when full."""
        if len(self._stack) < MAX_LAYOUT_STACK:
            self._stack.append(self.cursor)
            self.cursor = cursor

    def pop_layout(self) -> None:
        """Restore the most recently saved cursor, if any."""
        if self._stack:
            self.cursor = self._stack.pop()

    def _fill(self, area: pygame.Rect, color: Color) -> None:
        if color.a == 0 or area.width <= 0 or area.height <= 0:
            return
        if color.a == 255:
            self.surface.fill(color.rgba, area)
            return
        overlay = pygame.Surface(area.size, pygame.SRCALPHA)
        overlay.fill(color.rgba)
        self.surface.blit(overlay, area.topleft)

    def rect(self, rect: GridRect) -> None:
        """Fill ``rect`` with the style's background and draw its border."""
        area = pygame.Rect(*rect.to_pixels(TILE_SIZE, TILE_SIZE))
        self._fill(area, self.style.background)
        if self.style.border_width > 0 and area.width > 0 and area.height > 0:
            pygame.draw.rect(
                self.surface, self.style.border.rgba, area, self.style.border_width
            )

    def label(self, text: str, x: int, y: int, color: Color) -> None:
        """Draw ``text`` starting at cell ``x``, ``y``."""
        if not text or color.a == 0:
            return
        rendered = self.font.render(text, False, color.rgba)
        self.surface.blit(rendered, (x * TILE_SIZE, y * TILE_SIZE))

    def button(self, text: str, x: int, y: int) -> GridRect:
        """Draw a one-row button with a cell of padding each side; return its rectangle."""
        if self.mode is not LayoutMode.NONE:
            x, y = self.cursor.x, self.cursor.y
        width = pixels_to_cells(self.font.size(text)[0], TILE_SIZE) + 2
        area = GridRect(x, y, width, 1)
        self.rect(area)
        self.label(text, x + 1, y, self.style.foreground)
        if self.mode is LayoutMode.VBOX:
            self.cursor = replace(self.cursor, y=self.cursor.y + 1)
        elif self.mode is LayoutMode.HBOX:
            self.cursor = replace(self.cursor, x=self.cursor.x + width)
        return area

    def draw_tile(self, x: int, y: int, tile: AtlasPos) -> None:
        """Copy an atlas tile to cell ``x``, ``y``."""
        if self.atlas is None:
            return
        source = pygame.Rect(tile.x * TILE_SIZE, tile.y * TILE_SIZE, TILE_SIZE, TILE_SIZE)
        self.surface.blit(self.atlas, (x * TILE_SIZE, y * TILE_SIZE), area=source)

    def vbox(self, x: int, y: int) -> None:
        """Stack following buttons downward from cell ``x``, ``y``."""
        self.mode = LayoutMode.VBOX
        self.push_layout(GridRect(x, y, 0, 0))

    def hbox(self, x: int, y: int) -> None:
        """Place following buttons rightward from cell ``x``, ``y``."""
        self.mode = LayoutMode.HBOX
        self.push_layout(GridRect(x, y, 0, 0))

    def end_box(self) -> None:
        """Close the current box and return to free placement."""
        self.pop_layout()
        self.mode = LayoutMode.NONE