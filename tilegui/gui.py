"""Immediate-mode drawing of grid-aligned text, tiles, panels and buttons."""

from __future__ import annotations

from typing import Any, Protocol

import pygame

from tilegui.geometry import AtlasPos, GridPos, GridRect, pixels_to_cells
from tilegui.layout import Layout, LayoutMode
from tilegui.style import BLANK, STYLE_TMGUI, WHITE, Color, PanelKit, RectStyle, Style


class FontLike(Protocol):
    """What the GUI needs from a font (``pygame.font.Font`` fits)."""

    def size(self, text: str) -> tuple[int, int]: ...

    def render(self, text: str, antialias: bool, color: Any) -> pygame.Surface: ...


class Gui:
    """Draws widgets onto a surface in grid cells of ``cell_w`` by ``cell_h``.

    ``font`` is the fallback font; ``atlas`` is a surface of tiles laid out
    on the same cell grid.
    """

    def __init__(
        self,
        surface: pygame.Surface,
        cell_w: int = 8,
        cell_h: int = 8,
        font: FontLike | None = None,
        atlas: pygame.Surface | None = None,
    ) -> None:
        if cell_w <= 0 or cell_h <= 0:
            raise ValueError("cell size must be positive")
        if font is None:
            pygame.font.init()
            font = pygame.font.Font(None, cell_h)
        self.surface = surface
        self.cell_w = cell_w
        self.cell_h = cell_h
        self.fallback_font = font
        self.atlas = atlas
        self.layout = Layout()
        self.style: Style = STYLE_TMGUI.with_font(font)
        self.current_font: FontLike | None = None
        self.scale = 1
        self.offset_x = 0
        self.offset_y = 0
        self._mouse_pos: tuple[float, float] = (-1.0, -1.0)
        self._mouse_down = False
        self._mouse_released = False

    # --- configuration ---

    def set_style(self, style: Style | None) -> None:
        """Make ``style`` the active theme; ``None`` leaves it unchanged."""
        if style is not None:
            self.style = style

    def set_font(self, font: FontLike | None) -> None:
        """Use ``font`` for text; ``None`` reverts to the style's font."""
        self.current_font = font if font is not None else self.style.font

    def active_font(self) -> FontLike:
        """The font in effect: explicit, then the style's, then the fallback."""
        if self.current_font is not None:
            return self.current_font
        if self.style.font is not None:
            return self.style.font
        return self.fallback_font

    def measure_cells(self, text: str) -> int:
        """Width of ``text`` in whole cells."""
        width, _ = self.active_font().size(text)
        return pixels_to_cells(width, self.cell_w)

    # --- input ---

    def update_transform(self, scale: int, offset_x: int, offset_y: int) -> None:
        """Record how the drawing surface is placed on the screen."""
        if scale <= 0:
            raise ValueError("scale must be positive")
        self.scale = scale
        self.offset_x = offset_x
        self.offset_y = offset_y

    def update_mouse(
        self, position: tuple[float, float], down: bool = False, released: bool = False
    ) -> None:
        """Record the mouse position in screen pixels and the left-button state."""
        self._mouse_pos = (float(position[0]), float(position[1]))
        self._mouse_down = down
        self._mouse_released = released

    def mouse_grid(self) -> tuple[float, float]:
        """The mouse position in fractional grid cells."""
        mx, my = self._mouse_pos
        px = (mx - self.offset_x) / self.scale
        py = (my - self.offset_y) / self.scale
        return (px / self.cell_w, py / self.cell_h)

    # --- primitives ---

    def _pixel_rect(self, rect: GridRect) -> pygame.Rect:
        return pygame.Rect(*rect.to_pixels(self.cell_w, self.cell_h))

    def _fill_pixels(self, area: pygame.Rect, color: Color) -> None:
        if color.a == 0 or area.width <= 0 or area.height <= 0:
            return
        if color.a == 255:
            self.surface.fill(color.rgba, area)
            return
        overlay = pygame.Surface(area.size, pygame.SRCALPHA)
        overlay.fill(color.rgba)
        self.surface.blit(overlay, area.topleft)

    def _draw_border(self, rect: GridRect, style: RectStyle) -> None:
        if style.border_width > 0 and style.border.a > 0:
            pygame.draw.rect(
                self.surface, style.border.rgba, self._pixel_rect(rect), style.border_width
            )

    def draw_fill_cell(self, pos: GridPos, color: Color) -> None:
        """Fill one cell with ``color``."""
        self.draw_fill_rect(GridRect(pos.x, pos.y, 1, 1), color)

    def draw_fill_rect(self, rect: GridRect, color: Color) -> None:
        """Fill a cell rectangle with ``color``."""
        self._fill_pixels(self._pixel_rect(rect), color)

    def draw_style_rect(self, rect: GridRect) -> None:
        """Draw ``rect`` with the base style's background and border."""
        base = self.style.base
        self.draw_fill_rect(rect, base.background)
        self._draw_border(rect, base)

    def draw_bevel_rect(self, rect: GridRect) -> None:
        """Draw ``rect`` with a light top-left and dark bottom-right edge."""
        bevel = self.style.bevel
        px = self._pixel_rect(rect)
        bw = bevel.border_width
        self.draw_fill_rect(rect, bevel.background)
        self._fill_pixels(pygame.Rect(px.x, px.y, px.width, bw), bevel.light_edge)
        self._fill_pixels(pygame.Rect(px.x, px.y, bw, px.height), bevel.light_edge)
        self._fill_pixels(
            pygame.Rect(px.x, px.y + px.height - bw, px.width, bw), bevel.dark_edge
        )
        self._fill_pixels(
            pygame.Rect(px.x + px.width - bw, px.y, bw, px.height), bevel.dark_edge
        )

    def draw_glyph(self, pos: GridPos, tile: AtlasPos, fg: Color, bg: Color) -> None:
        """Draw an atlas tile tinted by ``fg`` over a ``bg`` cell."""
        if bg.a > 0:
            self.draw_fill_cell(pos, bg)
        if self.atlas is None:
            return
        glyph = pygame.Surface((self.cell_w, self.cell_h), pygame.SRCALPHA)
        source = pygame.Rect(
            tile.x * self.cell_w, tile.y * self.cell_h, self.cell_w, self.cell_h
        )
        glyph.blit(self.atlas, (0, 0), area=source)
        if fg != WHITE:
            glyph.fill(fg.rgba, special_flags=pygame.BLEND_RGBA_MULT)
        self.surface.blit(glyph, pos.to_pixels(self.cell_w, self.cell_h))

    def draw_text(self, text: str, pos: GridPos, fg: Color, bg: Color) -> None:
        """Draw ``text`` one character per cell, each over a ``bg`` cell."""
        font = self.active_font()
        for offset, char in enumerate(text):
            cell = GridPos(pos.x + offset, pos.y)
            self.draw_fill_cell(cell, bg)
            if fg.a == 0:
                continue
            glyph = font.render(char, False, fg.rgba)
            self.surface.blit(glyph, cell.to_pixels(self.cell_w, self.cell_h))

    def draw_panel(self, rect: GridRect, kit: PanelKit, fg: Color, bg: Color) -> None:
        """Draw a framed panel from the tiles of ``kit``."""
        if not rect.is_valid():
            return
        self.draw_fill_rect(rect, bg)

        def glyph(dx: int, dy: int, tile: AtlasPos) -> None:
            self.draw_glyph(rect.pos_offset(dx, dy), tile, fg, bg)

        last_x, last_y = rect.w - 1, rect.h - 1
        if rect.h == 1:
            left = kit.cap_left if kit.cap_left.x >= 0 else kit.corner_tl
            right = kit.cap_right if kit.cap_right.x >= 0 else kit.corner_tr
            glyph(0, 0, left)
            for i in range(1, last_x):
                glyph(i, 0, kit.edge_horizontal)
            if rect.w > 1:
                glyph(last_x, 0, right)
            return

        glyph(0, 0, kit.corner_tl)
        glyph(last_x, 0, kit.corner_tr)
        glyph(0, last_y, kit.corner_bl)
        glyph(last_x, last_y, kit.corner_br)
        for i in range(1, last_x):
            glyph(i, 0, kit.edge_horizontal)
            glyph(i, last_y, kit.edge_horizontal)
        for j in range(1, last_y):
            glyph(0, j, kit.edge_vertical)
            glyph(last_x, j, kit.edge_vertical)
        for i in range(1, last_x):
            for j in range(1, last_y):
                glyph(i, j, kit.fill)

    # --- elements ---

    def label(self, text: str, rect: GridRect) -> None:
        """Draw aligned text with the base style; only text cells get a background."""
        text_w = self.measure_cells(text)
        if rect.w > 0:
            w = rect.w
        elif self.layout.mode is LayoutMode.VBOX and self.layout.container_w > 0:
            w = self.layout.container_w
        else:
            w = text_w
        h = rect.h if rect.h > 0 else 1
        final = self.layout.resolve(rect, w, h)
        text_pos = self.layout.align_text_pos(final, text_w, 1)
        base = self.style.base
        self.draw_text(text, text_pos, base.foreground, base.background)

    def label_rect_styled(self, text: str, rect: GridRect, style: RectStyle) -> GridRect:
        """Draw a filled, bordered box with aligned text; return its rectangle."""
        text_w = self.measure_cells(text)
        w = rect.w if rect.w > 0 else text_w
        h = rect.h if rect.h > 0 else 1
        final = self.layout.resolve(rect, w, h)
        self.draw_fill_rect(final, style.background)
        self._draw_border(final, style)
        text_pos = self.layout.align_text_pos(final, text_w, 1)
        self.draw_text(text, text_pos, style.foreground, BLANK)
        return final

    def label_rect(self, text: str, rect: GridRect) -> GridRect:
        """Draw a boxed label with the base style."""
        return self.label_rect_styled(text, rect, self.style.base)

    def button(self, text: str, rect: GridRect) -> bool:
        """Draw a button; True when the left button was released over it."""
        text_w = self.measure_cells(text)
        w = rect.w if rect.w > 0 else text_w
        h = rect.h if rect.h > 0 else 1
        final = self.layout.resolve(rect, w, h)

        gx, gy = self.mouse_grid()
        over = final.contains(GridPos(int(gx), int(gy)))
        pressed = over and self._mouse_down
        clicked = over and self._mouse_released

        states = self.style.button
        if pressed:
            style = states.active
        elif over:
            style = states.hover
        else:
            style = states.normal
        self.label_rect_styled(text, final, style)
        return clicked