"""Off-screen, fixed-resolution canvas scaled by whole steps onto a window."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import pygame

from tilegui.geometry import _trunc_div
from tilegui.style import BLACK, BLANK


class Canvas:
    """A grid-sized drawing surface that is scaled onto a larger screen.

    The scale is the largest whole factor that fits the screen, never less
    than one, and the scaled image is centred.
    """

    def __init__(
        self,
        grid_w: int,
        grid_h: int,
        cell_w: int = 8,
        cell_h: int = 8,
        transparent: bool = False,
    ) -> None:
        if min(grid_w, grid_h, cell_w, cell_h) <= 0:
            raise ValueError("grid and cell dimensions must be positive")
        self.grid_w = grid_w
        self.grid_h = grid_h
        self.cell_w = cell_w
        self.cell_h = cell_h
        self.transparent = transparent
        self.surface = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        self.scale = 1
        self.offset_x = 0
        self.offset_y = 0

    @property
    def width(self) -> int:
        """Canvas width in pixels."""
        return self.grid_w * self.cell_w

    @property
    def height(self) -> int:
        """Canvas height in pixels."""
        return self.grid_h * self.cell_h

    def fit(self, screen_w: int, screen_h: int) -> tuple[int, int, int]:
        """Compute and store ``(scale, offset_x, offset_y)`` for a screen size."""
        scale = max(min(screen_w // self.width, screen_h // self.height), 1)
        self.scale = scale
        self.offset_x = _trunc_div(screen_w - self.width * scale, 2)
        self.offset_y = _trunc_div(screen_h - self.height * scale, 2)
        return (self.scale, self.offset_x, self.offset_y)

    def begin(self) -> pygame.Surface:
        """Clear the canvas and return the surface to draw on."""
        clear = BLANK if self.transparent else BLACK
        self.surface.fill(clear.rgba)
        return self.surface

    def end(self, screen: pygame.Surface) -> tuple[int, int, int]:
        """Scale the canvas onto ``screen``; return the transform used."""
        transform = self.fit(*screen.get_size())
        scaled = pygame.transform.scale(
            self.surface, (self.width * self.scale, self.height * self.scale)
        )
        screen.blit(scaled, (self.offset_x, self.offset_y))
        return transform

    @contextmanager
    def frame(self, screen: pygame.Surface) -> Iterator[pygame.Surface]:
        """Draw one frame: clear on entry, present onto ``screen`` on exit."""
        surface = self.begin()
        yield surface
        self.end(screen)