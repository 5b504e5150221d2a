"""Grid-space geometry: cell positions, cell rectangles and atlas tiles."""

from __future__ import annotations

from dataclasses import dataclass


def _trunc_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass(frozen=True)
class GridPos:
    """A cell position on the grid."""

    x: int
    y: int

    def to_pixels(self, cell_w: int, cell_h: int) -> tuple[int, int]:
        """Pixel coordinates of the cell's top-left corner."""
        return (self.x * cell_w, self.y * cell_h)


@dataclass(frozen=True)
class GridRect:
    """A rectangle measured in grid cells.

    Negative ``x`` and ``y`` mean "place by the active layout"; a width or
    height of zero or less means "choose automatically".
    """

    x: int
    y: int
    w: int = 0
    h: int = 0

    def offset(self, dx: int, dy: int) -> GridRect:
        """A copy of this rectangle moved by ``dx``, ``dy`` cells."""
        return GridRect(self.x + dx, self.y + dy, self.w, self.h)

    def pos_offset(self, dx: int, dy: int) -> GridPos:
        """The rectangle's origin moved by ``dx``, ``dy`` cells."""
        return GridPos(self.x + dx, self.y + dy)

    def is_valid(self) -> bool:
        """True when both width and height are positive."""
        return self.w > 0 and self.h > 0

    def contains(self, pos: GridPos) -> bool:
        """True when ``pos`` lies inside the rectangle."""
        return (
            self.x <= pos.x < self.x + self.w
            and self.y <= pos.y < self.y + self.h
        )

    def center(self) -> GridPos:
        """The central cell of the rectangle."""
        return GridPos(self.x + _trunc_div(self.w, 2), self.y + _trunc_div(self.h, 2))

    def to_pixels(self, cell_w: int, cell_h: int) -> tuple[int, int, int, int]:
        """The rectangle in pixels as ``(x, y, width, height)``."""
        return (self.x * cell_w, self.y * cell_h, self.w * cell_w, self.h * cell_h)


@dataclass(frozen=True)
class AtlasPos:
    """A tile position (column, row) inside a tile atlas."""

    x: int
    y: int


AUTO = GridRect(-1, -1, 0, 0)


def size(w: int, h: int) -> GridRect:
    """A rectangle placed by the layout with the given size."""
    return GridRect(-1, -1, w, h)


def pos(x: int, y: int) -> GridRect:
    """A rectangle at a fixed cell with automatic size."""
    return GridRect(x, y, 0, 0)


def pixels_to_cells(pixels: float, cell: int) -> int:
    """Whole cells covered by a pixel distance, truncated toward zero."""
    return int(pixels / cell)