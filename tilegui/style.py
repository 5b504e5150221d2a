"""Colours, visual styles, preset themes and panel tile kits."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from tilegui.geometry import AtlasPos


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def with_alpha(self, a: int) -> Color:
        """The same colour with a different alpha."""
        return replace(self, a=a)

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


LIGHTGRAY = Color(200, 200, 200)
GRAY = Color(130, 130, 130)
DARKGRAY = Color(80, 80, 80)
YELLOW = Color(253, 249, 0)
RED = Color(230, 41, 55)
GREEN = Color(0, 228, 48)
BLUE = Color(0, 121, 241)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
BLANK = Color(0, 0, 0, 0)


@dataclass(frozen=True)
class RectStyle:
    """Colours and border width of a plain rectangle."""

    background: Color
    foreground: Color
    border: Color
    border_width: int = 0


@dataclass(frozen=True)
class ButtonStyle:
    """Rectangle styles for the three button states."""

    normal: RectStyle
    hover: RectStyle
    active: RectStyle


@dataclass(frozen=True)
class BevelStyle:
    """A filled rectangle with light top-left and dark bottom-right edges."""

    background: Color
    light_edge: Color
    dark_edge: Color
    border_width: int = 1


@dataclass(frozen=True)
class Style:
    """A complete theme. ``font`` of ``None`` means use the fallback font."""

    base: RectStyle
    button: ButtonStyle
    bevel: BevelStyle
    font: Any = None

    def with_font(self, font: Any) -> Style:
        """A copy of this style using ``font``."""
        return replace(self, font=font)


_NO_CAP = AtlasPos(-1, -1)


@dataclass(frozen=True)
class PanelKit:
    """Atlas tiles used to draw a framed panel.

    A cap with a negative column is absent; one-row panels then use the
    top corners as their ends.
    """

    corner_tl: AtlasPos
    corner_tr: AtlasPos
    corner_bl: AtlasPos
    corner_br: AtlasPos
    edge_horizontal: AtlasPos
    edge_vertical: AtlasPos
    fill: AtlasPos
    cap_left: AtlasPos = _NO_CAP
    cap_right: AtlasPos = _NO_CAP


STYLE_TMGUI = Style(
    base=RectStyle(background=GREEN, foreground=BLACK, border=GREEN, border_width=0),
    button=ButtonStyle(
        normal=RectStyle(background=BLACK, foreground=GREEN, border=GREEN, border_width=0),
        hover=RectStyle(background=BLACK, foreground=GREEN, border=GREEN, border_width=1),
        active=RectStyle(background=GREEN, foreground=BLACK, border=BLACK, border_width=1),
    ),
    bevel=BevelStyle(background=BLACK, light_edge=GREEN, dark_edge=BLACK, border_width=2),
)

STYLE_OSGREY = Style(
    base=RectStyle(background=DARKGRAY, foreground=WHITE, border=GRAY, border_width=1),
    button=ButtonStyle(
        normal=RectStyle(background=GRAY, foreground=WHITE, border=DARKGRAY, border_width=1),
        hover=RectStyle(background=LIGHTGRAY, foreground=WHITE, border=WHITE, border_width=1),
        active=RectStyle(background=BLACK, foreground=GRAY, border=DARKGRAY, border_width=1),
    ),
    bevel=BevelStyle(background=GRAY, light_edge=LIGHTGRAY, dark_edge=DARKGRAY, border_width=1),
)

STYLE_BASIC = RectStyle(DARKGRAY, LIGHTGRAY, GRAY, 1)
STYLE_BW = RectStyle(BLACK, WHITE, WHITE, 1)
STYLE_CONSOLE = RectStyle(GREEN, BLACK, BLACK, 1)
STYLE_BTN_NORMAL = RectStyle(GRAY, WHITE, LIGHTGRAY, 1)
STYLE_BTN_HOVER = RectStyle(LIGHTGRAY, WHITE, WHITE, 2)
STYLE_BTN_ACTIVE = RectStyle(DARKGRAY, WHITE, BLACK, 1)