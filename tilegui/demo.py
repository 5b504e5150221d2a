"""Demonstration screens and the command that shows them in a window."""

from __future__ import annotations

import argparse
import itertools
import logging
import random
from collections.abc import Iterator

import pygame

from tilegui.canvas import Canvas
from tilegui.classic import (
    GRID_HEIGHT,
    GRID_WIDTH,
    TILE_B,
    TILE_C,
    TILE_SIZE,
    ClassicGui,
    ClassicStyle,
)
from tilegui.geometry import AUTO, AtlasPos, GridPos, GridRect, size
from tilegui.gui import Gui
from tilegui.layout import Align
from tilegui.style import (
    BLACK,
    BLANK,
    BLUE,
    DARKGRAY,
    GREEN,
    RED,
    STYLE_TMGUI,
    WHITE,
    YELLOW,
    PanelKit,
)

log = logging.getLogger(__name__)

DEMO_PANEL_KIT = PanelKit(
    corner_tl=AtlasPos(15, 15),
    corner_tr=AtlasPos(15, 15),
    corner_bl=AtlasPos(15, 15),
    corner_br=AtlasPos(15, 15),
    edge_horizontal=AtlasPos(4, 12),
    edge_vertical=AtlasPos(3, 11),
    fill=AtlasPos(0, 0),
    cap_left=AtlasPos(4, 11),
    cap_right=AtlasPos(3, 12),
)

_PALETTE = (BLACK, GREEN)


def build_argument_parser() -> argparse.ArgumentParser:
    """Options of the demo command."""
    parser = argparse.ArgumentParser(prog="tilegui", description="Show the tile GUI demo.")
    parser.add_argument("--classic", action="store_true", help="show the fixed-cell demo")
    parser.add_argument("--cell", type=int, default=8, help="cell size in pixels")
    parser.add_argument("--grid-width", type=int, default=80, help="grid width in cells")
    parser.add_argument("--grid-height", type=int, default=47, help="grid height in cells")
    parser.add_argument("--font", default=None, help="TrueType font file")
    parser.add_argument("--atlas", default=None, help="tile atlas image")
    parser.add_argument(
        "--frames", type=int, default=0, help="stop after this many frames (0: run until closed)"
    )
    return parser


def draw_demo(gui: Gui, frame: int) -> bool:
    """Draw one frame of the main demo; True when EXECUTE was clicked."""
    gui.set_style(STYLE_TMGUI)
    gui.layout.spacing = 0
    gui.layout.hbox(GridRect(0, 0, 80, 1))
    for name in ("FILE", "VIEW", "TOOLS", "HELP"):
        gui.button(name, AUTO)
    gui.draw_text("Welcome to TMGUI!", GridPos(30, 1), GREEN, BLANK)
    gui.draw_text("Premier GUI for old-ass wretched shit", GridPos(30, 2), BLACK, GREEN)
    gui.draw_panel(GridRect(1, 2, 22, 41), DEMO_PANEL_KIT, GREEN, BLACK)

    gui.layout.vbox(GridRect(2, 3, 20, 0))
    gui.layout.spacing = 1
    gui.layout.align(Align.LEFT, Align.CENTER)
    gui.label_rect("     VBOX START     ", AUTO)
    for name in ("OPTION1", "OPTION2", "OPTION3", "OPTION4"):
        gui.button(name, size(20, 3))
    gui.label_rect("       HEADER       ", AUTO)
    for _ in range(3):
        gui.button("OPTION1", size(20, 3))
    gui.label_rect("       HEADER       ", AUTO)
    clicked = gui.button("EXECUTE", size(20, 5))
    gui.layout.spacing = 0

    gui.draw_panel(GridRect(29, 9, 18, 18), DEMO_PANEL_KIT, GREEN, BLACK)
    gui.draw_panel(GridRect(32, 9, 12, 1), DEMO_PANEL_KIT, GREEN, BLACK)
    gui.draw_text("WOW GYPHS!", GridPos(33, 9), GREEN, BLACK)

    rng = random.Random(frame)
    for x, y in itertools.product(range(16), range(16)):
        fg = rng.choice(_PALETTE)
        bg = rng.choice([c for c in _PALETTE if c != fg])
        gui.draw_glyph(GridPos(x + 30, y + 10), AtlasPos(x, y), fg, bg)
    return clicked


def draw_classic_demo(gui: ClassicGui) -> None:
    """Draw one frame of the fixed-cell demo."""
    gui.rect(GridRect(20, 20, 15, 15))
    gui.label("ABCdef", 3, 10, WHITE)
    gui.label("Dungeons of dogfood", 3, 11, WHITE)
    gui.label("1234567890", 3, 12, WHITE)
    gui.label("ABCdef", 3, 10, WHITE)
    gui.label("Sphinx of black quartz, judge my vow.", 3, 13, WHITE)

    gui.set_style(ClassicStyle(RED, YELLOW, RED, 2))
    gui.button("Danger!", 3, 3)

    gui.vbox(1, 25)
    gui.set_style(ClassicStyle())
    for row, name in enumerate(
        ["Play", "BIG BOOTYS", "FREE DOGS", "ALL DAY EVERU WAY", "$56 entry", "FREE DOGS"],
        start=5,
    ):
        gui.button(name, 3, row)
    gui.end_box()

    gui.draw_tile(1, 3, TILE_B)
    for x in range(GRID_WIDTH):
        gui.draw_tile(x, 1, TILE_C if x % 2 == 0 else TILE_B)
    for x in range(GRID_WIDTH):
        gui.draw_tile(x, 0, TILE_C if x % 2 != 0 else TILE_B)


def _frame_numbers(limit: int) -> Iterator[int]:
    return iter(range(limit)) if limit > 0 else itertools.count()


def _load_atlas(path: str | None) -> pygame.Surface | None:
    return pygame.image.load(path).convert_alpha() if path else None


def _poll_input() -> tuple[bool, bool]:
    """Return (quit requested, left button released) for this frame."""
    quit_requested = released = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            released = True
    return quit_requested, released


def _run_demo(args: argparse.Namespace) -> None:
    cw = ch = args.cell
    gw, gh = args.grid_width, args.grid_height
    pygame.display.set_mode((gw * cw * 2, gh * ch * 2), pygame.RESIZABLE)
    pygame.display.set_caption("TMGUI Test")
    font = pygame.font.Font(args.font, ch) if args.font else None
    canvas = Canvas(gw, gh, cw, ch, False)
    gui = Gui(canvas.surface, cw, ch, font, _load_atlas(args.atlas))
    if font is not None:
        gui.set_font(font)
    clock = pygame.time.Clock()
    for frame in _frame_numbers(args.frames):
        quit_requested, released = _poll_input()
        if quit_requested:
            return
        gui.update_mouse(pygame.mouse.get_pos(), pygame.mouse.get_pressed()[0], released)
        screen = pygame.display.get_surface()
        screen.fill(BLUE.rgba)
        with canvas.frame(screen):
            if draw_demo(gui, frame):
                log.info("Play button clicked!")
            gui.draw_text(f"FPS: {round(clock.get_fps())}", GridPos(70, 0), GREEN, BLANK)
        gui.update_transform(canvas.scale, canvas.offset_x, canvas.offset_y)
        pygame.display.flip()
        clock.tick(60)


def _run_classic(args: argparse.Namespace) -> None:
    pygame.display.set_mode(
        (GRID_WIDTH * TILE_SIZE * 2, GRID_HEIGHT * TILE_SIZE * 2), pygame.RESIZABLE
    )
    pygame.display.set_caption("tmgui")
    font = pygame.font.Font(args.font, TILE_SIZE) if args.font else None
    canvas = Canvas(GRID_WIDTH, GRID_HEIGHT, TILE_SIZE, TILE_SIZE, False)
    gui = ClassicGui(canvas.surface, font, _load_atlas(args.atlas))
    clock = pygame.time.Clock()
    for _ in _frame_numbers(args.frames):
        quit_requested, _released = _poll_input()
        if quit_requested:
            return
        screen = pygame.display.get_surface()
        screen.fill(DARKGRAY.rgba)
        with canvas.frame(screen):
            draw_classic_demo(gui)
        pygame.display.flip()
        clock.tick(60)


def main(argv: list[str] | None = None) -> int:
    """Open a window and run the chosen demo until it is closed."""
    args = build_argument_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    pygame.init()
    try:
        if args.classic:
            _run_classic(args)
        else:
            _run_demo(args)
    finally:
        pygame.quit()
    return 0