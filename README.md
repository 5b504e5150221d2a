# tilegui

An immediate-mode GUI for pygame that lays everything out on a grid of
fixed-size cells. Each cell holds one character of text or one tile from an
atlas image. The grid is drawn to an off-screen canvas, and that canvas is
scaled onto the window by the largest whole factor that fits, never less
than one, and centred.

## Installing

```
pip install .
```

This also installs pygame. To run the tests, install the `test` extra
(`pip install .[test]`) and run `pytest`.

## Trying it

```
tilegui-demo
```

This opens a resizable window. It shows a menu bar of buttons, a column of
buttons and headers inside a tiled panel, and a 16 by 16 block of atlas
glyphs. Clicking EXECUTE logs a message. Options:

- `--font PATH`: a TrueType font file to use for text. Without it, pygame's
  default font is used.
- `--atlas PATH`: a tile atlas image laid out on the same cell grid. Without
  it, tiles and panel frames are not drawn and only their background cells
  are filled.
- `--cell N`: cell size in pixels. The default is 8.
- `--grid-width N`, `--grid-height N`: grid size in cells. The defaults are
  80 and 47.
- `--classic`: show the simpler fixed-cell demo, which uses `ClassicGui` on
  an 80 by 45 grid of 8-pixel cells.
- `--frames N`: stop after N frames. With the default of 0 it runs until the
  window is closed.

No font or atlas image comes with the package. Supply your own.

## Using it

Geometry is in grid cells (`tilegui.geometry`). A `GridRect` holds a
position and a size, and a `GridPos` holds one cell. A negative position
means the active layout places the element. A width or height of zero means
it is sized automatically. `AUTO` is `GridRect(-1, -1, 0, 0)`. `size(w, h)`
gives a rectangle with no position. `pos(x, y)` gives a rectangle with a
position and no size. `AtlasPos` is a column and row in the tile atlas.

```python
import pygame
from tilegui.canvas import Canvas
from tilegui.geometry import AUTO, GridPos, GridRect, size
from tilegui.gui import Gui
from tilegui.layout import Align
from tilegui.style import BLANK, GREEN

pygame.init()
screen = pygame.display.set_mode((1280, 752), pygame.RESIZABLE)
canvas = Canvas(80, 47, 8, 8, False)
gui = Gui(canvas.surface, 8, 8)  # font and atlas are optional

running = True
while running:
    released = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            released = True
    gui.update_mouse(pygame.mouse.get_pos(), pygame.mouse.get_pressed()[0], released)

    with canvas.frame(screen):
        gui.layout.hbox(GridRect(0, 0, 80, 1))
        gui.button("FILE", AUTO)
        gui.button("VIEW", AUTO)

        gui.layout.vbox(GridRect(2, 3, 20, 0))
        gui.layout.spacing = 1
        gui.layout.align(Align.LEFT, Align.CENTER)
        if gui.button("EXECUTE", size(20, 5)):
            print("clicked")
        gui.draw_text("Hello", GridPos(30, 1), GREEN, BLANK)
    gui.update_transform(canvas.scale, canvas.offset_x, canvas.offset_y)
    pygame.display.flip()
pygame.quit()
```

### Canvas

`Canvas(grid_w, grid_h, cell_w, cell_h, transparent)` owns a surface of
`grid_w * cell_w` by `grid_h * cell_h` pixels. `begin()` clears it, to fully
transparent or to black. `end(screen)` scales it onto `screen` and returns
`(scale, offset_x, offset_y)`. It also keeps these values as `scale`,
`offset_x` and `offset_y`. `frame(screen)` is a context manager that calls
both. `fit(screen_w, screen_h)` only computes the transform.

### Gui

`Gui` reads no input on its own. Pass the mouse in each frame with
`update_mouse(position, down, released)`, and pass the canvas transform in
with `update_transform(scale, offset_x, offset_y)`. `mouse_grid()` then gives
the mouse position in fractional cells.

The elements are:

- `button(text, rect)`: draws a box in the normal, hover or active button
  style. It returns True when the left button was released over it.
- `label(text, rect)`: draws aligned text in the base style. Only the cells
  under the text get the background. In a vertical box with a container
  width, an unsized label takes that width.
- `label_rect(text, rect)` and `label_rect_styled(text, rect, style)`: draw
  a filled, bordered box with aligned text and return its final rectangle.

The primitives are `draw_fill_cell`, `draw_fill_rect`, `draw_style_rect`,
`draw_bevel_rect`, `draw_text`, `draw_glyph` and `draw_panel`.
`draw_text` draws one character per cell. `draw_glyph` copies an atlas tile
tinted by the foreground colour.

Text is measured and drawn with the active font. That is the font given to
`set_font`, then the style's font, then the fallback font passed to the
constructor (pygame's default font when none is given).
`measure_cells(text)` gives a text's width in whole cells.

### Layout

`gui.layout` is a `Layout`. `vbox(rect)` stacks elements downward from
`rect`'s position, and `hbox(rect)` places them rightward. `spacing` adds
cells between elements. `align(horizontal, vertical)` takes `Align` values
for text inside a box, and `None` keeps the current setting. Starting a box
replaces the previous one. Boxes do not nest.

### Styles

`tilegui.style` provides `Color` along with named colours such as `GREEN`,
`BLACK` and `BLANK`. A `Style` holds a base `RectStyle`, a `ButtonStyle` for
the normal, hover and active states, a `BevelStyle` and an optional font.
`STYLE_TMGUI` (green on black, the default) and `STYLE_OSGREY` are complete
styles. `STYLE_BASIC`, `STYLE_BW`, `STYLE_CONSOLE` and `STYLE_BTN_*` are
single `RectStyle`s. `PanelKit` names the atlas tiles that `draw_panel` uses
for corners, edges, fill and the optional end caps of one-row panels.

### ClassicGui

`tilegui.classic.ClassicGui` is a simpler interface on 8-pixel cells. It has
`rect`, `label`, `button` (one row, one cell of padding each side) and
`draw_tile`. Between `vbox(x, y)` or `hbox(x, y)` and `end_box()`, buttons
ignore their own coordinates and follow the box cursor. Box cursors are
saved on a stack of up to 16 with `push_layout` and `pop_layout`. However,
`end_box()` always returns to free placement. Styling uses a single
`ClassicStyle`.

## What it does not do

There are no text inputs, sliders, checkboxes, scrolling or keyboard focus.
The only interaction is clicking buttons with the left mouse button. There
is also no way to load or save layouts or themes from files.