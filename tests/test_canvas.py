import pygame
import pytest

from tilegui.canvas import Canvas
from tilegui.style import BLACK, BLANK, RED


def test_dimensions_in_pixels():
    canvas = Canvas(80, 47, 8, 8)
    assert canvas.surface.get_size() == (canvas.width, canvas.height)
    assert canvas.width == 80 * 8


@pytest.mark.parametrize("bad", [(0, 10, 8, 8), (10, -1, 8, 8), (10, 10, 0, 8)])
def test_rejects_non_positive_sizes(bad):
    with pytest.raises(ValueError):
        Canvas(*bad)


def test_fit_whole_scale_and_centring():
    canvas = Canvas(10, 5, 8, 8)
    w, h = canvas.width, canvas.height
    assert canvas.fit(w * 3 + 10, h * 3 + 20) == (3, 5, 10)
    assert (canvas.scale, canvas.offset_x, canvas.offset_y) == (3, 5, 10)


def test_fit_uses_smaller_axis():
    canvas = Canvas(10, 5, 8, 8)
    scale, _, _ = canvas.fit(canvas.width * 4, canvas.height * 2)
    assert scale == 2


def test_fit_never_downscales():
    canvas = Canvas(10, 5, 8, 8)
    scale, ox, oy = canvas.fit(canvas.width - 10, canvas.height - 10)
    assert scale == 1
    assert (ox, oy) == (-5, -5)


def test_begin_clears_opaque_to_black():
    canvas = Canvas(4, 4)
    canvas.surface.fill(RED.rgba)
    surface = canvas.begin()
    assert tuple(surface.get_at((3, 3))) == BLACK.rgba


def test_begin_clears_transparent_to_blank():
    canvas = Canvas(4, 4, transparent=True)
    canvas.surface.fill(RED.rgba)
    surface = canvas.begin()
    assert tuple(surface.get_at((3, 3))) == BLANK.rgba


def test_end_blits_scaled_image():
    canvas = Canvas(2, 2, 4, 4)
    screen = pygame.Surface((canvas.width * 2, canvas.height * 2), pygame.SRCALPHA)
    canvas.begin()
    canvas.surface.fill(RED.rgba, pygame.Rect(0, 0, 1, 1))
    scale, ox, oy = canvas.end(screen)
    assert scale == 2
    assert tuple(screen.get_at((ox + 1, oy + 1))) == RED.rgba
    assert tuple(screen.get_at((ox + 2, oy + 2))) == BLACK.rgba


def test_frame_context_draws_and_presents():
    canvas = Canvas(2, 2, 4, 4)
    screen = pygame.Surface((canvas.width * 3, canvas.height * 3), pygame.SRCALPHA)
    with canvas.frame(screen) as surface:
        surface.fill(RED.rgba)
    assert canvas.scale == 3
    assert tuple(screen.get_at((screen.get_width() - 1, screen.get_height() - 1))) == RED.rgba