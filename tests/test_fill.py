from __future__ import annotations
import numpy as np
import pytest
from geometry import pixel_span
from pixel_buffer import PixelBuffer
from plotter import Plotter
from styles import ClearStyle, FillStyle

def test_clear_defaults_to_black():
    buffer = PixelBuffer(6, 4, (50, 60, 70))
    Plotter(buffer).clear()
    assert not np.any(buffer.pixels)

def test_clear_with_color_sets_every_pixel(canvas):
    Plotter(canvas).clear(ClearStyle((7, 8, 9)))
    assert all(canvas.get_pixel(x, y) == (7, 8, 9) for x in range(10) for y in range(10))

def test_clear_accepts_a_plain_fill_style(canvas):
    Plotter(canvas).clear(FillStyle('white'))
    assert np.all(canvas.pixels == 255)

def test_rect_fills_exactly_its_area(canvas):
    plotter = Plotter(canvas)
    plotter.clear()
    plotter.rect(2, 2, 3, 3, FillStyle((10, 20, 30)))

    for y in range(10):
        for x in range(10):
            expected = (10, 20, 30) if 2 <= x < 5 and 2 <= y < 5 else (0, 0, 0)
            assert canvas.get_pixel(x, y) == expected

def test_rect_defaults():
    buffer = PixelBuffer(12, 12)
    Plotter(buffer).rect()
    filled = np.all(buffer.pixels == 255, axis=2)
    assert filled[:10, :10].all()
    assert filled.sum() == 100

def test_rect_is_clipped_on_every_side(canvas):
    Plotter(canvas).rect(-3, 8, 5, 10, FillStyle((1, 1, 1)))
    filled = np.all(canvas.pixels == 1, axis=2)
    assert filled.sum() == 4
    assert filled[8:10, 0:2].all()

@pytest.mark.parametrize("x, y, w, h", [(0, 0, 0, 5), (0, 0, 5, -2), (10, 0, 3, 3), (-5, -5, 3, 3)])
def test_rect_outside_or_empty_draws_nothing(canvas, x, y, w, h):
    Plotter(canvas).rect(x, y, w, h, FillStyle((1, 1, 1)))
    assert not np.any(canvas.pixels)

def test_fractional_rect_covers_every_unit_step(canvas):
    Plotter(canvas).rect(0.5, 0, 1.6, 1, FillStyle((1, 1, 1)))
    filled = np.all(canvas.pixels == 1, axis=2)
    assert filled.sum() == 2
    assert filled[0, 0] and filled[0, 1]

def test_fractional_origin_is_floored(canvas):
    Plotter(canvas).rect(2.7, 1.2, 2, 1, FillStyle((1, 1, 1)))
    ys, xs = np.nonzero(np.all(canvas.pixels == 1, axis=2))
    assert sorted(zip(xs.tolist(), ys.tolist())) == [(2, 1), (3, 1)]

@pytest.mark.parametrize("start, length, span", [
    (2, 3, (2, 5)),
    (0.5, 1.6, (0, 2)),
    (-1.5, 2, (-2, 0)),
    (4, 0, (4, 4)),
    (4, -2, (4, 2)),
])
def test_pixel_span(start, length, span):
    assert pixel_span(start, length) == span
