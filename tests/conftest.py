from __future__ import annotations
import pytest
from pixel_buffer import PixelBuffer
from text_layout import GlyphAtlas, GLYPH_COUNT

CELL_WIDTH = 4
CELL_HEIGHT = 5

def marker_color(index: int) -> tuple[int, int, int]:
    return (index, 100, 200)

def make_atlas(cell_width: int = CELL_WIDTH, cell_height: int = CELL_HEIGHT) -> GlyphAtlas:
    # Every cell: black background, a white stroke down column 0 and a
    # marker pixel at (1, 0) whose red channel is the glyph index.
    buffer = PixelBuffer(cell_width * GLYPH_COUNT, cell_height)
    for index in range(GLYPH_COUNT):
        left = index * cell_width
        for row in range(cell_height):
            buffer.set_pixel(left, row, (255, 255, 255))
        buffer.set_pixel(left + 1, 0, marker_color(index))
    return GlyphAtlas(buffer)

@pytest.fixture
def canvas() -> PixelBuffer:
    return PixelBuffer(10, 10)

@pytest.fixture
def atlas() -> GlyphAtlas:
    return make_atlas()
