from __future__ import annotations
import logging
from typing import Iterator, NamedTuple, Optional
import numpy as np
from pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

FIRST_CHAR = 0x20
LAST_CHAR = 0x7E
GLYPH_COUNT = 96
FALLBACK_GLYPH = GLYPH_COUNT - 1

NEWLINES = ('\n', '\r')

class GlyphPlacement(NamedTuple):
    index: int
    x: int
    y: int

def glyph_index(char: str) -> int:
    code = ord(char)
    if FIRST_CHAR <= code <= LAST_CHAR:
        return code - FIRST_CHAR
    return FALLBACK_GLYPH

class GlyphAtlas:
    """A buffer holding 96 fixed-width glyph cells side by side, covering
    character codes 0x20 to 0x7F. The last cell doubles as the fallback glyph
    for anything outside 0x20-0x7E."""

    def __init__(self, buffer: PixelBuffer):
        self.buffer = buffer

    @property
    def cell_width(self) -> int:
        return self.buffer.width // GLYPH_COUNT

    @property
    def cell_height(self) -> int:
        return self.buffer.height

    @property
    def is_usable(self) -> bool:
        return self.cell_width > 0

    def cell(self, index: int) -> np.ndarray:
        left = index * self.cell_width
        return self.buffer.pixels[:, left:left + self.cell_width]

    def render_cell(self, index: int, foreground: Optional[tuple[int, int, int]],
                    background: Optional[tuple[int, int, int]]) -> tuple[np.ndarray, np.ndarray]:
        """Return (colors, mask) for one glyph after color substitution.

        White atlas pixels take the foreground color, black ones the background
        color, and anything else keeps its own color. A missing foreground or
        background color clears the mask for those pixels.
        """
        cell = self.cell(index)
        colors = cell.copy()
        mask = np.ones(cell.shape[:2], dtype=bool)

        is_white = np.all(cell == 255, axis=2)
        is_black = np.all(cell == 0, axis=2)

        for selected, color in ((is_white, foreground), (is_black, background)):
            if color is None:
                mask[selected] = False
            else:
                colors[selected] = color

        return colors, mask

def as_atlas(atlas) -> GlyphAtlas:
    if isinstance(atlas, GlyphAtlas):
        return atlas
    return GlyphAtlas(atlas)

def layout_text(text: str, cell_width: int, cell_height: int, x: int, y: int,
                dest_width: int, wrap: bool = True) -> Iterator[GlyphPlacement]:
    x_offset = x
    y_offset = y

    for char in text:
        if char in NEWLINES:
            x_offset = x
            y_offset += cell_height
            continue

        if wrap and x_offset + cell_width > dest_width:
            x_offset = x
            y_offset += cell_height

        yield GlyphPlacement(glyph_index(char), x_offset, y_offset)

        x_offset += cell_width

def check_atlas(atlas: GlyphAtlas) -> bool:
    if atlas.is_usable:
        return True
    logger.warning("Glyph atlas %dx%d is narrower than %d pixels, text skipped",
                   atlas.buffer.width, atlas.buffer.height, GLYPH_COUNT)
    return False
