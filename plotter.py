from __future__ import annotations
import logging
from typing import Optional
import numpy as np
from pixel_buffer import PixelBuffer
from styles import LineStyle, FillStyle, ClearStyle, PasteOptions, TextStyle
from geometry import clamp, clamp_precision, line_samples, pixel_span, sample_window, scale_points, to_pixel
from shapes import get_shape
from text_layout import as_atlas, check_atlas, layout_text

logger = logging.getLogger(__name__)

class Plotter:
    """Draws lines, outlines, rectangles, pasted buffers and bitmap text onto
    an existing PixelBuffer. Every write is clipped to the buffer; nothing here
    raises for out-of-range geometry."""

    def __init__(self, resource: PixelBuffer):
        self.resource = resource

    @property
    def width(self) -> int:
        return self.resource.width

    @property
    def height(self) -> int:
        return self.resource.height

    def _write_block(self, colors: np.ndarray, mask: Optional[np.ndarray], x: int, y: int):
        h, w = colors.shape[:2]
        x0 = max(x, 0)
        y0 = max(y, 0)
        x1 = min(x + w, self.width)
        y1 = min(y + h, self.height)

        if x0 >= x1 or y0 >= y1:
            return

        src = colors[y0 - y:y1 - y, x0 - x:x1 - x]
        region = self.resource.pixels[y0:y1, x0:x1]

        if mask is None:
            region[:, :] = src
        else:
            selected = mask[y0 - y:y1 - y, x0 - x:x1 - x]
            region[selected] = src[selected]

    def line(self, x1: float, y1: float, x2: float, y2: float, style: Optional[LineStyle] = None):
        style = style or LineStyle()
        p = clamp_precision(style.precision)
        if p != style.precision:
            logger.debug("Line precision %s clamped to %s", style.precision, p)

        count, step_x, step_y = line_samples(x1, y1, x2, y2, p)
        if count == 0:
            logger.debug("Zero-length line at (%s, %s) skipped", x1, y1)
            return

        pixels = self.resource.pixels
        color = style.color
        width = self.width
        height = self.height

        # only walk the samples that can land inside the buffer
        lo_x, hi_x = sample_window(x1, step_x, width, count)
        lo_y, hi_y = sample_window(y1, step_y, height, count)
        first = max(lo_x, lo_y)
        last = min(hi_x, hi_y)

        x = x1 + first * step_x
        y = y1 + first * step_y
        for _ in range(first, last):
            px = to_pixel(x)
            py = to_pixel(y)
            if 0 <= px < width and 0 <= py < height:
                pixels[py, px] = color

            x += step_x
            y += step_y

    def outline(self, shape, x: float, y: float, w: float, h: float, style: Optional[LineStyle] = None):
        style = style or LineStyle()
        points = scale_points(get_shape(shape), x, y, w, h)

        for (lx, ly), (cx, cy) in zip(points, points[1:]):
            self.line(lx, ly, cx, cy, style)

    def circle(self, x: float, y: float, w: float, h: float, style: Optional[LineStyle] = None):
        self.outline('circle', x, y, w, h, style)

    def triangle(self, x: float, y: float, w: float, h: float, style: Optional[LineStyle] = None):
        self.outline('triangle', x, y, w, h, style)

    def arrow_up(self, x: float, y: float, w: float, h: float, style: Optional[LineStyle] = None):
        self.outline('arrow_up', x, y, w, h, style)

    def arrow_down(self, x: float, y: float, w: float, h: float, style: Optional[LineStyle] = None):
        self.outline('arrow_down', x, y, w, h, style)

    def arrow_left(self, x: float, y: float, w: float, h: float, style: Optional[LineStyle] = None):
        self.outline('arrow_left', x, y, w, h, style)

    def arrow_right(self, x: float, y: float, w: float, h: float, style: Optional[LineStyle] = None):
        self.outline('arrow_right', x, y, w, h, style)

    def rect(self, x: int = 0, y: int = 0, w: int = 10, h: int = 10, style: Optional[FillStyle] = None):
        style = style or FillStyle()
        left, right = pixel_span(x, w)
        top, bottom = pixel_span(y, h)

        x0 = max(left, 0)
        y0 = max(top, 0)
        x1 = min(right, self.width)
        y1 = min(bottom, self.height)

        if x0 >= x1 or y0 >= y1:
            return

        self.resource.pixels[y0:y1, x0:x1] = style.color

    def clear(self, style: Optional[FillStyle] = None):
        style = style or ClearStyle()
        self.resource.pixels[:, :] = style.color

    def paste(self, source: PixelBuffer, x: int = 0, y: int = 0, options: Optional[PasteOptions] = None):
        options = options or PasteOptions()
        # source may be self.resource, so read only from a private copy
        snapshot = source.snapshot()

        w = clamp(int(options.width), -1, snapshot.width)
        h = clamp(int(options.height), -1, snapshot.height)
        if (w, h) != (options.width, options.height):
            logger.debug("Paste size %sx%s clamped to %sx%s", options.width, options.height, w, h)

        if w == -1:
            w = snapshot.width
        if h == -1:
            h = snapshot.height

        self._write_block(snapshot.pixels[0:h, 0:w], None, to_pixel(x), to_pixel(y))

    def text(self, atlas, x: int, y: int, text: str = 'A', style: Optional[TextStyle] = None):
        style = style or TextStyle()
        atlas = as_atlas(atlas)
        if not check_atlas(atlas):
            return

        placements = layout_text(text, atlas.cell_width, atlas.cell_height,
                                 to_pixel(x), to_pixel(y), self.width, style.wrap)

        rendered = {}
        for glyph in placements:
            if glyph.index not in rendered:
                rendered[glyph.index] = atlas.render_cell(glyph.index, style.foreground, style.background)
            colors, mask = rendered[glyph.index]
            self._write_block(colors, mask, glyph.x, glyph.y)
