from __future__ import annotations
import numpy as np
from PIL import Image
from colors import normalize_color

class ResourceError(ValueError):
    pass

class PixelBuffer:
    """Fixed-size grid of 8-bit RGB pixels stored as a (height, width, 3) array."""

    def __init__(self, width: int, height: int, color: tuple[int, int, int] = (0, 0, 0)):
        if not isinstance(width, (int, np.integer)) or not isinstance(height, (int, np.integer)):
            raise ResourceError(f"Buffer dimensions must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise ResourceError(f"Invalid buffer size: {width}x{height}")

        self.pixels = np.zeros((int(height), int(width), 3), dtype=np.uint8)
        self.pixels[:, :] = normalize_color(color)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> tuple[int, int, int]:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        r, g, b = self.pixels[y, x]
        return (int(r), int(g), int(b))

    def set_pixel(self, x: int, y: int, color):
        if not self.in_bounds(x, y):
            return
        self.pixels[y, x] = normalize_color(color)

    def snapshot(self) -> 'PixelBuffer':
        # np.array copies, so the clone never shares storage with self
        clone = PixelBuffer.__new__(PixelBuffer)
        clone.pixels = np.array(self.pixels, dtype=np.uint8, copy=True)
        return clone

    @staticmethod
    def from_array(array) -> 'PixelBuffer':
        data = np.asarray(array)
        if data.ndim != 3 or data.shape[2] not in (3, 4):
            raise ResourceError(f"Expected an (h, w, 3) or (h, w, 4) array, got shape {data.shape}")
        if data.shape[0] == 0 or data.shape[1] == 0:
            raise ResourceError(f"Invalid buffer size: {data.shape[1]}x{data.shape[0]}")

        buffer = PixelBuffer.__new__(PixelBuffer)
        buffer.pixels = np.clip(data[:, :, 0:3], 0, 255).astype(np.uint8)
        return buffer

    @staticmethod
    def from_image(image: Image.Image) -> 'PixelBuffer':
        return PixelBuffer.from_array(np.asarray(image.convert('RGB')))

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels.copy(), 'RGB')

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"
