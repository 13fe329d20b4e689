from __future__ import annotations
from colors import BLACK, WHITE, normalize_color, optional_color

class LineStyle:
    def __init__(self, color=WHITE, precision: float = 1.0):
        self.color = normalize_color(color)
        # density multiplier, clamped to [0.1, 2] when a line is drawn
        self.precision = precision

    def copy(self) -> 'LineStyle':
        return LineStyle(self.color, self.precision)

    def __repr__(self) -> str:
        return f"LineStyle(color={self.color}, precision={self.precision})"

class FillStyle:
    def __init__(self, color=WHITE):
        self.color = normalize_color(color)

    def copy(self) -> 'FillStyle':
        return type(self)(self.color)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(color={self.color})"

class ClearStyle(FillStyle):
    def __init__(self, color=BLACK):
        super().__init__(color)

class PasteOptions:
    """Region of the source to copy; -1 means the source's full dimension."""

    def __init__(self, width: int = -1, height: int = -1):
        self.width = width
        self.height = height

    def copy(self) -> 'PasteOptions':
        return PasteOptions(self.width, self.height)

    def __repr__(self) -> str:
        return f"PasteOptions(width={self.width}, height={self.height})"

class TextStyle:
    """Text colors substitute pure white (foreground) and pure black (background)
    atlas pixels. A color of None, "none" or any negative channel leaves those
    pixels transparent."""

    def __init__(self, wrap: bool = True, foreground=WHITE, background=None):
        self.wrap = wrap
        self.foreground = optional_color(foreground)
        self.background = optional_color(background)

    def copy(self) -> 'TextStyle':
        return TextStyle(self.wrap, self.foreground, self.background)

    def __repr__(self) -> str:
        return (f"TextStyle(wrap={self.wrap}, foreground={self.foreground}, "
                f"background={self.background})")
