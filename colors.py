from __future__ import annotations
import logging
import re

logger = logging.getLogger(__name__)

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

NAMED_COLORS = {
    'black': (0, 0, 0),
    'white': (255, 255, 255),
    'red': (255, 0, 0),
    'lime': (0, 255, 0),
    'green': (0, 128, 0),
    'blue': (0, 0, 255),
    'yellow': (255, 255, 0),
    'cyan': (0, 255, 255),
    'aqua': (0, 255, 255),
    'magenta': (255, 0, 255),
    'fuchsia': (255, 0, 255),
    'gray': (128, 128, 128),
    'grey': (128, 128, 128),
    'silver': (192, 192, 192),
    'maroon': (128, 0, 0),
    'olive': (128, 128, 0),
    'navy': (0, 0, 128),
    'purple': (128, 0, 128),
    'teal': (0, 128, 128),
    'orange': (255, 165, 0),
}

rgb_pattern = re.compile(r'^rgb\(\s*([-+]?\d+(?:\.\d*)?)\s*,\s*([-+]?\d+(?:\.\d*)?)\s*,\s*([-+]?\d+(?:\.\d*)?)\s*\)$')

def clamp_channel(value) -> int:
    return max(0, min(255, int(value)))

def parse_hex_color(hex_str: str) -> tuple[int, int, int]:
    hex_str = hex_str.strip().lstrip('#')

    try:
        if len(hex_str) == 3:
            return tuple(int(c, 16) * 17 for c in hex_str)
        if len(hex_str) == 6:
            return tuple(int(hex_str[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        pass

    logger.debug("Unrecognized hex color %r, using black", hex_str)
    return BLACK

def parse_rgb_color(rgb_str: str) -> tuple[int, int, int]:
    match = rgb_pattern.match(rgb_str.strip().lower())
    if not match:
        logger.debug("Unrecognized rgb() color %r, using black", rgb_str)
        return BLACK

    return tuple(clamp_channel(float(v)) for v in match.groups())

def parse_color(color_str: str) -> tuple[int, int, int] | None:
    if not color_str:
        return None

    color_str = color_str.strip().lower()

    if color_str == 'none':
        return None

    if color_str in NAMED_COLORS:
        return NAMED_COLORS[color_str]

    if color_str.startswith('#'):
        return parse_hex_color(color_str)

    if color_str.startswith('rgb'):
        return parse_rgb_color(color_str)

    logger.debug("Unknown color name %r, using black", color_str)
    return BLACK

def is_drawable(color) -> bool:
    """A color is drawable unless it is None, "none", or has a negative channel."""
    if color is None:
        return False
    if isinstance(color, str):
        return parse_color(color) is not None
    return all(channel >= 0 for channel in color)

def normalize_color(color) -> tuple[int, int, int]:
    if isinstance(color, str):
        parsed = parse_color(color)
        if parsed is None:
            raise ValueError(f"Color {color!r} cannot be used for a solid fill")
        return parsed

    if color is None:
        raise ValueError("A color is required")

    r, g, b = color
    return (clamp_channel(r), clamp_channel(g), clamp_channel(b))

def optional_color(color) -> tuple[int, int, int] | None:
    if not is_drawable(color):
        return None
    return normalize_color(color)
