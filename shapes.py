from __future__ import annotations

# Outlines in a 512x512 virtual space. Each table is a closed polyline: the
# last point repeats the first.

CIRCLE = (
    (247, 1), (312, 8), (360, 23), (403, 47), (439, 78), (469, 114),
    (490, 153), (507, 205), (511, 257), (505, 312), (490, 360), (466, 403),
    (435, 439), (399, 469), (360, 490), (308, 507), (256, 511), (201, 505),
    (153, 490), (110, 466), (74, 435), (44, 399), (23, 360), (6, 308),
    (2, 256), (8, 201), (23, 153), (47, 110), (78, 74), (114, 44),
    (153, 23), (205, 6), (247, 1),
)

TRIANGLE = (
    (256, 0), (512, 512), (0, 512), (256, 0),
)

ARROW_UP = (
    (256, 1), (512, 256), (384, 256), (384, 512),
    (128, 512), (128, 256), (1, 256), (256, 1),
)

ARROW_DOWN = (
    (128, 0), (384, 0), (384, 256), (512, 256),
    (256, 512), (0, 256), (128, 256), (128, 0),
)

ARROW_LEFT = (
    (0, 256), (256, 0), (256, 128), (512, 128),
    (512, 384), (256, 384), (256, 512), (0, 256),
)

ARROW_RIGHT = (
    (0, 128), (256, 128), (256, 0), (512, 256),
    (256, 512), (256, 384), (0, 384), (0, 128),
)

SHAPES = {
    'circle': CIRCLE,
    'triangle': TRIANGLE,
    'arrow_up': ARROW_UP,
    'arrow_down': ARROW_DOWN,
    'arrow_left': ARROW_LEFT,
    'arrow_right': ARROW_RIGHT,
}

def register_shape(name: str, points) -> tuple[tuple[float, float], ...]:
    table = tuple((float(px), float(py)) for px, py in points)
    if len(table) < 2:
        raise ValueError(f"Shape {name!r} needs at least 2 points, got {len(table)}")

    if table[0] != table[-1]:
        table = table + (table[0],)

    SHAPES[name] = table
    return table

def get_shape(shape) -> tuple:
    if isinstance(shape, str):
        try:
            return SHAPES[shape]
        except KeyError:
            raise KeyError(f"Unknown shape: {shape!r}") from None
    return tuple(shape)
