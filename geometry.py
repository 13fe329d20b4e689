from __future__ import annotations
import math

VIRTUAL_SIZE = 512.0

MIN_PRECISION = 0.1
MAX_PRECISION = 2.0

def clamp(x, minx, maxx):
    return max(min(x, maxx), minx)

def map_range(x, frommin, frommax, tomin, tomax):
    return ((x-frommin)/(frommax-frommin))*(tomax-tomin)+tomin

def scale_point(point: tuple[float, float], x: float, y: float, w: float, h: float) -> tuple[float, float]:
    px, py = point
    return (map_range(px, 0.0, VIRTUAL_SIZE, 0.0, w) + x,
            map_range(py, 0.0, VIRTUAL_SIZE, 0.0, h) + y)

def scale_points(points, x: float, y: float, w: float, h: float) -> list[tuple[float, float]]:
    return [scale_point(p, x, y, w, h) for p in points]

def clamp_precision(p: float) -> float:
    return clamp(float(p), MIN_PRECISION, MAX_PRECISION)

def line_samples(x1: float, y1: float, x2: float, y2: float, p: float) -> tuple[int, float, float]:
    """Return (count, step_x, step_y) for a line sampled at density ``p``.

    The scaled length is ``hypot(dx, dy) * p``; one sample is taken per unit of
    that length, stepping ``(dx, dy) / length`` between samples. A zero-length
    segment yields no samples and a zero step.
    """
    dx = x2 - x1
    dy = y2 - y1
    length = math.hypot(dx, dy) * p

    if length <= 0.0 or not math.isfinite(length):
        return (0, 0.0, 0.0)

    return (math.ceil(length), dx / length, dy / length)

def to_pixel(value: float) -> int:
    return int(math.floor(value))

def sample_window(start: float, step: float, limit: int, count: int) -> tuple[int, int]:
    """Return the half-open range of sample indices ``i`` in ``[0, count)`` whose
    position ``start + i * step`` may fall in ``[0, limit)``.

    The range is widened by one sample on each side to absorb floating point
    drift; callers still bounds-check every sample.
    """
    if step == 0.0:
        return (0, count) if 0 <= start < limit else (0, 0)

    # ratios are clamped so a tiny step cannot overflow math.ceil
    bound = float(count + 1)
    enter = clamp(-start / step, -bound, bound)
    leave = clamp((limit - start) / step, -bound, bound)

    if step > 0:
        lo = math.ceil(enter)
        hi = math.ceil(leave)
    else:
        lo = math.floor(leave) + 1
        hi = math.floor(enter) + 1

    return (max(lo - 1, 0), min(hi + 1, count))

def pixel_span(start: float, length: float) -> tuple[int, int]:
    # unit steps from start while below start + length, each floored
    first = to_pixel(start)
    return (first, first + math.ceil(length))
