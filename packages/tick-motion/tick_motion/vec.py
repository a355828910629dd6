"""2D vector math helpers operating on tuple[float, ...]."""
from __future__ import annotations

import math

from tick_motion.config import EPSILON

Vec = tuple[float, ...]


def add(a: Vec, b: Vec) -> Vec:
    return tuple(ai + bi for ai, bi in zip(a, b, strict=True))


def sub(a: Vec, b: Vec) -> Vec:
    return tuple(ai - bi for ai, bi in zip(a, b, strict=True))


def scale(v: Vec, s: float) -> Vec:
    return tuple(vi * s for vi in v)


def dot(a: Vec, b: Vec) -> float:
    return sum(ai * bi for ai, bi in zip(a, b, strict=True))


def magnitude(v: Vec) -> float:
    return math.sqrt(dot(v, v))


def distance(a: Vec, b: Vec) -> float:
    return magnitude(sub(a, b))


def normalize(v: Vec, epsilon: float = EPSILON) -> Vec | None:
    """Unit vector along *v*, or None when ``|v| < epsilon`` (degenerate)."""
    mag = magnitude(v)
    if mag < epsilon:
        return None
    return scale(v, 1.0 / mag)


def lerp(a: Vec, b: Vec, t: float) -> Vec:
    """Blend from *a* to *b*. ``t == 1`` returns *b* exactly."""
    return tuple(ai * (1.0 - t) + bi * t for ai, bi in zip(a, b, strict=True))


def clamp_scalar(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def zero(dimensions: int = 2) -> Vec:
    return tuple(0.0 for _ in range(dimensions))
