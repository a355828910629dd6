"""Symmetric ease-in-out curves.

Each function maps progress in [0, 1] to a shaping factor in [0, 1]:
accelerating over the first half, decelerating over the second.
"""
from __future__ import annotations

import math
from typing import Callable


def sine(t: float) -> float:
    return 0.5 - math.cos(t * math.pi) / 2


def quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def quart(t: float) -> float:
    if t < 0.5:
        return 8 * t * t * t * t
    return 1 - (-2 * t + 2) ** 4 / 2


def quint(t: float) -> float:
    if t < 0.5:
        return 16 * t * t * t * t * t
    return 1 - (-2 * t + 2) ** 5 / 2


EASINGS: dict[str, Callable[[float], float]] = {
    "sine": sine,
    "quad": quad,
    "cubic": cubic,
    "quart": quart,
    "quint": quint,
}
