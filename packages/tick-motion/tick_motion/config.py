"""Motion configuration dataclass and shared constants."""
from __future__ import annotations

from dataclasses import dataclass

# Below this magnitude a vector has no usable direction.
EPSILON = 1e-3

EASE_STEP = 0.02
EASE_ARRIVAL_DISTANCE = 0.1
EASE_GAIN = 0.1

DEFAULT_DT = 1.0 / 60.0
CURVE_SAMPLES = 101


@dataclass(frozen=True)
class MotionConfig:
    """Immutable configuration for a motion loop and its input surface.

    Attributes:
        tps: Ticks per second driving the mover.
        dead_zone: Stick values with an absolute value below this read as 0.
        stick_tolerance: Minimum per-axis change before a new stick value
            is published.
        movement_range: Fraction of the smaller viewport side that a full
            stick deflection maps to.
        mover_radius: Radius handed to the renderer.
        curve_samples: Resolution of the step-response curve.
    """

    tps: int = 60
    dead_zone: float = 0.05
    stick_tolerance: float = 0.05
    movement_range: float = 0.4
    mover_radius: float = 20.0
    curve_samples: int = CURVE_SAMPLES
