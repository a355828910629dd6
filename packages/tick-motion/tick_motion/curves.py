"""Idealized step responses for plotting.

Each response maps normalized time t in [0, 1] to the position of a mover
whose target jumps from 0 to 1 at t = 0. These are analytic shapes chosen
to show the character of each variant; they are not replays of a live
mover and never touch ``MoverState``.
"""
from __future__ import annotations

import math
from typing import Any, Callable

from tick_motion import vec
from tick_motion.components import CurveSample
from tick_motion.config import CURVE_SAMPLES
from tick_motion.easing import EASINGS
from tick_motion.params import (
    EaseInOutParams,
    LerpParams,
    MoveTowardParams,
    SecondOrderParams,
    SlerpParams,
)

Response = Callable[[float, Any], float]

# The speed slider spans 0-10 ticks of travel; the chart works in tenths.
SPEED_SCALE = 10.0


def move_toward_response(t: float, params: MoveTowardParams) -> float:
    """Linear ramp clipped at the target."""
    return min(1.0, t * (params.speed / SPEED_SCALE) * 2)


def lerp_response(t: float, params: LerpParams) -> float:
    exponent = min(1.0, params.factor * 2)
    return 1.0 - (1.0 - t) ** exponent


def slerp_response(t: float, params: SlerpParams) -> float:
    factor = min(1.0, params.factor * 2)
    return math.sin(math.pi * t * factor) * factor


def second_order_response(t: float, params: SecondOrderParams) -> float:
    """Damped cosine settling on 1, starting at ``1 + amplitude``."""
    damping = vec.clamp_scalar(params.damping, 0.1, 1.0)
    omega = 2 * math.pi * params.frequency
    amplitude = 0.5 * (1 + (1 - damping))
    return 1 + amplitude * math.exp(-damping * omega * t) * math.cos(omega * t)


def ease_in_out_response(t: float, params: EaseInOutParams) -> float:
    return EASINGS[params.easing](t) * params.strength


def sample(
    response: Response, params: Any, samples: int = CURVE_SAMPLES
) -> tuple[CurveSample, ...]:
    """Evaluate *response* at *samples* evenly spaced points over [0, 1]."""
    if samples < 2:
        raise ValueError(f"samples must be >= 2, got {samples}")
    last = samples - 1
    return tuple(
        CurveSample(t=i / last, value=response(i / last, params))
        for i in range(samples)
    )
