"""tick-motion - Target-chasing motion rules and their step responses."""
from __future__ import annotations

from tick_motion import vec
from tick_motion.components import CurveSample, MoverState
from tick_motion.config import MotionConfig
from tick_motion.easing import EASINGS
from tick_motion.loop import Clock, MotionLoop
from tick_motion.movers import create_mover, reset_mover
from tick_motion.params import (
    AlgorithmParameters,
    EaseInOutParams,
    LerpParams,
    MoveTowardParams,
    SecondOrderParams,
    SlerpParams,
)
from tick_motion.registry import (
    Algorithm,
    Variant,
    generate_curve,
    get_algorithm,
    list_variants,
    update_mover,
)
from tick_motion.stick import Stick, apply_dead_zone, target_from_stick
from tick_motion.types import (
    InvalidParameterError,
    MotionError,
    Position2D,
    UnknownVariantError,
)

__all__ = [
    "Algorithm",
    "AlgorithmParameters",
    "Clock",
    "CurveSample",
    "EASINGS",
    "EaseInOutParams",
    "InvalidParameterError",
    "LerpParams",
    "MotionConfig",
    "MotionError",
    "MotionLoop",
    "MoveTowardParams",
    "MoverState",
    "Position2D",
    "SecondOrderParams",
    "SlerpParams",
    "Stick",
    "UnknownVariantError",
    "Variant",
    "apply_dead_zone",
    "create_mover",
    "generate_curve",
    "get_algorithm",
    "list_variants",
    "reset_mover",
    "target_from_stick",
    "update_mover",
    "vec",
]
