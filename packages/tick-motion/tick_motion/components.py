"""Mover state and curve sample records."""
from __future__ import annotations

from dataclasses import dataclass

from tick_motion.types import Position2D


@dataclass(frozen=True, slots=True)
class MoverState:
    """A 2D point chasing a target.

    Only ``position`` is read by the renderer. ``last_position`` feeds the
    slerp heading, ``velocity`` the spring-damper, and ``ease_progress`` the
    eased variant. ``initial_position`` is fixed at creation.
    """

    position: Position2D
    last_position: Position2D
    velocity: Position2D
    ease_progress: float
    initial_position: Position2D
    radius: float = 20.0


@dataclass(frozen=True, slots=True)
class CurveSample:
    """One point of a step-response curve."""

    t: float
    value: float
