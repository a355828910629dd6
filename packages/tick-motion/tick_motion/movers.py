"""Mover update rules.

Every rule is a pure function ``(state, target, params) -> state``. The
input state is never mutated; ``initial_position`` is carried through
untouched.
"""
from __future__ import annotations

import math
from dataclasses import replace

from tick_motion import vec
from tick_motion.components import MoverState
from tick_motion.config import EASE_ARRIVAL_DISTANCE, EASE_GAIN, EASE_STEP, EPSILON
from tick_motion.easing import EASINGS
from tick_motion.params import (
    EaseInOutParams,
    LerpParams,
    MoveTowardParams,
    SecondOrderParams,
    SlerpParams,
)
from tick_motion.types import Position2D

_ORIGIN: Position2D = vec.zero(2)


def create_mover(initial: Position2D, radius: float = 20.0) -> MoverState:
    start = (float(initial[0]), float(initial[1]))
    return MoverState(
        position=start,
        last_position=start,
        velocity=_ORIGIN,
        ease_progress=0.0,
        initial_position=start,
        radius=radius,
    )


def reset_mover(state: MoverState) -> MoverState:
    """Return *state* moved back to its initial position, at rest."""
    return replace(
        state,
        position=state.initial_position,
        last_position=state.initial_position,
        velocity=_ORIGIN,
        ease_progress=0.0,
    )


def move_toward(
    state: MoverState, target: Position2D, params: MoveTowardParams
) -> MoverState:
    """Step a fixed distance along the unit direction to *target*."""
    offset = vec.sub(target, state.position)
    direction = vec.normalize(offset)
    if direction is None:
        return state
    if params.snap and vec.magnitude(offset) <= params.speed:
        return replace(state, position=tuple(target))
    return replace(
        state, position=vec.add(state.position, vec.scale(direction, params.speed))
    )


def lerp(state: MoverState, target: Position2D, params: LerpParams) -> MoverState:
    """Cover a fixed fraction of the remaining distance."""
    return replace(state, position=vec.lerp(state.position, target, params.factor))


def slerp(state: MoverState, target: Position2D, params: SlerpParams) -> MoverState:
    """Rotate the current heading toward the target heading.

    Falls back to :func:`lerp` when either heading is too short to have a
    direction; ``last_position`` is only advanced on the rotational path.
    """
    current = vec.sub(state.position, state.last_position)
    toward = vec.sub(target, state.position)
    current_n = vec.normalize(current, EPSILON)
    toward_n = vec.normalize(toward, EPSILON)
    if current_n is None or toward_n is None:
        return replace(
            state, position=vec.lerp(state.position, target, params.factor)
        )

    factor = params.factor
    cos_angle = vec.clamp_scalar(vec.dot(current_n, toward_n), -1.0, 1.0)
    theta = math.acos(cos_angle) * factor
    blend = vec.add(
        vec.scale(current_n, math.sin((1.0 - factor) * theta)),
        vec.scale(toward_n, math.sin(factor * theta)),
    )
    step = vec.scale(blend, vec.magnitude(toward))
    return replace(
        state,
        last_position=state.position,
        position=vec.add(state.position, step),
    )


def force_multiplier(damping: float, form: str) -> float:
    """Spring force scale for a clamped *damping* under *form*."""
    if form == "force_multiplier":
        return 2.0 * (2.0 - damping)
    return 1.0


def second_order(
    state: MoverState, target: Position2D, params: SecondOrderParams
) -> MoverState:
    """Spring toward *target*, then damp the velocity."""
    damping = vec.clamp_scalar(params.damping, 0.1, 1.0)
    gain = (
        params.frequency
        * params.frequency
        * params.dt
        * force_multiplier(damping, params.form)
    )
    accel = vec.scale(vec.sub(target, state.position), gain)
    velocity = vec.scale(vec.add(state.velocity, accel), 1.0 - damping)
    return replace(
        state, velocity=velocity, position=vec.add(state.position, velocity)
    )


def ease_in_out(
    state: MoverState, target: Position2D, params: EaseInOutParams
) -> MoverState:
    """Advance along an easing cycle while the target is out of reach.

    Arriving within the arrival distance ends the cycle and resets progress,
    so the next target change eases in from rest again.
    """
    offset = vec.sub(target, state.position)
    if vec.magnitude(offset) <= EASE_ARRIVAL_DISTANCE:
        return replace(state, ease_progress=0.0)

    progress = min(1.0, state.ease_progress + EASE_STEP)
    shaped = EASINGS[params.easing](progress)
    step = vec.scale(offset, shaped * params.strength * EASE_GAIN)
    return replace(
        state, ease_progress=progress, position=vec.add(state.position, step)
    )
