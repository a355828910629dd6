"""Variant registry and the dispatching entry points."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from tick_motion import curves, movers
from tick_motion.components import CurveSample, MoverState
from tick_motion.config import CURVE_SAMPLES
from tick_motion.params import (
    AlgorithmParameters,
    EaseInOutParams,
    LerpParams,
    MoveTowardParams,
    SecondOrderParams,
    SlerpParams,
)
from tick_motion.types import InvalidParameterError, Position2D, UnknownVariantError

UpdateFn = Callable[[MoverState, Position2D, Any], MoverState]


class Variant(str, Enum):
    MOVE_TOWARD = "move_toward"
    LERP = "lerp"
    SLERP = "slerp"
    SECOND_ORDER = "second_order"
    EASE_IN_OUT = "ease_in_out"


@dataclass(frozen=True)
class Algorithm:
    """Everything the UI needs to drive and explain one variant."""

    variant: Variant
    label: str
    params_type: type
    defaults: AlgorithmParameters
    update: UpdateFn
    response: curves.Response
    equation: tuple[str, ...]
    form_equations: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def equation_for(self, params: AlgorithmParameters | None = None) -> tuple[str, ...]:
        """Equation text matching the ``form`` of *params*, if it has one."""
        form = getattr(params, "form", None)
        return self.form_equations.get(form, self.equation)

    def describe(self, params: AlgorithmParameters | None = None) -> list[str]:
        """Parameter readout lines, e.g. ``["Speed: 5.0", "Snap: off"]``."""
        params = self.defaults if params is None else params
        lines = []
        for f in dataclasses.fields(params):
            name = f.name.replace("_", " ").capitalize()
            lines.append(f"{name}: {_format_value(f.name, getattr(params, f.name))}")
        return lines


# Readout precision per field; everything else gets one decimal.
_DECIMALS = {"factor": 2, "dt": 4}


def _format_value(name: str, value: Any) -> str:
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, float):
        return f"{value:.{_DECIMALS.get(name, 1)}f}"
    return str(value)


_REGISTRY: dict[Variant, Algorithm] = {
    Variant.MOVE_TOWARD: Algorithm(
        variant=Variant.MOVE_TOWARD,
        label="Move Toward",
        params_type=MoveTowardParams,
        defaults=MoveTowardParams(),
        update=movers.move_toward,
        response=curves.move_toward_response,
        equation=(
            "direction = normalize(targetPos - currentPos)",
            "newPos = currentPos + direction * speed",
        ),
    ),
    Variant.LERP: Algorithm(
        variant=Variant.LERP,
        label="Linear Interpolation (Lerp)",
        params_type=LerpParams,
        defaults=LerpParams(),
        update=movers.lerp,
        response=curves.lerp_response,
        equation=("newPos = currentPos + (targetPos - currentPos) * factor",),
    ),
    Variant.SLERP: Algorithm(
        variant=Variant.SLERP,
        label="Spherical Linear Interpolation (Slerp)",
        params_type=SlerpParams,
        defaults=SlerpParams(),
        update=movers.slerp,
        response=curves.slerp_response,
        equation=(
            "theta = acos(heading . toTarget) * factor",
            "newPos = currentPos + (heading * sin((1 - factor) * theta)",
            "         + toTarget * sin(factor * theta)) * distance",
        ),
    ),
    Variant.SECOND_ORDER: Algorithm(
        variant=Variant.SECOND_ORDER,
        label="Second Order Dynamics",
        params_type=SecondOrderParams,
        defaults=SecondOrderParams(),
        update=movers.second_order,
        response=curves.second_order_response,
        equation=(
            "velocity += (targetPos - currentPos) * frequency^2 * dt * 2(2 - damping)",
            "velocity *= (1 - damping)",
            "newPos = currentPos + velocity",
        ),
        form_equations={
            "plain": (
                "velocity += (targetPos - currentPos) * frequency^2 * dt",
                "velocity *= (1 - damping)",
                "newPos = currentPos + velocity",
            ),
        },
    ),
    Variant.EASE_IN_OUT: Algorithm(
        variant=Variant.EASE_IN_OUT,
        label="Ease In/Out",
        params_type=EaseInOutParams,
        defaults=EaseInOutParams(),
        update=movers.ease_in_out,
        response=curves.ease_in_out_response,
        equation=(
            "progress = min(1, progress + 0.02)",
            "newPos = currentPos + (targetPos - currentPos) * ease(progress) * strength * 0.1",
        ),
    ),
}


def get_algorithm(variant: Variant | str) -> Algorithm:
    """Look up a variant. Raises UnknownVariantError outside the closed set."""
    try:
        key = Variant(variant)
    except ValueError:
        raise UnknownVariantError(variant) from None
    return _REGISTRY[key]


def list_variants() -> tuple[Algorithm, ...]:
    """All algorithms in display order."""
    return tuple(_REGISTRY[v] for v in Variant)


def resolve_params(
    algorithm: Algorithm, params: AlgorithmParameters | None
) -> AlgorithmParameters:
    """*params* checked against *algorithm*, or its defaults when None."""
    if params is None:
        return algorithm.defaults
    if not isinstance(params, algorithm.params_type):
        raise InvalidParameterError(
            "params",
            params,
            f"{algorithm.variant.value} expects {algorithm.params_type.__name__}, "
            f"got {type(params).__name__}",
        )
    return params


def update_mover(
    state: MoverState,
    target: Position2D,
    variant: Variant | str,
    params: AlgorithmParameters | None = None,
) -> MoverState:
    """Run one tick of *variant*. Omitted params use the variant defaults."""
    algorithm = get_algorithm(variant)
    return algorithm.update(state, target, resolve_params(algorithm, params))


def generate_curve(
    variant: Variant | str,
    params: AlgorithmParameters | None = None,
    samples: int = CURVE_SAMPLES,
) -> tuple[CurveSample, ...]:
    """Step-response samples of *variant* over t in [0, 1]."""
    algorithm = get_algorithm(variant)
    return curves.sample(
        algorithm.response, resolve_params(algorithm, params), samples
    )
