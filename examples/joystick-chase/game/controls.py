"""Keyboard-driven parameter sliders and chart zoom."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from tick_motion import EASINGS, AlgorithmParameters, InvalidParameterError, Variant

from ui.constants import CHART_Y_MAX, CHART_Y_MIN


@dataclass(frozen=True)
class Slider:
    field: str
    step: float
    lo: float
    hi: float


SLIDERS: dict[Variant, list[Slider]] = {
    Variant.MOVE_TOWARD: [Slider("speed", 0.5, 0.5, 10.0)],
    Variant.LERP: [Slider("factor", 0.01, 0.01, 1.0)],
    Variant.SLERP: [Slider("factor", 0.01, 0.01, 1.0)],
    Variant.SECOND_ORDER: [
        Slider("frequency", 0.5, 0.5, 10.0),
        Slider("damping", 0.1, 0.0, 1.0),
    ],
    Variant.EASE_IN_OUT: [Slider("strength", 0.1, 0.1, 5.0)],
}

EASING_ORDER = list(EASINGS)


def nudge(
    params: AlgorithmParameters, slider: Slider, direction: int
) -> AlgorithmParameters:
    """Move one slider by a step, staying inside its range."""
    value = getattr(params, slider.field) + slider.step * direction
    value = round(max(slider.lo, min(slider.hi, value)), 4)
    try:
        return dataclasses.replace(params, **{slider.field: value})
    except InvalidParameterError:
        return params


def next_easing(params: AlgorithmParameters) -> AlgorithmParameters:
    easing = getattr(params, "easing", None)
    if easing is None:
        return params
    i = (EASING_ORDER.index(easing) + 1) % len(EASING_ORDER)
    return dataclasses.replace(params, easing=EASING_ORDER[i])


def zoom(y_max: float, factor: float) -> float:
    """Chart y-range after zooming by *factor* (> 1 zooms in)."""
    return max(CHART_Y_MIN, min(CHART_Y_MAX, y_max / factor))
