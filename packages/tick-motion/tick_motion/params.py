"""Per-variant algorithm parameters.

Parameters are immutable value objects handed into every update and curve
call. Out-of-contract values are rejected at construction so that no
update can emit NaN or infinity.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from tick_motion.config import DEFAULT_DT
from tick_motion.easing import EASINGS
from tick_motion.types import InvalidParameterError

SECOND_ORDER_FORMS = ("force_multiplier", "plain")


def _require_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameterError(name, value, f"{name} must be > 0, got {value!r}")


def _require_unit_factor(name: str, value: float) -> None:
    if not math.isfinite(value) or not 0.0 < value <= 1.0:
        raise InvalidParameterError(
            name, value, f"{name} must be in (0, 1], got {value!r}"
        )


@dataclass(frozen=True)
class MoveTowardParams:
    """Constant-speed pursuit. ``speed`` is a distance per tick.

    With ``snap`` set, a mover closer than ``speed`` lands on the target
    instead of overshooting it.
    """

    speed: float = 5.0
    snap: bool = False

    def __post_init__(self) -> None:
        _require_positive("speed", self.speed)


@dataclass(frozen=True)
class LerpParams:
    factor: float = 0.1

    def __post_init__(self) -> None:
        _require_unit_factor("factor", self.factor)


@dataclass(frozen=True)
class SlerpParams:
    factor: float = 0.1

    def __post_init__(self) -> None:
        _require_unit_factor("factor", self.factor)


@dataclass(frozen=True)
class SecondOrderParams:
    """Spring-damper parameters.

    Attributes:
        frequency: Spring frequency.
        damping: Velocity damping in [0, 1]; clamped to [0.1, 1] when used.
        dt: Integration step in seconds.
        form: ``"force_multiplier"`` scales the spring force by
            ``2 * (2 - damping)``; ``"plain"`` applies it unscaled.
    """

    frequency: float = 2.0
    damping: float = 0.5
    dt: float = DEFAULT_DT
    form: str = "force_multiplier"

    def __post_init__(self) -> None:
        _require_positive("frequency", self.frequency)
        _require_positive("dt", self.dt)
        if not math.isfinite(self.damping) or not 0.0 <= self.damping <= 1.0:
            raise InvalidParameterError(
                "damping", self.damping, f"damping must be in [0, 1], got {self.damping!r}"
            )
        if self.form not in SECOND_ORDER_FORMS:
            raise InvalidParameterError(
                "form", self.form, f"form must be one of {SECOND_ORDER_FORMS}, got {self.form!r}"
            )


@dataclass(frozen=True)
class EaseInOutParams:
    strength: float = 2.0
    easing: str = "sine"

    def __post_init__(self) -> None:
        _require_positive("strength", self.strength)
        if self.easing not in EASINGS:
            raise InvalidParameterError(
                "easing",
                self.easing,
                f"easing must be one of {sorted(EASINGS)}, got {self.easing!r}",
            )


AlgorithmParameters = Union[
    MoveTowardParams, LerpParams, SlerpParams, SecondOrderParams, EaseInOutParams
]
