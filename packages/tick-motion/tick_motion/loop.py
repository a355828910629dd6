"""Fixed-timestep driver owning the single animated mover."""
from __future__ import annotations

import dataclasses
import logging
from typing import Callable

from tick_motion.components import CurveSample, MoverState
from tick_motion.config import MotionConfig
from tick_motion.movers import create_mover, reset_mover
from tick_motion.params import AlgorithmParameters
from tick_motion.registry import (
    Variant,
    generate_curve,
    get_algorithm,
    resolve_params,
    update_mover,
)
from tick_motion.types import Position2D

logger = logging.getLogger(__name__)

TickHook = Callable[[int, MoverState], None]


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number


class MotionLoop:
    """Runs exactly one mover update per tick.

    The loop holds the currently selected variant and its parameters on
    behalf of the control surface; each tick passes them by value into the
    update, so a parameter change never lands halfway through one.
    """

    def __init__(
        self,
        initial: Position2D,
        variant: Variant | str = Variant.MOVE_TOWARD,
        params: AlgorithmParameters | None = None,
        config: MotionConfig | None = None,
    ) -> None:
        self._config = config or MotionConfig()
        self._clock = Clock(self._config.tps)
        self._mover = create_mover(initial, self._config.mover_radius)
        self._variant = Variant.MOVE_TOWARD
        self._params: AlgorithmParameters = get_algorithm(self._variant).defaults
        self._tick_hooks: list[TickHook] = []
        self._stop_requested = False
        self.select(variant, params)

    @property
    def mover(self) -> MoverState:
        return self._mover

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def config(self) -> MotionConfig:
        return self._config

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def params(self) -> AlgorithmParameters:
        return self._params

    def select(
        self, variant: Variant | str, params: AlgorithmParameters | None = None
    ) -> None:
        """Switch algorithm.

        Without *params* the variant defaults apply, integrating over this
        loop's tick length where the variant takes a ``dt``.
        """
        algorithm = get_algorithm(variant)
        if params is None and hasattr(algorithm.defaults, "dt"):
            params = dataclasses.replace(algorithm.defaults, dt=self._clock.dt)
        params = resolve_params(algorithm, params)
        self._variant = algorithm.variant
        self._params = params
        logger.debug("selected %s with %r", algorithm.variant.value, params)

    def set_params(self, params: AlgorithmParameters) -> None:
        self.select(self._variant, params)

    def on_tick(self, hook: TickHook) -> None:
        self._tick_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def step(self, target: Position2D) -> MoverState:
        tick = self._clock.advance()
        self._mover = update_mover(self._mover, target, self._variant, self._params)
        for hook in self._tick_hooks:
            hook(tick, self._mover)
        return self._mover

    def run(self, n: int, target_fn: Callable[[int], Position2D]) -> MoverState:
        """Run up to *n* ticks, asking *target_fn* for each tick's target."""
        self._stop_requested = False
        for _ in range(n):
            self.step(target_fn(self._clock.tick_number + 1))
            if self._stop_requested:
                logger.debug("stopped at tick %d", self._clock.tick_number)
                break
        return self._mover

    def reset(self) -> MoverState:
        self._mover = reset_mover(self._mover)
        self._clock.reset()
        logger.debug("mover reset to %r", self._mover.initial_position)
        return self._mover

    def curve(self) -> tuple[CurveSample, ...]:
        """Step-response of the selected variant under the current params."""
        return generate_curve(self._variant, self._params, self._config.curve_samples)
