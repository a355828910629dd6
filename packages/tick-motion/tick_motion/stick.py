"""Virtual joystick input: normalized stick vectors and world targets."""
from __future__ import annotations

import math

from tick_motion.types import Position2D


def apply_dead_zone(x: float, y: float, dead_zone: float = 0.05) -> Position2D:
    """Clamp each axis to [-1, 1] and zero axes inside the dead zone."""
    x = max(-1.0, min(1.0, x))
    y = max(-1.0, min(1.0, y))
    if abs(x) < dead_zone:
        x = 0.0
    if abs(y) < dead_zone:
        y = 0.0
    return (x, y)


def target_from_stick(
    center: Position2D, stick: Position2D, movement_range: float
) -> Position2D:
    """World-space target for a stick deflection around *center*."""
    return (
        center[0] + stick[0] * movement_range,
        center[1] + stick[1] * movement_range,
    )


class Stick:
    """A draggable knob confined to a circle of radius ``max_distance``.

    Offsets are measured from the knob's rest position. Published values
    only change when an axis moves by more than ``tolerance``, which keeps
    pointer jitter out of the target.
    """

    def __init__(
        self,
        max_distance: float,
        dead_zone: float = 0.05,
        tolerance: float = 0.05,
    ) -> None:
        if max_distance <= 0:
            raise ValueError("max_distance must be positive")
        self.max_distance = max_distance
        self.dead_zone = dead_zone
        self.tolerance = tolerance
        self._value: Position2D = (0.0, 0.0)
        self._knob: Position2D = (0.0, 0.0)

    @property
    def value(self) -> Position2D:
        return self._value

    @property
    def knob_offset(self) -> Position2D:
        """Knob displacement in pixels, clamped to the travel circle."""
        return self._knob

    def drag(self, dx: float, dy: float) -> bool:
        """Move the knob to offset (dx, dy). Returns True if the value changed."""
        dist = math.sqrt(dx * dx + dy * dy)
        if dist > self.max_distance:
            dx = dx / dist * self.max_distance
            dy = dy / dist * self.max_distance

        x, y = apply_dead_zone(
            dx / self.max_distance, dy / self.max_distance, self.dead_zone
        )
        last_x, last_y = self._value
        if abs(x - last_x) > self.tolerance or abs(y - last_y) > self.tolerance:
            self._value = (x, y)
            self._knob = (dx, dy)
            return True
        return False

    def release(self) -> None:
        self._value = (0.0, 0.0)
        self._knob = (0.0, 0.0)
