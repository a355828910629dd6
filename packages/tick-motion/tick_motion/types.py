"""Shared type aliases and error types for tick-motion."""
from __future__ import annotations

Position2D = tuple[float, float]


class MotionError(Exception):
    """Base class for tick-motion errors."""


class InvalidParameterError(MotionError, ValueError):
    """Raised when an algorithm parameter is outside its contract."""

    def __init__(self, name: str, value: object, message: str) -> None:
        self.name = name
        self.value = value
        super().__init__(message)


class UnknownVariantError(MotionError, KeyError):
    """Raised when dispatching on an identifier outside the variant set."""

    def __init__(self, variant: object) -> None:
        self.variant = variant
        super().__init__(f"Unknown motion variant: {variant!r}")
