"""Tests for joystick input handling."""
from __future__ import annotations

import pytest

from tick_motion import Stick, apply_dead_zone, target_from_stick


class TestApplyDeadZone:
    def test_small_axis_zeroed(self) -> None:
        assert apply_dead_zone(0.04, -0.5) == (0.0, -0.5)

    def test_both_zeroed(self) -> None:
        assert apply_dead_zone(-0.049, 0.01) == (0.0, 0.0)

    def test_edge_kept(self) -> None:
        assert apply_dead_zone(0.05, -0.05) == (0.05, -0.05)

    def test_clamped(self) -> None:
        assert apply_dead_zone(2.0, -3.0) == (1.0, -1.0)

    def test_custom_dead_zone(self) -> None:
        assert apply_dead_zone(0.2, 0.3, dead_zone=0.25) == (0.0, 0.3)


class TestStick:
    def test_full_deflection_clamped(self) -> None:
        stick = Stick(max_distance=50.0)
        assert stick.drag(100.0, 0.0) is True
        assert stick.value == (1.0, 0.0)
        assert stick.knob_offset == (50.0, 0.0)

    def test_diagonal(self) -> None:
        stick = Stick(max_distance=50.0)
        stick.drag(30.0, 40.0)
        assert stick.value == pytest.approx((0.6, 0.8))

    def test_dead_zone_ignored(self) -> None:
        stick = Stick(max_distance=50.0)
        assert stick.drag(1.0, 0.0) is False
        assert stick.value == (0.0, 0.0)

    def test_jitter_below_tolerance_ignored(self) -> None:
        stick = Stick(max_distance=50.0)
        stick.drag(25.0, 0.0)
        assert stick.drag(26.0, 0.0) is False
        assert stick.value == (0.5, 0.0)
        assert stick.knob_offset == (25.0, 0.0)

    def test_release_recenters(self) -> None:
        stick = Stick(max_distance=50.0)
        stick.drag(-50.0, 20.0)
        stick.release()
        assert stick.value == (0.0, 0.0)
        assert stick.knob_offset == (0.0, 0.0)

    def test_values_stay_in_range(self) -> None:
        stick = Stick(max_distance=40.0)
        for dx, dy in [(500.0, -500.0), (-80.0, 3.0), (0.0, 41.0)]:
            stick.drag(dx, dy)
            x, y = stick.value
            assert -1.0 <= x <= 1.0
            assert -1.0 <= y <= 1.0

    def test_requires_positive_travel(self) -> None:
        with pytest.raises(ValueError):
            Stick(max_distance=0.0)


def test_target_from_stick() -> None:
    assert target_from_stick((400.0, 300.0), (0.5, -1.0), 100.0) == (450.0, 200.0)


def test_target_at_rest_is_center() -> None:
    assert target_from_stick((400.0, 300.0), (0.0, 0.0), 100.0) == (400.0, 300.0)
