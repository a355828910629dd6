"""Tests for the mover update rules."""
from __future__ import annotations

import math
from dataclasses import replace

import pytest

from tick_motion import (
    EASINGS,
    EaseInOutParams,
    LerpParams,
    MoveTowardParams,
    SecondOrderParams,
    SlerpParams,
    create_mover,
    reset_mover,
    vec,
)
from tick_motion.movers import ease_in_out, lerp, move_toward, second_order, slerp


class TestCreateAndReset:
    def test_create(self) -> None:
        state = create_mover((3, 4), radius=12.0)
        assert state.position == (3.0, 4.0)
        assert state.last_position == (3.0, 4.0)
        assert state.initial_position == (3.0, 4.0)
        assert state.velocity == (0.0, 0.0)
        assert state.ease_progress == 0.0
        assert state.radius == 12.0

    def test_reset_restores_initial(self) -> None:
        state = create_mover((0.0, 0.0))
        params = SecondOrderParams()
        for _ in range(20):
            state = second_order(state, (100.0, -50.0), params)
        state = replace(state, ease_progress=0.7)
        assert state.position != (0.0, 0.0)

        state = reset_mover(state)
        assert state.position == (0.0, 0.0)
        assert state.last_position == (0.0, 0.0)
        assert state.velocity == (0.0, 0.0)
        assert state.ease_progress == 0.0
        assert state.initial_position == (0.0, 0.0)

    def test_reset_at_rest_is_noop(self) -> None:
        state = create_mover((5.0, 5.0))
        assert reset_mover(state) == state


class TestMoveToward:
    def test_two_steps_reach_target(self) -> None:
        params = MoveTowardParams(speed=5.0)
        state = create_mover((0.0, 0.0))
        state = move_toward(state, (10.0, 0.0), params)
        assert state.position == (5.0, 0.0)
        state = move_toward(state, (10.0, 0.0), params)
        assert state.position == (10.0, 0.0)

    def test_at_target_does_not_move(self) -> None:
        params = MoveTowardParams(speed=5.0)
        state = create_mover((10.0, 0.0))
        assert move_toward(state, (10.0, 0.0), params) == state

    def test_degenerate_direction_does_not_move(self) -> None:
        state = create_mover((10.0, 0.0))
        after = move_toward(state, (10.0005, 0.0), MoveTowardParams(speed=1.0))
        assert after.position == (10.0, 0.0)

    @pytest.mark.parametrize(
        "target", [(30.0, 40.0), (-7.0, 2.0), (0.0, -100.0), (1.0, 1.0)]
    )
    def test_displacement_never_exceeds_speed(self, target) -> None:
        speed = 3.0
        state = create_mover((0.0, 0.0))
        after = move_toward(state, target, MoveTowardParams(speed=speed))
        moved = vec.distance(after.position, state.position)
        assert moved <= speed + 1e-9
        if vec.distance(target, state.position) >= speed:
            assert moved == pytest.approx(speed)

    def test_overshoots_without_snap(self) -> None:
        state = create_mover((0.0, 0.0))
        after = move_toward(state, (4.0, 0.0), MoveTowardParams(speed=5.0))
        assert after.position == (5.0, 0.0)

    def test_snap_lands_on_target(self) -> None:
        state = create_mover((0.0, 0.0))
        after = move_toward(state, (4.0, 0.0), MoveTowardParams(speed=5.0, snap=True))
        assert after.position == (4.0, 0.0)

    def test_input_state_untouched(self) -> None:
        state = create_mover((0.0, 0.0))
        move_toward(state, (10.0, 0.0), MoveTowardParams())
        assert state.position == (0.0, 0.0)


class TestLerp:
    def test_two_steps(self) -> None:
        params = LerpParams(factor=0.1)
        state = create_mover((0.0, 0.0))
        state = lerp(state, (10.0, 0.0), params)
        assert state.position == (1.0, 0.0)
        state = lerp(state, (10.0, 0.0), params)
        assert state.position[0] == pytest.approx(1.9)
        assert state.position[1] == 0.0

    @pytest.mark.parametrize(
        "start, target",
        [
            ((0.1, -7.3), (0.3, 2.9)),
            ((123.456, 0.001), (-98.7, 1e6)),
            ((0.0, 0.0), (1.0 / 3.0, 2.0 / 3.0)),
        ],
    )
    def test_factor_one_snaps_exactly(self, start, target) -> None:
        state = create_mover(start)
        after = lerp(state, target, LerpParams(factor=1.0))
        assert after.position == target

    def test_never_reaches_target(self) -> None:
        state = create_mover((0.0, 0.0))
        for _ in range(50):
            state = lerp(state, (10.0, 0.0), LerpParams(factor=0.1))
        assert state.position[0] < 10.0
        assert state.position[0] == pytest.approx(10.0, abs=0.1)


class TestSlerp:
    def test_zero_heading_matches_lerp(self) -> None:
        state = create_mover((2.0, 3.0))
        target = (40.0, -12.0)
        assert slerp(state, target, SlerpParams(factor=0.3)) == lerp(
            state, target, LerpParams(factor=0.3)
        )

    def test_degenerate_path_keeps_last_position(self) -> None:
        state = create_mover((0.0, 0.0))
        after = slerp(state, (10.0, 0.0), SlerpParams(factor=0.5))
        assert after.last_position == (0.0, 0.0)
        assert after.position == (5.0, 0.0)

    def test_target_reached_degrades(self) -> None:
        state = replace(create_mover((5.0, 5.0)), last_position=(0.0, 0.0))
        after = slerp(state, (5.0, 5.0), SlerpParams(factor=0.5))
        assert after.position == (5.0, 5.0)

    def test_curved_approach(self) -> None:
        """Heading east with the target due north bends through the diagonal."""
        state = replace(create_mover((0.0, 0.0)), last_position=(-1.0, 0.0))
        after = slerp(state, (0.0, 10.0), SlerpParams(factor=0.5))
        expected = 10.0 * math.sin(math.pi / 8)
        assert after.position[0] == pytest.approx(expected)
        assert after.position[1] == pytest.approx(expected)
        assert after.last_position == (0.0, 0.0)

    def test_aligned_heading_stays_put(self) -> None:
        """Heading straight at the target leaves no angle to rotate through."""
        state = replace(create_mover((0.0, 0.0)), last_position=(-1.0, 0.0))
        after = slerp(state, (10.0, 0.0), SlerpParams(factor=0.5))
        assert after.position == (0.0, 0.0)
        assert after.last_position == (0.0, 0.0)

    def test_second_tick_uses_heading(self) -> None:
        state = create_mover((0.0, 0.0))
        params = SlerpParams(factor=0.2)
        state = slerp(state, (0.0, 10.0), params)
        assert state.position == pytest.approx((0.0, 2.0))
        state = slerp(state, (10.0, 10.0), params)
        assert state.last_position == pytest.approx((0.0, 2.0))
        assert state.position[0] > 0.0


class TestSecondOrder:
    def test_force_multiplier_first_tick(self) -> None:
        state = create_mover((0.0, 0.0))
        params = SecondOrderParams(frequency=2.0, damping=0.5)
        after = second_order(state, (60.0, 0.0), params)
        # gain = 2^2 * 1/60 * 2*(2 - 0.5) = 0.2; velocity = 60*0.2*(1-0.5)
        assert after.velocity[0] == pytest.approx(6.0)
        assert after.position[0] == pytest.approx(6.0)
        assert after.position[1] == 0.0

    def test_plain_first_tick(self) -> None:
        state = create_mover((0.0, 0.0))
        params = SecondOrderParams(frequency=2.0, damping=0.5, form="plain")
        after = second_order(state, (60.0, 0.0), params)
        assert after.velocity[0] == pytest.approx(2.0)
        assert after.position[0] == pytest.approx(2.0)

    def test_explicit_dt(self) -> None:
        state = create_mover((0.0, 0.0))
        params = SecondOrderParams(frequency=2.0, damping=0.5, dt=1 / 30, form="plain")
        after = second_order(state, (60.0, 0.0), params)
        assert after.velocity[0] == pytest.approx(4.0)

    def test_low_damping_clamped(self) -> None:
        state = create_mover((0.0, 0.0))
        zero = second_order(state, (60.0, 0.0), SecondOrderParams(damping=0.0))
        tenth = second_order(state, (60.0, 0.0), SecondOrderParams(damping=0.1))
        assert zero == tenth

    def test_full_damping_freezes(self) -> None:
        state = create_mover((0.0, 0.0))
        after = second_order(state, (60.0, 0.0), SecondOrderParams(damping=1.0))
        assert after.velocity == (0.0, 0.0)
        assert after.position == (0.0, 0.0)

    def test_velocity_carries_over(self) -> None:
        state = replace(create_mover((0.0, 0.0)), velocity=(4.0, 0.0))
        params = SecondOrderParams(damping=0.5)
        after = second_order(state, (0.0, 0.0), params)
        assert after.velocity == (2.0, 0.0)
        assert after.position == (2.0, 0.0)

    def test_settles_on_target(self) -> None:
        state = create_mover((0.0, 0.0))
        params = SecondOrderParams(frequency=2.0, damping=0.5)
        for _ in range(600):
            state = second_order(state, (100.0, 50.0), params)
        assert state.position == pytest.approx((100.0, 50.0), abs=1e-3)


class TestEaseInOut:
    def test_progress_steps_then_holds(self) -> None:
        state = create_mover((0.0, 0.0))
        params = EaseInOutParams(strength=2.0, easing="sine")
        target = (1e6, 0.0)
        previous = 0.0
        for tick in range(1, 71):
            state = ease_in_out(state, target, params)
            assert state.ease_progress >= previous
            assert state.ease_progress == pytest.approx(min(1.0, 0.02 * tick))
            assert vec.distance(state.position, target) > 0.1
            previous = state.ease_progress
        assert state.ease_progress == 1.0

    def test_first_tick_movement(self) -> None:
        state = create_mover((0.0, 0.0))
        params = EaseInOutParams(strength=2.0, easing="quad")
        after = ease_in_out(state, (100.0, 0.0), params)
        expected = 100.0 * EASINGS["quad"](0.02) * 2.0 * 0.1
        assert after.position[0] == pytest.approx(expected)

    def test_near_target_resets_progress(self) -> None:
        state = replace(create_mover((10.0, 10.0)), ease_progress=0.6)
        after = ease_in_out(state, (10.05, 10.0), EaseInOutParams())
        assert after.ease_progress == 0.0
        assert after.position == (10.0, 10.0)

    def test_new_cycle_after_arrival(self) -> None:
        state = replace(create_mover((0.0, 0.0)), ease_progress=0.6)
        state = ease_in_out(state, (0.0, 0.0), EaseInOutParams())
        state = ease_in_out(state, (50.0, 0.0), EaseInOutParams())
        assert state.ease_progress == pytest.approx(0.02)
