"""Joystick Chase — motion interpolation visualizer.

Exercises tick-motion: drag the joystick and watch the mover chase the
implied target under the selected algorithm, next to the algorithm's
step-response curve.

Controls:
  Drag        Move the joystick knob (release recenters it)
  1-5         Select algorithm
  Up/Down     Select parameter
  Left/Right  Adjust parameter
  E           Cycle easing curve (Ease In/Out)
  +/-         Zoom chart in/out
  0           Reset chart view
  R           Reset mover
  Esc         Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from tick_motion import (
    MotionConfig,
    MotionLoop,
    Stick,
    Variant,
    get_algorithm,
    target_from_stick,
)

from game.controls import SLIDERS, next_easing, nudge, zoom
from ui.chart import draw_chart
from ui.constants import (
    BG_COLOR,
    CHART_H,
    CHART_W,
    CHART_X,
    CHART_Y,
    CHART_Y_MAX,
    FIELD_H,
    FIELD_W,
    FPS,
    KNOB_SIZE,
    PAD_SIZE,
    SCREEN_H,
    SCREEN_W,
    TPS,
    ZOOM_IN,
    ZOOM_OUT,
)
from ui.pad import draw_field, draw_pad, knob_hit, pad_center
from ui.status import draw_info, draw_panel_bg, draw_status_bar

logger = logging.getLogger("joystick-chase")

VARIANT_KEYS = {
    pygame.K_1: Variant.MOVE_TOWARD,
    pygame.K_2: Variant.LERP,
    pygame.K_3: Variant.SLERP,
    pygame.K_4: Variant.SECOND_ORDER,
    pygame.K_5: Variant.EASE_IN_OUT,
}


class DemoState:
    """Holds the motion loop, the stick and the cached chart curve."""

    def __init__(self) -> None:
        self.config = MotionConfig(tps=TPS)
        self.center = (FIELD_W / 2, FIELD_H / 2)
        self.movement_range = min(FIELD_W, FIELD_H) * self.config.movement_range
        self.loop = MotionLoop(self.center, config=self.config)
        self.stick = Stick(
            max_distance=(PAD_SIZE - KNOB_SIZE) / 2,
            dead_zone=self.config.dead_zone,
            tolerance=self.config.stick_tolerance,
        )
        self.dragging = False
        self.slider_index = 0
        self.y_max = CHART_Y_MAX
        self.curve = self.loop.curve()

    @property
    def target(self) -> tuple[float, float]:
        return target_from_stick(self.center, self.stick.value, self.movement_range)

    @property
    def active_field(self) -> str | None:
        sliders = SLIDERS[self.loop.variant]
        return sliders[self.slider_index].field if sliders else None

    def select(self, variant: Variant) -> None:
        self.loop.select(variant)
        self.slider_index = 0
        self.curve = self.loop.curve()
        self.y_max = CHART_Y_MAX
        logger.info("variant: %s", variant.value)

    def change_slider(self, delta: int) -> None:
        count = len(SLIDERS[self.loop.variant])
        self.slider_index = (self.slider_index + delta) % count

    def adjust(self, direction: int) -> None:
        slider = SLIDERS[self.loop.variant][self.slider_index]
        self._apply(nudge(self.loop.params, slider, direction))

    def cycle_easing(self) -> None:
        self._apply(next_easing(self.loop.params))

    def _apply(self, params) -> None:
        if params == self.loop.params:
            return
        self.loop.set_params(params)
        self.curve = self.loop.curve()

    def zoom(self, factor: float) -> None:
        self.y_max = zoom(self.y_max, factor)

    def reset_view(self) -> None:
        self.y_max = CHART_Y_MAX

    def drag_to(self, pos: tuple[int, int]) -> None:
        cx, cy = pad_center()
        self.stick.drag(pos[0] - cx, pos[1] - cy)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Joystick Chase — tick-motion demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = DemoState()

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in VARIANT_KEYS:
                    state.select(VARIANT_KEYS[event.key])
                elif event.key == pygame.K_UP:
                    state.change_slider(-1)
                elif event.key == pygame.K_DOWN:
                    state.change_slider(1)
                elif event.key == pygame.K_LEFT:
                    state.adjust(-1)
                elif event.key == pygame.K_RIGHT:
                    state.adjust(1)
                elif event.key == pygame.K_e:
                    state.cycle_easing()
                elif event.key in (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS):
                    state.zoom(ZOOM_IN)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.zoom(ZOOM_OUT)
                elif event.key in (pygame.K_0, pygame.K_KP0):
                    state.reset_view()
                elif event.key == pygame.K_r:
                    state.loop.reset()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if knob_hit(event.pos, state.stick):
                    state.dragging = True

            elif event.type == pygame.MOUSEMOTION and state.dragging:
                state.drag_to(event.pos)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                if state.dragging:
                    state.dragging = False
                    state.stick.release()

        # --- Tick ---
        while accumulator >= tick_interval:
            state.loop.step(state.target)
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_field(screen, state.loop.mover, state.target)
        draw_panel_bg(screen)
        draw_pad(screen, state.stick)

        algorithm = get_algorithm(state.loop.variant)
        draw_chart(
            screen,
            font,
            state.curve,
            algorithm.label,
            CHART_X,
            CHART_Y,
            CHART_W,
            CHART_H,
            state.y_max,
        )
        draw_info(
            screen,
            font,
            algorithm,
            state.loop.params,
            state.stick.value,
            state.active_field,
        )
        draw_status_bar(screen, font)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
