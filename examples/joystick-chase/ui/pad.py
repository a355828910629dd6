"""Field, mover and joystick pad renderers."""
from __future__ import annotations

import pygame

from tick_motion import MoverState, Position2D, Stick

from ui.constants import (
    FIELD_BG,
    FIELD_H,
    FIELD_W,
    GRID_DOT,
    KNOB_COLOR,
    KNOB_SIZE,
    MOVER_COLOR,
    PAD_BG,
    PAD_RIM,
    PAD_SIZE,
    PAD_X,
    PAD_Y,
    TARGET_COLOR,
)


def pad_center() -> tuple[int, int]:
    return PAD_X + PAD_SIZE // 2, PAD_Y + PAD_SIZE // 2


def knob_hit(pos: tuple[int, int], stick: Stick) -> bool:
    """True if *pos* lands on the knob at its current offset."""
    cx, cy = pad_center()
    kx = cx + stick.knob_offset[0]
    ky = cy + stick.knob_offset[1]
    return (pos[0] - kx) ** 2 + (pos[1] - ky) ** 2 <= (KNOB_SIZE / 2) ** 2


def draw_field(surface: pygame.Surface, mover: MoverState, target: Position2D) -> None:
    pygame.draw.rect(surface, FIELD_BG, (0, 0, FIELD_W, FIELD_H))
    for gx in range(40, FIELD_W, 40):
        for gy in range(40, FIELD_H, 40):
            surface.set_at((gx, gy), GRID_DOT)

    tx, ty = int(target[0]), int(target[1])
    pygame.draw.line(surface, TARGET_COLOR, (tx - 6, ty), (tx + 6, ty), 1)
    pygame.draw.line(surface, TARGET_COLOR, (tx, ty - 6), (tx, ty + 6), 1)

    mx, my = mover.position
    pygame.draw.circle(surface, MOVER_COLOR, (int(mx), int(my)), int(mover.radius))


def draw_pad(surface: pygame.Surface, stick: Stick) -> None:
    cx, cy = pad_center()
    pygame.draw.circle(surface, PAD_BG, (cx, cy), PAD_SIZE // 2)
    pygame.draw.circle(surface, PAD_RIM, (cx, cy), PAD_SIZE // 2, 2)
    kx = int(cx + stick.knob_offset[0])
    ky = int(cy + stick.knob_offset[1])
    pygame.draw.circle(surface, KNOB_COLOR, (kx, ky), KNOB_SIZE // 2)
