"""Equation panel and bottom status bar."""
from __future__ import annotations

import pygame

from tick_motion import Algorithm, AlgorithmParameters, Position2D

from ui.constants import (
    FIELD_W,
    HIGHLIGHT,
    INFO_Y,
    LABEL_COLOR,
    PANEL_BG,
    PANEL_W,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_panel_bg(surface: pygame.Surface) -> None:
    pygame.draw.rect(surface, PANEL_BG, (FIELD_W, 0, PANEL_W, SCREEN_H - STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (FIELD_W, 0), (FIELD_W, SCREEN_H - STATUS_H))


def draw_info(
    surface: pygame.Surface,
    font: pygame.font.Font,
    algorithm: Algorithm,
    params: AlgorithmParameters,
    stick: Position2D,
    active_field: str | None,
) -> None:
    """Draw the selected variant, its equation and parameter readout."""
    cx = FIELD_W + 12
    cy = INFO_Y
    line_h = 17

    surface.blit(font.render(algorithm.label, True, LABEL_COLOR), (cx, cy))
    cy += line_h + 4

    for line in algorithm.equation_for(params):
        surface.blit(font.render(line, True, TEXT_DIM), (cx, cy))
        cy += line_h
    cy += 6

    for line in algorithm.describe(params):
        field = line.split(":")[0].lower().replace(" ", "_")
        color = HIGHLIGHT if field == active_field else TEXT_COLOR
        surface.blit(font.render(line, True, color), (cx, cy))
        cy += line_h
    cy += 6

    surface.blit(
        font.render(f"Stick X: {stick[0]:.2f}, Y: {stick[1]:.2f}", True, TEXT_DIM),
        (cx, cy),
    )


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom key-bindings bar."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    text = "[1-5] Variant  [Up/Down] Param  [Left/Right] Adjust  [E] Easing  [+/-/0] Zoom  [R] Reset  [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
