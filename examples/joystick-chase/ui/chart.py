"""Step-response chart renderer."""
from __future__ import annotations

import pygame

from tick_motion import CurveSample

from ui.constants import (
    CHART_BG,
    CHART_GRID,
    CURVE_COLOR,
    TEXT_DIM,
)


def draw_chart(
    surface: pygame.Surface,
    font: pygame.font.Font,
    samples: tuple[CurveSample, ...],
    title: str,
    x: int,
    y: int,
    w: int,
    h: int,
    y_max: float,
) -> None:
    """Plot samples over t in [0, 1] and position in [0, y_max]."""
    pad = 22
    plot_x = x + pad
    plot_y = y + pad
    plot_w = w - pad - 8
    plot_h = h - 2 * pad

    pygame.draw.rect(surface, CHART_BG, (x, y, w, h))

    # Grid every 0.2 on both axes
    for i in range(6):
        gx = plot_x + int(plot_w * i / 5)
        pygame.draw.line(surface, CHART_GRID, (gx, plot_y), (gx, plot_y + plot_h))
    for i in range(int(y_max / 0.2 + 1e-9) + 1):
        gy = plot_y + plot_h - int(plot_h * i * 0.2 / y_max)
        pygame.draw.line(surface, CHART_GRID, (plot_x, gy), (plot_x + plot_w, gy))

    pygame.draw.line(
        surface, TEXT_DIM, (plot_x, plot_y + plot_h), (plot_x + plot_w, plot_y + plot_h)
    )
    pygame.draw.line(surface, TEXT_DIM, (plot_x, plot_y + plot_h), (plot_x, plot_y))

    points = []
    for s in samples:
        v = max(0.0, min(y_max, s.value))
        points.append((plot_x + s.t * plot_w, plot_y + plot_h - v / y_max * plot_h))
    if len(points) > 1:
        pygame.draw.lines(surface, CURVE_COLOR, False, points, 2)

    surface.blit(font.render(title, True, TEXT_DIM), (x + 6, y + 4))
    surface.blit(font.render("t", True, TEXT_DIM), (plot_x + plot_w - 8, plot_y + plot_h + 4))
    surface.blit(font.render("p", True, TEXT_DIM), (x + 6, plot_y))
