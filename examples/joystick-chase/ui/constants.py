"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 60

# Layout dimensions
FIELD_W = 600
FIELD_H = 600
PANEL_W = 340
STATUS_H = 32

SCREEN_W = FIELD_W + PANEL_W
SCREEN_H = FIELD_H + STATUS_H

PAD_SIZE = 160
KNOB_SIZE = 50
PAD_X = FIELD_W + (PANEL_W - PAD_SIZE) // 2
PAD_Y = 16

CHART_X = FIELD_W + 16
CHART_Y = PAD_Y + PAD_SIZE + 20
CHART_W = PANEL_W - 32
CHART_H = 190
CHART_Y_MAX = 2.0  # leaves room for overshoot
CHART_Y_MIN = 0.2
ZOOM_IN = 1.1
ZOOM_OUT = 0.9

INFO_Y = CHART_Y + CHART_H + 14

# Colors
BG_COLOR = (20, 20, 30)
FIELD_BG = (18, 18, 28)
GRID_DOT = (40, 40, 55)
PANEL_BG = (25, 25, 38)
PAD_BG = (35, 35, 52)
PAD_RIM = (70, 70, 95)
KNOB_COLOR = (200, 200, 220)
CHART_BG = (15, 15, 25)
CHART_GRID = (35, 35, 50)
CURVE_COLOR = (76, 175, 80)
MOVER_COLOR = (76, 175, 80)
TARGET_COLOR = (255, 160, 40)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)
HIGHLIGHT = (255, 215, 0)
