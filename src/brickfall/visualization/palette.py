from __future__ import annotations

from typing import Tuple

Color = Tuple[int, int, int]

PALETTE = {
    1: (0, 255, 255),    # I aqua
    2: (138, 43, 226),   # J blue violet
    3: (0, 100, 0),      # L dark green
    4: (255, 255, 0),    # O yellow
    5: (255, 0, 0),      # S red
    6: (245, 245, 220),  # T beige
    7: (222, 184, 135),  # Z burlywood
}

UNKNOWN: Color = (255, 255, 255)


def color_for_value(v: int) -> Color:
    # Falling bricks are overlaid as negative ids
    return PALETTE.get(abs(int(v)), UNKNOWN)
