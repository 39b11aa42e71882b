from __future__ import annotations

from typing import Tuple


def color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),      # transparent
        1: (0, 0, 240),       # blue
        2: (0, 240, 240),     # cyan
        3: (128, 128, 128),   # grey
        4: (240, 240, 0),     # yellow
        5: (0, 240, 0),       # green
        6: (160, 0, 240),     # violet
        7: (240, 0, 0),       # red
    }
    return palette.get(v, (200, 200, 200))
