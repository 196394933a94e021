"""Drawing surface interface and color helpers."""

import colorsys
import math
from typing import Sequence, Tuple

# Gradient stops of the water column: (depth, hue, saturation, base lightness,
# shimmer amplitude, shimmer rate)
OCEAN_STOPS = [
    (0.0, 200, 0.70, 0.75, 0.05, 1.0),
    (0.5, 210, 0.80, 0.50, 0.05, 1.2),
    (1.0, 220, 0.90, 0.25, 0.03, 0.8),
]


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """'#ff6b6b' -> (255, 107, 107)"""
    color = color.lstrip('#')
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


def rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    return '#{:02x}{:02x}{:02x}'.format(*rgb)


def xterm_index(rgb: Tuple[int, int, int]) -> int:
    """Nearest entry of the 6x6x6 color cube in the 256-color palette"""
    r, g, b = (int(round(c / 255 * 5)) for c in rgb)
    return 16 + 36 * r + 6 * g + b


def ocean_color(depth: float, frame: int) -> str:
    """Water color at a depth (0 = surface, 1 = floor) for a frame"""
    depth = min(1.0, max(0.0, depth))
    t = frame * 0.01

    def hls_at(stop):
        _, hue, sat, light, amp, rate = stop
        return hue, light + math.sin(t * rate) * amp, sat

    for upper, lower in zip(OCEAN_STOPS, OCEAN_STOPS[1:]):
        if depth <= lower[0]:
            span = (depth - upper[0]) / (lower[0] - upper[0])
            a = hls_at(upper)
            b = hls_at(lower)
            hue, light, sat = (a[i] + (b[i] - a[i]) * span for i in range(3))
            break
    else:
        hue, light, sat = hls_at(OCEAN_STOPS[-1])

    r, g, b = colorsys.hls_to_rgb(hue / 360, light, sat)
    return rgb_to_hex((int(round(r * 255)), int(round(g * 255)), int(round(b * 255))))


class Surface:
    """Drawing target handed to ``render(surface)``. The base class draws nothing."""

    def fill_background(self, frame: int):
        pass

    def disc(self, x: float, y: float, radius: float, color: str,
             alpha: float = 1.0, filled: bool = True):
        pass

    def polygon(self, points: Sequence[Tuple[float, float]], color: str, alpha: float = 1.0):
        pass

    def glyph(self, x: float, y: float, char: str, color: str,
              alpha: float = 1.0, bold: bool = False):
        pass

    def fish(self, x: float, y: float, angle: float, radius: float,
             facing_right: bool, frame_x: int, color: str):
        pass


NULL_SURFACE = Surface()
