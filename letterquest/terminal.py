"""Curses rendition of the drawing surface."""

import curses
import math
from typing import Dict, Sequence, Tuple

from letterquest import config
from letterquest.surface import Surface, hex_to_rgb, ocean_color, xterm_index

# Fixed HUD color pairs, initialised by the game; dynamic pairs start after them
HUD_TEXT = 1
HUD_LEVEL = 2
HUD_BONUS = 3
HUD_BORDER = 4
HUD_TITLE = 5
HUD_INFO = 6
FIRST_DYNAMIC_PAIR = 7

COLOR_BG = 17  # Very dark blue, also the fallback water color

# Basic 8-color fallbacks for terminals without a 256-color palette
BASIC_COLORS = [
    ((0, 0, 0), curses.COLOR_BLACK),
    ((205, 0, 0), curses.COLOR_RED),
    ((0, 205, 0), curses.COLOR_GREEN),
    ((205, 205, 0), curses.COLOR_YELLOW),
    ((0, 0, 238), curses.COLOR_BLUE),
    ((205, 0, 205), curses.COLOR_MAGENTA),
    ((0, 205, 205), curses.COLOR_CYAN),
    ((229, 229, 229), curses.COLOR_WHITE),
]

# Fish sprites per tail frame, three rows each
FISH_RIGHT = [
    [r"  ,/  ", r"><(((º>", r"  `\  "],
    [r"  ,/  ", r"}<(((º>", r"  `\  "],
    [r"  ,/  ", r"=<(((º>", r"  `\  "],
    [r"  ,/  ", r")<(((º>", r"  `\  "],
]
FISH_LEFT = [
    [r"  \,  ", r"<º)))><", r"  /`  "],
    [r"  \,  ", r"<º)))>{", r"  /`  "],
    [r"  \,  ", r"<º)))>=", r"  /`  "],
    [r"  \,  ", r"<º)))>(", r"  /`  "],
]


def nearest_basic_color(rgb: Tuple[int, int, int]) -> int:
    def dist(entry):
        ref, _ = entry
        return sum((a - b) ** 2 for a, b in zip(ref, rgb))
    return min(BASIC_COLORS, key=dist)[1]


def shade_char(alpha: float) -> str:
    """Denser block for more opaque fills"""
    if alpha > 0.7:
        return '█'
    if alpha > 0.45:
        return '▓'
    if alpha > 0.25:
        return '▒'
    return '░'


class TerminalSurface(Surface):
    """Draws world-unit shapes onto a curses pad, one character per cell"""

    min_alpha = 0.08  # Fainter than this is not drawn at all

    def __init__(self, pad, rows: int, cols: int,
                 cell_width: float = config.CELL_WIDTH,
                 cell_height: float = config.CELL_HEIGHT):
        self.pad = pad
        self.rows = rows
        self.cols = cols
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.colors_256 = curses.COLORS >= 256
        self.row_bg = [self._bg_fallback()] * rows
        self.pairs: Dict[Tuple[int, int], int] = {}
        self.next_pair = FIRST_DYNAMIC_PAIR

    def _bg_fallback(self) -> int:
        return COLOR_BG if curses.COLORS >= 256 else curses.COLOR_BLUE

    def resize(self, pad, rows: int, cols: int):
        self.pad = pad
        self.rows = rows
        self.cols = cols
        self.row_bg = [self._bg_fallback()] * rows

    def palette(self, color: str) -> int:
        rgb = hex_to_rgb(color)
        return xterm_index(rgb) if self.colors_256 else nearest_basic_color(rgb)

    def pair(self, fg: int, bg: int) -> int:
        """Color pair for a foreground/background, allocated on first use"""
        key = (fg, bg)
        if key not in self.pairs:
            if self.next_pair >= curses.COLOR_PAIRS:
                return 0  # Out of pairs, fall back to the default colors
            curses.init_pair(self.next_pair, fg, bg)
            self.pairs[key] = self.next_pair
            self.next_pair += 1
        return self.pairs[key]

    def to_cell(self, x: float, y: float) -> Tuple[float, float]:
        """World position to fractional (row, col)"""
        return y / self.cell_height, x / self.cell_width

    def cell(self, x: float, y: float) -> Tuple[int, int]:
        """(row, col) of the cell holding a world position, negative off the top/left"""
        row, col = self.to_cell(x, y)
        return math.floor(row), math.floor(col)

    def _attr(self, color: str, row: int, alpha: float, bold: bool = False) -> int:
        attr = curses.color_pair(self.pair(self.palette(color), self.row_bg[row]))
        if alpha < 0.35:
            attr |= curses.A_DIM
        elif bold or alpha > 0.85:
            attr |= curses.A_BOLD
        return attr

    def _put(self, row: int, col: int, text: str, attr: int):
        if row < 0 or row >= self.rows or col >= self.cols or col + len(text) <= 0:
            return
        if col < 0:
            text = text[-col:]
            col = 0
        text = text[:self.cols - col]
        try:
            self.pad.addstr(row, col, text, attr)
        except curses.error:
            # The bottom-right cell cannot be written without scrolling
            pass

    def fill_background(self, frame: int):
        self.pad.erase()
        last = max(1, self.rows - 1)
        for row in range(self.rows):
            if self.colors_256:
                self.row_bg[row] = xterm_index(hex_to_rgb(ocean_color(row / last, frame)))
            bg = self.row_bg[row]
            self._put(row, 0, ' ' * self.cols, curses.color_pair(self.pair(bg, bg)))

    def disc(self, x, y, radius, color, alpha=1.0, filled=True):
        if alpha < self.min_alpha or radius <= 0:
            return
        cy, cx = self.to_cell(x, y)
        ry = radius / self.cell_height
        rx = radius / self.cell_width

        if rx < 0.75 and ry < 0.75:
            row, col = self.cell(x, y)
            if 0 <= row < self.rows:
                char = '·' if radius < 4 else ('o' if radius < 8 else 'O')
                self._put(row, col, char, self._attr(color, row, alpha))
            return

        ry = max(ry, 0.5)
        for row in range(math.floor(cy - ry), math.floor(cy + ry) + 1):
            if not 0 <= row < self.rows:
                continue
            attr = self._attr(color, row, alpha)
            for col in range(math.floor(cx - rx), math.floor(cx + rx) + 1):
                norm = ((col + 0.5 - cx) / rx) ** 2 + ((row + 0.5 - cy) / ry) ** 2
                if filled and norm <= 1:
                    self._put(row, col, shade_char(alpha), attr)
                elif not filled and 0.6 <= norm <= 1.1:
                    self._put(row, col, '·' if alpha < 0.35 else 'o', attr)

    def polygon(self, points: Sequence[Tuple[float, float]], color, alpha=1.0):
        if alpha < self.min_alpha or not points:
            return
        cx = sum(p[0] for p in points) / len(points)
        cy = sum(p[1] for p in points) / len(points)
        center = self.cell(cx, cy)
        for px, py in points:
            row, col = self.cell(px, py)
            if (row, col) != center and 0 <= row < self.rows:
                self._put(row, col, '·', self._attr(color, row, alpha))
        row, col = center
        if 0 <= row < self.rows:
            self._put(row, col, '✦', self._attr(color, row, alpha, bold=True))

    def glyph(self, x, y, char, color, alpha=1.0, bold=False):
        if alpha < self.min_alpha:
            return
        row, col = self.cell(x, y)
        if 0 <= row < self.rows:
            self._put(row, col, char, self._attr(color, row, alpha, bold))

    def fish(self, x, y, angle, radius, facing_right, frame_x, color):
        # Character cells cannot rotate, so only the facing side is shown
        sprite = (FISH_RIGHT if facing_right else FISH_LEFT)[frame_x % 4]
        cy, cx = self.to_cell(x, y)
        top = math.floor(cy) - len(sprite) // 2
        for offset, line in enumerate(sprite):
            row = top + offset
            if 0 <= row < self.rows:
                self._put(row, math.floor(cx) - len(line) // 2, line, self._attr(color, row, 1.0, bold=True))
