"""Pointer target that the fish swims toward."""

from typing import List

from letterquest import config
from letterquest.entities import TrailPoint


class PointerInput:
    """Continuously updated target position plus a pressed flag"""

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y
        self.pressed = False
        self.trail: List[TrailPoint] = []

    def move_to(self, x: float, y: float):
        self.x = x
        self.y = y
        self.trail.append(TrailPoint(x, y))
        if len(self.trail) > config.POINTER_TRAIL_LENGTH:
            self.trail.pop(0)

    def nudge(self, dx: float, dy: float, width: float, height: float):
        """Move by an offset, staying inside the field"""
        self.move_to(min(max(self.x + dx, 0), width), min(max(self.y + dy, 0), height))

    def press(self, x: float, y: float):
        self.pressed = True
        self.move_to(x, y)

    def release(self):
        self.pressed = False

    def render(self, surface):
        count = len(self.trail)
        for index, point in enumerate(self.trail):
            if index > 0:
                surface.disc(point.x, point.y, 3, '#ffffff', (index / count) * 0.2)
