"""
Game entities: the player fish, letter bubbles and effect particles.

Entities are flat classes. Each one advances itself with ``update(...)`` and
describes itself to a drawing surface with ``render(surface)``; rendering never
mutates entity state.
"""

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from letterquest import config


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points"""
    return math.hypot(x2 - x1, y2 - y1)


def circles_overlap(x1: float, y1: float, r1: float,
                    x2: float, y2: float, r2: float) -> bool:
    """True when two circles overlap; touching edges do not count"""
    return distance(x1, y1, x2, y2) < r1 + r2


class ParticleKind(Enum):
    """Particle render/physics variants"""
    NORMAL = 'normal'
    STAR = 'star'
    BUBBLE = 'bubble'


@dataclass
class TrailPoint:
    """A remembered player position that fades out"""
    x: float
    y: float
    alpha: float = 1.0
    size: float = 0.0
    speed: float = 0.0


@dataclass
class WakeBubble:
    """Small bubble shed by the fish when it swims fast"""
    x: float
    y: float
    size: float
    vx: float
    vy: float
    life: float = 1.0


@dataclass
class Sparkle:
    """Twinkle inside a bubble, positioned relative to its center"""
    x: float
    y: float
    size: float
    phase: float
    speed: float


@dataclass
class BackgroundMote:
    """Ambient speck drifting up the water column"""
    x: float
    y: float
    size: float
    speed: float
    opacity: float
    color: str

    @classmethod
    def scatter(cls, width: float, height: float) -> 'BackgroundMote':
        return cls(
            x=random.random() * width,
            y=random.random() * height,
            size=random.random() * 3 + 1,
            speed=random.random() * 0.5 + 0.2,
            opacity=random.random() * 0.3 + 0.1,
            color=config.MOTE_COLORS[0] if random.random() > 0.5 else config.MOTE_COLORS[1],
        )

    def drift(self, width: float, height: float):
        """Rise, wrapping back to the bottom once above the top edge"""
        self.y -= self.speed
        if self.y < -10:
            self.y = height + 10
            self.x = random.random() * width


class Player:
    """The fish that chases the pointer"""

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y
        self.radius = 45  # Collision extent
        self.angle = 0.0  # Facing angle (radians)
        self.target_angle = 0.0
        self.vx = 0.0
        self.vy = 0.0
        self.speed = 0.0
        self.max_speed = config.PLAYER_SPEED
        self.acceleration = 0.3
        self.friction = 0.85
        self.dead_zone = 5  # Stop accelerating this close to the pointer
        self.facing_right = True
        self.animation_frame = 0.0
        self.frame_x = 0  # Tail animation frame (0-3)
        self.glow_intensity = 0.0
        self.trail: List[TrailPoint] = []
        self.wake: List[WakeBubble] = []

    def place(self, x: float, y: float):
        """Put the fish at rest at a position, dropping its effects"""
        self.x = x
        self.y = y
        self.vx = 0.0
        self.vy = 0.0
        self.speed = 0.0
        self.trail = []
        self.wake = []

    def update(self, state, pointer):
        """Steer toward the pointer and advance one frame"""
        if state.is_paused:
            return

        dx = pointer.x - self.x
        dy = pointer.y - self.y
        dist = math.hypot(dx, dy)

        # sin() of the difference keeps the turn continuous across the -pi/pi seam
        self.target_angle = math.atan2(dy, dx)
        self.angle += math.sin(self.target_angle - self.angle) * 0.1

        if dist > self.dead_zone:
            self.vx += (dx / dist) * self.acceleration
            self.vy += (dy / dist) * self.acceleration

        self.vx *= self.friction
        self.vy *= self.friction

        self.speed = math.hypot(self.vx, self.vy)
        if self.speed > self.max_speed:
            self.vx = (self.vx / self.speed) * self.max_speed
            self.vy = (self.vy / self.speed) * self.max_speed
            self.speed = self.max_speed

        self.x += self.vx
        self.y += self.vy

        self.facing_right = self.vx > 0

        # Tail flaps faster the faster we swim
        if self.speed > 1:
            self.animation_frame += self.speed * 0.3
            self.frame_x = int(self.animation_frame // config.ANIMATION_SPEED) % 4
        else:
            self.frame_x = 0

        self._update_trail()
        self._update_wake()

        self.glow_intensity = math.sin(state.game_frame * 0.1) * 0.3 + 0.7

    def _update_trail(self):
        self.trail.append(TrailPoint(self.x, self.y, 1.0, self.radius * 0.8, self.speed))
        if len(self.trail) > config.PLAYER_TRAIL_LENGTH:
            self.trail.pop(0)

        # Older points sit at the front, so they get the lowest alpha
        for index, point in enumerate(self.trail):
            point.alpha = (index / len(self.trail)) * 0.4
            point.size *= 0.95

    def _update_wake(self):
        if self.speed > 5:
            self.wake.append(WakeBubble(
                x=self.x + (random.random() - 0.5) * 30,
                y=self.y + (random.random() - 0.5) * 30,
                size=random.random() * 8 + 3,
                vx=(random.random() - 0.5) * 2,
                vy=(random.random() - 0.5) * 2,
            ))

        alive = []
        for bubble in self.wake:
            bubble.x += bubble.vx
            bubble.y += bubble.vy
            bubble.life -= 0.02
            bubble.size *= 0.98
            if bubble.life > 0:
                alive.append(bubble)
        self.wake = alive

    def render(self, surface):
        # Trail (skip the oldest point, it is fully faded)
        for point in self.trail[1:]:
            surface.disc(point.x, point.y, point.size, '#87ceeb', point.alpha)

        for bubble in self.wake:
            surface.disc(bubble.x, bubble.y, bubble.size, '#ffffff', bubble.life * 0.6)

        surface.disc(self.x, self.y, self.radius * 2, '#4ecdc4',
                     self.glow_intensity * 0.3, filled=False)
        surface.fish(self.x, self.y, self.angle, self.radius,
                     self.facing_right, self.frame_x, '#ff6b6b')


class Bubble:
    """A rising bubble carrying one letter"""

    def __init__(self, width: float, height: float):
        self.x = random.random() * width
        self.y = height + 50  # Start just below the bottom edge
        self.radius = 20 + random.random() * 20
        self.speed = config.BUBBLE_SPEED + random.random() * 3
        self.letter = random.choice(config.LETTERS)
        self.color = random.choice(config.BUBBLE_COLORS)
        self.bob_offset = random.random() * math.pi * 2
        self.bob_speed = 0.02 + random.random() * 0.03
        self.scale = 0.8 + random.random() * 0.4
        self.alpha = 0.9
        self.glow_intensity = 0.5 + random.random() * 0.5
        self.rotation_speed = (random.random() - 0.5) * 0.05
        self.rotation = 0.0
        self.pulse_phase = random.random() * math.pi * 2
        self.sparkles = [
            Sparkle(
                x=(random.random() - 0.5) * self.radius,
                y=(random.random() - 0.5) * self.radius,
                size=random.random() * 3 + 1,
                phase=random.random() * math.pi * 2,
                speed=random.random() * 0.1 + 0.05,
            )
            for _ in range(5)
        ]

    def update(self, state):
        """Rise, bob sideways and fade out near the surface"""
        if state.is_paused:
            return

        self.y -= self.speed
        self.x += math.sin(self.bob_offset + state.game_frame * self.bob_speed) * 1.5
        self.rotation += self.rotation_speed

        pulse = math.sin(state.game_frame * 0.1 + self.pulse_phase) * 0.1 + 1
        self.scale = (0.8 + random.random() * 0.4) * pulse

        for sparkle in self.sparkles:
            sparkle.phase += sparkle.speed

        if self.y < 100:
            self.alpha = max(0.0, self.y / 100)

    def is_gone(self) -> bool:
        """Off the top of the screen or fully faded"""
        return self.y < -self.radius or self.alpha <= 0

    def collides_with(self, player: Player) -> bool:
        return circles_overlap(self.x, self.y, self.radius,
                               player.x, player.y, player.radius)

    def render(self, surface):
        radius = self.radius * self.scale
        surface.disc(self.x, self.y, radius * 2.5, self.color,
                     self.alpha * self.glow_intensity * 0.3, filled=False)
        surface.disc(self.x, self.y, radius, self.color, self.alpha)

        cos_r = math.cos(self.rotation)
        sin_r = math.sin(self.rotation)
        for sparkle in self.sparkles:
            sparkle_alpha = math.sin(sparkle.phase) * 0.5 + 0.5
            sx = self.x + (sparkle.x * cos_r - sparkle.y * sin_r) * self.scale
            sy = self.y + (sparkle.x * sin_r + sparkle.y * cos_r) * self.scale
            surface.disc(sx, sy, sparkle.size, '#ffffff', self.alpha * sparkle_alpha * 0.8)

        surface.glyph(self.x, self.y, self.letter, '#ffffff', self.alpha, bold=True)


class Particle:
    """Burst particle with drag, gravity and a finite life"""

    def __init__(self, x: float, y: float, color: str,
                 kind: ParticleKind = ParticleKind.NORMAL, decay: float = 0.015):
        self.x = x
        self.y = y
        self.vx = (random.random() - 0.5) * 12
        self.vy = (random.random() - 0.5) * 12
        self.max_life = 1.0
        self.life = self.max_life
        self.decay = decay
        self.age = 0  # Frames lived
        self.size = random.random() * 8 + 3
        self.color = color
        self.kind = kind
        self.rotation = random.random() * math.pi * 2
        self.rotation_speed = (random.random() - 0.5) * 0.2
        self.gravity = -0.1 if kind == ParticleKind.BUBBLE else 0.1
        self.drag = 0.98

    def update(self):
        self.x += self.vx
        self.y += self.vy
        self.vy += self.gravity
        self.vx *= self.drag
        self.vy *= self.drag
        self.age += 1
        # Derived from the age so repeated float subtraction cannot drift
        self.life = self.max_life - self.age * self.decay
        self.size *= 0.99
        self.rotation += self.rotation_speed

    def is_dead(self) -> bool:
        return self.life <= 0

    def star_points(self) -> List[Tuple[float, float]]:
        """Five vertices spaced 2*pi/5 apart, rotated and placed at the particle"""
        points = []
        for i in range(5):
            angle = (i * math.pi * 2) / 5 + self.rotation
            points.append((self.x + math.cos(angle) * self.size,
                           self.y + math.sin(angle) * self.size))
        return points

    def render(self, surface):
        if self.kind == ParticleKind.STAR:
            surface.polygon(self.star_points(), self.color, self.life)
        else:
            surface.disc(self.x, self.y, self.size, self.color, self.life)
