"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from letterquest.entities import Bubble  # noqa: E402
from letterquest.hud import NotificationBoard, Readout  # noqa: E402
from letterquest.session import GameSession  # noqa: E402
from letterquest.surface import Surface  # noqa: E402

FIELD_WIDTH = 800
FIELD_HEIGHT = 600


class RecordingAudio:
    """Audio sink that remembers what it was asked to play"""

    def __init__(self):
        self.played = []

    def play_pop(self):
        self.played.append('pop')

    def play(self, name):
        self.played.append(name)


class RecordingSurface(Surface):
    """Surface that records the name of every draw call"""

    def __init__(self):
        self.calls = []

    def fill_background(self, frame):
        self.calls.append('fill_background')

    def disc(self, x, y, radius, color, alpha=1.0, filled=True):
        self.calls.append('disc')

    def polygon(self, points, color, alpha=1.0):
        self.calls.append('polygon')

    def glyph(self, x, y, char, color, alpha=1.0, bold=False):
        self.calls.append('glyph')

    def fish(self, x, y, angle, radius, facing_right, frame_x, color):
        self.calls.append('fish')


@pytest.fixture(autouse=True)
def seeded_random():
    """Make every test see the same random draws."""
    random.seed(1234)


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def notifications():
    return NotificationBoard(fps=60)


@pytest.fixture
def session(audio, notifications):
    """A session on a fixed 800x600 field, sound on."""
    return GameSession(FIELD_WIDTH, FIELD_HEIGHT, notifications=notifications,
                       audio=audio, readout=Readout(), muted=False)


@pytest.fixture
def make_bubble():
    """Build a bubble with a known letter at a known spot."""
    def _make(x, y, letter='A', radius=30, color='#4ecdc4'):
        bubble = Bubble(FIELD_WIDTH, FIELD_HEIGHT)
        bubble.x = x
        bubble.y = y
        bubble.letter = letter
        bubble.radius = radius
        bubble.color = color
        bubble.speed = 0
        bubble.bob_speed = 0
        bubble.bob_offset = 0
        return bubble
    return _make


@pytest.fixture
def recording_surface():
    return RecordingSurface()
