"""Configuration for Ocean Letter Quest, read from environment variables."""

import os
from pathlib import Path

# Frame loop
FPS = int(os.getenv("FPS", "60"))

# Terminal cell size in world units (the world is simulated in canvas pixels)
CELL_WIDTH = int(os.getenv("CELL_WIDTH", "10"))
CELL_HEIGHT = int(os.getenv("CELL_HEIGHT", "20"))

# Smallest terminal the game will start in
MIN_COLUMNS = 60
MIN_ROWS = 20

# Sound settings
START_MUTED = os.getenv("LETTERQUEST_MUTED", "false").lower() == "true"
SOUND_VOLUME = float(os.getenv("SOUND_VOLUME", "0.4"))

# Logging settings (the log directory sits outside the install tree)
LOGS_DIR = Path(os.getenv("LOGS_DIR", Path.home() / ".letterquest" / "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Game tuning
BUBBLE_SPAWN_RATE = 60  # Frames between bubbles at level 1
MIN_BUBBLE_SPAWN_RATE = 30
SPAWN_RATE_STEP = 5  # Frames shaved off per level
BUBBLE_SPEED = 2
PLAYER_SPEED = 12
LEVEL_THRESHOLD = 50  # Letters per level
ANIMATION_SPEED = 8
WORD_BONUS_MULTIPLIER = 100
POINTS_PER_LETTER = 10

LETTERS = [chr(code) for code in range(ord('A'), ord('Z') + 1)]
COMMON_WORDS = [
    'FISH', 'OCEAN', 'WATER', 'BLUE', 'SWIM', 'DEEP', 'WAVE',
    'CORAL', 'SHELL', 'PEARL', 'STAR', 'GOLD', 'MAGIC',
]

BUBBLE_COLORS = [
    '#ff6b6b', '#4ecdc4', '#45b7d1', '#96ceb4',
    '#feca57', '#ff9ff3', '#54a0ff', '#5f27cd',
    '#00d2d3', '#ff9f43', '#10ac84', '#ee5a24',
]

# Effects
BURST_PARTICLES = 12
STAR_PARTICLE_CHANCE = 0.3
BACKGROUND_MOTES = 50
MOTE_COLORS = ['#87ceeb', '#b0e0e6']
PLAYER_TRAIL_LENGTH = 20
POINTER_TRAIL_LENGTH = 15
POINTER_KEY_SPEED = 14  # World units per frame while an arrow key is held

# Notification lifetimes, in seconds
LEVEL_UP_SECONDS = 3
WORD_BONUS_SECONDS = 4

SHARE_TEMPLATE = "I just scored {score:,} points in Ocean Letter Quest! Can you beat my score?"

__all__ = [
    "FPS",
    "CELL_WIDTH",
    "CELL_HEIGHT",
    "MIN_COLUMNS",
    "MIN_ROWS",
    "START_MUTED",
    "SOUND_VOLUME",
    "LOGS_DIR",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "BUBBLE_SPAWN_RATE",
    "MIN_BUBBLE_SPAWN_RATE",
    "SPAWN_RATE_STEP",
    "BUBBLE_SPEED",
    "PLAYER_SPEED",
    "LEVEL_THRESHOLD",
    "ANIMATION_SPEED",
    "WORD_BONUS_MULTIPLIER",
    "POINTS_PER_LETTER",
    "LETTERS",
    "COMMON_WORDS",
    "BUBBLE_COLORS",
    "BURST_PARTICLES",
    "STAR_PARTICLE_CHANCE",
    "BACKGROUND_MOTES",
    "MOTE_COLORS",
    "PLAYER_TRAIL_LENGTH",
    "POINTER_TRAIL_LENGTH",
    "POINTER_KEY_SPEED",
    "LEVEL_UP_SECONDS",
    "WORD_BONUS_SECONDS",
    "SHARE_TEMPLATE",
]
