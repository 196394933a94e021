"""Round state: score, letters, level and pacing."""

import logging
from typing import List

from letterquest import config
from letterquest.entities import BackgroundMote

logger = logging.getLogger(__name__)


def level_for(letters_collected: int) -> int:
    """Level reached after collecting a number of letters"""
    return letters_collected // config.LEVEL_THRESHOLD + 1


def spawn_rate_for(level: int) -> int:
    """Frames between bubble spawns at a level, never below the floor"""
    return max(config.MIN_BUBBLE_SPAWN_RATE,
               config.BUBBLE_SPAWN_RATE - level * config.SPAWN_RATE_STEP)


class GameState:
    """Everything about the current round that is not an entity"""

    def __init__(self, width: float, height: float, notifications=None,
                 muted: bool = config.START_MUTED):
        self.width = width
        self.height = height
        self.notifications = notifications  # Receives level-up/word-bonus events
        self.start_muted = muted
        self.score = 0
        self.letters_collected = 0
        self.level = 1
        self.game_frame = 0
        self.is_paused = False
        self.is_muted = muted
        self.collected_word = ""
        self.bubble_spawn_rate = config.BUBBLE_SPAWN_RATE
        self.background_motes: List[BackgroundMote] = []
        self._scatter_motes()

    def _scatter_motes(self):
        self.background_motes = [
            BackgroundMote.scatter(self.width, self.height)
            for _ in range(config.BACKGROUND_MOTES)
        ]

    def update_level(self) -> bool:
        """Recompute the level from letters collected. Returns True on level up."""
        new_level = level_for(self.letters_collected)
        if new_level <= self.level:
            return False

        self.level = new_level
        self.bubble_spawn_rate = spawn_rate_for(self.level)
        logger.info("Level %d reached, bubbles every %d frames",
                    self.level, self.bubble_spawn_rate)
        if self.notifications is not None:
            self.notifications.level_up(self.level)
        return True

    def reset(self):
        """Restore the values the state was constructed with"""
        self.score = 0
        self.letters_collected = 0
        self.level = 1
        self.game_frame = 0
        self.is_paused = False
        self.is_muted = self.start_muted
        self.collected_word = ""
        self.bubble_spawn_rate = config.BUBBLE_SPAWN_RATE
        self._scatter_motes()

    def snapshot(self) -> dict:
        """Plain values of the scoring fields, for readouts and comparisons"""
        return {
            'score': self.score,
            'letters_collected': self.letters_collected,
            'level': self.level,
            'game_frame': self.game_frame,
            'is_paused': self.is_paused,
            'is_muted': self.is_muted,
            'collected_word': self.collected_word,
            'bubble_spawn_rate': self.bubble_spawn_rate,
        }
