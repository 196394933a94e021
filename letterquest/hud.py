"""HUD collaborators: timed notifications and the score readout."""

from dataclasses import dataclass
from typing import List

from letterquest import config

EMPTY_WORD_HINT = "Start collecting letters!"


@dataclass
class Notification:
    """A banner shown for a limited number of frames"""
    text: str
    timer: int  # Frames left on screen
    style: str = 'info'  # 'level', 'bonus' or 'info'
    scroll_offset: int = 0


class NotificationBoard:
    """Fire-and-forget sink for level-up and word-bonus banners"""

    def __init__(self, fps: int = config.FPS):
        self.fps = fps
        self.active: List[Notification] = []

    def level_up(self, level: int):
        self.active.append(Notification(f"★ LEVEL {level}! ★", config.LEVEL_UP_SECONDS * self.fps, 'level'))

    def word_bonus(self, word: str, points: int):
        self.active.append(Notification(f"✦ {word} +{points}! ✦", config.WORD_BONUS_SECONDS * self.fps, 'bonus'))

    def message(self, text: str, seconds: float = 4):
        self.active.append(Notification(text, int(seconds * self.fps), 'info'))

    def tick(self, frame: int):
        """Count every banner down one frame and drop the expired ones"""
        for notification in self.active:
            notification.timer -= 1
            # Scroll long messages leftward every other frame
            if frame % 2 == 0:
                notification.scroll_offset += 1
        self.active = [n for n in self.active if n.timer > 0]

    def clear(self):
        self.active = []


class Readout:
    """Latest score, letters, level and word for the status bar"""

    def __init__(self):
        self.score = 0
        self.letters_collected = 0
        self.level = 1
        self.collected_word = ""

    def update(self, score: int, letters_collected: int, level: int, collected_word: str):
        self.score = score
        self.letters_collected = letters_collected
        self.level = level
        self.collected_word = collected_word

    @property
    def word_text(self) -> str:
        return self.collected_word or EMPTY_WORD_HINT

    def status_line(self) -> str:
        return (f" SCORE {self.score:,}   LETTERS {self.letters_collected}"
                f"   LEVEL {self.level}   WORD {self.word_text}")
