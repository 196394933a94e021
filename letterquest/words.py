"""Bonus scoring for words spelled with collected letters."""

import logging
from typing import Optional, Sequence

from letterquest import config

logger = logging.getLogger(__name__)


def word_bonus(word: str, multiplier: int = config.WORD_BONUS_MULTIPLIER) -> int:
    return len(word) * multiplier


def check_for_words(state, words: Sequence[str] = config.COMMON_WORDS,
                    multiplier: int = config.WORD_BONUS_MULTIPLIER) -> Optional[str]:
    """Credit the first listed word found inside the collected letters.

    Words are tried in list order and only one is credited per call. The
    matched span (its first occurrence) is cut out of the buffer, whatever
    letters surround it stay. Returns the credited word, or None.
    """
    collected = state.collected_word.upper()
    for word in words:
        if word in collected:
            points = word_bonus(word, multiplier)
            state.score += points
            state.collected_word = collected.replace(word, '', 1)
            logger.info("Word bonus %s +%d", word, points)
            if state.notifications is not None:
                state.notifications.word_bonus(word, points)
            return word
    return None
