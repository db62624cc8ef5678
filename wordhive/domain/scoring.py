"""Word scoring: base score, rarity bonus and pangram bonus.

Rarity is relative to the other words of the same puzzle, so every word must
be ranked against the same ordered word list.
"""

import math
from enum import Enum
from typing import Dict, Iterable, Sequence, Tuple

import numpy as np

from wordhive.domain.word_finder import UNKNOWN_RANK
from wordhive.models.puzzle_models import Feedback, FeedbackKind, WordScore

PANGRAM_BONUS = 10
RARE_DECILE = 8
KNOWN_RATIO_THRESHOLD = 0.5
POSITION_GROUP_COUNT = 5
POSITION_GROUP_BONUS = (10, 7, 5, 3, 1)
NEUTRAL_RARITY = (5, 5)

RARE_WORD_MESSAGES = {
    10: "Amazing!",
    9: "Excellent!",
    8: "Nice!",
}


class RarityMode(str, Enum):
    frequency = "frequency"  # rank by frequency table
    position = "position"  # rank by position in the pre-ordered word list


def base_score(word: str) -> int:
    return 1 if len(word) == 4 else len(word)


def is_pangram(word: str, letters: Iterable[str]) -> bool:
    return set(word).issuperset(letters)


def detect_rarity_mode(words: Sequence[str], frequency: Dict[str, int]) -> RarityMode:
    """Pick frequency mode when at least half of the words have a known rank."""
    if not words:
        return RarityMode.frequency
    known = sum(1 for word in words if word in frequency)
    if known / len(words) >= KNOWN_RATIO_THRESHOLD:
        return RarityMode.frequency
    return RarityMode.position


def frequency_rarity(words: Sequence[str], frequency: Dict[str, int]) -> Dict[str, Tuple[int, int]]:
    """Decile and bonus per word from its position after sorting by frequency rank.

    Args:
        words (Sequence[str]): Valid words of one puzzle
        frequency (Dict[str, int]): Word -> rank, 1 is the most common

    Returns:
        Dict[str, Tuple[int, int]]: Word -> (decile 1..10, bonus 0..9)
    """
    total = len(words)
    ranks = np.array([frequency.get(word, UNKNOWN_RANK) for word in words], dtype=np.int64)
    order = np.argsort(ranks, kind="stable")

    table: Dict[str, Tuple[int, int]] = {}
    for position, index in enumerate(order):
        word = words[int(index)]
        if word in table:
            continue
        decile = min(10, position * 10 // total + 1)
        table[word] = (decile, decile - 1)
    return table


def position_rarity(words: Sequence[str]) -> Dict[str, Tuple[int, int]]:
    """Decile and bonus per word from five contiguous groups of the original order.

    The first group holds the rarest words.
    """
    group_size = math.ceil(len(words) / POSITION_GROUP_COUNT)

    table: Dict[str, Tuple[int, int]] = {}
    for position, word in enumerate(words):
        if word in table:
            continue
        group = min(position // group_size, POSITION_GROUP_COUNT - 1)
        bonus = POSITION_GROUP_BONUS[group]
        # decile mirrors the bonus for this value set
        table[word] = (bonus, bonus)
    return table


def rarity_table(
    words: Sequence[str],
    frequency: Dict[str, int],
    mode: RarityMode | None = None,
) -> Dict[str, Tuple[int, int]]:
    """Rarity of every word in one pass. ``mode`` overrides the auto-detection."""
    if not words:
        return {}
    mode = mode or detect_rarity_mode(words, frequency)
    if mode == RarityMode.position:
        return position_rarity(words)
    return frequency_rarity(words, frequency)


def make_word_score(word: str, letters: Iterable[str], rarity: Tuple[int, int]) -> WordScore:
    decile, bonus = rarity
    pangram = is_pangram(word, letters)
    base = base_score(word)
    pangram_bonus = PANGRAM_BONUS if pangram else 0
    return WordScore(
        word=word,
        base_score=base,
        rarity_bonus=bonus,
        is_pangram=pangram,
        pangram_bonus=pangram_bonus,
        total_score=base + bonus + pangram_bonus,
        rarity_decile=decile,
    )


def calculate_word_score(
    word: str,
    letters: Iterable[str],
    words: Sequence[str],
    frequency: Dict[str, int],
    mode: RarityMode | None = None,
) -> WordScore:
    """Score one word against the puzzle's ordered word list.

    A word missing from ``words`` gets the neutral decile 5 / bonus 5.
    """
    rarity = rarity_table(words, frequency, mode).get(word, NEUTRAL_RARITY)
    return make_word_score(word, letters, rarity)


def is_rare_word(rarity_decile: int) -> bool:
    return rarity_decile >= RARE_DECILE


def feedback_message(score: WordScore) -> Feedback:
    """Message shown after an accepted word. Pangrams win over rare words."""
    if score.is_pangram:
        return Feedback(kind=FeedbackKind.pangram, text="PANGRAM!")
    if is_rare_word(score.rarity_decile):
        return Feedback(kind=FeedbackKind.rare, text=RARE_WORD_MESSAGES[min(score.rarity_decile, 10)])
    return Feedback(kind=FeedbackKind.success, text=f"+{score.total_score} points!")
