"""Compose strategy, word finder and scoring into an immutable Puzzle."""

import logging
from typing import Dict, Sequence

from wordhive.domain.scoring import RarityMode, make_word_score, rarity_table
from wordhive.domain.seeding import make_rng
from wordhive.domain.strategies import PuzzleStrategy
from wordhive.models.puzzle_models import LetterSet, Puzzle, WordScore


def build_puzzle(
    letters: Sequence[str],
    center_letter: str,
    ordered_words: Sequence[str],
    frequency: Dict[str, int],
    rarity_mode: RarityMode | None = None,
) -> Puzzle:
    """Score every word against the same ordered list and freeze the result.

    Args:
        letters (Sequence[str]): The 7 puzzle letters
        center_letter (str): Letter every word must contain
        ordered_words (Sequence[str]): Valid words in strategy order
        frequency (Dict[str, int]): Word -> frequency rank
        rarity_mode (RarityMode | None): Forces a rarity mode instead of auto-detection

    Returns:
        Puzzle: The built puzzle
    """
    words = tuple(dict.fromkeys(ordered_words))
    rarity = rarity_table(words, frequency, rarity_mode)

    word_scores: Dict[str, WordScore] = {}
    max_score = 0
    for word in words:
        score = make_word_score(word, letters, rarity[word])
        word_scores[word] = score
        max_score += score.total_score

    return Puzzle(
        letters=tuple(letters),
        center_letter=center_letter,
        valid_words=frozenset(words),
        ordered_words=words,
        word_scores=word_scores,
        max_score=max_score,
        total_words=len(words),
    )


class PuzzleGenerator:
    """Generates the puzzle of a date seed with one configured strategy."""

    def __init__(self, strategy: PuzzleStrategy, frequency: Dict[str, int]):
        self.strategy = strategy
        self.frequency = frequency

    def letter_set(self, date_seed: str) -> LetterSet:
        return self.strategy.generate_letter_set(make_rng(date_seed))

    def generate(self, date_seed: str) -> Puzzle:
        letter_set = self.letter_set(date_seed)
        words = self.strategy.find_valid_words(letter_set.letters, letter_set.center)
        if not words:
            logging.warning(
                f"Strategy {self.strategy.name.value} produced no words for {date_seed} "
                f"(letters={''.join(letter_set.letters)}, center={letter_set.center})"
            )
        return build_puzzle(letter_set.letters, letter_set.center, words, self.frequency)
