"""Build and cache the puzzle of each (date seed, strategy).

Puzzles are pure functions of their inputs, so one build per key serves the
whole process lifetime.
"""

import logging
import pathlib
from functools import lru_cache

from wordhive.domain.puzzle_builder import PuzzleGenerator
from wordhive.domain.seeding import parse_date_seed
from wordhive.domain.strategies import StrategyName, create_strategy
from wordhive.models.puzzle_models import Puzzle
from wordhive.word_data import load_historic_puzzles, load_word_data


@lru_cache(maxsize=8)
def get_generator(strategy: StrategyName, data_dir: pathlib.Path) -> PuzzleGenerator:
    word_data = load_word_data(data_dir)
    historic_puzzles = load_historic_puzzles(data_dir) if strategy == StrategyName.historic else ()
    puzzle_strategy = create_strategy(strategy, word_data.words, word_data.frequency, historic_puzzles)
    return PuzzleGenerator(puzzle_strategy, word_data.frequency)


@lru_cache(maxsize=64)
def get_puzzle(date_seed: str, strategy: StrategyName, data_dir: pathlib.Path) -> Puzzle:
    """Return the puzzle of ``date_seed`` for ``strategy``.

    Raises:
        ValueError: ``date_seed`` is not a ``YYYY-MM-DD`` date
    """
    parse_date_seed(date_seed)
    puzzle = get_generator(strategy, data_dir).generate(date_seed)
    logging.info(
        f"Built puzzle {date_seed}/{strategy.value}: letters={''.join(puzzle.letters)} "
        f"center={puzzle.center_letter} words={puzzle.total_words} max_score={puzzle.max_score}"
    )
    return puzzle
