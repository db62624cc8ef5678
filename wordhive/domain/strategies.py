"""Letter-set selection strategies.

Each strategy turns a seeded RNG into a letter set and derives the ordered
list of valid words for it. Strategies hold only read-only data, so one
instance can serve every date.
"""

import logging
from enum import Enum
from typing import Dict, List, Protocol, Sequence, Tuple

from wordhive.domain.seeding import Rng, pick_index
from wordhive.domain.word_finder import find_curated_words
from wordhive.models.puzzle_models import VOWELS, HistoricPuzzle, LetterSet

ALPHABET = tuple("abcdefghijklmnopqrstuvwxyz")
CENTER_VOWEL_THRESHOLD = 0.3  # draws above this pick a vowel center (70%)

# (letters, center) pairs known to give rich word coverage.
CURATED_LETTER_SETS: Tuple[Tuple[str, str], ...] = (
    ("aelnrst", "n"),
    ("acehprt", "h"),
    ("deilnow", "o"),
    ("adeghin", "h"),
    ("aborstu", "t"),
    ("adegiln", "g"),
)


class StrategyName(str, Enum):
    curated = "curated"  # random letters, at least one vowel
    curated_sets = "curated_sets"  # hand-picked letter sets
    historic = "historic"  # archived puzzles with their own word lists


DEFAULT_STRATEGY = StrategyName.curated


class PuzzleStrategy(Protocol):
    name: StrategyName
    description: str

    def generate_letter_set(self, rng: Rng) -> LetterSet: ...

    def find_valid_words(self, letters: Sequence[str], center: str) -> List[str]: ...


class CuratedRandomStrategy:
    name = StrategyName.curated
    description = "Generates random 7 letters with at least one vowel"

    def __init__(self, dictionary: Sequence[str], frequency: Dict[str, int]):
        self.dictionary = tuple(dictionary)
        self.frequency = frequency

    def generate_letter_set(self, rng: Rng) -> LetterSet:
        """Draw 7 distinct letters and a center letter.

        Args:
            rng (Rng): Seeded generator of floats in [0, 1)

        Returns:
            LetterSet: Letters in draw order and the center letter
        """
        available = list(ALPHABET)
        letters: List[str] = []
        while len(letters) < 7:
            letters.append(available.pop(pick_index(rng, len(available))))

        if not any(letter in VOWELS for letter in letters):
            # overwrite one slot; no vowel was drawn so it cannot duplicate
            slot = pick_index(rng, 7)
            letters[slot] = VOWELS[pick_index(rng, len(VOWELS))]

        vowels_in_set = [letter for letter in letters if letter in VOWELS]
        if vowels_in_set and rng() > CENTER_VOWEL_THRESHOLD:
            center = vowels_in_set[pick_index(rng, len(vowels_in_set))]
        else:
            center = letters[pick_index(rng, len(letters))]
        return LetterSet(letters=tuple(letters), center=center)

    def find_valid_words(self, letters: Sequence[str], center: str) -> List[str]:
        return find_curated_words(self.dictionary, self.frequency, letters, center)


class CuratedSetsStrategy:
    name = StrategyName.curated_sets
    description = "Picks one of the hand-curated letter sets"

    def __init__(
        self,
        dictionary: Sequence[str],
        frequency: Dict[str, int],
        letter_sets: Sequence[Tuple[str, str]] = CURATED_LETTER_SETS,
    ):
        self.dictionary = tuple(dictionary)
        self.frequency = frequency
        if not letter_sets:
            raise ValueError("Curated sets strategy needs at least one letter set")
        self.letter_sets = tuple(letter_sets)

    def generate_letter_set(self, rng: Rng) -> LetterSet:
        letters, center = self.letter_sets[pick_index(rng, len(self.letter_sets))]
        return LetterSet(letters=tuple(letters), center=center)

    def find_valid_words(self, letters: Sequence[str], center: str) -> List[str]:
        return find_curated_words(self.dictionary, self.frequency, letters, center)


class HistoricStrategy:
    name = StrategyName.historic
    description = "Replays archived puzzles with their original word lists"

    def __init__(self, puzzles: Sequence[HistoricPuzzle]):
        if not puzzles:
            raise ValueError("Historic strategy needs at least one archived puzzle")
        self.puzzles = tuple(puzzles)

    def generate_letter_set(self, rng: Rng) -> LetterSet:
        puzzle = self.puzzles[pick_index(rng, len(self.puzzles))]
        return LetterSet(letters=puzzle.letters, center=puzzle.center)

    def find_valid_words(self, letters: Sequence[str], center: str) -> List[str]:
        """Return the archived word list verbatim, or [] when no puzzle matches."""
        wanted = set(letters)
        for puzzle in self.puzzles:
            if puzzle.center == center and len(puzzle.letters) == len(letters) and set(puzzle.letters) == wanted:
                return list(puzzle.words)
        logging.warning(
            f"No historic puzzle found for letters [{', '.join(letters)}] with center '{center}'"
        )
        return []


def resolve_strategy_name(value: str | None) -> StrategyName:
    """Map a configured identifier to a strategy name, falling back to the default."""
    if value is None:
        return DEFAULT_STRATEGY
    try:
        return StrategyName(value.strip().lower())
    except ValueError:
        logging.warning(f"Unknown strategy \"{value}\", falling back to {DEFAULT_STRATEGY.value}")
        return DEFAULT_STRATEGY


def create_strategy(
    name: StrategyName | str | None,
    dictionary: Sequence[str],
    frequency: Dict[str, int],
    historic_puzzles: Sequence[HistoricPuzzle] = (),
) -> PuzzleStrategy:
    """Build the strategy registered under ``name``."""
    strategy_name = name if isinstance(name, StrategyName) else resolve_strategy_name(name)
    if strategy_name == StrategyName.historic:
        return HistoricStrategy(historic_puzzles)
    if strategy_name == StrategyName.curated_sets:
        return CuratedSetsStrategy(dictionary, frequency)
    return CuratedRandomStrategy(dictionary, frequency)


STRATEGY_REGISTRY: Dict[StrategyName, type] = {
    StrategyName.curated: CuratedRandomStrategy,
    StrategyName.curated_sets: CuratedSetsStrategy,
    StrategyName.historic: HistoricStrategy,
}
