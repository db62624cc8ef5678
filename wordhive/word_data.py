"""Static inputs: the dictionary, the frequency table and the historic archive.

They are read once per process and treated as read-only afterwards.
"""

import json
import logging
import pathlib
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Iterable, Tuple

from wordhive.domain.word_finder import UNKNOWN_RANK
from wordhive.models.puzzle_models import HistoricPuzzle

DEFAULT_DATA_DIR = pathlib.Path(__file__).parent / "data"
WORDS_FILE = "words.txt"
FREQUENCY_FILE = "word_frequency.json"
HISTORIC_FILE = "historic_puzzles.json"

_WORD_RE = re.compile(r"^[a-z]+$")


@dataclass(frozen=True)
class WordData:
    words: Tuple[str, ...]
    frequency: Dict[str, int] = field(default_factory=dict)

    def frequency_rank(self, word: str) -> int:
        """Rank of ``word``; unknown words get the rarest sentinel rank."""
        return self.frequency.get(word, UNKNOWN_RANK)


def read_words(path: pathlib.Path) -> Iterable[str]:
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if _WORD_RE.match(word):
                yield word


def read_frequency(path: pathlib.Path) -> Dict[str, int]:
    """Load word -> rank, dropping entries that are not positive integers."""
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    frequency: Dict[str, int] = {}
    for word, rank in raw.items():
        if isinstance(rank, bool) or not isinstance(rank, int) or rank <= 0:
            logging.warning(f"Ignoring frequency entry {word!r}: {rank!r}")
            continue
        frequency[word.lower()] = rank
    return frequency


@lru_cache(maxsize=8)
def load_word_data(data_dir: pathlib.Path = DEFAULT_DATA_DIR) -> WordData:
    """Read the dictionary and frequency table from ``data_dir``."""
    data_dir = pathlib.Path(data_dir)
    words = tuple(dict.fromkeys(read_words(data_dir / WORDS_FILE)))
    frequency_path = data_dir / FREQUENCY_FILE
    frequency = read_frequency(frequency_path) if frequency_path.exists() else {}
    logging.info(f"Loaded {len(words)} words and {len(frequency)} frequency ranks from {data_dir}")
    return WordData(words=words, frequency=frequency)


@lru_cache(maxsize=8)
def load_historic_puzzles(data_dir: pathlib.Path = DEFAULT_DATA_DIR) -> Tuple[HistoricPuzzle, ...]:
    path = pathlib.Path(data_dir) / HISTORIC_FILE
    if not path.exists():
        logging.warning(f"No historic puzzle archive at {path}")
        return ()
    with path.open("r", encoding="utf-8") as f:
        archive = json.load(f)
    puzzles = tuple(HistoricPuzzle.model_validate(entry) for entry in archive.get("puzzles", []))
    logging.info(f"Loaded {len(puzzles)} historic puzzles from {path}")
    return puzzles
