"""Prepare the static data files read by the puzzle service.

    wordhive-build-data words --top 50000 --out wordhive/data
    wordhive-build-data historic puzzles.txt --out wordhive/data

``words`` ranks English words with wordfreq: ``words.txt`` lists them from
most to least common and ``word_frequency.json`` maps each to its 1-based
rank. ``historic`` converts a plain text archive, where each puzzle is a
7-letter line (first letter is the center) followed by its words and a blank
line, into ``historic_puzzles.json``.
"""

import argparse
import json
import logging
import pathlib
import re
from datetime import date, timedelta
from typing import Iterable, List

from wordfreq import top_n_list

from wordhive.domain.seeding import parse_date_seed
from wordhive.domain.word_finder import MIN_WORD_LENGTH
from wordhive.models.puzzle_models import HistoricPuzzle
from wordhive.word_data import FREQUENCY_FILE, HISTORIC_FILE, WORDS_FILE

_WORD_RE = re.compile(r"^[a-z]+$")
_LETTERS_RE = re.compile(r"^[a-z]{7}$")
DEFAULT_START_DATE = "2024-12-17"


def rank_words(candidates: Iterable[str]) -> List[str]:
    """Keep lowercase alphabetic words of playable length, first occurrence wins."""
    words = (word for word in candidates if len(word) >= MIN_WORD_LENGTH and _WORD_RE.match(word))
    return list(dict.fromkeys(words))


def write_word_files(words: List[str], out_dir: pathlib.Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    (out_dir / WORDS_FILE).write_text("\n".join(words) + "\n", encoding="utf-8")
    frequency = {word: rank for rank, word in enumerate(words, start=1)}
    (out_dir / FREQUENCY_FILE).write_text(json.dumps(frequency, indent=2), encoding="utf-8")
    logging.info(f"Wrote {len(words)} words to {out_dir / WORDS_FILE} and {out_dir / FREQUENCY_FILE}")


def parse_puzzle_archive(text: str, start_date: date) -> List[HistoricPuzzle]:
    """Parse the plain text archive into puzzles dated one day apart from ``start_date``."""
    puzzles: List[HistoricPuzzle] = []
    letters: str | None = None
    words: List[str] = []

    def flush() -> None:
        nonlocal letters, words
        if letters and words:
            puzzles.append(
                HistoricPuzzle(
                    date=(start_date + timedelta(days=len(puzzles))).isoformat(),
                    letters=tuple(letters),
                    center=letters[0],
                    words=tuple(words),
                )
            )
        letters, words = None, []

    for raw_line in text.splitlines():
        line = raw_line.strip().lower()
        if not line:
            flush()
            continue
        if letters is None and _LETTERS_RE.match(line):
            letters = line
        elif letters is not None:
            words.append(line)
    flush()
    return puzzles


def write_historic_file(puzzles: List[HistoricPuzzle], out_dir: pathlib.Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    archive = {
        "version": "1.0",
        "source": "Spelling Bee archive",
        "description": (
            "Historic Spelling Bee puzzles with pre-ordered word lists. "
            "Word order represents difficulty (first = rarest, last = most common)."
        ),
        "puzzles": [puzzle.model_dump(mode="json") for puzzle in puzzles],
    }
    (out_dir / HISTORIC_FILE).write_text(json.dumps(archive, indent=2), encoding="utf-8")
    for puzzle in puzzles:
        logging.info(
            f"{puzzle.date}: letters={''.join(puzzle.letters)} center={puzzle.center} words={len(puzzle.words)}"
        )
    logging.info(f"Wrote {len(puzzles)} puzzles to {out_dir / HISTORIC_FILE}")


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build WordHive data files")
    subparsers = parser.add_subparsers(dest="command", required=True)

    words_parser = subparsers.add_parser("words", help="Build the dictionary and frequency table")
    words_parser.add_argument("--top", type=int, default=50000, help="Number of wordfreq words to rank")
    words_parser.add_argument("--lang", type=str, default="en", help="wordfreq language code")
    words_parser.add_argument("--out", type=pathlib.Path, required=True, help="Output directory")

    historic_parser = subparsers.add_parser("historic", help="Convert a plain text puzzle archive")
    historic_parser.add_argument("archive", type=pathlib.Path, help="Plain text archive")
    historic_parser.add_argument("--start-date", type=str, default=DEFAULT_START_DATE, help="Date of the first puzzle")
    historic_parser.add_argument("--out", type=pathlib.Path, required=True, help="Output directory")
    return parser


def main(argv: List[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)
    args = get_parser().parse_args(argv)
    if args.command == "words":
        write_word_files(rank_words(top_n_list(args.lang, args.top)), args.out)
    else:
        text = args.archive.read_text(encoding="utf-8")
        write_historic_file(parse_puzzle_archive(text, parse_date_seed(args.start_date)), args.out)


if __name__ == "__main__":
    main()
