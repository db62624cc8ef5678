from typing import Iterable

from wordhive.domain.word_finder import MIN_WORD_LENGTH
from wordhive.models.puzzle_models import Puzzle, RejectionCode, ValidationResult


def normalize_word(word: str) -> str:
    return word.strip().lower()


def reject(code: RejectionCode, reason: str) -> ValidationResult:
    return ValidationResult(valid=False, reason=reason, code=code)


def validate_word(word: str, puzzle: Puzzle, found_words: Iterable[str]) -> ValidationResult:
    """Check a submission against the puzzle rules, stopping at the first failure.

    Args:
        word (str): Player submission
        puzzle (Puzzle): The active puzzle
        found_words (Iterable[str]): Words already accepted this session

    Returns:
        ValidationResult: ``valid=True`` or the first rejection with its reason
    """
    candidate = normalize_word(word)

    if len(candidate) < MIN_WORD_LENGTH:
        return reject(RejectionCode.too_short, "Too short! Words must be at least 4 letters.")

    if puzzle.center_letter not in candidate:
        return reject(
            RejectionCode.missing_center,
            f"Must use center letter \"{puzzle.center_letter.upper()}\"!",
        )

    letter_set = set(puzzle.letters)
    if any(char not in letter_set for char in candidate):
        return reject(RejectionCode.invalid_letters, "Invalid letters!")

    if candidate not in puzzle.valid_words:
        return reject(RejectionCode.not_in_word_list, "Not in word list!")

    if candidate in set(found_words):
        return reject(RejectionCode.already_found, "Already found!")

    return ValidationResult(valid=True)
