from enum import Enum
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, field_validator, model_validator

VOWELS = ("a", "e", "i", "o", "u")


class LetterSet(BaseModel):
    """Seven distinct lowercase letters and the required center letter."""

    letters: Tuple[str, ...]
    center: str

    class Config:
        frozen = True

    @field_validator("letters")
    @classmethod
    def check_letters(cls, letters: Tuple[str, ...]) -> Tuple[str, ...]:
        if len(letters) != 7 or len(set(letters)) != 7:
            raise ValueError(f"Expected 7 distinct letters; got {list(letters)}")
        for letter in letters:
            if len(letter) != 1 or not ("a" <= letter <= "z"):
                raise ValueError(f"Letters must be single lowercase characters; got {letter!r}")
        return letters

    @model_validator(mode="after")
    def check_center(self) -> "LetterSet":
        if self.center not in self.letters:
            raise ValueError(f"Center letter '{self.center}' must be among {list(self.letters)}")
        return self


class WordScore(BaseModel):
    word: str
    base_score: int
    rarity_bonus: int
    is_pangram: bool
    pangram_bonus: int
    total_score: int
    rarity_decile: int

    class Config:
        frozen = True


class Puzzle(BaseModel):
    """A built daily puzzle. Never mutated after the builder returns it."""

    letters: Tuple[str, ...]
    center_letter: str
    valid_words: frozenset[str]
    ordered_words: Tuple[str, ...]
    word_scores: Dict[str, WordScore]
    max_score: int
    total_words: int

    class Config:
        frozen = True

    @property
    def pangrams(self) -> Tuple[str, ...]:
        return tuple(w for w in self.ordered_words if self.word_scores[w].is_pangram)


class RejectionCode(str, Enum):
    too_short = "too_short"
    missing_center = "missing_center"
    invalid_letters = "invalid_letters"
    not_in_word_list = "not_in_word_list"
    already_found = "already_found"


class ValidationResult(BaseModel):
    valid: bool
    reason: Optional[str] = None
    code: Optional[RejectionCode] = None

    class Config:
        frozen = True


class FeedbackKind(str, Enum):
    error = "error"
    success = "success"
    rare = "rare"
    pangram = "pangram"


class Feedback(BaseModel):
    kind: FeedbackKind
    text: str

    class Config:
        frozen = True


class SavedProgress(BaseModel):
    """Progress as handed back by the persistence layer."""

    date_seed: str
    strategy: str
    found_words: list[str]
    score: int


class HistoricPuzzle(BaseModel):
    """An archived puzzle whose word list is ordered rarest first."""

    date: str
    letters: Tuple[str, ...]
    center: str
    words: Tuple[str, ...]

    class Config:
        frozen = True
