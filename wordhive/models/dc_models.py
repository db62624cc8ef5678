from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from wordhive.domain.strategies import StrategyName
from wordhive.models.puzzle_models import Feedback, ValidationResult


class StrategyModel(BaseModel):
    name: StrategyName
    description: str
    default: bool


class PuzzleModel(BaseModel):
    """Public view of a puzzle. The answer list is never sent to the client."""

    date_seed: str
    strategy: StrategyName
    letters: List[str]
    center_letter: str
    total_words: int
    max_score: int
    pangram_count: int


class StartSessionModel(BaseModel):
    date_seed: Optional[str] = None
    player_id: Optional[UUID] = None


class SubmitWordModel(BaseModel):
    word: str
    date_seed: Optional[str] = None


class SessionModel(BaseModel):
    player_id: UUID
    date_seed: str
    strategy: StrategyName
    letters: List[str]
    center_letter: str
    found_words: List[str]  # insertion order
    found_words_sorted: List[str]  # alphabetical, for display
    score: int
    max_score: int
    total_words: int
    progress: int  # percent of max score


class SubmitResultModel(BaseModel):
    validation: ValidationResult
    points: int
    feedback: Optional[Feedback] = None
    saved: bool
    session: SessionModel
