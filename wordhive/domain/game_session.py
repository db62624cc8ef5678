"""Player session over one puzzle.

Sessions are frozen; every operation returns a new session. The score is
always the sum of the found words' totals.
"""

import logging
import math
from typing import Optional, Tuple

from pydantic import BaseModel

from wordhive.domain.scoring import feedback_message
from wordhive.domain.word_validator import normalize_word, validate_word
from wordhive.models.puzzle_models import (
    Feedback,
    FeedbackKind,
    Puzzle,
    SavedProgress,
    ValidationResult,
)


class GameSession(BaseModel):
    puzzle: Puzzle
    date_seed: str
    strategy: str
    found_words: Tuple[str, ...] = ()
    current_word: str = ""
    score: int = 0

    class Config:
        frozen = True


class SubmitOutcome(BaseModel):
    session: GameSession
    validation: ValidationResult
    points: int
    feedback: Optional[Feedback] = None

    class Config:
        frozen = True


def new_session(puzzle: Puzzle, date_seed: str, strategy: str) -> GameSession:
    return GameSession(puzzle=puzzle, date_seed=date_seed, strategy=strategy)


def add_letter(session: GameSession, letter: str) -> GameSession:
    return session.model_copy(update={"current_word": session.current_word + letter.lower()})


def remove_letter(session: GameSession) -> GameSession:
    return session.model_copy(update={"current_word": session.current_word[:-1]})


def clear_word(session: GameSession) -> GameSession:
    return session.model_copy(update={"current_word": ""})


def submit_word(session: GameSession, word: Optional[str] = None) -> SubmitOutcome:
    """Validate a word and, when accepted, record it and add its points.

    Args:
        session (GameSession): Session before the submission
        word (Optional[str]): Word to submit; the current word when None

    Returns:
        SubmitOutcome: New session (current word cleared), validation, points and feedback.
            An empty word leaves the session unchanged and carries no feedback.
    """
    candidate = normalize_word(session.current_word if word is None else word)
    if not candidate:
        return SubmitOutcome(session=session, validation=ValidationResult(valid=False), points=0)

    validation = validate_word(candidate, session.puzzle, session.found_words)
    cleared = clear_word(session)

    if not validation.valid:
        return SubmitOutcome(
            session=cleared,
            validation=validation,
            points=0,
            feedback=Feedback(kind=FeedbackKind.error, text=validation.reason or "Invalid word"),
        )

    word_score = session.puzzle.word_scores[candidate]
    updated = cleared.model_copy(
        update={
            "found_words": session.found_words + (candidate,),
            "score": session.score + word_score.total_score,
        }
    )
    return SubmitOutcome(
        session=updated,
        validation=validation,
        points=word_score.total_score,
        feedback=feedback_message(word_score),
    )


def restore_session(
    puzzle: Puzzle,
    date_seed: str,
    strategy: str,
    saved: SavedProgress | None,
) -> GameSession:
    """Resume saved progress for the active puzzle.

    Progress saved for another date or strategy is discarded. Words that are no
    longer valid are dropped and the score is recomputed from the words kept.
    """
    session = new_session(puzzle, date_seed, strategy)
    if saved is None:
        return session

    if saved.date_seed != date_seed or saved.strategy != strategy:
        logging.warning(
            f"Discarding progress for {saved.date_seed}/{saved.strategy}; "
            f"active puzzle is {date_seed}/{strategy}"
        )
        return session

    found_words = tuple(
        word for word in dict.fromkeys(saved.found_words) if word in puzzle.valid_words
    )
    score = sum(puzzle.word_scores[word].total_score for word in found_words)
    if found_words != tuple(saved.found_words) or score != saved.score:
        logging.warning(
            f"Saved progress for {date_seed}/{strategy} did not match the puzzle; "
            f"kept {len(found_words)} of {len(saved.found_words)} words, score {saved.score} -> {score}"
        )
    return session.model_copy(update={"found_words": found_words, "score": score})


def progress_percent(session: GameSession) -> int:
    max_score = session.puzzle.max_score
    if max_score <= 0:
        return 0
    # halves round up
    return math.floor(session.score / max_score * 100 + 0.5)
