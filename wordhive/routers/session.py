import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, status
from uuid6 import uuid7

from wordhive.converter import DataConverter
from wordhive.domain.game_session import GameSession, restore_session, submit_word
from wordhive.domain.strategies import StrategyName
from wordhive.models.dc_models import SessionModel, StartSessionModel, SubmitResultModel, SubmitWordModel
from wordhive.routers.puzzle import load_puzzle
from wordhive.services import progress_db

session_router = APIRouter()
data_converter = DataConverter()


async def resume_session(
    player_id: UUID, date_seed: str | None, strategy: StrategyName | None
) -> GameSession:
    """Load the puzzle and the player's saved progress for it."""
    date_seed, strategy, puzzle = load_puzzle(date_seed, strategy)
    saved = await progress_db.load_progress(player_id, date_seed, strategy.value)
    return restore_session(puzzle, date_seed, strategy.value, saved)


class SessionAPI:
    @staticmethod
    @session_router.post("/session/start", response_model=SessionModel)
    async def start_session(start: StartSessionModel, strategy: StrategyName | None = None):
        player_id = start.player_id or uuid7()
        session = await resume_session(player_id, start.date_seed, strategy)
        logging.info(f"Session of {player_id} on {session.date_seed}/{session.strategy}: {len(session.found_words)} words")
        return data_converter.convert_session_to_sessionmodel(player_id, session)

    @staticmethod
    @session_router.get("/session/{player_id}", response_model=SessionModel)
    async def get_session(player_id: UUID, date_seed: str | None = None, strategy: StrategyName | None = None):
        session = await resume_session(player_id, date_seed, strategy)
        return data_converter.convert_session_to_sessionmodel(player_id, session)

    @staticmethod
    @session_router.post("/session/{player_id}/submit", response_model=SubmitResultModel)
    async def submit(player_id: UUID, submission: SubmitWordModel, strategy: StrategyName | None = None):
        session = await resume_session(player_id, submission.date_seed, strategy)
        outcome = submit_word(session, submission.word)

        saved = False
        if outcome.validation.valid:
            saved = await progress_db.save_progress(
                player_id,
                outcome.session.date_seed,
                outcome.session.strategy,
                outcome.session.found_words,
                outcome.session.score,
            )
        return data_converter.convert_outcome_to_submitresultmodel(player_id, outcome, saved)

    @staticmethod
    @session_router.delete("/session/{player_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def reset_session(player_id: UUID, date_seed: str | None = None, strategy: StrategyName | None = None):
        date_seed, strategy, _ = load_puzzle(date_seed, strategy)
        deleted = await progress_db.delete_progress(player_id, date_seed, strategy.value)
        if not deleted:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Progress could not be reset",
            )
