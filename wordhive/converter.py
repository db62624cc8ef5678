from uuid import UUID

from wordhive.domain.game_session import GameSession, SubmitOutcome, progress_percent
from wordhive.domain.strategies import StrategyName
from wordhive.models.dc_models import PuzzleModel, SessionModel, SubmitResultModel
from wordhive.models.puzzle_models import Puzzle


class DataConverter:
    """This class is used to convert domain objects into client models."""

    def convert_puzzle_to_puzzlemodel(self, puzzle: Puzzle, date_seed: str, strategy: StrategyName) -> PuzzleModel:
        """Convert the Puzzle to the PuzzleModel to send client

        Args:
            puzzle (Puzzle): The built puzzle
            date_seed (str): Date the puzzle was built for
            strategy (StrategyName): Strategy that built the puzzle

        Returns:
            PuzzleModel: Puzzle summary without the answers
        """
        return PuzzleModel(
            date_seed=date_seed,
            strategy=strategy,
            letters=list(puzzle.letters),
            center_letter=puzzle.center_letter,
            total_words=puzzle.total_words,
            max_score=puzzle.max_score,
            pangram_count=len(puzzle.pangrams),
        )

    def convert_session_to_sessionmodel(self, player_id: UUID, session: GameSession) -> SessionModel:
        return SessionModel(
            player_id=player_id,
            date_seed=session.date_seed,
            strategy=StrategyName(session.strategy),
            letters=list(session.puzzle.letters),
            center_letter=session.puzzle.center_letter,
            found_words=list(session.found_words),
            found_words_sorted=sorted(session.found_words),
            score=session.score,
            max_score=session.puzzle.max_score,
            total_words=session.puzzle.total_words,
            progress=progress_percent(session),
        )

    def convert_outcome_to_submitresultmodel(
        self, player_id: UUID, outcome: SubmitOutcome, saved: bool
    ) -> SubmitResultModel:
        return SubmitResultModel(
            validation=outcome.validation,
            points=outcome.points,
            feedback=outcome.feedback,
            saved=saved,
            session=self.convert_session_to_sessionmodel(player_id, outcome.session),
        )
