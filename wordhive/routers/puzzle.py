import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from wordhive import load_settings
from wordhive.converter import DataConverter
from wordhive.domain.seeding import parse_date_seed, today_date_seed
from wordhive.domain.strategies import STRATEGY_REGISTRY, StrategyName, resolve_strategy_name
from wordhive.models.dc_models import PuzzleModel, StrategyModel
from wordhive.models.puzzle_models import Puzzle
from wordhive.services.puzzle_service import get_puzzle

puzzle_router = APIRouter()
data_converter = DataConverter()
active_strategy = resolve_strategy_name(load_settings.strategy)


def load_puzzle(date_seed: str | None, strategy: StrategyName | None) -> tuple[str, StrategyName, Puzzle]:
    """Resolve the date and strategy of a request and return their puzzle

    Raises:
        HTTPException: 422 when the date seed is malformed, 503 when the puzzle cannot be built
    """
    date_seed = date_seed or today_date_seed()
    strategy = strategy or active_strategy
    try:
        parse_date_seed(date_seed)
    except ValueError as e:
        logging.info(f"Rejected puzzle request for {date_seed}: {e}")
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    try:
        puzzle = get_puzzle(date_seed, strategy, load_settings.data_dir)
    except ValueError as e:
        logging.error(f"Failed to build puzzle {date_seed}/{strategy.value}: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Puzzle is not available",
        )
    return date_seed, strategy, puzzle


class StrategyAPI:
    @staticmethod
    @puzzle_router.get("/strategies", response_model=List[StrategyModel])
    async def list_strategies():
        return [
            StrategyModel(name=name, description=strategy_class.description, default=name == active_strategy)
            for name, strategy_class in STRATEGY_REGISTRY.items()
        ]


class PuzzleAPI:
    @staticmethod
    @puzzle_router.get("/puzzle", response_model=PuzzleModel)
    async def get_today_puzzle(strategy: StrategyName | None = None):
        date_seed, strategy, puzzle = load_puzzle(None, strategy)
        return data_converter.convert_puzzle_to_puzzlemodel(puzzle, date_seed, strategy)

    @staticmethod
    @puzzle_router.get("/puzzle/{date_seed}", response_model=PuzzleModel)
    async def get_puzzle_by_date(date_seed: str, strategy: StrategyName | None = None):
        date_seed, strategy, puzzle = load_puzzle(date_seed, strategy)
        return data_converter.convert_puzzle_to_puzzlemodel(puzzle, date_seed, strategy)
