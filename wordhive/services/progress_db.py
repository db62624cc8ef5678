"""DB service layer for saved progress.

- Routers should not touch DB sessions directly; they call this module.
- This layer owns session boundaries.
- Failures never propagate: a failed load reads as "no progress", a failed save is lost.
"""

import logging
from datetime import datetime, timedelta
from typing import Sequence
from uuid import UUID

from wordhive.crud import CreateData, DeleteData, ReadData, UpdateData
from wordhive.db import Session
from wordhive.create_engine import engine
from wordhive.models.puzzle_models import SavedProgress
from wordhive.models.schema_models import ProgressSchema


async def create_tables() -> None:
    await CreateData.create_table(engine)


async def load_progress(player_id: UUID, date_seed: str, strategy: str) -> SavedProgress | None:
    async with Session() as session:
        progress = await ReadData.read_progress_data(player_id, date_seed, strategy, session)
    if progress is None:
        return None
    return SavedProgress(
        date_seed=progress.date_seed,
        strategy=progress.strategy,
        found_words=list(progress.found_words),
        score=progress.score,
    )


async def save_progress(
    player_id: UUID,
    date_seed: str,
    strategy: str,
    found_words: Sequence[str],
    score: int,
) -> bool:
    progress = ProgressSchema(
        player_id=player_id,
        date_seed=date_seed,
        strategy=strategy,
        found_words=list(found_words),
        score=score,
    )
    async with Session() as session:
        saved = await UpdateData.upsert_progress_data(progress, session)
    if not saved:
        logging.warning(f"Progress of {player_id} for {date_seed}/{strategy} was not saved")
    return saved


async def delete_progress(player_id: UUID, date_seed: str, strategy: str) -> bool:
    async with Session() as session:
        return await DeleteData.delete_progress_data(player_id, date_seed, strategy, session)


async def purge_expired_progress(retention_days: int) -> int:
    expired_before = datetime.now() - timedelta(days=retention_days)
    async with Session() as session:
        deleted = await DeleteData.delete_expired_progress_data(expired_before, session)
    logging.info(f"Purged {deleted} progress rows not updated since {expired_before:%Y-%m-%d}")
    return deleted
