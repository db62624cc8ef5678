import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from wordhive.models.schema_models import ProgressSchema
from wordhive.models.schemas import Base, Progress


class CreateData:
    @staticmethod
    async def create_table(engine: AsyncEngine) -> None:
        """Create tables if not exists"""
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except IntegrityError as e:
            logging.warning(f"Table already exists or other integrity error: {e}")


class ReadData:
    @staticmethod
    async def read_progress_data(
        player_id: UUID, date_seed: str, strategy: str, session: AsyncSession
    ) -> ProgressSchema | None:
        """Read the saved progress of a player for one puzzle

        Args:
            player_id (UUID): To identify the player
            date_seed (str): Date of the puzzle
            strategy (str): Strategy that generated the puzzle

        Returns:
            ProgressSchema | None: Saved progress, None if nothing is saved or reading failed
        """
        async with session:
            try:
                stmt = select(Progress).where(
                    Progress.player_id == player_id,
                    Progress.date_seed == date_seed,
                    Progress.strategy == strategy,
                )
                result = await session.execute(stmt)
                result = result.scalars().first()

                if result is None:
                    return None

                return ProgressSchema.model_validate(result)
            except Exception as e:
                logging.error(f"Failed to read progress data: {e}")
                return None


class UpdateData:
    @staticmethod
    async def write_progress_data(progress: ProgressSchema, session: AsyncSession) -> None:
        """Insert the progress row, or overwrite it when it exists"""
        stmt = select(Progress).where(
            Progress.player_id == progress.player_id,
            Progress.date_seed == progress.date_seed,
            Progress.strategy == progress.strategy,
        )
        result = await session.execute(stmt)
        result = result.scalars().first()

        if result is None:
            session.add(
                Progress(
                    player_id=progress.player_id,
                    date_seed=progress.date_seed,
                    strategy=progress.strategy,
                    found_words=list(progress.found_words),
                    score=progress.score,
                )
            )
        else:
            result.found_words = list(progress.found_words)
            result.score = progress.score
        await session.commit()

    @staticmethod
    async def upsert_progress_data(progress: ProgressSchema, session: AsyncSession) -> bool:
        """Insert or overwrite the progress row of (player, date, strategy)

        A concurrent insert of the same row is retried once as an update.

        Args:
            progress (ProgressSchema): Found words and score to store

        Returns:
            bool: True if the progress was stored
        """
        async with session:
            try:
                try:
                    await UpdateData.write_progress_data(progress, session)
                except IntegrityError:
                    await session.rollback()
                    logging.info(f"Progress of {progress.player_id} was inserted concurrently; updating it")
                    await UpdateData.write_progress_data(progress, session)
                return True
            except Exception as e:
                logging.error(f"Failed to save progress data: {e}")
                return False


class DeleteData:
    @staticmethod
    async def delete_progress_data(
        player_id: UUID, date_seed: str, strategy: str, session: AsyncSession
    ) -> bool:
        async with session:
            try:
                stmt = delete(Progress).where(
                    Progress.player_id == player_id,
                    Progress.date_seed == date_seed,
                    Progress.strategy == strategy,
                )
                await session.execute(stmt)
                await session.commit()
                return True
            except Exception as e:
                logging.error(f"Failed to delete progress data: {e}")
                return False

    @staticmethod
    async def delete_expired_progress_data(expired_before: datetime, session: AsyncSession) -> int:
        """Delete progress that has not been updated since ``expired_before``

        Returns:
            int: Number of deleted rows, 0 if the deletion failed
        """
        async with session:
            try:
                stmt = delete(Progress).where(Progress.updated_at < expired_before)
                result = await session.execute(stmt)
                await session.commit()
                return result.rowcount or 0
            except Exception as e:
                logging.error(f"Failed to delete expired progress data: {e}")
                return 0
