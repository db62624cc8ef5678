import logging
from contextlib import asynccontextmanager

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from wordhive import load_settings
from wordhive.routers import puzzle, session
from wordhive.services import progress_db
from wordhive.word_data import load_historic_puzzles, load_word_data

scheduler = AsyncIOScheduler()
logging.basicConfig(level=load_settings.log_level)
logging.getLogger("aiosqlite").setLevel(logging.WARNING)
logging.getLogger("apscheduler").setLevel(logging.WARNING)


async def purge_expired_progress() -> None:
    await progress_db.purge_expired_progress(load_settings.progress_retention_days)


@asynccontextmanager
async def lifespan(app):
    """Load the word data, create the progress table and start the purge job.
    This function is called to start the server.
    """
    load_word_data(load_settings.data_dir)
    load_historic_puzzles(load_settings.data_dir)
    await progress_db.create_tables()
    logging.info(f"Active strategy: {puzzle.active_strategy.value}")

    # Saved progress older than the retention window is deleted once a day
    scheduler.add_job(
        purge_expired_progress, "interval", hours=24, id="purge_expired_progress", replace_existing=True
    )
    scheduler.start()
    try:
        yield
    finally:
        scheduler.shutdown()
        logging.info("Stop Server")


app = FastAPI(lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=load_settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(puzzle.puzzle_router)
app.include_router(session.session_router)
