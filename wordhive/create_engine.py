import pathlib

from sqlalchemy.ext.asyncio import create_async_engine

from wordhive.load_settings import database_url, db_name, host, password, port, user

file_path = pathlib.Path(__file__).parent / "wordhive.sqlite3"
SQLITE_DATABASE_URL = f"sqlite+aiosqlite:///{file_path}"


def resolve_database_url() -> str:
    """Explicit URL first, then PostgreSQL when DB_HOST is set, else local SQLite."""
    if database_url:
        return database_url
    if host:
        return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{db_name}"
    return SQLITE_DATABASE_URL


DATABASE_URL = resolve_database_url()

if DATABASE_URL.startswith("postgresql"):
    engine = create_async_engine(DATABASE_URL, pool_size=20, max_overflow=20)
else:
    engine = create_async_engine(url=DATABASE_URL, echo=False)
