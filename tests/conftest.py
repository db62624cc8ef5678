import os
import tempfile

# The engine is created at import time, so point it at a throwaway database first.
_db_dir = tempfile.mkdtemp(prefix="wordhive-test-")
os.environ["WORDHIVE_DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.sqlite3')}"
os.environ["WORDHIVE_STRATEGY"] = "curated_sets"

import pytest  # noqa: E402

SAMPLE_LETTERS = ("a", "e", "i", "n", "r", "s", "t")
SAMPLE_CENTER = "a"
SAMPLE_WORDS = ["rain", "star", "stair", "train", "trains", "tears", "attires", "nastier", "retains", "saint"]
SAMPLE_FREQUENCY = {
    "star": 5,
    "train": 8,
    "rain": 10,
    "tears": 20,
    "trains": 30,
    "stair": 40,
    "saint": 60,
    "attires": 90,
    "retains": 150,
    "nastier": 200,
}


def sequence_rng(values):
    """A fake RNG replaying fixed draws."""
    draws = iter(values)
    return lambda: next(draws)


@pytest.fixture
def sample_puzzle():
    from wordhive.domain.puzzle_builder import build_puzzle

    return build_puzzle(SAMPLE_LETTERS, SAMPLE_CENTER, SAMPLE_WORDS, SAMPLE_FREQUENCY)


@pytest.fixture(scope="session")
def word_data():
    from wordhive.word_data import DEFAULT_DATA_DIR, load_word_data

    return load_word_data(DEFAULT_DATA_DIR)


@pytest.fixture(scope="session")
def historic_puzzles():
    from wordhive.word_data import DEFAULT_DATA_DIR, load_historic_puzzles

    return load_historic_puzzles(DEFAULT_DATA_DIR)


@pytest.fixture(scope="session")
def client():
    from fastapi.testclient import TestClient

    from wordhive.main import app

    with TestClient(app) as test_client:
        yield test_client
