"""Date seeds and the seeded random generator behind daily puzzles.

The same seed string always yields the same sequence of floats, on every
process and platform, so every player sees the same puzzle for a date.
"""

import random
import re
from datetime import date, datetime
from typing import Callable

DATE_SEED_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

Rng = Callable[[], float]


def make_rng(seed: str) -> Rng:
    """Return a generator of floats in [0, 1) seeded only by ``seed``.

    Args:
        seed (str): Seed string, normally a date seed such as "2025-11-17"

    Returns:
        Rng: Zero-argument callable producing the seeded sequence
    """
    generator = random.Random(seed)
    return generator.random


def parse_date_seed(value: str) -> date:
    """Validate a ``YYYY-MM-DD`` date seed.

    Raises:
        ValueError: The value is not a calendar date in ``YYYY-MM-DD`` form
    """
    if not DATE_SEED_PATTERN.match(value):
        raise ValueError(f"Date seed must look like YYYY-MM-DD; got {value!r}")
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_date_seed(now: datetime | None = None) -> str:
    """Today's date seed in local time."""
    now = now or datetime.now()
    return now.strftime("%Y-%m-%d")


def pick_index(rng: Rng, length: int) -> int:
    """Scale one draw from ``rng`` to an index in ``range(length)``."""
    return int(rng() * length)
