from datetime import date, datetime

import pytest

from wordhive.domain.seeding import make_rng, parse_date_seed, pick_index, today_date_seed


def test_same_seed_gives_same_sequence():
    first = make_rng("2025-11-17")
    second = make_rng("2025-11-17")
    assert [first() for _ in range(20)] == [second() for _ in range(20)]


def test_different_seeds_diverge():
    first = make_rng("2025-11-17")
    second = make_rng("2025-11-18")
    assert [first() for _ in range(5)] != [second() for _ in range(5)]


def test_draws_are_in_unit_interval():
    rng = make_rng("2025-01-01")
    assert all(0.0 <= rng() < 1.0 for _ in range(1000))


def test_pick_index_stays_in_range():
    rng = make_rng("range")
    assert all(0 <= pick_index(rng, 7) < 7 for _ in range(500))


def test_today_date_seed_format():
    assert today_date_seed(datetime(2025, 3, 4, 23, 59)) == "2025-03-04"


def test_parse_date_seed():
    assert parse_date_seed("2024-12-17") == date(2024, 12, 17)


@pytest.mark.parametrize("value", ["2024-13-01", "20241217", "2024-1-7", "yesterday"])
def test_parse_date_seed_rejects_malformed(value):
    with pytest.raises(ValueError):
        parse_date_seed(value)
