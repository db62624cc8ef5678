import logging

import pytest

from conftest import sequence_rng
from wordhive.domain.seeding import make_rng
from wordhive.domain.strategies import (
    CURATED_LETTER_SETS,
    DEFAULT_STRATEGY,
    STRATEGY_REGISTRY,
    CuratedRandomStrategy,
    CuratedSetsStrategy,
    HistoricStrategy,
    StrategyName,
    create_strategy,
    resolve_strategy_name,
)
from wordhive.models.puzzle_models import VOWELS, HistoricPuzzle, LetterSet

ARCHIVE = (
    HistoricPuzzle(
        date="2024-12-17",
        letters=tuple("lacenrt"),
        center="l",
        words=("lancet", "claret", "central", "lane"),
    ),
    HistoricPuzzle(
        date="2024-12-18",
        letters=tuple("oginpst"),
        center="o",
        words=("ingot", "posting", "spot"),
    ),
)


def test_curated_random_letter_set_is_well_formed():
    strategy = CuratedRandomStrategy([], {})
    for day in range(1, 29):
        letter_set = strategy.generate_letter_set(make_rng(f"2025-02-{day:02d}"))
        assert len(set(letter_set.letters)) == 7
        assert letter_set.center in letter_set.letters
        assert any(letter in VOWELS for letter in letter_set.letters)


def test_curated_random_is_deterministic():
    strategy = CuratedRandomStrategy([], {})
    first = strategy.generate_letter_set(make_rng("2025-11-17"))
    second = strategy.generate_letter_set(make_rng("2025-11-17"))
    assert first == second


def test_curated_random_repairs_missing_vowel():
    draws = [1.5 / 26, 1.5 / 25, 1.5 / 24, 2.5 / 23, 2.5 / 22, 2.5 / 21, 3.5 / 20]  # b c d f g h j
    draws += [0.5, 0.1]  # slot 3 becomes "a"
    draws += [0.9, 0.0]  # vowel center
    letter_set = CuratedRandomStrategy([], {}).generate_letter_set(sequence_rng(draws))
    assert letter_set.letters == ("b", "c", "d", "a", "g", "h", "j")
    assert letter_set.center == "a"


def test_curated_random_center_without_vowel_bias():
    draws = [0.0] * 7  # a b c d e f g
    draws += [0.2, 0.99]  # no vowel preference, last letter
    letter_set = CuratedRandomStrategy([], {}).generate_letter_set(sequence_rng(draws))
    assert letter_set.letters == tuple("abcdefg")
    assert letter_set.center == "g"


def test_curated_sets_picks_table_entry():
    strategy = CuratedSetsStrategy([], {})
    letter_set = strategy.generate_letter_set(sequence_rng([0.0]))
    letters, center = CURATED_LETTER_SETS[0]
    assert letter_set == LetterSet(letters=tuple(letters), center=center)

    last = strategy.generate_letter_set(sequence_rng([0.999]))
    assert last.letters == tuple(CURATED_LETTER_SETS[-1][0])


def test_curated_sets_are_valid_letter_sets():
    for letters, center in CURATED_LETTER_SETS:
        LetterSet(letters=tuple(letters), center=center)


def test_curated_sets_find_words(word_data):
    strategy = CuratedSetsStrategy(word_data.words, word_data.frequency)
    for letters, center in CURATED_LETTER_SETS:
        words = strategy.find_valid_words(tuple(letters), center)
        assert len(words) >= 8
        assert len(words) == len(set(words))


def test_historic_returns_archived_words_verbatim():
    strategy = HistoricStrategy(ARCHIVE)
    letter_set = strategy.generate_letter_set(sequence_rng([0.6]))
    assert letter_set.center == "o"
    # letter order does not matter for the lookup
    assert strategy.find_valid_words(tuple("ptsnigo"), "o") == ["ingot", "posting", "spot"]


def test_historic_miss_returns_empty_list(caplog):
    strategy = HistoricStrategy(ARCHIVE)
    with caplog.at_level(logging.WARNING):
        assert strategy.find_valid_words(tuple("lacenrt"), "a") == []
    assert "No historic puzzle found" in caplog.text


def test_historic_needs_an_archive():
    with pytest.raises(ValueError):
        HistoricStrategy(())


def test_packaged_archive_is_consistent(historic_puzzles):
    assert historic_puzzles
    for puzzle in historic_puzzles:
        assert puzzle.center in puzzle.letters
        for word in puzzle.words:
            assert len(word) >= 4
            assert puzzle.center in word
            assert set(word) <= set(puzzle.letters)


def test_resolve_strategy_name():
    assert resolve_strategy_name("historic") == StrategyName.historic
    assert resolve_strategy_name(" Curated_Sets ") == StrategyName.curated_sets
    assert resolve_strategy_name(None) == DEFAULT_STRATEGY


def test_unknown_strategy_falls_back_to_default(caplog):
    with caplog.at_level(logging.WARNING):
        assert resolve_strategy_name("daily-special") == DEFAULT_STRATEGY
    assert "falling back" in caplog.text


def test_create_strategy_uses_registry_names():
    assert set(STRATEGY_REGISTRY) == set(StrategyName)
    assert isinstance(create_strategy("historic", [], {}, ARCHIVE), HistoricStrategy)
    assert isinstance(create_strategy(StrategyName.curated_sets, [], {}), CuratedSetsStrategy)
    assert isinstance(create_strategy("nope", [], {}), CuratedRandomStrategy)
