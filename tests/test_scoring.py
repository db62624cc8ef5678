import pytest

from conftest import SAMPLE_FREQUENCY, SAMPLE_LETTERS, SAMPLE_WORDS
from wordhive.domain.scoring import (
    RarityMode,
    base_score,
    calculate_word_score,
    detect_rarity_mode,
    feedback_message,
    is_pangram,
    is_rare_word,
    position_rarity,
    rarity_table,
)
from wordhive.models.puzzle_models import FeedbackKind, WordScore


@pytest.mark.parametrize("word, expected", [("rain", 1), ("stair", 5), ("trains", 6), ("attires", 7)])
def test_base_score(word, expected):
    assert base_score(word) == expected


def test_pangram_needs_every_letter():
    assert is_pangram("nastier", SAMPLE_LETTERS)
    assert is_pangram("retains", SAMPLE_LETTERS)
    # attires has no n
    assert not is_pangram("attires", SAMPLE_LETTERS)


def test_pangram_bonus_in_total():
    score = calculate_word_score("nastier", SAMPLE_LETTERS, SAMPLE_WORDS, SAMPLE_FREQUENCY)
    assert score.is_pangram
    assert score.pangram_bonus == 10
    assert score.total_score == score.base_score + score.rarity_bonus + score.pangram_bonus


def test_frequency_mode_deciles():
    table = rarity_table(SAMPLE_WORDS, SAMPLE_FREQUENCY)
    # ten words sorted by rank: position p gets decile p + 1
    assert table["star"] == (1, 0)
    assert table["train"] == (2, 1)
    assert table["stair"] == (6, 5)
    assert table["nastier"] == (10, 9)


def test_unknown_words_rank_as_rarest():
    frequency = {"star": 5, "train": 8, "rain": 10}
    table = rarity_table(["stair", "star", "train", "rain"], frequency)
    assert table["stair"] == (8, 7)
    assert table["star"] == (1, 0)


def test_decile_monotonic_in_frequency():
    table = rarity_table(SAMPLE_WORDS, SAMPLE_FREQUENCY)
    for first in SAMPLE_WORDS:
        for second in SAMPLE_WORDS:
            if SAMPLE_FREQUENCY[first] < SAMPLE_FREQUENCY[second]:
                assert table[first][0] <= table[second][0]


def test_detect_rarity_mode_threshold():
    words = [f"word{i}" for i in range(10)]
    half_known = {f"word{i}": i + 1 for i in range(5)}
    less_known = {f"word{i}": i + 1 for i in range(4)}
    assert detect_rarity_mode(words, half_known) == RarityMode.frequency
    assert detect_rarity_mode(words, less_known) == RarityMode.position


def test_position_mode_groups():
    words = [f"w{i}" for i in range(10)]
    table = position_rarity(words)
    bonuses = [table[word][1] for word in words]
    assert bonuses == [10, 10, 7, 7, 5, 5, 3, 3, 1, 1]
    assert all(decile == bonus for decile, bonus in table.values())


def test_position_mode_uneven_groups():
    words = [f"w{i}" for i in range(12)]
    bonuses = [position_rarity(words)[word][1] for word in words]
    # groups of ceil(12 / 5) = 3, the last group is empty
    assert bonuses == [10, 10, 10, 7, 7, 7, 5, 5, 5, 3, 3, 3]


def test_auto_detection_uses_position_for_unranked_lists():
    words = ["lancet", "claret", "rental", "central"]
    table = rarity_table(words, {"rental": 1})
    assert table["lancet"] == (10, 10)
    assert table["central"] == (3, 3)


def test_explicit_mode_overrides_detection():
    table = rarity_table(SAMPLE_WORDS, SAMPLE_FREQUENCY, RarityMode.position)
    assert table["rain"] == (10, 10)


def test_word_missing_from_list_gets_neutral_rarity():
    score = calculate_word_score("stairs", SAMPLE_LETTERS, SAMPLE_WORDS, SAMPLE_FREQUENCY)
    assert score.rarity_decile == 5
    assert score.rarity_bonus == 5
    assert score.total_score == 6 + 5


def test_empty_list_has_no_rarity():
    assert rarity_table([], SAMPLE_FREQUENCY) == {}


@pytest.mark.parametrize("decile, rare", [(7, False), (8, True), (10, True)])
def test_is_rare_word(decile, rare):
    assert is_rare_word(decile) is rare


def make_score(decile, pangram=False, total=5):
    return WordScore(
        word="word",
        base_score=1,
        rarity_bonus=decile - 1,
        is_pangram=pangram,
        pangram_bonus=10 if pangram else 0,
        total_score=total,
        rarity_decile=decile,
    )


def test_feedback_pangram_overrides_rare():
    feedback = feedback_message(make_score(10, pangram=True))
    assert feedback.kind == FeedbackKind.pangram
    assert feedback.text == "PANGRAM!"


def test_feedback_rare_by_decile():
    assert feedback_message(make_score(10)).text == "Amazing!"
    assert feedback_message(make_score(9)).text == "Excellent!"
    assert feedback_message(make_score(8)).kind == FeedbackKind.rare


def test_feedback_generic_shows_points():
    feedback = feedback_message(make_score(3, total=7))
    assert feedback.kind == FeedbackKind.success
    assert feedback.text == "+7 points!"
