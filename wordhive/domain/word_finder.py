"""Derive the playable words of a puzzle from the dictionary.

Rule of thumb:
- A playable word has at least 4 letters, uses the center letter and uses
  nothing but the puzzle letters (repeats allowed).
- Curated puzzles keep the 100 most common matches and then pull in their
  regular inflections right after each base word, so that inflected forms
  land next to their base when rarity is ranked.
"""

from typing import Dict, Iterable, List, Sequence

MIN_WORD_LENGTH = 4
CURATED_WORD_LIMIT = 100
UNKNOWN_RANK = 999999

INFLECTION_SUFFIXES = ("s", "es", "ed", "ing", "er", "est", "ly")


def is_playable(word: str, letters: Iterable[str], center: str) -> bool:
    if len(word) < MIN_WORD_LENGTH:
        return False
    if center not in word:
        return False
    return set(word).issubset(letters)


def find_matching_words(dictionary: Iterable[str], letters: Sequence[str], center: str) -> List[str]:
    """Return every dictionary word playable with the letters, in dictionary order."""
    letter_set = set(letters)
    return [word for word in dictionary if is_playable(word, letter_set, center)]


def most_common(words: Sequence[str], frequency: Dict[str, int], limit: int = CURATED_WORD_LIMIT) -> List[str]:
    """Keep the ``limit`` most common words.

    Unknown words sort as rarest; ties keep their incoming order.
    """
    ranked = sorted(words, key=lambda word: frequency.get(word, UNKNOWN_RANK))
    return ranked[:limit]


def inflections(word: str) -> List[str]:
    """Candidate regular inflections of ``word``, in the order they are tried."""
    variants = [word + suffix for suffix in INFLECTION_SUFFIXES]
    if word.endswith("e"):
        variants.append(word[:-1] + "ed")
        variants.append(word[:-1] + "ing")
    if word.endswith("y") and len(word) > 3:
        variants.append(word[:-1] + "ies")
    return variants


def expand_with_inflections(base_words: Sequence[str], all_matches: Iterable[str]) -> List[str]:
    """Place each base word's inflections found in ``all_matches`` right after it.

    A word is emitted once, at its first position.
    """
    available = set(all_matches)
    expanded: List[str] = []
    emitted = set()
    for word in base_words:
        for candidate in [word] + [v for v in inflections(word) if v in available]:
            if candidate in emitted:
                continue
            emitted.add(candidate)
            expanded.append(candidate)
    return expanded


def find_curated_words(
    dictionary: Iterable[str],
    frequency: Dict[str, int],
    letters: Sequence[str],
    center: str,
    limit: int = CURATED_WORD_LIMIT,
) -> List[str]:
    """Playable words for the curated strategies, most common first."""
    matches = find_matching_words(dictionary, letters, center)
    return expand_with_inflections(most_common(matches, frequency, limit), matches)
