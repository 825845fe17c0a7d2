from __future__ import annotations

from enum import Enum
from typing import Iterable


class Ranking(str, Enum):
    LEXICOGRAPHIC = "alpha"
    SCORE = "score"


def score_word(word: str) -> int:
    """Boggle points for a word: 3 -> 1, 4..6 -> len - 3, 7 -> 5, 8+ -> 11."""
    n = len(word)
    if n < 3:
        return 0
    if n == 3:
        return 1
    if n <= 6:
        return n - 3
    if n == 7:
        return 5
    return 11


def total_score(words: Iterable[str]) -> int:
    return sum(score_word(w) for w in words)


def rank_words(words: Iterable[str], ranking: Ranking | str = Ranking.LEXICOGRAPHIC) -> list[str]:
    ranking = Ranking(ranking)
    if ranking is Ranking.SCORE:
        return sorted(words, key=lambda w: (-score_word(w), w))
    return sorted(words)


def aggregate(per_cell_results: Iterable[Iterable[str]], ranking: Ranking | str = Ranking.LEXICOGRAPHIC) -> list[str]:
    """Union the words found from each starting cell and order them."""
    found: set[str] = set()
    for words in per_cell_results:
        found.update(words)
    return rank_words(found, ranking)
