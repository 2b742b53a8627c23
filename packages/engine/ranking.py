"""
Ordering candidate words.

Two modes:
  - rank            : descending by the static frequency score
  - rank_by_entropy : descending by expected-elimination score

Input sets have no meaningful order, so both modes sort alphabetically
first; the stable sort on score then makes ties come out the same way on
every run.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Tuple

from . import entropy
from .errors import MissingFrequencyError


def frequency_of(word: str, frequency_table: Mapping[str, float]) -> float:
    """Look up `word`; a missing entry means the table is stale or mismatched."""
    try:
        return frequency_table[word]
    except KeyError:
        raise MissingFrequencyError(f"no frequency entry for {word!r}") from None


def rank(candidates: Iterable[str], frequency_table: Mapping[str, float]) -> List[str]:
    """Return `candidates` ordered most frequent first."""
    words = sorted(candidates)
    keyed = [(frequency_of(w, frequency_table), w) for w in words]
    keyed.sort(key=lambda t: t[0], reverse=True)
    return [w for _, w in keyed]


def rank_by_entropy(
        guesses: Iterable[str],
        guess_space: Iterable[str],
        solution_space: Iterable[str],
        *,
        workers: int = 1,
        limit: Optional[int] = None,
) -> List[Tuple[str, float]]:
    """
    Score each prospective guess with entropy.score_all and return
    (word, score) pairs, best first, optionally truncated to `limit`.
    """
    scores = entropy.score_all(guesses, guess_space, solution_space, workers=workers)
    ranked = sorted(scores.items(), key=lambda kv: (-kv[1], kv[0]))
    return ranked if limit is None else ranked[:limit]
