"""
Expected-elimination ("entropy") score of a prospective guess.

For every word s that could still be the solution, simulate the feedback
the guess would get if s were the answer, then count how many words of
the guess space that feedback would rule out. The score is the average of
that count over all s. Higher means the guess shrinks the space more no
matter which solution turns out to be true.

Despite the name this is not Shannon entropy; it is kept as an average
number of eliminated candidates.

Acceleration:
  - Solutions that produce the same feedback eliminate the same words, so
    solutions are bucketed by feedback first and each distinct feedback is
    checked against the guess space once (at most 3^5 = 243 buckets).
  - Scoring many guesses is embarrassingly parallel; `score_all` can farm
    chunks of guesses out to a process pool.
"""

from __future__ import annotations

import logging
from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from typing import Dict, Iterable, List, Sequence, Tuple

from .constraints import constraints_for
from .feedback import states
from .validation import normalize_word

log = logging.getLogger(__name__)


def _score(guess: str, guess_space: Sequence[str], solution_space: Sequence[str]) -> float:
    n = len(solution_space)
    if n == 0:
        return 0.0

    buckets = Counter(states(s, guess) for s in solution_space)

    total = len(guess_space)
    eliminated = 0
    for result, count in buckets.items():
        c = constraints_for(guess, result)
        kept = sum(1 for w in guess_space if c.allows(w))
        eliminated += count * (total - kept)
    return eliminated / n


def score(guess: str, guess_space: Iterable[str], solution_space: Iterable[str]) -> float:
    """
    Average number of `guess_space` words eliminated by playing `guess`,
    taken over every word in `solution_space` as the hypothetical answer.

    An empty solution space scores 0.0.
    """
    return _score(normalize_word(guess),
                  [normalize_word(w) for w in guess_space],
                  [normalize_word(w) for w in solution_space])


def _score_chunk(args: Tuple[List[str], List[str], List[str]]) -> List[Tuple[str, float]]:
    guesses, guess_space, solution_space = args
    return [(g, _score(g, guess_space, solution_space)) for g in guesses]


def _chunks(items: List[str], k: int) -> List[List[str]]:
    size = max(1, -(-len(items) // k))  # ceil division
    return [items[i:i + size] for i in range(0, len(items), size)]


def score_all(
        guesses: Iterable[str],
        guess_space: Iterable[str],
        solution_space: Iterable[str],
        *,
        workers: int = 1,
) -> Dict[str, float]:
    """
    Score every prospective guess. With workers > 1 the guesses are split
    into chunks scored in separate processes; results are identical to the
    serial path.
    """
    pool = sorted({normalize_word(g) for g in guesses})
    gspace = sorted(normalize_word(w) for w in guess_space)
    sspace = sorted(normalize_word(w) for w in solution_space)
    log.debug("scoring %d guesses against %d words / %d solutions (workers=%d)",
              len(pool), len(gspace), len(sspace), workers)

    if workers <= 1 or len(pool) < 2:
        return dict(_score_chunk((pool, gspace, sspace)))

    out: Dict[str, float] = {}
    jobs = [(chunk, gspace, sspace) for chunk in _chunks(pool, workers * 4)]
    with ProcessPoolExecutor(max_workers=workers) as ex:
        for part in ex.map(_score_chunk, jobs):
            out.update(part)
    return out
