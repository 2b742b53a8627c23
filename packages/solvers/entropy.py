"""
Entropy solver (expected elimination).

For each candidate guess g, average over the surviving solutions how many
surviving words g's feedback would eliminate; pick the g with the highest
average. Ties go to the more frequent word.

Acceleration:
  - When few solutions remain, just guess the most frequent one (the
    elimination score can't beat a possible win).
  - When the surviving word set is large, only the POOL_CAP most frequent
    surviving words are scored as guesses. Every surviving word still
    counts towards the guess space being shrunk.
"""

from __future__ import annotations

from typing import List

from packages.datasets.library import SUGGESTION_POOL_CAP
from packages.engine import rank, rank_by_entropy
from .base import BaseSolver, register


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Expected Elimination"
    version = "1.0.0"

    # With this many solutions or fewer, guess a likely answer outright.
    DIRECT_GUESS_LIMIT = 2

    # Cap on how many guesses get scored per turn
    POOL_CAP = SUGGESTION_POOL_CAP

    def next_guess(self, state: dict) -> str:
        words = state["words"]
        solutions = state["solutions"]
        freq = self.library.frequencies

        if not words and not solutions:
            raise ValueError("no consistent words left; feedback history is contradictory")
        if len(solutions) <= self.DIRECT_GUESS_LIMIT:
            return rank(solutions or words, freq)[0]

        pool: List[str] = rank(words, freq)[: self.POOL_CAP]
        scored = rank_by_entropy(pool, words, solutions, workers=self.workers)

        best = scored[0][1]
        if best == 0:
            # Nothing splits the remaining solutions; take a shot at one.
            return rank(solutions, freq)[0]
        tied = [w for w, s in scored if s == best]
        return rank([w for w in tied if w in solutions] or tied, freq)[0]
