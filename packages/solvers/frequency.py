"""
Frequency solver.

Guess the most popular word that could still be the answer. Cheap, and a
useful baseline for the entropy solver: it never probes with a word that
is already ruled out, so every guess can win.
"""

from __future__ import annotations

from packages.engine import rank
from .base import BaseSolver, register


@register
class FrequencySolver(BaseSolver):
    id = "frequency"
    name = "Most Frequent Candidate"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        # Prefer real answers; fall back to any consistent word.
        pool = state["solutions"] or state["words"]
        if not pool:
            raise ValueError("no consistent words left; feedback history is contradictory")
        return rank(pool, self.library.frequencies)[0]
