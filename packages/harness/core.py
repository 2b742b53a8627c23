"""
Self-play harness.

- run_case:  play one game against a known solution with a given solver.
- run_batch: play many games in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

The candidate sets are narrowed incrementally, one record per turn; the
engine guarantees that gives the same sets as refiltering the whole
history each turn.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Optional

from packages.datasets.library import Library
from packages.engine import FeedbackRecord, evaluate, filter_candidates

log = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        solver,
        solution: str,
        *,
        library: Library,
        max_turns: int = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Returns:
        dict with keys:
            solution (str), success (bool), guesses (int), time_ms (float),
            history (list[FeedbackRecord])
    """
    _assert_wordle_turns(max_turns)
    solver.reset(library=library)

    history: List[FeedbackRecord] = []
    words = set(library.words)
    solutions = set(library.solutions)
    success = False

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        state = {
            "turn": turn,
            "history": list(history),
            "words": words,
            "solutions": solutions,
        }
        guess = solver.next_guess(state)
        record = evaluate(solution, guess)
        history.append(record)

        if record.solved:
            success = True
            break

        words = filter_candidates(words, [record])
        solutions = filter_candidates(solutions, [record])

    dt = (time.perf_counter() - t0) * 1000.0
    log.debug("%s: %s in %d (%s)", solver.id, solution,
              len(history), " ".join(r.guess for r in history))
    return {
        "solution": solution,
        "success": success,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
    }


def run_batch(
        solver,
        solutions: Iterable[str],
        *,
        library: Library,
        sample: Optional[int] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    solutions are used to speed up quick experiments.
    """
    pool = list(solutions)
    if sample is not None:
        pool = pool[:sample]
    return [run_case(solver, s, library=library) for s in pool]
