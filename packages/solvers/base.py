from __future__ import annotations

from typing import Dict, Type

from packages.datasets.library import Library

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A solver picks the next guess from the current game state:

        state = {
            "turn":      1-based turn number,
            "history":   list of FeedbackRecord so far,
            "words":     set of guess-vocabulary words still consistent,
            "solutions": set of solution-vocabulary words still consistent,
        }
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    # Processes used by solvers that score guesses in parallel.
    workers = 1

    def __init__(self):
        self.library: Library | None = None

    def reset(self, *, library: Library) -> None:
        self.library = library

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
