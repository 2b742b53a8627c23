"""
Core value types: the per-letter feedback state and the feedback record.

Two notations are supported for a row of feedback:
  - wire names, as used by the HTTP service: "Missing", "WrongPlace", "Correct"
  - compact pattern strings, as used by the CLI and the harness CSVs:
      'G' : Correct     (right letter, right position)
      'Y' : WrongPlace  (letter is in the solution, elsewhere)
      '-' : Missing     (absent, or every copy already accounted for)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from .errors import MalformedWordError

WORD_LENGTH = 5


class GuessState(Enum):
    MISSING = "Missing"
    WRONG_PLACE = "WrongPlace"
    CORRECT = "Correct"

    @property
    def symbol(self) -> str:
        return _STATE_TO_SYMBOL[self]

    @classmethod
    def parse(cls, value) -> "GuessState":
        """Accept a GuessState, a wire name ("WrongPlace") or a pattern symbol ('Y')."""
        if isinstance(value, GuessState):
            return value
        if isinstance(value, str):
            if value in _SYMBOL_TO_STATE:
                return _SYMBOL_TO_STATE[value]
            try:
                return cls(value)
            except ValueError:
                pass
        raise MalformedWordError(f"unknown feedback state: {value!r}")


_STATE_TO_SYMBOL = {
    GuessState.MISSING: "-",
    GuessState.WRONG_PLACE: "Y",
    GuessState.CORRECT: "G",
}

# Several spellings of "gray" show up in hand-typed patterns.
_SYMBOL_TO_STATE = {
    "G": GuessState.CORRECT, "g": GuessState.CORRECT,
    "Y": GuessState.WRONG_PLACE, "y": GuessState.WRONG_PLACE,
    "-": GuessState.MISSING, ".": GuessState.MISSING,
    "_": GuessState.MISSING, "x": GuessState.MISSING, "X": GuessState.MISSING,
}


@dataclass(frozen=True)
class FeedbackRecord:
    """
    The feedback one guess received: five states paired with the guess itself.

    The states mean nothing without the guess, so the two always travel
    together. Records are immutable and hashable, which lets the constraint
    derivation be cached per record.
    """
    guess: str
    result: Tuple[GuessState, ...]

    def __post_init__(self):
        guess = self.guess.strip().lower() if isinstance(self.guess, str) else self.guess
        if not (isinstance(guess, str) and len(guess) == WORD_LENGTH
                and guess.isascii() and guess.isalpha()):
            raise MalformedWordError(f"guess must be {WORD_LENGTH} letters a-z, got {self.guess!r}")
        result = tuple(GuessState.parse(s) for s in self.result)
        if len(result) != WORD_LENGTH:
            raise MalformedWordError(
                f"result must have {WORD_LENGTH} states, got {len(result)}")
        object.__setattr__(self, "guess", guess)
        object.__setattr__(self, "result", result)

    @classmethod
    def from_pattern(cls, guess: str, pattern: str) -> "FeedbackRecord":
        """FeedbackRecord.from_pattern("crane", "-Y--G")"""
        return cls(guess, tuple(pattern.strip()))

    @classmethod
    def from_json(cls, obj) -> "FeedbackRecord":
        """Build from the wire shape {"guess": "enter", "result": ["Missing", ...]}."""
        if not isinstance(obj, dict) or "guess" not in obj or "result" not in obj:
            raise MalformedWordError(f"expected {{'guess', 'result'}} object, got {obj!r}")
        result = obj["result"]
        if not isinstance(result, (list, tuple)):
            raise MalformedWordError(f"result must be a list, got {result!r}")
        return cls(obj["guess"], tuple(result))

    @property
    def pattern(self) -> str:
        return "".join(s.symbol for s in self.result)

    @property
    def solved(self) -> bool:
        return all(s is GuessState.CORRECT for s in self.result)

    def to_json(self) -> dict:
        return {"guess": self.guess, "result": [s.value for s in self.result]}


def parse_history(items: Iterable) -> list:
    """Parse a JSON list of wire records into FeedbackRecords (order preserved)."""
    if not isinstance(items, (list, tuple)):
        raise MalformedWordError(f"expected a list of feedback records, got {type(items).__name__}")
    return [FeedbackRecord.from_json(obj) for obj in items]
