"""
Candidate filtering given game history.

A feedback record is turned into three kinds of constraint:
  - exact letters   : Correct positions pin the letter at that position
  - exclusions      : per position, a 26-bit mask of letters that may not
                      sit there (WrongPlace letters, Missing letters)
  - minimum counts  : for each letter, the number of Correct + WrongPlace
                      marks it received; the word needs at least that many

Missing is multiplicity-aware. When none of a letter's copies in the guess
scored Correct/WrongPlace the letter is excluded everywhere. When some did,
the Missing copy only rules the letter out at the guess positions where it
was not Correct; the minimum count still holds. Counts are minimums, not
exact counts.

A word matches a history iff it matches every record. Since that is a
plain AND, filtering record by record or all at once gives the same set.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional, Set, Tuple

from .types import FeedbackRecord, GuessState, WORD_LENGTH
from .validation import normalize_word

_ALL_POSITIONS = range(WORD_LENGTH)


def _bit(ch: str) -> int:
    return 1 << (ord(ch) - ord("a"))


@dataclass(frozen=True)
class Constraints:
    """Constraints derived from one FeedbackRecord."""
    exact: Tuple[Optional[str], ...]       # letter required at each position, or None
    excluded: Tuple[int, ...]              # per-position bitmask of forbidden letters
    min_counts: Tuple[Tuple[str, int], ...]

    def allows(self, word: str) -> bool:
        for i, ch in enumerate(word):
            need = self.exact[i]
            if need is not None and ch != need:
                return False
            if self.excluded[i] & _bit(ch):
                return False
        for ch, k in self.min_counts:
            if word.count(ch) < k:
                return False
        return True


@lru_cache(maxsize=65536)
def constraints_for(guess: str, result: Tuple[GuessState, ...]) -> Constraints:
    """Constraints for a raw (guess, states) pair. `guess` must already be normalised."""
    exact = [None] * WORD_LENGTH
    excluded = [0] * WORD_LENGTH

    # Letters confirmed present, with multiplicity.
    present = Counter(
        g for g, s in zip(guess, result) if s is not GuessState.MISSING
    )

    for i, (g, s) in enumerate(zip(guess, result)):
        if s is GuessState.CORRECT:
            exact[i] = g
        elif s is GuessState.WRONG_PLACE:
            excluded[i] |= _bit(g)
        elif present[g] == 0:
            for j in _ALL_POSITIONS:
                excluded[j] |= _bit(g)
        else:
            # No extra copy at any guess position of this letter that wasn't green.
            for j in _ALL_POSITIONS:
                if guess[j] == g and result[j] is not GuessState.CORRECT:
                    excluded[j] |= _bit(g)

    return Constraints(
        exact=tuple(exact),
        excluded=tuple(excluded),
        min_counts=tuple(sorted(present.items())),
    )


def derive_constraints(record: FeedbackRecord) -> Constraints:
    """Derive (and cache) the constraints implied by one record."""
    return constraints_for(record.guess, record.result)


def is_consistent(word: str, record: FeedbackRecord) -> bool:
    """True if `word` could still be the solution given `record`."""
    return derive_constraints(record).allows(normalize_word(word))


def matches_history(word: str, records: Iterable[FeedbackRecord]) -> bool:
    """True if `word` is consistent with every record in `records`."""
    w = normalize_word(word)
    return all(derive_constraints(r).allows(w) for r in records)


def filter_candidates(candidates: Iterable[str], records: Iterable[FeedbackRecord]) -> Set[str]:
    """
    Keep only the candidates consistent with ALL feedback records.

    Args:
      candidates : words still in play; malformed words raise MalformedWordError
      records    : feedback records seen so far, in any order

    Returns:
      set of surviving words; an empty set means the history is
      contradictory (or the answer is outside the vocabulary).
    """
    survivors = {normalize_word(w) for w in candidates}
    for record in records:
        c = derive_constraints(record)
        survivors = {w for w in survivors if c.allows(w)}
        if not survivors:
            break
    return survivors
