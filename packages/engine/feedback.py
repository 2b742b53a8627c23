"""
Wordle feedback for a single (solution, guess) pair.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks every exact match Correct and consumes that solution
     position.
  2) Second pass walks the remaining guess letters left to right; each one
     takes the leftmost unconsumed solution position holding the same
     letter and becomes WrongPlace, or stays Missing if there is none.

Consuming greens before handing out yellows caps the number of Correct +
WrongPlace marks for a letter at min(count in guess, count in solution).

Examples:
  evaluate("water", "enter").pattern -> "--GGG"
  evaluate("water", "axaer").pattern -> "Y--GG"
"""

from typing import List, Tuple

from .types import FeedbackRecord, GuessState, WORD_LENGTH
from .validation import normalize_word


def states(solution: str, guess: str) -> Tuple[GuessState, ...]:
    """Feedback states for two already-normalised words. No checks; hot path."""
    result: List[GuessState] = [GuessState.MISSING] * WORD_LENGTH
    consumed = [False] * WORD_LENGTH

    # Pass 1: exact matches.
    for i, (s, g) in enumerate(zip(solution, guess)):
        if s == g:
            result[i] = GuessState.CORRECT
            consumed[i] = True

    # Pass 2: leftmost unconsumed occurrence elsewhere in the solution.
    for i, g in enumerate(guess):
        if result[i] is GuessState.CORRECT:
            continue
        for j, s in enumerate(solution):
            if not consumed[j] and s == g:
                result[i] = GuessState.WRONG_PLACE
                consumed[j] = True
                break

    return tuple(result)


def evaluate(solution: str, guess: str) -> FeedbackRecord:
    """
    Compute the feedback `guess` receives when the hidden word is `solution`.

    Both words are normalised; anything that is not five letters raises
    MalformedWordError.
    """
    solution = normalize_word(solution)
    guess = normalize_word(guess)
    return FeedbackRecord(guess, states(solution, guess))


def pattern(solution: str, guess: str) -> str:
    """Shorthand for evaluate(...).pattern, e.g. pattern("water", "enter") -> "--GGG"."""
    return evaluate(solution, guess).pattern
