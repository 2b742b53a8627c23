"""
Word shape checks.

`normalize_word` is the strict form used on anything entering the engine:
a malformed word is a caller error and raises. `validate_guess` is the
boolean form the CLI uses to decide whether to re-prompt.
"""

from typing import Iterable

from .errors import MalformedWordError
from .types import WORD_LENGTH


def normalize_word(word: str) -> str:
    """
    Strip and lowercase `word`; raise MalformedWordError unless the result is
    exactly WORD_LENGTH ASCII letters.
    """
    if not isinstance(word, str):
        raise MalformedWordError(f"word must be a string, got {type(word).__name__}")
    w = word.strip().lower()
    if len(w) != WORD_LENGTH or not (w.isascii() and w.isalpha()):
        raise MalformedWordError(f"expected a {WORD_LENGTH}-letter word a-z, got {word!r}")
    return w


def validate_guess(word: str, allowed: Iterable[str]) -> bool:
    """
    Return True if `word` is well formed and present in `allowed`.

    `allowed` is usually the guess vocabulary (already a frozenset on the
    Library); other iterables are turned into a set here.
    """
    try:
        w = normalize_word(word)
    except MalformedWordError:
        return False
    if not isinstance(allowed, (set, frozenset)):
        allowed = {a.strip().lower() for a in allowed}
    return w in allowed
