"""
Exception types raised by the engine and the dataset loaders.

Filtering down to an empty candidate set is NOT an error; callers get an
empty result and decide for themselves what it means.
"""


class WordleError(Exception):
    """Base class for all errors raised by this project."""


class MalformedWordError(WordleError, ValueError):
    """A word is not exactly five ASCII letters (or a record is misshapen)."""


class MissingFrequencyError(WordleError, KeyError):
    """A word being ranked has no entry in the frequency table."""

    def __str__(self) -> str:
        # KeyError.__str__ repr()s the argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class DatasetError(WordleError):
    """Word lists or the frequency table could not be loaded or are invalid."""
