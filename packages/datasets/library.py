"""
Read-only reference data the engine works against.

A Library bundles the guess vocabulary, the solution vocabulary and the
frequency table. It is built once at startup and handed to whatever needs
it (the HTTP app, the CLI loop, the harness) instead of living in module
globals, so tests can build a tiny one in memory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from packages.engine import FeedbackRecord, filter_candidates, rank, rank_by_entropy
from packages.engine.errors import DatasetError, MalformedWordError
from packages.engine.validation import normalize_word
from .io import load_frequency_table, load_words

log = logging.getLogger(__name__)

# Most frequent surviving words scored as prospective guesses per suggestion.
SUGGESTION_POOL_CAP = 300


@dataclass(frozen=True)
class Library:
    words: frozenset                # guess vocabulary
    solutions: frozenset            # solution vocabulary
    frequencies: Mapping[str, float]

    @classmethod
    def from_iterables(
            cls,
            words: Iterable[str],
            solutions: Iterable[str],
            frequencies: Mapping[str, float],
    ) -> "Library":
        """
        Build and check a Library.

        Raises DatasetError if any word is malformed or a guess-vocabulary
        word has no frequency entry. Solutions outside the guess vocabulary
        are only logged.
        """
        try:
            word_set = frozenset(normalize_word(w) for w in words)
            solution_set = frozenset(normalize_word(w) for w in solutions)
        except MalformedWordError as e:
            raise DatasetError(str(e)) from e

        if not word_set:
            raise DatasetError("guess vocabulary is empty")
        if not solution_set:
            raise DatasetError("solution vocabulary is empty")

        missing = sorted(w for w in word_set if w not in frequencies)
        if missing:
            raise DatasetError(
                f"{len(missing)} word(s) have no frequency entry (e.g., {missing[:5]})")

        stray = solution_set - word_set
        if stray:
            log.warning("%d solution(s) are not in the guess vocabulary (e.g., %s)",
                        len(stray), sorted(stray)[:5])

        return cls(word_set, solution_set, MappingProxyType(dict(frequencies)))

    @classmethod
    def load(cls, words_path: Path | str, solutions_path: Path | str,
             freq_path: Path | str) -> "Library":
        """Load the three reference files; any problem is a DatasetError."""
        lib = cls.from_iterables(
            load_words(words_path),
            load_words(solutions_path),
            load_frequency_table(freq_path),
        )
        log.info("library loaded: %d words, %d solutions, %d frequency entries",
                 len(lib.words), len(lib.solutions), len(lib.frequencies))
        return lib

    def possible_words(self, records: Sequence[FeedbackRecord]) -> List[str]:
        """Guess-vocabulary words consistent with `records`, most frequent first."""
        return rank(filter_candidates(self.words, records), self.frequencies)

    def possible_solutions(self, records: Sequence[FeedbackRecord]) -> Set[str]:
        """Solution-vocabulary words consistent with `records`."""
        return filter_candidates(self.solutions, records)

    def suggest(
            self,
            records: Sequence[FeedbackRecord],
            *,
            limit: Optional[int] = 10,
            workers: int = 1,
            pool_cap: int = SUGGESTION_POOL_CAP,
    ) -> List[Tuple[str, float]]:
        """
        Rank the `pool_cap` most frequent surviving words by how many
        surviving words they would eliminate on average over the surviving
        solutions. Every surviving word still counts towards the space
        being shrunk.
        """
        words = filter_candidates(self.words, records)
        solutions = filter_candidates(self.solutions, records)
        pool = rank(words, self.frequencies)[:pool_cap]
        return rank_by_entropy(pool, words, solutions, workers=workers, limit=limit)
