from .types import WORD_LENGTH, GuessState, FeedbackRecord, parse_history
from .errors import WordleError, MalformedWordError, MissingFrequencyError, DatasetError
from .feedback import evaluate, pattern
from .constraints import derive_constraints, is_consistent, matches_history, filter_candidates
from .ranking import rank, rank_by_entropy
from .validation import normalize_word, validate_guess

__all__ = [
    "WORD_LENGTH", "GuessState", "FeedbackRecord", "parse_history",
    "WordleError", "MalformedWordError", "MissingFrequencyError", "DatasetError",
    "evaluate", "pattern",
    "derive_constraints", "is_consistent", "matches_history", "filter_candidates",
    "rank", "rank_by_entropy",
    "normalize_word", "validate_guess",
]
