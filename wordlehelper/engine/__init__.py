from .feedback import feedback, is_valid_pattern, ALL_CORRECT
from .constraints import filter_candidates, filter_history, choose_candidate_set
from .validation import validate_guess, normalize_word, parse_pattern

__all__ = [
    "feedback", "is_valid_pattern", "ALL_CORRECT",
    "filter_candidates", "filter_history", "choose_candidate_set",
    "validate_guess", "normalize_word", "parse_pattern",
]
