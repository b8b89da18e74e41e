from .answers import (
    ORIGIN, ROLLOVER_UTC_HOUR, wordle_index, known_past_answers, build_weights,
    today_key, initial_candidates,
)
from .cache import FirstGuessCache, should_cache_first_guess

__all__ = [
    "ORIGIN", "ROLLOVER_UTC_HOUR", "wordle_index", "known_past_answers", "build_weights",
    "today_key", "initial_candidates", "FirstGuessCache", "should_cache_first_guess",
]
