"""
Interactive solving session.

A Session is the state of one puzzle: the current candidate set and the
append-only history of (guess, pattern) pairs that produced it. The
candidate set IS the state; history is kept for display and audit only.

Input is validated here, at the boundary, before the solver core sees it.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, List, Optional, Sequence, Tuple

from wordlehelper.config import PAST_ANSWER_WEIGHT, clamp_weight
from wordlehelper.engine import (
    ALL_CORRECT, choose_candidate_set, filter_candidates, filter_history, normalize_word, parse_pattern,
    validate_guess,
)
from wordlehelper.history import build_weights, initial_candidates

log = logging.getLogger(__name__)


class Session:
    def __init__(self, possible: Sequence[str], allowed: Sequence[str], *,
                 past_answer_weight: float = PAST_ANSWER_WEIGHT):
        self.possible = list(possible)
        # Guess universe = allowed + possible, de-duplicated, first-seen order.
        self.allowed_guesses: List[str] = list(dict.fromkeys([*allowed, *possible]))
        self._allowed_set = set(self.allowed_guesses)
        self.past_answer_weight = clamp_weight(past_answer_weight)
        self.candidates: List[str] = initial_candidates(self.possible)
        self.history: List[Tuple[str, str]] = []
        self.warning: Optional[str] = None

    @property
    def initial_size(self) -> int:
        return len(self.possible)

    def apply(self, guess: str, pattern: str) -> List[str]:
        """
        Record one guess and its feedback and narrow the candidate set.

        Raises:
          ValueError for a malformed or unknown guess, or a malformed pattern.
        """
        g = normalize_word(guess)
        if not validate_guess(g, self._allowed_set):
            raise ValueError(f"{guess!r} is not a 5-letter word in the allowed guess list")
        p = parse_pattern(pattern)

        canonical = filter_candidates(self.candidates, g, p)
        self.history.append((g, p))
        if not canonical:
            # The answer list may be missing the real answer; re-derive from the
            # whole guess universe before declaring the feedback contradictory.
            broad = filter_history(self.allowed_guesses, self.history)
            canonical, self.warning = choose_candidate_set(canonical, broad)
        else:
            self.warning = None
        self.candidates = canonical
        log.debug(f"applied {g} {p}: {len(self.candidates)} candidates left")
        return self.candidates

    def reset(self) -> None:
        self.candidates = initial_candidates(self.possible)
        self.history = []
        self.warning = None

    def set_past_answer_weight(self, w: float) -> float:
        self.past_answer_weight = clamp_weight(w)
        return self.past_answer_weight

    def weights(self, past_answers: AbstractSet[str]) -> List[float]:
        return build_weights(self.candidates, past_answers, self.past_answer_weight)

    @property
    def solved(self) -> bool:
        return bool(self.history) and self.history[-1][1] == ALL_CORRECT
