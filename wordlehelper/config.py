"""
Tunable solver settings.

The defaults trade a little optimality for responsiveness:
  - finish_threshold: at or below this many candidates, only candidates are
    scored, so a guess can win outright.
  - shortlist_size: how many heuristic-ranked guesses get exact entropy.
  - past_answer_weight: prior weight of a word that was already an answer
    (0 = impossible, 1 = no penalty).
  - top_k_*: limits for the exploratory Top-K list.
"""

from __future__ import annotations

from dataclasses import dataclass

WORD_LENGTH = 5

FINISH_THRESHOLD = 15
SHORTLIST_SIZE = 2500
PAST_ANSWER_WEIGHT = 0.05
TOP_K_LIMIT = 10
TOP_K_SPACE_CAP = 4000
TOP_K_LARGE_CANDIDATES = 200


def clamp_weight(w: float) -> float:
    """Clamp a past-answer weight into [0, 1]."""
    return max(0.0, min(1.0, float(w)))


@dataclass
class SolverConfig:
    finish_threshold: int = FINISH_THRESHOLD
    shortlist_size: int = SHORTLIST_SIZE
    past_answer_weight: float = PAST_ANSWER_WEIGHT
    top_k_limit: int = TOP_K_LIMIT
    top_k_space_cap: int = TOP_K_SPACE_CAP
    top_k_large_candidates: int = TOP_K_LARGE_CANDIDATES

    def __post_init__(self):
        if self.shortlist_size is not None and self.shortlist_size < 1:
            raise ValueError(f"shortlist_size must be at least 1; got {self.shortlist_size}")
        if self.finish_threshold < 0:
            raise ValueError(f"finish_threshold must be non-negative; got {self.finish_threshold}")

    def clamp_weight(self) -> float:
        return clamp_weight(self.past_answer_weight)

    def top_k_space(self, candidates, allowed_guesses):
        """
        Guess universe for the Top-K list: capped while the candidate set is
        still large so exact scoring stays responsive.
        """
        if len(candidates) > self.top_k_large_candidates:
            return list(allowed_guesses)[: self.top_k_space_cap]
        return list(allowed_guesses)
