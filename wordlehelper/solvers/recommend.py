"""
Recommendation Engine.

recommend() picks the next guess:
  - no candidates      -> NoCandidates (feedback history contradicts itself)
  - one candidate      -> that word, score +inf ("solved")
  - few candidates     -> (<= finish_threshold) score only the candidates,
                          so the pick can win immediately
  - otherwise          -> heuristic shortlist of the guess universe, then
                          exact entropy on the shortlist
                          (shortlist_size=None: exact over the whole universe)

Ties go to the first word seen in the search space. This is the
latency-critical path and normally runs on the worker thread.
"""

from __future__ import annotations

import logging
import time
from typing import NamedTuple, Optional, Sequence

from wordlehelper.config import FINISH_THRESHOLD, SHORTLIST_SIZE
from wordlehelper.errors import NoCandidates
from .entropy import Weights, check_weights, entropy_score
from .heuristic import shortlist

log = logging.getLogger(__name__)


class Recommendation(NamedTuple):
    guess: str
    score: float  # bits; +inf when solved


def best_by_entropy(search_space: Sequence[str], candidates: Sequence[str],
                    weights: Weights = None) -> Recommendation:
    """Exact entropy argmax over `search_space`; first-seen wins ties."""
    best_guess = search_space[0]
    best_score = float("-inf")
    for g in search_space:
        s = entropy_score(g, candidates, weights)
        if s > best_score:
            best_guess, best_score = g, s
    return Recommendation(best_guess, best_score)


def recommend(candidates: Sequence[str],
              allowed_guesses: Sequence[str],
              weights: Weights = None,
              finish_threshold: int = FINISH_THRESHOLD,
              shortlist_size: Optional[int] = SHORTLIST_SIZE) -> Recommendation:
    """
    Best next guess for the current candidate set.

    Args:
      candidates      : words still consistent with all feedback
      allowed_guesses : guess universe (may include guess-only words)
      weights         : optional prior weights parallel to `candidates`
      finish_threshold: switch to candidate-only search at or below this size
      shortlist_size  : heuristic shortlist size; None scores every guess exactly

    Raises:
      NoCandidates, WeightLengthMismatch
      ValueError if `shortlist_size` is below 1
    """
    if shortlist_size is not None and shortlist_size < 1:
        raise ValueError(f"shortlist_size must be at least 1 or None; got {shortlist_size}")
    if not candidates:
        raise NoCandidates("No candidates remain (inconsistent feedback?)")
    check_weights(candidates, weights)
    if len(candidates) == 1:
        return Recommendation(candidates[0], float("inf"))

    t0 = time.perf_counter()
    if len(candidates) <= finish_threshold or not allowed_guesses:
        search_space = candidates
        mode = "finish"
    elif shortlist_size is None:
        search_space = allowed_guesses
        mode = "exact"
    else:
        search_space = shortlist(allowed_guesses, candidates, weights, shortlist_size)
        mode = "shortlist"

    rec = best_by_entropy(search_space, candidates, weights)
    log.debug(f"recommend[{mode}]: {rec.guess} H={rec.score:.3f} over {len(search_space)} "
              f"guesses, {len(candidates)} candidates, "
              f"{(time.perf_counter() - t0) * 1000.0:.1f} ms")
    return rec
