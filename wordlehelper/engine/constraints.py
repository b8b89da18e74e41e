"""
Candidate filtering given feedback.

Two entry points:
  - filter_candidates: one (guess, pattern) step; this is what the live
    session applies after every guess.
  - filter_history:    every (guess, pattern) pair in a history; used to
    replay or audit a session from scratch.

Both preserve the input order and never mutate the input.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .feedback import feedback

log = logging.getLogger(__name__)

# History is a sequence of (guess, pattern) tuples produced by the engine.
History = Iterable[Tuple[str, str]]  # (guess, pattern)


def filter_candidates(candidates: Iterable[str], guess: str, pattern: str) -> List[str]:
    """
    Keep exactly the candidates `a` for which feedback(guess, a) == pattern.

    An empty result is valid: it means the feedback so far contradicts
    every candidate, and it is up to the caller to surface that.
    """
    return [a for a in candidates if feedback(guess, a) == pattern]


def filter_history(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words that would produce exactly the recorded pattern for
    every (guess, pattern) in `history`.
    """
    history = list(history)
    out: List[str] = []
    for w in words:
        # A candidate survives only if every past guess reproduces its pattern.
        if all(feedback(g, w) == patt for g, patt in history):
            out.append(w)
    return out


def choose_candidate_set(canonical: Sequence[str],
                         broad: Sequence[str]) -> Tuple[List[str], Optional[str]]:
    """
    Pick the next candidate set from two filtered views of the same feedback:
    `canonical` (filtered answer list) and `broad` (filtered guess universe).

    The answer list can lag behind the real game (new answers get added).
    When it leaves nothing, or a single word while the broad view still has
    others, fall back to the broad view and return a warning.

    Returns:
      (next_candidates, warning_or_None)
    """
    if not canonical and broad:
        warning = ("No answer-list word fits this feedback; "
                   "falling back to the full guess list.")
        log.warning(warning)
        return list(broad), warning
    if len(canonical) == 1 and len(broad) > 1:
        warning = (f"Only {canonical[0]!r} fits the answer list; the list may be stale, "
                   f"keeping {len(broad)} words from the full guess list.")
        log.warning(warning)
        return list(broad), warning
    return list(canonical), None
