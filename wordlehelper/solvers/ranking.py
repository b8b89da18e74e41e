"""
Top-K Ranker.

Exact entropy for every word of an explicit guess universe, best first.
No heuristic shortcut: callers cap the universe themselves (see
SolverConfig.top_k_space) when the candidate set is still large.
"""

from __future__ import annotations

from typing import List, Sequence

from wordlehelper.config import TOP_K_LIMIT
from .entropy import Weights, check_weights, entropy_score
from .recommend import Recommendation


def top_k(candidates: Sequence[str], allowed_guesses: Sequence[str],
          weights: Weights = None, limit: int = TOP_K_LIMIT) -> List[Recommendation]:
    """Return the `limit` highest-entropy guesses, descending, ties in input order."""
    check_weights(candidates, weights)
    scored = [Recommendation(g, entropy_score(g, candidates, weights)) for g in allowed_guesses]
    # sorted() is stable, so equal scores keep their input order
    scored.sort(key=lambda r: r.score, reverse=True)
    return scored[: max(0, limit)]
