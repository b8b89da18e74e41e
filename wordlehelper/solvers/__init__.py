from __future__ import annotations

from typing import List

from .base import BaseSolver, REGISTRY, register
from .entropy import entropy_score
from .heuristic import shortlist, build_frequencies
from .recommend import Recommendation, recommend
from .ranking import top_k

from . import strategies  # noqa: F401


def create_solver(solver_id: str, config=None) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(config)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseSolver", "REGISTRY", "register", "create_solver", "get_solver_ids",
    "entropy_score", "shortlist", "build_frequencies",
    "Recommendation", "recommend", "top_k",
]
