"""
Registered solvers for the simulation harness.

Both wrap recommend(); they differ only in how the guess universe is
searched while many candidates remain:
  - entropy      : exact entropy over every allowed guess (slow, reference)
  - entropy_fast : heuristic shortlist, then exact entropy (the live default)

`state` is the harness dict: "candidates", "allowed" and optional "weights".
"""

from __future__ import annotations

from typing import List

from .base import BaseSolver, register
from .recommend import recommend


@register
class EntropySolver(BaseSolver):
    id = "entropy"
    name = "Entropy (exact)"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]
        rec = recommend(candidates, allowed, state.get("weights"),
                        finish_threshold=self.config.finish_threshold,
                        shortlist_size=None)
        return rec.guess


@register
class HeuristicEntropySolver(BaseSolver):
    id = "entropy_fast"
    name = "Entropy (heuristic shortlist)"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]
        rec = recommend(candidates, allowed, state.get("weights"),
                        finish_threshold=self.config.finish_threshold,
                        shortlist_size=self.config.shortlist_size)
        return rec.guess
