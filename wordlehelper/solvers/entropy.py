"""
Entropy Scorer (expected information gain).

For a guess g, partition the CURRENT candidates by the pattern that
feedback(g, candidate) produces, then take the Shannon entropy of the
bucket masses:

    H = sum_b p_b * log2(1 / p_b),   p_b = bucket_weight / total_weight

Weights are optional. Without them every candidate counts 1.0; with them
each candidate counts its own prior weight, and non-positive weights carry
no mass at all. A single implementation serves both cases.
"""

from __future__ import annotations

from collections import defaultdict
from math import log2
from typing import Dict, Iterable, Optional, Sequence

from wordlehelper.engine import feedback
from wordlehelper.errors import WeightLengthMismatch

Weights = Optional[Sequence[float]]


def check_weights(candidates: Sequence[str], weights: Weights) -> None:
    """Raise WeightLengthMismatch unless `weights` is None or parallel to `candidates`."""
    if weights is not None and len(weights) != len(candidates):
        raise WeightLengthMismatch(
            f"weights must match candidates length ({len(weights)} != {len(candidates)})")


def entropy_from_bucket_weights(total_weight: float, bucket_weights: Iterable[float]) -> float:
    """H = sum p * log2(1/p) over buckets with positive mass."""
    H = 0.0
    for w in bucket_weights:
        p = w / total_weight
        if p <= 0:
            continue
        H += p * log2(1 / p)   # == -p*log2(p)
    return H


def entropy_score(guess: str, candidates: Sequence[str], weights: Weights = None) -> float:
    """
    Entropy in bits of the partition `guess` induces on `candidates`.

    Returns 0.0 when the total weight is not positive (no usable signal).
    Bounded above by log2(len(candidates)), reached only when every
    candidate lands in its own bucket with equal mass.
    """
    check_weights(candidates, weights)

    buckets: Dict[str, float] = defaultdict(float)
    total = 0.0
    # localize for speed
    _feedback = feedback
    if weights is None:
        for ans in candidates:
            buckets[_feedback(guess, ans)] += 1.0
        total = float(len(candidates))
    else:
        for ans, w in zip(candidates, weights):
            if w <= 0:
                continue
            total += w
            buckets[_feedback(guess, ans)] += w

    if total <= 0:
        return 0.0
    return entropy_from_bucket_weights(total, buckets.values())
