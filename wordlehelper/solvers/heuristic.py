"""
Heuristic Pre-filter.

Exact entropy over thousands of guesses against thousands of candidates is
the dominant cost. This module ranks the guess universe with two cheap
letter-frequency tables built from the (weighted) candidates:

  - letter_freq[c]     : share of candidate mass containing letter c
                         (each letter counted at most once per candidate)
  - pos_freq[i][c]     : share of candidate mass with letter c at slot i

  heuristic(g) = sum_i 1.2 * pos_freq[i][g_i]  +  sum_{distinct c in g} letter_freq[c]

Only the top `size` words go on to exact scoring. The ranking is an
approximation; it can miss a marginally better guess.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from wordlehelper.config import SHORTLIST_SIZE, WORD_LENGTH
from .entropy import Weights, check_weights

log = logging.getLogger(__name__)

ALPHABET = 26
POSITIONAL_BONUS = 1.2


def _letter_codes(word: str) -> List[int]:
    return [ord(ch) - 97 for ch in word]


def build_frequencies(candidates: Sequence[str],
                      weights: Weights = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return (letter_freq, pos_freq), shapes (26,) and (5, 26), both normalised
    by the total positive weight. Non a-z characters are ignored.
    """
    check_weights(candidates, weights)

    letter_freq = np.zeros(ALPHABET)
    pos_freq = np.zeros((WORD_LENGTH, ALPHABET))

    total = 0.0
    for idx, w in enumerate(candidates):
        ww = 1.0 if weights is None else float(weights[idx])
        if ww <= 0:
            continue
        total += ww
        seen = set()
        for i, code in enumerate(_letter_codes(w)):
            if not 0 <= code < ALPHABET:
                continue
            pos_freq[i, code] += ww
            if code not in seen:
                seen.add(code)
                letter_freq[code] += ww

    n = total or 1.0
    return letter_freq / n, pos_freq / n


def heuristic_scores(guesses: Sequence[str], letter_freq: np.ndarray,
                     pos_freq: np.ndarray) -> np.ndarray:
    """Vectorised heuristic score for every word in `guesses`."""
    if not guesses:
        return np.zeros(0)

    codes = np.array([_letter_codes(g) for g in guesses], dtype=np.int64)
    valid = (codes >= 0) & (codes < ALPHABET)
    safe = np.where(valid, codes, 0)

    # reward positional match likelihood (greens)
    positional = pos_freq[np.arange(WORD_LENGTH), safe] * valid
    s = positional.sum(axis=1) * POSITIONAL_BONUS

    # reward covering common letters, but only once per letter
    rows = np.repeat(np.arange(len(guesses)), WORD_LENGTH)
    present = np.zeros((len(guesses), ALPHABET), dtype=bool)
    present[rows[valid.ravel()], codes.ravel()[valid.ravel()]] = True
    return s + present.astype(float) @ letter_freq


def heuristic_score(guess: str, letter_freq: np.ndarray, pos_freq: np.ndarray) -> float:
    return float(heuristic_scores([guess], letter_freq, pos_freq)[0])


def shortlist(guesses: Sequence[str], candidates: Sequence[str], weights: Weights = None,
              size: Optional[int] = SHORTLIST_SIZE) -> List[str]:
    """
    Rank `guesses` by heuristic score (descending, ties in input order) and
    keep the top `size`. `size=None` keeps every guess, ranked.
    """
    letter_freq, pos_freq = build_frequencies(candidates, weights)
    scores = heuristic_scores(guesses, letter_freq, pos_freq)
    # stable sort on the negated score keeps first-seen order for ties
    order = np.argsort(-scores, kind="stable")
    if size is not None:
        order = order[: max(0, int(size))]
    out = [guesses[i] for i in order]
    log.debug(f"shortlist: kept {len(out)} of {len(guesses)} guesses")
    return out
