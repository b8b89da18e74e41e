"""
Wordle feedback pattern for a single (guess, answer) pair.

Conventions:
  - 'G' : green  = correct letter in the correct position
  - 'Y' : yellow = letter present elsewhere in the answer
  - 'B' : black  = letter absent (or present fewer times than guessed)

Algorithm (two-pass, order-sensitive, matches the official game):
  1) First pass marks all greens and counts the answer letters that were
     NOT matched in place. Greens never consume from the counter.
  2) Second pass walks the guess left to right and marks a yellow only while
     the letter still has unmatched copies, consuming one per yellow. Earlier
     duplicates in the guess therefore win the yellow over later ones.
"""

from __future__ import annotations

import re
from collections import Counter

from wordlehelper.config import WORD_LENGTH
from wordlehelper.errors import InvalidLength

ABSENT = "B"
PRESENT = "Y"
CORRECT = "G"

ALL_CORRECT = CORRECT * WORD_LENGTH

_PATTERN_RE = re.compile(r"^[BYG]{5}$")


def feedback(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Both words are lowercased first. Raises InvalidLength unless both are
    exactly 5 characters.

    Examples:
      feedback("abbey", "algae") -> "GBBYB"
      feedback("slate", "slate") -> "GGGGG"
    """
    guess = guess.lower()
    answer = answer.lower()
    if len(guess) != WORD_LENGTH or len(answer) != WORD_LENGTH:
        raise InvalidLength(
            f"guess/answer must be length {WORD_LENGTH}; got {guess!r}, {answer!r}")

    pattern = [ABSENT] * WORD_LENGTH

    # Pass 1: greens, and leftover counts from the answer.
    remaining: Counter = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = CORRECT
        else:
            remaining[a] += 1

    # Pass 2: yellows, capped by the unmatched multiplicity in the answer.
    for i, g in enumerate(guess):
        if pattern[i] == CORRECT:
            continue
        if remaining[g] > 0:
            pattern[i] = PRESENT
            remaining[g] -= 1

    return "".join(pattern)


def is_valid_pattern(p: str) -> bool:
    """True iff `p` is exactly five symbols from {B, Y, G}."""
    return isinstance(p, str) and bool(_PATTERN_RE.match(p))
