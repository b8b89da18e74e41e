"""
Boundary validation for user input.

The solver core assumes well-formed words and patterns. Everything typed by
a user goes through here first:
  - normalize_word: trim + lowercase
  - validate_guess: a-z only, length 5, present in the allowed universe
  - parse_pattern:  accept B/Y/G (any case) and a few friendly aliases
"""

from __future__ import annotations

from typing import Container

from wordlehelper.config import WORD_LENGTH
from .feedback import is_valid_pattern

# Friendly aliases typed at a prompt: '-', '.', 'x' mean absent.
_ALIASES = {"-": "B", ".": "B", "x": "B", "_": "B", "0": "B", "1": "Y", "2": "G"}


def normalize_word(word: str) -> str:
    return word.strip().lower()


def validate_guess(word: str, allowed: Container[str]) -> bool:
    """
    Return True if `word` is an acceptable guess.

    Notes:
      - `allowed` should be a set (or anything with fast membership);
        callers that validate in a loop should build it once.
    """
    if not isinstance(word, str):
        return False

    w = normalize_word(word)

    # Shape/characters check
    if len(w) != WORD_LENGTH or not (w.isascii() and w.isalpha()):
        return False

    return w in allowed


def parse_pattern(raw: str) -> str:
    """
    Turn user input into a canonical pattern string.

    Raises:
      ValueError if the result is not five symbols over {B, Y, G}.
    """
    s = raw.strip()
    p = "".join(_ALIASES.get(ch.lower(), ch.upper()) for ch in s)
    if not is_valid_pattern(p):
        raise ValueError(f"feedback pattern must be {WORD_LENGTH} tiles of B/Y/G; got {raw!r}")
    return p
