"""
First-guess cache.

The recommendation for the untouched candidate set is the slowest to compute
and is the same all day, so it is stored in a small JSON file keyed by day.
A missing or unreadable file simply means "nothing cached".
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Dict, Optional

from wordlehelper.config import WORD_LENGTH
from wordlehelper.solvers import Recommendation

log = logging.getLogger(__name__)


def should_cache_first_guess(requested_candidate_count: int, initial_candidate_count: int) -> bool:
    """Only the computation over the initial candidate set is cacheable."""
    return requested_candidate_count == initial_candidate_count


class FirstGuessCache:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read(self) -> Dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            log.warning(f"ignoring unreadable first-guess cache {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def load(self, day_key: str) -> Optional[Recommendation]:
        entry = self._read().get(day_key)
        if not isinstance(entry, dict) or not isinstance(entry.get("guess"), str):
            return None
        guess = entry["guess"].strip().lower()
        if len(guess) != WORD_LENGTH:
            return None
        score = entry.get("score")
        return Recommendation(guess, float(score) if isinstance(score, (int, float)) else float("nan"))

    def save(self, day_key: str, rec: Recommendation, saved_at: float | None = None) -> str:
        """
        Store `rec` under `day_key`, dropping entries for other days.
        Returns the path written.
        """
        data = {day_key: {
            "guess": rec.guess,
            "score": rec.score,
            "saved_at": time.time() if saved_at is None else saved_at,
        }}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        return str(self.path)
