"""
Simulation harness.

- run_case:  play one puzzle (one hidden answer) with a given solver.
- run_batch: play many puzzles in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

Used by the `run` CLI to measure solver quality and speed against known
answers. UI-agnostic: no printing, no progress bars.
"""

from __future__ import annotations

import logging
import time
from typing import AbstractSet, Dict, List, Sequence, Tuple

from wordlehelper.engine import ALL_CORRECT, feedback, filter_candidates
from wordlehelper.history import build_weights

log = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with a different turn budget."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        allowed: Sequence[str],
        answers: Sequence[str],
        max_turns: int = WORDLE_MAX_TURNS,
        past_answers: AbstractSet[str] | None = None,
        past_answer_weight: float | None = None,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Args:
        solver:             a BaseSolver with next_guess(state)
        answer:             the hidden word for this case
        allowed:            guess universe
        answers:            starting candidate set
        max_turns:          must be 6 (Wordle rule; enforced)
        past_answers:       known past answers, for weighting
        past_answer_weight: weight for past answers; None = uniform weights

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), answer (str)
    """
    _assert_wordle_turns(max_turns)

    solver.reset(allowed=list(allowed), answers=list(answers))

    history: List[Tuple[str, str]] = []
    candidates = list(answers)

    total_ms = 0.0
    for turn in range(1, WORDLE_MAX_TURNS + 1):
        weights = None
        if past_answer_weight is not None:
            weights = build_weights(candidates, past_answers or set(), past_answer_weight)
        state = {
            "turn": turn,
            "history": list(history),
            "candidates": candidates,
            "allowed": allowed,
            "weights": weights,
        }

        t0 = time.perf_counter()
        guess = solver.next_guess(state)
        total_ms += (time.perf_counter() - t0) * 1000.0

        patt = feedback(guess, answer)
        history.append((guess, patt))

        if patt == ALL_CORRECT:
            return {
                "success": True, "guesses": turn, "time_ms": total_ms,
                "history": history, "answer": answer
            }

        # Narrow candidate set using the new feedback before next turn
        candidates = filter_candidates(candidates, guess, patt)

    log.debug(f"{getattr(solver, 'id', '?')} failed on {answer}: {history}")
    return {
        "success": False, "guesses": WORDLE_MAX_TURNS, "time_ms": total_ms,
        "history": history, "answer": answer
    }


def run_batch(
        solver,
        answers: Sequence[str],
        *,
        allowed: Sequence[str],
        max_turns: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
        **kwargs,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are played. Extra keyword arguments go to run_case.
    """
    _assert_wordle_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    return [
        run_case(solver, ans, allowed=allowed, answers=answers, max_turns=max_turns, **kwargs)
        for ans in pool
    ]
