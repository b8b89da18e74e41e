"""
Historical Wordle answers ("word of the day").

Words that were already used as an answer are less likely to come back, so
instead of dropping them the session down-weights them. This module only
turns a moment in time plus an answers-by-date list into:
  - the set of known past answers, and
  - a weight vector parallel to a candidate set.

The current time is always a parameter; nothing here reads the clock.
"""

from __future__ import annotations

import datetime as dt
from typing import List, Sequence, Set, Union

from wordlehelper.config import PAST_ANSWER_WEIGHT, clamp_weight

# Wordle rollover time: 05:00 UTC
ROLLOVER_UTC_HOUR = 5
# Wordle #1 = 2021-06-19 (cigar)
ORIGIN = dt.datetime(2021, 6, 19, ROLLOVER_UTC_HOUR, tzinfo=dt.timezone.utc)
_DAY = dt.timedelta(days=1)


def wordle_index(now: dt.datetime) -> int:
    """
    Index into the answers-by-date list for the puzzle live at `now`
    (0 => 2021-06-19). Naive datetimes are taken as UTC.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=dt.timezone.utc)
    return (now - ORIGIN) // _DAY


def known_past_answers(now: dt.datetime, answers_by_date: Sequence[str]) -> Set[str]:
    """Answers of every puzzle strictly before today's."""
    idx = wordle_index(now)
    return set(answers_by_date[: max(0, min(idx, len(answers_by_date)))])


def build_weights(candidates: Sequence[str], past_answers: Set[str],
                  past_answer_weight: float = PAST_ANSWER_WEIGHT) -> List[float]:
    """
    Weight vector for `candidates`: the clamped past-answer weight for known
    past answers, 1.0 for everything else.
    """
    w = clamp_weight(past_answer_weight)
    return [w if c in past_answers else 1.0 for c in candidates]


def today_key(d: Union[dt.date, dt.datetime]) -> str:
    """Day-partition key (YYYY-MM-DD) for caches and display."""
    return d.strftime("%Y-%m-%d")


def initial_candidates(possible_words: Sequence[str]) -> List[str]:
    """Starting candidate set: every possible answer, past answers included."""
    return list(possible_words)
