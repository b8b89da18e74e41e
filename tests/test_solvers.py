import math

import numpy as np
import pytest

from wordlehelper.config import SolverConfig
from wordlehelper.errors import NoCandidates, WeightLengthMismatch
from wordlehelper.solvers import build_frequencies, entropy_score, recommend, shortlist, top_k
from wordlehelper.solvers.heuristic import heuristic_score

WORDS = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop", "slate", "pious", "moody"]

# Five candidates that differ only in the first letter; any candidate splits
# them 1/4, while "bumph" tells all five apart.
ILLS = ["bills", "fills", "hills", "mills", "pills"]
SPLITTER = "bumph"


# --- Entropy Scorer ---

def test_entropy_bounds():
    for g in WORDS:
        H = entropy_score(g, WORDS)
        assert 0.0 <= H <= math.log2(len(WORDS)) + 1e-9


def test_entropy_max_when_every_pattern_distinct():
    assert entropy_score("crane", ["crane", "slate", "pious"]) == pytest.approx(math.log2(3))
    assert entropy_score(SPLITTER, ILLS) == pytest.approx(math.log2(5))


def test_entropy_zero_for_single_bucket():
    assert entropy_score("jumpy", ["crane", "slate"]) == 0.0


def test_entropy_empty_candidates_is_zero():
    assert entropy_score("crane", []) == 0.0


def test_weighted_entropy():
    cands = ["crane", "slate", "pious"]
    assert entropy_score("crane", cands, [1.0, 1.0, 1.0]) == pytest.approx(entropy_score("crane", cands))
    # zero weights carry no mass
    assert entropy_score("crane", cands, [1.0, 1.0, 0.0]) == pytest.approx(1.0)
    assert entropy_score("crane", cands, [1.0, 0.0, -2.0]) == 0.0
    assert entropy_score("crane", cands, [0.0, 0.0, 0.0]) == 0.0
    expected = 0.75 * math.log2(4 / 3) + 0.25 * 2
    assert entropy_score("crane", cands[:2], [3.0, 1.0]) == pytest.approx(expected)


def test_entropy_weight_length_mismatch():
    with pytest.raises(WeightLengthMismatch):
        entropy_score("crane", ["crane", "slate"], [1.0])


# --- Heuristic Pre-filter ---

def test_build_frequencies_uniform():
    letter_freq, pos_freq = build_frequencies(["apple", "angle"])
    a, p, l = ord("a") - 97, ord("p") - 97, ord("l") - 97
    assert letter_freq.shape == (26,) and pos_freq.shape == (5, 26)
    assert letter_freq[a] == pytest.approx(1.0)  # once per word, even if repeated
    assert letter_freq[p] == pytest.approx(0.5)
    assert letter_freq[l] == pytest.approx(1.0)
    assert pos_freq[0, a] == pytest.approx(1.0)
    assert pos_freq[1, p] == pytest.approx(0.5)
    assert np.allclose(pos_freq.sum(axis=1), 1.0)


def test_build_frequencies_weighted():
    letter_freq, _ = build_frequencies(["apple", "angle"], [3.0, 1.0])
    assert letter_freq[ord("p") - 97] == pytest.approx(0.75)
    with pytest.raises(WeightLengthMismatch):
        build_frequencies(["apple", "angle"], [1.0])


def test_heuristic_score():
    letter_freq, pos_freq = build_frequencies(["apple", "angle"])
    # positions: a 1.0, p .5, p .5, l 1.0, e 1.0 -> 4.0 * 1.2
    # distinct letters: a 1.0, p .5, l 1.0, e 1.0 -> 3.5
    assert heuristic_score("apple", letter_freq, pos_freq) == pytest.approx(4.8 + 3.5)


def test_shortlist_orders_and_bounds():
    guesses = ["zzzzz", "apple", "qqqqq", "angle", "amble"]
    out = shortlist(guesses, ["apple", "angle"], size=2)
    assert len(out) == 2
    assert set(out) == {"apple", "angle"}
    # ties keep input order; None keeps everything
    full = shortlist(guesses, ["apple", "angle"], size=None)
    assert len(full) == len(guesses)
    assert full.index("zzzzz") < full.index("qqqqq")


# --- Recommendation Engine ---

def test_recommend_no_candidates():
    with pytest.raises(NoCandidates):
        recommend([], WORDS)


def test_recommend_single_candidate_is_solved():
    rec = recommend(["crane"], WORDS)
    assert rec.guess == "crane" and rec.score == float("inf")


def test_recommend_weight_mismatch():
    with pytest.raises(WeightLengthMismatch):
        recommend(ILLS, ILLS + [SPLITTER], [1.0])


def test_recommend_close_to_finish_searches_candidates_only():
    rec = recommend(ILLS, ILLS + [SPLITTER])
    # every candidate ties; the first one wins
    assert rec.guess == "bills"
    assert rec.score == pytest.approx(entropy_score("bills", ILLS))


def test_recommend_uses_guess_universe_above_threshold():
    rec = recommend(ILLS, ILLS + [SPLITTER], finish_threshold=2)
    assert rec.guess == SPLITTER
    assert rec.score == pytest.approx(math.log2(5))

    exact = recommend(ILLS, ILLS + [SPLITTER], finish_threshold=2, shortlist_size=None)
    assert exact == rec


def test_recommend_rejects_empty_shortlist():
    with pytest.raises(ValueError, match="shortlist_size"):
        recommend(ILLS, ILLS + [SPLITTER], finish_threshold=2, shortlist_size=0)
    # checked even when the finish path would not use it
    with pytest.raises(ValueError):
        recommend(ILLS, ILLS + [SPLITTER], shortlist_size=-3)


def test_solver_config_validates_sizes():
    with pytest.raises(ValueError, match="shortlist_size"):
        SolverConfig(shortlist_size=0)
    with pytest.raises(ValueError, match="finish_threshold"):
        SolverConfig(finish_threshold=-1)
    cfg = SolverConfig(shortlist_size=1, finish_threshold=0)
    # a one-word shortlist keeps the heuristic favourite, not the best splitter
    rec = recommend(ILLS, ILLS + [SPLITTER], finish_threshold=cfg.finish_threshold,
                    shortlist_size=cfg.shortlist_size)
    assert rec.guess == "bills"


def test_recommend_weighted_stays_in_bounds():
    weights = [0.05, 1.0, 1.0, 0.05, 1.0]
    rec = recommend(ILLS, ILLS + [SPLITTER], weights, finish_threshold=2)
    assert rec.guess == SPLITTER
    assert 0.0 < rec.score <= math.log2(5)


# --- Top-K Ranker ---

def test_top_k():
    ranked = top_k(ILLS, ILLS + [SPLITTER], limit=3)
    assert len(ranked) == 3
    assert ranked[0].guess == SPLITTER
    assert [r.guess for r in ranked[1:]] == ["bills", "fills"]  # ties in input order
    assert ranked[0].score >= ranked[1].score >= ranked[2].score


def test_top_k_limit_larger_than_universe():
    assert len(top_k(ILLS, ILLS, limit=50)) == len(ILLS)
