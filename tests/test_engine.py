import pytest
from wordlehelper.engine import (
    feedback, is_valid_pattern, filter_candidates, filter_history, choose_candidate_set,
    validate_guess, parse_pattern,
)
from wordlehelper.errors import InvalidLength

WORDS = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop",
         "abbey", "algae", "mommy", "mummy", "llama", "hello", "geese", "those"]


# --- golden table (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "BGYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GGBBB"),
    ("cools", "scoop", "YYGBY"),
    ("raise", "crane", "YYBBG"),
    ("stare", "crane", "BBGYG"),
    # repeated letters
    ("abbey", "algae", "GBBYB"),
    ("mommy", "mummy", "GBGGG"),
    ("speed", "abide", "BBYBY"),   # earlier duplicate takes the yellow
    ("geese", "those", "BBBGG"),   # a green is never consumed twice
    ("llama", "hello", "YYBBB"),
    ("array", "radar", "YYYGB"),
])
def test_feedback_golden(guess, answer, expected):
    assert feedback(guess, answer) == expected


def test_feedback_is_case_insensitive():
    assert feedback("SLATE", "slate") == "GGGGG"


@pytest.mark.parametrize("guess,answer", [("slat", "slate"), ("slate", "slates"), ("", "")])
def test_feedback_rejects_wrong_length(guess, answer):
    with pytest.raises(InvalidLength):
        feedback(guess, answer)


def test_feedback_well_formed_and_self_all_correct():
    for g in WORDS:
        assert feedback(g, g) == "GGGGG"
        for a in WORDS:
            assert is_valid_pattern(feedback(g, a))


@pytest.mark.parametrize("p,ok", [
    ("GYBBG", True), ("BBBBB", True), ("gybbg", False), ("GYBB", False), ("GYBBX", False),
])
def test_is_valid_pattern(p, ok):
    assert is_valid_pattern(p) is ok


def test_filter_candidates_keeps_order_and_does_not_mutate():
    words = list(WORDS)
    out = filter_candidates(words, "raise", "YYBBG")
    assert out == ["crane", "trace"]
    assert words == WORDS


def test_filter_idempotent_and_monotone():
    for g in WORDS:
        for a in WORDS:
            p = feedback(g, a)
            once = filter_candidates(WORDS, g, p)
            assert filter_candidates(once, g, p) == once
            assert len(once) <= len(WORDS)
            # the true answer is never eliminated
            assert a in once


def test_filter_empty_result_is_valid():
    assert filter_candidates(["crane", "stare"], "crane", "BBBBB") == []


def test_all_absent_removes_every_word_with_those_letters():
    possible = ["slate", "crane", "pious", "moody", "bunch", "girth", "fuzzy", "witch", "dumpy"]
    out = filter_candidates(possible, "slate", "BBBBB")
    assert out == ["moody", "bunch", "fuzzy", "dumpy"]
    assert len(out) < len(possible)
    assert not any(set(w) & set("slate") for w in out)


def test_filter_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    cand = filter_history(words, [("raise", "YYBBG")])
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand
    assert filter_history(words, []) == words


def test_choose_candidate_set_falls_back_for_stale_answer_list():
    nxt, warning = choose_candidate_set(["pooch"], ["pooch", "mooch"])
    assert nxt == ["pooch", "mooch"] and warning

    nxt, warning = choose_candidate_set([], ["mooch"])
    assert nxt == ["mooch"] and warning

    nxt, warning = choose_candidate_set(["mooch", "pooch"], ["mooch", "pooch"])
    assert nxt == ["mooch", "pooch"] and warning is None


def test_validate_guess():
    allowed = {"crane", "raise", "stare"}
    assert validate_guess("CRANE ", allowed) is True
    assert validate_guess("cranes", allowed) is False
    assert validate_guess("???", allowed) is False
    assert validate_guess("trace", allowed) is False
    assert validate_guess(None, allowed) is False


@pytest.mark.parametrize("raw,expected", [
    ("byg-g", "BYGBG"), (" GGGGG ", "GGGGG"), ("..y.2", "BBYBG"),
])
def test_parse_pattern(raw, expected):
    assert parse_pattern(raw) == expected


@pytest.mark.parametrize("raw", ["GGGG", "GGGGGG", "GGGGZ", ""])
def test_parse_pattern_rejects(raw):
    with pytest.raises(ValueError):
        parse_pattern(raw)
