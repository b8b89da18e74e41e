import pytest

from wordlehelper.session import Session

POSSIBLE = ["crane", "raise", "stare", "trace", "cared", "scoop"]
ALLOWED = ["slate", "salet", "roate"]


def test_session_apply_and_reset():
    s = Session(POSSIBLE, ALLOWED)
    assert s.allowed_guesses == ALLOWED + POSSIBLE
    out = s.apply("RAISE", "yybbg")
    assert out == ["crane", "trace"]
    assert s.history == [("raise", "YYBBG")]
    assert s.warning is None
    assert not s.solved

    s.apply("crane", "GGGGG")
    assert s.solved

    s.reset()
    assert s.candidates == POSSIBLE and s.history == []


def test_session_rejects_bad_input_before_filtering():
    s = Session(POSSIBLE, ALLOWED)
    with pytest.raises(ValueError):
        s.apply("zzzzz", "BBBBB")
    with pytest.raises(ValueError):
        s.apply("crane", "BBBB")
    assert s.history == [] and s.candidates == POSSIBLE


def test_session_falls_back_when_answer_list_is_stale():
    s = Session(["pooch"], ["mooch"])
    s.apply("pooch", "BGGGG")
    assert s.candidates == ["mooch"]
    assert s.warning


def test_session_contradictory_feedback_leaves_no_candidates():
    s = Session(POSSIBLE, ALLOWED)
    s.apply("crane", "GGGGB")
    assert s.candidates == []


def test_session_weights():
    s = Session(POSSIBLE, ALLOWED, past_answer_weight=0.25)
    assert s.weights({"raise"}) == [1.0, 0.25, 1.0, 1.0, 1.0, 1.0]
    assert s.set_past_answer_weight(3) == 1.0
