from pathlib import Path

from wordlehelper.datasets import load_answers_by_date, load_words, pretty_summary, validate_wordlists


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    pos = tmp_path / "possible.txt"
    allw = tmp_path / "allowed.txt"
    _write(pos, ["crane", "raise", "stare"])
    _write(allw, ["trace", "cared", "salet"])

    rep = validate_wordlists(str(pos), str(allw))
    assert rep["passed"] is True
    assert rep["overlap"] == 0
    assert rep["guess_universe"] == 6
    s = pretty_summary(rep)
    assert "possible=3" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    pos = tmp_path / "possible.txt"
    allw = tmp_path / "allowed.txt"
    # wrong length, bad chars and upper case are invalid; duplicates flagged
    pos.write_text("crane\ncranes\n???\nCRANE\ncrane\n", encoding="utf-8")
    allw.write_text("crane\nslate\n", encoding="utf-8")

    rep = validate_wordlists(str(pos), str(allw))
    assert rep["passed"] is False
    assert rep["possible"]["invalid_lines"] == 3
    assert rep["overlap"] == 1
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    rep = validate_wordlists(str(tmp_path / "nope.txt"), str(tmp_path / "nope2.txt"))
    assert rep["passed"] is False
    assert len(rep["issues"]) == 2


def test_load_words_and_answers_by_date(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Crane\n\nslate\ncrane\ntoolong\n", encoding="utf-8")
    assert load_words(p) == ["crane", "slate"]
    # calendar lists keep repeats so indices stay aligned with dates
    assert load_answers_by_date(p) == ["crane", "slate", "crane", "toolong"]
