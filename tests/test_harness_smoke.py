import csv
import json

import pytest

from wordlehelper.harness import run_batch, run_case, summarize, write_csv, write_manifest
from wordlehelper.solvers import create_solver, get_solver_ids

ANSWERS = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone"]
ALLOWED = ANSWERS + ["slate", "salet", "roate"]


def test_registry():
    assert get_solver_ids() == ["entropy", "entropy_fast"]
    with pytest.raises(ValueError):
        create_solver("nope")


@pytest.mark.parametrize("solver_id", ["entropy", "entropy_fast"])
def test_run_case_smoke(solver_id):
    solver = create_solver(solver_id)
    r = run_case(solver, "crane", allowed=ALLOWED, answers=ANSWERS, max_turns=6)
    assert r["success"] is True
    assert r["history"][-1] == ("crane", "GGGGG")
    assert r["guesses"] == len(r["history"])


def test_run_case_with_past_answer_weights():
    solver = create_solver("entropy_fast")
    r = run_case(solver, "alone", allowed=ALLOWED, answers=ANSWERS,
                 past_answers={"crane", "raise"}, past_answer_weight=0.05)
    assert r["success"] is True


def test_run_case_enforces_turn_budget():
    with pytest.raises(ValueError):
        run_case(create_solver("entropy"), "crane", allowed=ALLOWED, answers=ANSWERS, max_turns=7)


def test_run_batch_and_outputs(tmp_path):
    solver = create_solver("entropy_fast")
    results = run_batch(solver, ANSWERS, allowed=ALLOWED, sample=3)
    assert [r["answer"] for r in results] == ANSWERS[:3]
    assert all(r["success"] for r in results)

    summary = summarize(results)
    assert summary["games"] == 3 and summary["win_rate"] == 1.0

    csv_path = write_csv(results, str(tmp_path / "run.csv"), max_turns=6)
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3 and rows[0]["answer"] == "crane" and rows[0]["guess_1"]

    manifest_path = write_manifest({"summary": summary}, str(tmp_path / "m" / "manifest.json"))
    with open(manifest_path, encoding="utf-8") as f:
        assert json.load(f)["summary"]["wins"] == 3
