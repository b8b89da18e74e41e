# apps/cli/run.py
"""
CLI entry point for solver simulation runs.

This script:
  1) Validates the word lists (prints counts + SHA, overlap, union size).
  2) Loads the lists and instantiates the requested solver.
  3) Plays a batch of games against known answers with a live progress
     indicator and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, word list hashes, git commit, summary
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordlehelper.config import SolverConfig
from wordlehelper.datasets import load_answers_by_date, load_words, pretty_summary, validate_wordlists
from wordlehelper.harness import WORDLE_MAX_TURNS, run_case, summarize, write_csv, write_manifest
from wordlehelper.harness.io import git_commit_or_unknown, timestamp_id
from wordlehelper.history import known_past_answers
from wordlehelper.solvers import create_solver, get_solver_ids


def main(argv=None):
    """
    Parse CLI args, validate word lists, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordlehelper - run solver simulations")
    ap.add_argument("--solver", default="entropy_fast",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--possible", default="data/possible.txt",
                    help="path to the possible answers list (candidate universe)")
    ap.add_argument("--allowed", default="data/allowed.txt",
                    help="path to the extra allowed guesses list")
    ap.add_argument("--past-answers", default=None,
                    help="past answers in calendar order (enables weighting)")
    ap.add_argument("--past-weight", type=float, default=None,
                    help="prior weight for past answers in [0,1] (default: uniform weights)")
    ap.add_argument("--date", default=None,
                    help="UTC date (YYYY-MM-DD) used to decide which answers are past")
    ap.add_argument("--finish-threshold", type=int, default=SolverConfig.finish_threshold)
    ap.add_argument("--shortlist-size", type=int, default=SolverConfig.shortlist_size)
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for sampling")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="Show run progress (auto=bar when stderr is a terminal).")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.possible, args.allowed)
    print(pretty_summary(rep))

    # 2) Load lists into memory
    possible = load_words(args.possible)
    allowed = list(dict.fromkeys([*load_words(args.allowed), *possible]))

    past_answers = set()
    if args.past_answers:
        when = (dt.datetime.strptime(args.date, "%Y-%m-%d").replace(hour=12, tzinfo=dt.timezone.utc)
                if args.date else dt.datetime.now(dt.timezone.utc))
        past_answers = known_past_answers(when, load_answers_by_date(args.past_answers))
        print(f"{len(past_answers)} known past answers as of {when.date()}")

    # 3) Instantiate solver by id
    config = SolverConfig(finish_threshold=args.finish_threshold,
                          shortlist_size=args.shortlist_size)
    solver = create_solver(args.solver, config)

    # 4) Choose cases (deterministic sample by seed)
    if args.sample and args.sample < len(possible):
        pool = list(possible)
        random.Random(args.seed).shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(possible)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"
    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 5) Run batch
    start = time.time()
    results = []
    for ans in iterator:
        r = run_case(solver, ans, allowed=allowed, answers=possible,
                     past_answers=past_answers, past_answer_weight=args.past_weight)
        r["solver_id"] = solver.id  # stamp id for downstream tools
        results.append(r)
    summary = summarize(results)

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "elapsed_s": round(time.time() - start, 3),
        "summary": summary,
    }, str(manifest_path))

    print(f"win rate {summary['win_rate']:.1%} | mean guesses {summary['mean_guesses']:.3f} "
          f"| mean time {summary['mean_time_ms']:.1f} ms")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
