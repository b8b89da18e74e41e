# apps/cli/assist.py
"""
Interactive Wordle assistant.

Type the guess you played and the colours you got back, e.g.

    > slate BYBBG

and the assistant narrows the candidates and recommends the next guess.
Recommendations are computed on a worker thread; typing new feedback while
one is running simply supersedes it.

Commands:
    <guess> <pattern>   apply feedback (B=absent, Y=elsewhere, G=correct)
    top [n]             show the n best guesses by exact entropy
    candidates          list the remaining candidates (first 50)
    history             show the guesses applied so far
    weight <x>          set the prior weight of past answers (0..1)
    reset               start over
    quit
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import sys
from pathlib import Path

from wordlehelper.config import SolverConfig
from wordlehelper.datasets import load_answers_by_date, load_words
from wordlehelper.history import (
    FirstGuessCache, known_past_answers, should_cache_first_guess, today_key,
)
from wordlehelper.session import Session
from wordlehelper.solvers import Recommendation, top_k
from wordlehelper.worker import ErrorResponse, ResultResponse, SolverChannel


def _fmt_score(score: float) -> str:
    return "solved" if score == float("inf") else f"{score:.3f} bits"


class Assistant:
    def __init__(self, session: Session, channel: SolverChannel, *, past_answers,
                 config: SolverConfig, cache: FirstGuessCache | None = None,
                 day_key: str = "", out=sys.stdout):
        self.session = session
        self.channel = channel
        self.past_answers = past_answers
        self.config = config
        self.cache = cache
        self.day_key = day_key
        self.out = out
        self._latest_request: tuple[int, int] | None = None  # (request id, candidate count)

    def say(self, msg: str = "") -> None:
        print(msg, file=self.out)

    def request(self) -> None:
        rid = self.channel.compute(self.session.candidates, self.session.past_answer_weight)
        self._latest_request = (rid, len(self.session.candidates))

    def show_cached(self) -> None:
        if self.cache is None:
            return
        cached = self.cache.load(self.day_key)
        if cached is not None:
            self.say(f"cached first guess: {cached.guess.upper()}")

    def await_recommendation(self) -> None:
        """Wait for the latest request; Ctrl-C abandons the wait, not the session."""
        try:
            while True:
                resp = self.channel.wait(timeout=0.5)
                if resp is not None:
                    break
                print(".", end="", file=self.out, flush=True)
        except KeyboardInterrupt:
            self.say("\n(still computing in the background)")
            return
        self.show_response(resp)

    def show_response(self, resp) -> None:
        if isinstance(resp, ErrorResponse):
            self.say(f"error: {resp.message}. Check the feedback you entered, or `reset`.")
            self.channel.clear_error()
            return
        if isinstance(resp, ResultResponse):
            n = len(self.session.candidates)
            self.say(f"\nnext guess: {resp.guess.upper()}  ({_fmt_score(resp.score)}, "
                     f"{n} candidate{'s' if n != 1 else ''}, {resp.elapsed_ms:.0f} ms)")
            if self._latest_request is None or self._latest_request[0] != resp.request_id:
                return
            requested = self._latest_request[1]
            if (self.cache is not None and not self.session.history
                    and should_cache_first_guess(requested, self.session.initial_size)):
                self.cache.save(self.day_key, Recommendation(resp.guess, resp.score))

    def show_top(self, n: int) -> None:
        space = self.config.top_k_space(self.session.candidates, self.session.allowed_guesses)
        ranked = top_k(self.session.candidates, space,
                       self.session.weights(self.past_answers), limit=n)
        for i, rec in enumerate(ranked, 1):
            self.say(f"{i:3d}. {rec.guess.upper()}  {rec.score:.3f}")

    def handle(self, line: str) -> bool:
        """Process one input line. Returns False to quit."""
        parts = line.split()
        if not parts:
            return True
        cmd = parts[0].lower()

        if cmd in ("quit", "exit", "q"):
            return False
        if cmd == "reset":
            self.session.reset()
            self.request()
            self.await_recommendation()
        elif cmd == "top":
            n = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else self.config.top_k_limit
            self.show_top(n)
        elif cmd == "candidates":
            cands = self.session.candidates
            self.say(" ".join(cands[:50]) + (" ..." if len(cands) > 50 else ""))
        elif cmd == "history":
            for g, p in self.session.history:
                self.say(f"{g.upper()} {p}")
        elif cmd == "weight" and len(parts) == 2:
            try:
                w = self.session.set_past_answer_weight(float(parts[1]))
            except ValueError:
                self.say("weight must be a number between 0 and 1")
                return True
            self.say(f"past answer weight = {w:.2f}")
            self.request()
            self.await_recommendation()
        elif len(parts) == 2:
            try:
                self.session.apply(parts[0], parts[1])
            except ValueError as e:
                self.say(f"rejected: {e}")
                return True
            if self.session.warning:
                self.say(f"warning: {self.session.warning}")
            if self.session.solved:
                self.say("solved!")
                return True
            self.request()
            self.await_recommendation()
        else:
            self.say("expected: <guess> <pattern>, or top/candidates/history/weight/reset/quit")
        return True


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordlehelper - interactive Wordle assistant")
    ap.add_argument("--possible", default="data/possible.txt", help="possible answers list")
    ap.add_argument("--allowed", default="data/allowed.txt", help="extra allowed guesses list")
    ap.add_argument("--past-answers", default=None, help="past answers in calendar order")
    ap.add_argument("--past-weight", type=float, default=SolverConfig.past_answer_weight,
                    help="prior weight of past answers in [0,1]")
    ap.add_argument("--finish-threshold", type=int, default=SolverConfig.finish_threshold)
    ap.add_argument("--shortlist-size", type=int, default=SolverConfig.shortlist_size)
    ap.add_argument("--cache", default=None, help="JSON file for caching the first guess")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    now = dt.datetime.now(dt.timezone.utc)
    possible = load_words(args.possible)
    allowed = load_words(args.allowed)
    past_answers = (known_past_answers(now, load_answers_by_date(args.past_answers))
                    if args.past_answers else set())

    config = SolverConfig(finish_threshold=args.finish_threshold,
                          shortlist_size=args.shortlist_size,
                          past_answer_weight=args.past_weight)
    session = Session(possible, allowed, past_answer_weight=config.clamp_weight())
    cache = FirstGuessCache(Path(args.cache)) if args.cache else None

    with SolverChannel(session.allowed_guesses, past_answers=past_answers,
                       config=config) as channel:
        if not channel.is_alive():
            print("solver worker did not respond", file=sys.stderr)
            return 1
        assistant = Assistant(session, channel, past_answers=past_answers, config=config,
                              cache=cache, day_key=today_key(dt.date.today()))
        print(f"{len(session.candidates)} candidates, {len(session.allowed_guesses)} allowed guesses")
        assistant.show_cached()
        assistant.request()
        assistant.await_recommendation()
        while True:
            try:
                line = input("> ")
            except EOFError:
                break
            if not assistant.handle(line):
                break
    return 0


if __name__ == "__main__":
    sys.exit(main())
