"""
Solver worker: runs recommendations off the interactive thread.

The worker owns the read-only guess universe and the set of known past
answers. It takes one request at a time from its inbox, runs it to
completion and posts exactly one response per request. Failures become
ErrorResponse messages tagged with the request id; the thread keeps going.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from typing import AbstractSet, Optional, Sequence

from wordlehelper.config import SolverConfig
from wordlehelper.errors import WordleHelperError
from wordlehelper.history import build_weights
from wordlehelper.solvers import recommend
from .protocol import (
    ComputeRequest, ErrorResponse, PingRequest, PongResponse, Request, Response, ResultResponse,
    to_message,
)

log = logging.getLogger(__name__)

# Put on the inbox to stop the worker loop.
STOP = object()


def handle_request(request: Request,
                   allowed_guesses: Sequence[str],
                   past_answers: AbstractSet[str] = frozenset(),
                   config: Optional[SolverConfig] = None) -> Optional[Response]:
    """
    Serve one request synchronously.

    A compute request with `past_answer_weight` set gets a weight vector built
    from `past_answers`; without it the candidates are weighted uniformly.
    Unknown message types are ignored (returns None).
    """
    if isinstance(request, PingRequest):
        return PongResponse()
    if not isinstance(request, ComputeRequest):
        log.warning(f"ignoring unknown request {request!r}")
        return None

    config = config or SolverConfig()
    candidates = list(request.candidates)
    t0 = time.perf_counter()
    try:
        weights = None
        if request.past_answer_weight is not None:
            weights = build_weights(candidates, past_answers, request.past_answer_weight)
        rec = recommend(candidates, allowed_guesses, weights,
                        finish_threshold=config.finish_threshold,
                        shortlist_size=config.shortlist_size)
    except WordleHelperError as e:
        log.info(f"request {request.request_id} failed: {e}")
        return ErrorResponse(request.request_id, str(e))
    except Exception as e:
        log.exception(f"request {request.request_id} crashed")
        return ErrorResponse(request.request_id, f"internal error: {e}")

    elapsed_ms = (time.perf_counter() - t0) * 1000.0
    return ResultResponse(request.request_id, rec.guess, rec.score, elapsed_ms)


class SolverWorker(threading.Thread):
    def __init__(self, allowed_guesses: Sequence[str], *,
                 past_answers: AbstractSet[str] = frozenset(),
                 config: Optional[SolverConfig] = None,
                 inbox: Optional[queue.Queue] = None,
                 outbox: Optional[queue.Queue] = None):
        super().__init__(name="solver-worker", daemon=True)
        self.allowed_guesses = list(allowed_guesses)
        self.past_answers = frozenset(past_answers)
        self.config = config or SolverConfig()
        self.inbox: queue.Queue = inbox if inbox is not None else queue.Queue()
        self.outbox: queue.Queue = outbox if outbox is not None else queue.Queue()

    def run(self) -> None:
        log.info(f"solver worker started ({len(self.allowed_guesses)} allowed guesses)")
        while True:
            request = self.inbox.get()
            if request is STOP:
                break
            response = handle_request(request, self.allowed_guesses, self.past_answers, self.config)
            if response is not None:
                log.debug(f"solver worker -> {to_message(response)}")
                self.outbox.put(response)
        log.info("solver worker stopped")

    def stop(self, timeout: float | None = None) -> None:
        self.inbox.put(STOP)
        if self.is_alive():
            self.join(timeout)
