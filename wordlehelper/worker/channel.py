"""
Interactive side of the async computation channel.

State machine per session:

    IDLE --compute()--> COMPUTING --result--> IDLE
                                  --error---> ERROR --clear_error()/compute()--> ...

Each compute() gets the next request id. There is no cancel: issuing a new
request supersedes every earlier one, and their responses are dropped as
stale whenever they show up. Pings bypass the id check entirely.
"""

from __future__ import annotations

import enum
import logging
import queue
import time
from typing import AbstractSet, Optional, Sequence

from wordlehelper.config import SolverConfig
from .protocol import (
    ComputeRequest, ErrorResponse, PingRequest, PongResponse, Response, ResultResponse, is_stale,
)
from .service import SolverWorker

log = logging.getLogger(__name__)


class ChannelState(enum.Enum):
    IDLE = "idle"
    COMPUTING = "computing"
    ERROR = "error"


class SolverChannel:
    def __init__(self, allowed_guesses: Sequence[str], *,
                 past_answers: AbstractSet[str] = frozenset(),
                 config: Optional[SolverConfig] = None):
        self.inbox: queue.Queue = queue.Queue()
        self.outbox: queue.Queue = queue.Queue()
        self.worker = SolverWorker(allowed_guesses, past_answers=past_answers, config=config,
                                   inbox=self.inbox, outbox=self.outbox)
        self.state = ChannelState.IDLE
        self.latest_request_id = 0
        self.last_result: Optional[ResultResponse] = None
        self.last_error: Optional[ErrorResponse] = None
        self.last_pong_at: Optional[float] = None

    # ---- lifecycle ----
    def start(self) -> "SolverChannel":
        if not self.worker.is_alive():
            self.worker.start()
        return self

    def close(self, timeout: float | None = 1.0) -> None:
        self.worker.stop(timeout)

    def __enter__(self) -> "SolverChannel":
        return self.start()

    def __exit__(self, *exc) -> None:
        self.close()

    # ---- requests ----
    def compute(self, candidates: Sequence[str], past_answer_weight: float | None = None) -> int:
        """Issue a compute request; returns its id. Supersedes earlier requests."""
        self.latest_request_id += 1
        req = ComputeRequest(self.latest_request_id, tuple(candidates), past_answer_weight)
        self.state = ChannelState.COMPUTING
        self.inbox.put(req)
        log.debug(f"issued request {req.request_id} ({len(req.candidates)} candidates)")
        return req.request_id

    def ping(self) -> None:
        self.inbox.put(PingRequest())

    def clear_error(self) -> None:
        if self.state is ChannelState.ERROR:
            self.state = ChannelState.IDLE

    # ---- responses ----
    def accept(self, response: Response) -> Optional[Response]:
        """
        Apply the staleness rule to one response.
        Returns the response if it is authoritative (or a pong), else None.
        """
        if isinstance(response, PongResponse):
            self.last_pong_at = time.monotonic()
            return response
        if is_stale(response, self.latest_request_id):
            log.warning(f"discarding stale response for request {response.request_id} "
                        f"(latest is {self.latest_request_id})")
            return None
        if isinstance(response, ResultResponse):
            self.last_result = response
            self.state = ChannelState.IDLE
        elif isinstance(response, ErrorResponse):
            self.last_error = response
            self.state = ChannelState.ERROR
        return response

    def poll(self) -> Optional[Response]:
        """
        Drain everything the worker has posted without blocking.
        Returns the authoritative result/error seen, if any.
        """
        found: Optional[Response] = None
        while True:
            try:
                response = self.outbox.get_nowait()
            except queue.Empty:
                return found
            accepted = self.accept(response)
            if accepted is not None and not isinstance(accepted, PongResponse):
                found = accepted

    def wait(self, timeout: float | None = None) -> Optional[Response]:
        """
        Block until the latest request is answered (or `timeout` seconds pass).
        Returns the authoritative result/error, or None on timeout.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            try:
                response = self.outbox.get(timeout=remaining)
            except queue.Empty:
                return None
            accepted = self.accept(response)
            if accepted is not None and not isinstance(accepted, PongResponse):
                return accepted

    def is_alive(self, timeout: float = 1.0) -> bool:
        """Round-trip a ping. Other responses seen meanwhile go through accept()."""
        self.ping()
        deadline = time.monotonic() + timeout
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            try:
                response = self.outbox.get(timeout=remaining)
            except queue.Empty:
                return False
            if isinstance(self.accept(response), PongResponse):
                return True
