"""
Message protocol between the interactive side and the solver worker.

Requests (interactive -> worker):
  ComputeRequest(request_id, candidates, past_answer_weight=None)
  PingRequest()

Responses (worker -> interactive):
  ResultResponse(request_id, guess, score, elapsed_ms)
  ErrorResponse(request_id, message)
  PongResponse()

Every compute-related message carries the id of the request it answers.
Only the response for the most recently issued id is authoritative; older
ones are stale and dropped, whenever they arrive. Pings carry no id and are
never stale.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import ClassVar, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class ComputeRequest:
    kind: ClassVar[str] = "compute"
    request_id: int
    candidates: Tuple[str, ...] = field(default_factory=tuple)
    past_answer_weight: Optional[float] = None


@dataclass(frozen=True)
class PingRequest:
    kind: ClassVar[str] = "ping"


@dataclass(frozen=True)
class ResultResponse:
    kind: ClassVar[str] = "result"
    request_id: int
    guess: str
    score: float
    elapsed_ms: float


@dataclass(frozen=True)
class ErrorResponse:
    kind: ClassVar[str] = "error"
    request_id: int
    message: str


@dataclass(frozen=True)
class PongResponse:
    kind: ClassVar[str] = "pong"


Request = Union[ComputeRequest, PingRequest]
Response = Union[ResultResponse, ErrorResponse, PongResponse]


def is_stale(response: Response, latest_request_id: int) -> bool:
    """True iff `response` answers a request other than the latest one."""
    rid = getattr(response, "request_id", None)
    return rid is not None and rid != latest_request_id


def to_message(msg: Union[Request, Response]) -> Dict:
    """Plain dict form with a `kind` tag (for logs and JSON)."""
    d = asdict(msg)
    if "candidates" in d:
        d["candidates"] = list(d["candidates"])
    return {"kind": msg.kind, **d}
