from .protocol import (
    ComputeRequest, PingRequest, ResultResponse, ErrorResponse, PongResponse,
    Request, Response, is_stale, to_message,
)
from .service import SolverWorker, handle_request
from .channel import SolverChannel, ChannelState

__all__ = [
    "ComputeRequest", "PingRequest", "ResultResponse", "ErrorResponse", "PongResponse",
    "Request", "Response", "is_stale", "to_message",
    "SolverWorker", "handle_request", "SolverChannel", "ChannelState",
]
