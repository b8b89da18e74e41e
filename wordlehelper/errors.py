"""
Error taxonomy for the solver core.

All three are local, synchronous failures raised by the function that
detects them. They subclass ValueError so callers that already guard
against bad input keep working.
"""


class WordleHelperError(ValueError):
    """Base class for solver-core errors."""


class InvalidLength(WordleHelperError):
    """Feedback inputs were not exactly 5 letters long."""


class WeightLengthMismatch(WordleHelperError):
    """A weight vector does not line up with its candidate set."""


class NoCandidates(WordleHelperError):
    """Recommendation requested against an empty candidate set."""
