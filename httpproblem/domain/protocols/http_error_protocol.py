"""HTTPError protocol: the minimal "has an HTTP status" capability.

Anything exposing `get_status()` can be written as a problem response, so
ProblemDetails can be wrapped and extended (see ValidationProblem) without
the writer knowing the concrete type.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class HTTPError(Protocol):
    """Object that carries an HTTP status code."""

    def get_status(self) -> int:
        """Return the HTTP status code to send (0 means unset)."""
        ...
