"""ResponseSink protocol for the hosting HTTP layer.

Mirrors what any HTTP response writer offers: set a header, set the status
line, write body bytes. Implementations are not required to be thread-safe;
one sink belongs to one response.
"""

from typing import Protocol


class ResponseSink(Protocol):
    """Destination for a single HTTP response."""

    def set_header(self, name: str, value: str) -> None:
        """Set (replace) a response header."""
        ...

    def set_status(self, status: int) -> None:
        """Set the response status code."""
        ...

    def write(self, data: bytes) -> None:
        """Append bytes to the response body."""
        ...
