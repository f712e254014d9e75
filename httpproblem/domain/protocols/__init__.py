"""Domain protocols (ports) package.

Adapters and extensions satisfy these protocols structurally, without
inheritance.

Usage:
    from httpproblem.domain.protocols import HTTPError, ResponseSink
"""

from httpproblem.domain.protocols.http_error_protocol import HTTPError
from httpproblem.domain.protocols.logger_protocol import LoggerProtocol
from httpproblem.domain.protocols.response_sink_protocol import ResponseSink

__all__ = [
    "HTTPError",
    "LoggerProtocol",
    "ResponseSink",
]
