"""Presentation layer: writing problems to HTTP responses.

Exports:
    ResponseRecorder: In-memory ResponseSink
    raw_write: Write any HTTPError as a problem response
    write: Write an error if it is a structured problem
    must_write: Write any error, escalating opaque errors to 500
    reportf: Build a problem from a status and format string
    report_error: Build and immediately write a problem
    problem_response: Render an exception as a FastAPI Response
    register_exception_handlers: Register problem handlers with FastAPI
"""

from httpproblem.presentation.exception_handlers import (
    problem_response,
    register_exception_handlers,
)
from httpproblem.presentation.recorder import ResponseRecorder
from httpproblem.presentation.writer import (
    must_write,
    raw_write,
    report_error,
    reportf,
    write,
)

__all__ = [
    "ResponseRecorder",
    "must_write",
    "problem_response",
    "raw_write",
    "register_exception_handlers",
    "report_error",
    "reportf",
    "write",
]
