"""RFC 7807 problem details for HTTP handlers.

Build a problem anywhere, raise or return it like any other error, and write
it as an `application/problem+json` response at the boundary.

Usage:
    from httpproblem import ProblemDetails, ResponseRecorder, must_write

    problem = ProblemDetails(404).errorf("no order {}", order_id)
    recorder = ResponseRecorder()
    must_write(recorder, problem)
"""

from httpproblem.core.constants import CONTENT_PROBLEM_DETAILS
from httpproblem.domain.problem_details import ProblemDetails
from httpproblem.domain.protocols import HTTPError, ResponseSink
from httpproblem.domain.status_catalog import STATUS_TITLES, title_for, type_for
from httpproblem.domain.validation_problem import ValidationError, ValidationProblem
from httpproblem.presentation import (
    ResponseRecorder,
    must_write,
    problem_response,
    raw_write,
    register_exception_handlers,
    report_error,
    reportf,
    write,
)

__all__ = [
    "CONTENT_PROBLEM_DETAILS",
    "HTTPError",
    "ProblemDetails",
    "ResponseRecorder",
    "ResponseSink",
    "STATUS_TITLES",
    "ValidationError",
    "ValidationProblem",
    "must_write",
    "problem_response",
    "raw_write",
    "register_exception_handlers",
    "report_error",
    "reportf",
    "title_for",
    "type_for",
    "write",
]
