"""FastAPI integration for problem responses.

Handlers:
    problem_exception_handler: Renders raised structured problems
    generic_exception_handler: Renders any other unhandled exception as 500

Exports:
    problem_response: Render an exception as a Response
    register_exception_handlers: Register the handlers with a FastAPI app
"""

from fastapi import FastAPI, Request, Response

from httpproblem.core.container import get_logger
from httpproblem.domain.problem_details import ProblemDetails
from httpproblem.domain.protocols import HTTPError
from httpproblem.domain.validation_problem import ValidationProblem
from httpproblem.presentation.recorder import ResponseRecorder
from httpproblem.presentation.writer import must_write

PROBLEM_EXCEPTION_TYPES: tuple[type[Exception], ...] = (ProblemDetails, ValidationProblem)
"""Exception classes rendered as-is by problem_exception_handler."""


def problem_response(err: BaseException) -> Response:
    """Render any exception as a problem Response.

    Structured problems keep their own status; other errors become a 500
    problem whose detail is the error message.

    Example:
        >>> @app.get("/orders/{order_id}")
        ... async def get_order(order_id: str):
        ...     try:
        ...         return service.get(order_id)
        ...     except LookupError as exc:
        ...         return problem_response(ProblemDetails(404).with_err(exc))
    """
    recorder = ResponseRecorder()
    must_write(recorder, err)
    return recorder.to_response()


async def problem_exception_handler(request: Request, exc: Exception) -> Response:
    """Render a raised ProblemDetails (or ValidationProblem) faithfully."""
    return problem_response(exc)


async def generic_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle unexpected exceptions.

    Errors that happen to carry a status are still written with it; all
    others are logged and escalated to 500 Internal Server Error.
    """
    if not isinstance(exc, HTTPError):
        get_logger().error(
            "Unhandled exception escalated to problem response",
            error=exc,
            request_path=request.url.path,
            request_method=request.method,
        )
    return problem_response(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Register problem exception handlers with a FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    for exc_class in PROBLEM_EXCEPTION_TYPES:
        app.add_exception_handler(exc_class, problem_exception_handler)

    # Catch-all: Starlette routes this through ServerErrorMiddleware
    app.add_exception_handler(Exception, generic_exception_handler)
