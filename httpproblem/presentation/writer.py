"""Write problems to an HTTP response.

Each function here performs at most one status/header write and one body
write on the sink. Callers must not write the same response twice; nothing
here buffers or detects a second write.

Non-fluent API:
    write: writes structured problems, hands anything else back
    must_write: like write, but escalates opaque errors to a 500 problem
    reportf: build a problem from a status and a format string
    report_error: build and immediately write a problem (like http.Error)
"""

from typing import Any

from pydantic import BaseModel

from httpproblem.core.config import get_settings
from httpproblem.core.constants import CONTENT_TYPE_HEADER, HTTP_INTERNAL_SERVER_ERROR
from httpproblem.domain.problem_details import ProblemDetails
from httpproblem.domain.protocols import HTTPError, ResponseSink
from httpproblem.schemas import ProblemDetailsSchema


def _to_document(obj: HTTPError) -> BaseModel:
    """Pick the wire document for anything exposing a status."""
    if isinstance(obj, BaseModel):
        return obj
    to_schema = getattr(obj, "to_schema", None)
    if callable(to_schema):
        return to_schema()
    return ProblemDetailsSchema(status=obj.get_status() or None)


def raw_write(sink: ResponseSink, obj: HTTPError) -> None:
    """Write anything satisfying HTTPError as a JSON problem details object.

    Sets the content type, writes the status taken from `obj.get_status()`,
    then encodes the body (newline terminated).

    Args:
        sink: Response to write to; must not have been written yet.
        obj: Structured problem.
    """
    body = _to_document(obj).model_dump_json(by_alias=True, exclude_none=True)
    sink.set_header(CONTENT_TYPE_HEADER, get_settings().content_type)
    sink.set_status(obj.get_status())
    sink.write(body.encode("utf-8") + b"\n")


def write(sink: ResponseSink, err: Any) -> BaseException | None:
    """Write the error if it is a structured problem.

    Args:
        sink: Response to write to.
        err: Error to report, or None.

    Returns:
        None if there was nothing to write or the problem was written.
        The same error, untouched, if it carries no status.
        A TypeError describing the value if `err` is not an exception.
    """
    if err is None:
        return None
    if isinstance(err, HTTPError):
        raw_write(sink, err)
        return None
    if isinstance(err, BaseException):
        return err
    return TypeError(f"can't write non-error type {type(err).__name__}")


def must_write(sink: ResponseSink, err: Any) -> None:
    """Like write, but anything that is not a structured problem is written
    as a new 500 Internal Server Error problem wrapping it.

    Nothing is written when `err` is None.
    """
    residual = write(sink, err)
    if residual is not None:
        ProblemDetails(HTTP_INTERNAL_SERVER_ERROR).with_err(residual).write(sink)


def reportf(status: int, fmt: str, *args: Any, **kwargs: Any) -> ProblemDetails:
    """Create a problem like `ProblemDetails(status).errorf(fmt, ...)`.

    Example:
        >>> raise reportf(409, "order {} already shipped", order_id)
    """
    return ProblemDetails(status).errorf(fmt, *args, **kwargs)


def report_error(sink: ResponseSink, msg: str, status: int) -> None:
    """Create a problem with the given detail and status and write it at once."""
    ProblemDetails(status).with_detail(msg).write(sink)
