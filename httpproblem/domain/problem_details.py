"""ProblemDetails: an HTTP-reportable error value.

A ProblemDetails is an ordinary exception, so it can be raised or returned up
a call chain, and it carries everything needed to render an RFC 7807 response
at the boundary. Title and type are derived from the status when the object
is built; the fluent mutators return the same object for chaining.

The underlying cause is held as the standard `__cause__`, so tracebacks and
generic chain walkers see it. Only one level is kept.

Usage:
    from httpproblem import ProblemDetails

    try:
        order = repo.get(order_id)
    except KeyError as exc:
        raise ProblemDetails(404).errorf("order {} not found: {!w}", order_id, exc)
"""

import string
from typing import TYPE_CHECKING, Any

from httpproblem.domain.status_catalog import title_for, type_for
from httpproblem.schemas import ProblemDetailsSchema

if TYPE_CHECKING:
    from httpproblem.domain.protocols import ResponseSink


class _WrapFormatter(string.Formatter):
    """str.format with an extra `!w` conversion that records wrapped errors."""

    def __init__(self) -> None:
        super().__init__()
        self.wrapped: list[BaseException] = []

    def convert_field(self, value: Any, conversion: str | None) -> Any:
        if conversion == "w":
            if isinstance(value, BaseException):
                self.wrapped.append(value)
            return str(value)
        return super().convert_field(value, conversion)


def format_wrapped(fmt: str, *args: Any, **kwargs: Any) -> tuple[str, BaseException | None]:
    """Format a message and return it with the single error it wraps.

    Args:
        fmt: `str.format` template; `{!w}` marks the wrapped error.
        *args: Positional format arguments.
        **kwargs: Keyword format arguments.

    Returns:
        The formatted message, and the wrapped error when exactly one `!w`
        field referenced an exception (None otherwise).
    """
    formatter = _WrapFormatter()
    message = formatter.format(fmt, *args, **kwargs)
    cause = formatter.wrapped[0] if len(formatter.wrapped) == 1 else None
    return message, cause


class ProblemDetails(Exception):
    """Standard encapsulation of a problem encountered by a web application.

    Attributes:
        status: HTTP status code (0 means unset).
        title: Short summary; derived from status unless given.
        detail: Explanation specific to this occurrence.
        type: URI identifying the problem type; defaults to the per-status URI.
        instance: URI identifying this occurrence. Never set by this package.

    Example:
        >>> problem = ProblemDetails(404).with_detail("No such page")
        >>> str(problem)
        'Not Found'
        >>> problem.type
        'https://httpstatuses.com/404'
    """

    def __init__(
        self,
        status: int = 0,
        *,
        title: str | None = None,
        detail: str = "",
        type: str | None = None,
        instance: str = "",
    ) -> None:
        super().__init__()
        self.status = status
        self.title = title_for(status) if title is None else title
        self.detail = detail
        self.type = type_for(status) if type is None else type
        self.instance = instance

    def __str__(self) -> str:
        return self.title

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(status={self.status!r}, "
            f"title={self.title!r}, detail={self.detail!r})"
        )

    def get_status(self) -> int:
        """Implement the HTTPError protocol."""
        return self.status

    def unwrap(self) -> BaseException | None:
        """Return the wrapped underlying error, if any."""
        return self.__cause__

    # Fluent API

    def errorf(self, fmt: str, *args: Any, **kwargs: Any) -> "ProblemDetails":
        """Set the detail from a format string, capturing a `{!w}` error.

        The formatted message always replaces the detail. The wrapped error
        replaces any previous cause; without a single `{!w}` exception the
        cause is cleared.

        Args:
            fmt: `str.format` template.
            *args: Positional format arguments.
            **kwargs: Keyword format arguments.

        Returns:
            ProblemDetails: self, for chaining.
        """
        self.detail, self.__cause__ = format_wrapped(fmt, *args, **kwargs)
        return self

    def with_detail(self, msg: str) -> "ProblemDetails":
        """Set the detail message verbatim."""
        self.detail = msg
        return self

    def with_err(self, err: BaseException) -> "ProblemDetails":
        """Wrap an error as the cause.

        If the detail is currently blank it is initialized from the error's
        message; an existing detail is kept.

        Raises:
            TypeError: If `err` is not an exception.
        """
        if not isinstance(err, BaseException):
            raise TypeError(f"can't wrap non-error type {type(err).__name__}")
        self.__cause__ = err
        if not self.detail:
            self.detail = str(err)
        return self

    def to_schema(self) -> ProblemDetailsSchema:
        """Build the wire document, leaving empty members unset."""
        return ProblemDetailsSchema(
            status=self.status or None,
            title=self.title or None,
            detail=self.detail or None,
            type=self.type or None,
            instance=self.instance or None,
        )

    def write(self, sink: "ResponseSink") -> None:
        """Send this problem as the whole response: status, headers and JSON body."""
        from httpproblem.presentation.writer import raw_write

        raw_write(sink, self)
