"""ValidationProblem: problem details extended with field-level errors.

Follows the form-validation example in section 3 of RFC 7807. The base
problem is held as a component and the status capability is delegated to
it, so the writer handles a ValidationProblem like any other HTTPError.

Usage:
    problem = ValidationProblem()
    problem.add("email", "Must be a valid e-mail address")
    problem.add("name", "You must provide your name")
    raise problem
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from httpproblem.core.constants import HTTP_BAD_REQUEST, VALIDATION_DETAIL_DEFAULT
from httpproblem.domain.problem_details import ProblemDetails
from httpproblem.schemas import InvalidParam, ValidationProblemSchema

if TYPE_CHECKING:
    from httpproblem.domain.protocols import ResponseSink


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Server-side validation error for one submitted field.

    Attributes:
        field_name: Name of the field (non-empty).
        reason: Human-readable complaint.
    """

    field_name: str
    reason: str

    def __post_init__(self) -> None:
        if not self.field_name:
            raise ValueError("field_name must not be empty")


@dataclass(eq=False)
class ValidationProblem(Exception):
    """A 400 problem listing the fields that failed validation.

    Attributes:
        problem: The base problem (status 400, generic detail).
        validation_errors: Field errors in the order they were added.
    """

    problem: ProblemDetails = field(
        default_factory=lambda: ProblemDetails(
            HTTP_BAD_REQUEST, detail=VALIDATION_DETAIL_DEFAULT
        )
    )
    validation_errors: list[ValidationError] = field(default_factory=list)

    def __str__(self) -> str:
        return str(self.problem)

    def get_status(self) -> int:
        """Implement the HTTPError protocol by delegating to the base problem."""
        return self.problem.get_status()

    def unwrap(self) -> BaseException | None:
        return self.problem.unwrap()

    def add(self, field_name: str, reason: str) -> "ValidationProblem":
        """Append a validation error for a field.

        No deduplication: the same field may be reported more than once.
        """
        self.validation_errors.append(ValidationError(field_name, reason))
        return self

    def errorf(self, fmt: str, *args: Any, **kwargs: Any) -> "ValidationProblem":
        """Set the detail from a format string; `{!w}` wraps an error as cause."""
        self.problem.errorf(fmt, *args, **kwargs)
        self.__cause__ = self.problem.unwrap()
        return self

    def with_detail(self, msg: str) -> "ValidationProblem":
        self.problem.with_detail(msg)
        return self

    def with_err(self, err: BaseException) -> "ValidationProblem":
        self.problem.with_err(err)
        self.__cause__ = err
        return self

    def to_schema(self) -> ValidationProblemSchema:
        """Base problem members plus `invalid-params` (omitted when empty)."""
        params = [
            InvalidParam(name=ve.field_name, reason=ve.reason)
            for ve in self.validation_errors
        ]
        return ValidationProblemSchema(
            **self.problem.to_schema().model_dump(exclude_none=True),
            invalid_params=params or None,
        )

    def write(self, sink: "ResponseSink") -> None:
        from httpproblem.presentation.writer import raw_write

        raw_write(sink, self)
