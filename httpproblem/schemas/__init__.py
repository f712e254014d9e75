"""Wire schemas for RFC 7807 problem documents.

Exports:
    InvalidParam: One field-level validation complaint
    ProblemDetailsSchema: RFC 7807 problem document
    ValidationProblemSchema: Problem document with `invalid-params`
"""

from httpproblem.schemas.problem_details import (
    InvalidParam,
    ProblemDetailsSchema,
    ValidationProblemSchema,
)

__all__ = [
    "InvalidParam",
    "ProblemDetailsSchema",
    "ValidationProblemSchema",
]
