"""RFC 7807 Problem Details wire format.

Pydantic models describing the JSON document written to the response body.
Every member is optional; unset members are omitted on output
(`model_dump_json(by_alias=True, exclude_none=True)`).

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    InvalidParam: One field-level validation complaint
    ProblemDetailsSchema: RFC 7807 problem document
    ValidationProblemSchema: Problem document with `invalid-params`
"""

from pydantic import BaseModel, ConfigDict, Field


class InvalidParam(BaseModel):
    """Field-level validation complaint, as in section 3 of RFC 7807.

    Examples:
        >>> InvalidParam(name="email", reason="Must be a valid e-mail address")
    """

    name: str = Field(..., min_length=1, description="Name of the offending field")
    reason: str = Field(..., description="Human-readable reason")


class ProblemDetailsSchema(BaseModel):
    """RFC 7807 Problem Details document.

    Extension members are accepted and round-tripped (`extra="allow"`).

    Attributes:
        status: HTTP status code for this occurrence
        title: Short, human-readable summary of the problem type
        detail: Human-readable explanation specific to this occurrence
        type: URI reference identifying the problem type
        instance: URI reference identifying the specific occurrence

    Examples:
        >>> ProblemDetailsSchema(
        ...     status=404,
        ...     title="Not Found",
        ...     detail="No such page",
        ...     type="https://httpstatuses.com/404",
        ... ).model_dump_json(exclude_none=True)
        '{"status":404,"title":"Not Found","detail":"No such page","type":"https://httpstatuses.com/404"}'
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    status: int | None = Field(None, description="HTTP status code", examples=[404])
    title: str | None = Field(
        None, description="Short, human-readable summary", examples=["Not Found"]
    )
    detail: str | None = Field(
        None, description="Human-readable explanation", examples=["No such page"]
    )
    type: str | None = Field(
        None,
        description="URI reference identifying the problem type",
        examples=["https://httpstatuses.com/404"],
    )
    instance: str | None = Field(
        None,
        description="URI reference identifying this occurrence",
        examples=["/orders/123"],
    )


class ValidationProblemSchema(ProblemDetailsSchema):
    """Problem document carrying field-level validation errors."""

    invalid_params: list[InvalidParam] | None = Field(
        None,
        alias="invalid-params",
        description="Field-level validation errors, in the order they were found",
    )
