"""Unit tests for writing problems to a response sink."""

import pytest

from httpproblem.core.constants import CONTENT_PROBLEM_DETAILS
from httpproblem.domain.problem_details import ProblemDetails
from httpproblem.presentation.writer import (
    must_write,
    raw_write,
    report_error,
    reportf,
    write,
)
from httpproblem.schemas import ProblemDetailsSchema


def _decode(recorder) -> ProblemDetailsSchema:
    return ProblemDetailsSchema.model_validate_json(bytes(recorder.body))


class _Teapot:
    """Object that only has the status capability."""

    def get_status(self) -> int:
        return 418


@pytest.mark.unit
class TestRoundTrip:
    """Construct, write, decode."""

    @pytest.mark.parametrize(
        ("status", "detail"),
        [
            (404, "No such page"),
            (507, "Server disk is full"),
        ],
    )
    def test_write_then_decode(self, recorder, status, detail):
        """Test the decoded body matches what was built."""
        # Arrange
        problem = ProblemDetails(status).errorf(detail)

        # Act
        result = write(recorder, problem)

        # Assert
        assert result is None
        assert recorder.status_code == status
        assert recorder.content_type == CONTENT_PROBLEM_DETAILS
        decoded = _decode(recorder)
        assert decoded.status == status
        assert decoded.title
        assert decoded.type
        assert decoded.detail == detail

    def test_body_is_newline_terminated_json(self, recorder):
        ProblemDetails(404).write(recorder)

        assert recorder.body.endswith(b"\n")
        assert recorder.json() == {
            "status": 404,
            "title": "Not Found",
            "type": "https://httpstatuses.com/404",
        }


@pytest.mark.unit
class TestRawWrite:
    """Unit tests for raw_write over the HTTPError capability."""

    def test_status_only_object_is_written(self, recorder):
        """Test any object with get_status can be written."""
        raw_write(recorder, _Teapot())

        assert recorder.status_code == 418
        assert recorder.content_type == CONTENT_PROBLEM_DETAILS
        assert recorder.json() == {"status": 418}

    def test_pydantic_document_is_written_as_is(self, recorder):
        class Document(ProblemDetailsSchema):
            def get_status(self) -> int:
                return self.status or 0

        raw_write(recorder, Document(status=402, title="Payment Required", balance=30))

        assert recorder.status_code == 402
        assert recorder.json() == {"status": 402, "title": "Payment Required", "balance": 30}


@pytest.mark.unit
class TestWrite:
    """Unit tests for the non-fluent write dispatch."""

    def test_none_is_a_no_op(self, recorder):
        """Test nothing is written and nothing returned for None."""
        assert write(recorder, None) is None
        assert not recorder.status_written
        assert recorder.body == b""
        assert recorder.headers == {}

    def test_plain_error_is_returned_untouched(self, recorder):
        """Test an error without a status is handed back, unwritten."""
        err = ValueError("not a problem report")

        result = write(recorder, err)

        assert result is err
        assert str(result) == "not a problem report"
        assert not recorder.status_written
        assert recorder.body == b""
        assert recorder.headers == {}

    def test_non_error_value_is_reported(self, recorder):
        """Test a non-exception value yields a TypeError describing it."""
        result = write(recorder, 42)

        assert isinstance(result, TypeError)
        assert str(result) == "can't write non-error type int"
        assert recorder.body == b""


@pytest.mark.unit
class TestMustWrite:
    """Unit tests for must_write escalation."""

    def test_plain_error_becomes_500(self, recorder):
        """Test an opaque error is written as Internal Server Error."""
        must_write(recorder, RuntimeError("This is not a problem report"))

        decoded = _decode(recorder)
        assert recorder.status_code == 500
        assert decoded.status == 500
        assert decoded.title == "Internal Server Error"
        assert decoded.detail == "This is not a problem report"

    def test_structured_problem_is_written_faithfully(self, recorder):
        must_write(recorder, ProblemDetails(404).with_detail("Page not found"))

        decoded = _decode(recorder)
        assert recorder.status_code == 404
        assert decoded.detail == "Page not found"

    def test_none_writes_nothing(self, recorder):
        must_write(recorder, None)

        assert not recorder.status_written
        assert recorder.body == b""

    def test_non_error_value_becomes_500(self, recorder):
        must_write(recorder, "oops")

        assert recorder.status_code == 500
        assert _decode(recorder).detail == "can't write non-error type str"


@pytest.mark.unit
class TestConvenience:
    """Unit tests for reportf and report_error."""

    def test_reportf_builds_problem(self):
        cause = KeyError("order-7")

        problem = reportf(409, "order {} already shipped: {!w}", 7, cause)

        assert problem.status == 409
        assert problem.title == "Conflict"
        assert problem.detail == "order 7 already shipped: 'order-7'"
        assert problem.unwrap() is cause

    def test_report_error_writes_immediately(self, recorder):
        report_error(recorder, "Server disk is full", 507)

        decoded = _decode(recorder)
        assert recorder.status_code == 507
        assert decoded.title == "Insufficient Storage"
        assert decoded.detail == "Server disk is full"
