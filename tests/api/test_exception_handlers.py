"""API tests for the FastAPI problem exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from httpproblem.core.constants import CONTENT_PROBLEM_DETAILS
from httpproblem.domain.problem_details import ProblemDetails
from httpproblem.domain.validation_problem import ValidationProblem
from httpproblem.presentation.exception_handlers import (
    problem_response,
    register_exception_handlers,
)


@pytest.fixture
def client():
    """Create a test app with problem handlers registered.

    Returns:
        TestClient: Client that returns 500 responses instead of raising.
    """
    app = FastAPI(title="Test App")
    register_exception_handlers(app)

    @app.get("/orders/{order_id}")
    async def get_order(order_id: str):
        try:
            raise KeyError(order_id)
        except KeyError as exc:
            raise ProblemDetails(404).errorf("order {} not found: {!w}", order_id, exc)

    @app.post("/signup")
    async def signup():
        problem = ValidationProblem()
        problem.add("email", "Must be a valid e-mail address")
        problem.add("name", "You must provide your name")
        raise problem

    @app.get("/boom")
    async def boom():
        raise RuntimeError("database unavailable")

    @app.get("/returned")
    async def returned():
        return problem_response(ProblemDetails(409).with_detail("Already exists"))

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.api
class TestExceptionHandlers:
    """Raised and returned problems reach the client as RFC 7807 responses."""

    def test_raised_problem(self, client):
        response = client.get("/orders/123")

        assert response.status_code == 404
        assert response.headers["content-type"] == CONTENT_PROBLEM_DETAILS
        assert response.json() == {
            "status": 404,
            "title": "Not Found",
            "detail": "order 123 not found: '123'",
            "type": "https://httpstatuses.com/404",
        }

    def test_raised_validation_problem(self, client):
        response = client.post("/signup")

        body = response.json()
        assert response.status_code == 400
        assert response.headers["content-type"] == CONTENT_PROBLEM_DETAILS
        assert [p["name"] for p in body["invalid-params"]] == ["email", "name"]

    def test_unhandled_exception_becomes_500(self, client):
        response = client.get("/boom")

        body = response.json()
        assert response.status_code == 500
        assert response.headers["content-type"] == CONTENT_PROBLEM_DETAILS
        assert body["title"] == "Internal Server Error"
        assert body["detail"] == "database unavailable"

    def test_returned_problem_response(self, client):
        response = client.get("/returned")

        assert response.status_code == 409
        assert response.json()["detail"] == "Already exists"
