"""Unit tests for error_responses and the registered exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from decorbook.api.exception_handlers import register_exception_handlers
from decorbook.crosscutting.error_responses import (
    ErrorCode,
    ErrorDetail,
    conflict,
    forbidden,
    internal_error,
    not_found,
    unauthorized,
    validation_error,
)
from decorbook.crosscutting.exceptions import DatabaseError, PaymentGatewayError
from decorbook.crosscutting.middleware import RequestContextMiddleware

pytestmark = pytest.mark.unit


class TestErrorFactories:
    """Test error factory functions."""

    def test_validation_error(self):
        exc = validation_error("Invalid input", [{"field": "name", "msg": "required"}])
        assert exc.status_code == 400
        assert exc.code == ErrorCode.VALIDATION_ERROR
        assert exc.errors == [{"field": "name", "msg": "required"}]

    def test_not_found(self):
        exc = not_found("Booking not found")
        assert exc.status_code == 404
        assert exc.code == ErrorCode.NOT_FOUND
        assert exc.detail == "Booking not found"

    def test_conflict(self):
        exc = conflict("Already booked")
        assert exc.status_code == 409
        assert exc.code == ErrorCode.CONFLICT

    def test_unauthorized_keeps_legacy_message(self):
        exc = unauthorized()
        assert exc.status_code == 401
        assert exc.detail == "Unauthorized Access!"

    def test_forbidden(self):
        exc = forbidden()
        assert exc.status_code == 403
        assert exc.code == ErrorCode.FORBIDDEN

    def test_internal_error(self):
        exc = internal_error()
        assert exc.status_code == 500
        assert exc.detail == "Server Error"


class TestErrorDetail:
    def test_serialization(self):
        error = ErrorDetail(
            title="Not Found",
            status=404,
            detail="Booking not found",
            message="Booking not found",
            code=ErrorCode.NOT_FOUND,
        )

        data = error.model_dump(mode="json", exclude_none=True)

        assert data["code"] == "NOT_FOUND"
        assert data["message"] == data["detail"]
        assert "errors" not in data


class _Body(BaseModel):
    email: str


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)
    app.add_middleware(RequestContextMiddleware)

    @app.get("/conflict")
    def raise_conflict():
        raise conflict("Booking already exists for this time slot")

    @app.get("/db")
    def raise_db():
        raise DatabaseError("find failed")

    @app.get("/stripe")
    def raise_stripe():
        raise PaymentGatewayError("Checkout session creation failed")

    @app.get("/boom")
    def boom():
        raise RuntimeError("secret internals")

    @app.post("/body")
    def body(payload: _Body):
        return {"ok": True}

    return app


class TestHandlers:
    def test_app_exception_is_problem_json(self):
        response = TestClient(_build_app()).get(
            "/conflict", headers={"X-Request-Id": "req-1"}
        )

        assert response.status_code == 409
        assert response.headers["content-type"].startswith("application/problem+json")
        assert response.headers["X-Request-Id"] == "req-1"
        body = response.json()
        assert body["status"] == 409
        assert body["code"] == "CONFLICT"
        assert body["title"] == "Conflict"
        assert body["message"] == "Booking already exists for this time slot"
        assert body["instance"].endswith("/conflict")
        assert {"request_id": "req-1"} in body["errors"]

    def test_database_error_carries_error_id(self):
        response = TestClient(_build_app()).get("/db")

        assert response.status_code == 500
        body = response.json()
        assert body["code"] == "DATABASE_ERROR"
        assert any("error_id" in item for item in body["errors"])

    def test_payment_gateway_error(self):
        response = TestClient(_build_app()).get("/stripe")

        assert response.status_code == 500
        assert response.json()["code"] == "GATEWAY_ERROR"

    def test_unhandled_error_hides_details(self):
        client = TestClient(_build_app(), raise_server_exceptions=False)

        response = client.get("/boom")

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "Server Error"
        assert "secret internals" not in response.text

    def test_request_validation_is_400(self):
        response = TestClient(_build_app()).post("/body", json={})

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["message"] == "Invalid request data"
        assert any(item.get("loc") == ["body", "email"] for item in body["errors"])
