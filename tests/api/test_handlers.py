"""Exception handler tests."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from todo_api.api.exceptions import BadRequestError, NotFoundError, ServiceUnavailableError
from todo_api.api.handlers import register_exception_handlers
from todo_api.api.middleware import RequestIDMiddleware
from todo_api.core import StorageError


class Body(BaseModel):
    """Sample request body."""

    descricao: str


@pytest.fixture
def app_with_handlers() -> FastAPI:
    """Create FastAPI app with exception handlers registered."""
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)
    return app


class TestAPIErrorHandler:
    """Tests for custom API error handler."""

    def test_handles_not_found_error(self, app_with_handlers: FastAPI) -> None:
        """Handles NotFoundError correctly."""

        @app_with_handlers.get("/test")
        async def test_endpoint() -> None:
            raise NotFoundError("Todo", "abc-123")

        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.get("/test")

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "Todo not found"
        assert data["code"] == "NOT_FOUND"
        assert data["detail"] == "Todo with id 'abc-123' does not exist"
        assert "request_id" in data

    def test_handles_bad_request_error(self, app_with_handlers: FastAPI) -> None:
        """Handles BadRequestError as a 400."""

        @app_with_handlers.get("/test")
        async def test_endpoint() -> None:
            raise BadRequestError("Description is required")

        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.get("/test")

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Description is required"
        assert data["code"] == "VALIDATION_ERROR"

    def test_handles_service_unavailable_error(self, app_with_handlers: FastAPI) -> None:
        """Handles ServiceUnavailableError as a 503."""

        @app_with_handlers.get("/test")
        async def test_endpoint() -> None:
            raise ServiceUnavailableError("Todo store")

        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.get("/test")

        assert response.status_code == 503
        assert response.json()["error"] == "Todo store service unavailable"

    def test_request_id_matches_header(self, app_with_handlers: FastAPI) -> None:
        """Error body carries the request ID from the header."""

        @app_with_handlers.get("/test")
        async def test_endpoint() -> None:
            raise NotFoundError("Todo", "x")

        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.get("/test", headers={"X-Request-ID": "req-42"})

        assert response.json()["request_id"] == "req-42"


class TestHTTPExceptionHandler:
    """Tests for framework HTTP errors."""

    def test_unknown_route(self, app_with_handlers: FastAPI) -> None:
        """Unknown routes use the standard error body."""
        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.get("/missing")

        assert response.status_code == 404
        assert response.json()["code"] == "HTTP_404"

    def test_method_not_allowed(self, app_with_handlers: FastAPI) -> None:
        """Wrong methods keep the Allow header."""

        @app_with_handlers.get("/test")
        async def test_endpoint() -> dict[str, str]:
            return {"ok": "true"}

        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.delete("/test")

        assert response.status_code == 405
        assert response.json()["code"] == "HTTP_405"
        assert "GET" in response.headers["allow"]


class TestValidationErrorHandler:
    """Tests for request validation errors."""

    def test_returns_400_with_details(self, app_with_handlers: FastAPI) -> None:
        """Validation errors are 400 with field locations."""

        @app_with_handlers.post("/test")
        async def test_endpoint(body: Body) -> dict[str, str]:
            return {"descricao": body.descricao}

        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.post("/test", json={"descricao": 5})

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert "body.descricao" in data["detail"]


class TestStorageErrorHandler:
    """Tests for storage failures."""

    def test_returns_500_without_driver_detail(self, app_with_handlers: FastAPI) -> None:
        """Storage errors are 500 and hide the driver message."""

        @app_with_handlers.get("/test")
        async def test_endpoint() -> None:
            raise StorageError("get_all", "password authentication failed")

        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.get("/test")

        assert response.status_code == 500
        data = response.json()
        assert data["code"] == "STORAGE_ERROR"
        assert data["detail"] is None


class TestUnhandledExceptionHandler:
    """Tests for unexpected errors."""

    def test_returns_500(self, app_with_handlers: FastAPI) -> None:
        """Unexpected exceptions are 500 without details."""

        @app_with_handlers.get("/test")
        async def test_endpoint() -> None:
            raise RuntimeError("boom")

        client = TestClient(app_with_handlers, raise_server_exceptions=False)
        response = client.get("/test")

        assert response.status_code == 500
        data = response.json()
        assert data["code"] == "INTERNAL_ERROR"
        assert data["detail"] is None
