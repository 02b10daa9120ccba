"""
Test suite for health endpoint and application wiring.

Covers index status reporting, lifespan startup of the index build and
correlation ID propagation.

System role: Verification of status HTTP API and app factory
"""

import logging
import time

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from docs_chat.api.deps import AppContext, get_gateway, get_index_state
from docs_chat.api.routers.health import router
from docs_chat.configs import Settings
from docs_chat.core.exceptions import BuildFailure
from docs_chat.core.retrieval import IndexState
from docs_chat.main import create_app
from docs_chat.observability.middleware import CORRELATION_HEADER


@pytest.fixture
def index_state() -> IndexState:
    return IndexState()


@pytest.fixture
def client(index_state, mock_gateway) -> TestClient:
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_index_state] = lambda: index_state
    app.dependency_overrides[get_gateway] = lambda: mock_gateway
    return TestClient(app)


@pytest.fixture
def restore_root_logging():
    """Undo handler changes made by configure_logging during app startup."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestHealthEndpoint:
    """Test suite for GET /health."""

    def test_building_index_should_report_not_ready(self, client) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["model"] == "anthropic.claude-3-haiku-20240307-v1:0"
        assert data["embed_model"] == "amazon.titan-embed-text-v1"
        assert data["region"] == "us-east-1"
        assert data["index_status"] == "building"
        assert data["index_ready"] is False
        assert data["index_size"] == 0
        assert data["index_error"] is None
        assert data["index_built_at"] is None

    def test_ready_index_should_report_size(self, client, index_state, make_entry) -> None:
        index_state.publish([make_entry(0, [1.0]), make_entry(1, [0.5])])

        data = client.get("/health").json()

        assert data["index_status"] == "ready"
        assert data["index_ready"] is True
        assert data["index_size"] == 2
        assert data["index_built_at"] is not None

    def test_failed_index_should_report_error(self, client, index_state) -> None:
        index_state.fail(BuildFailure("Failed to fetch source documents: File not found", stage="fetch"))

        data = client.get("/health").json()

        assert data["index_status"] == "failed"
        assert data["index_ready"] is False
        assert "File not found" in data["index_error"]


class TestCreateApp:
    """Test suite for the application factory."""

    def test_lifespan_should_build_index(
        self, mock_gateway, mock_loader, restore_root_logging
    ) -> None:
        # Arrange
        context = AppContext(Settings(), gateway=mock_gateway, loader=mock_loader)
        app = create_app(context=context)

        # Act
        with TestClient(app) as client:
            for _ in range(100):
                data = client.get("/api/v1/health").json()
                if data["index_status"] != "building":
                    break
                time.sleep(0.02)

        # Assert
        assert data["index_status"] == "ready"
        assert data["index_size"] == 2

    def test_startup_build_can_be_disabled(
        self, mock_gateway, mock_loader, restore_root_logging
    ) -> None:
        settings = Settings(build_index_on_startup=False)
        context = AppContext(settings, gateway=mock_gateway, loader=mock_loader)

        with TestClient(create_app(settings, context)) as client:
            data = client.get("/api/v1/health").json()

        assert data["index_status"] == "building"
        mock_loader.load.assert_not_awaited()

    def test_correlation_id_should_be_echoed(
        self, mock_gateway, mock_loader, restore_root_logging
    ) -> None:
        settings = Settings(build_index_on_startup=False)
        context = AppContext(settings, gateway=mock_gateway, loader=mock_loader)

        with TestClient(create_app(settings, context)) as client:
            echoed = client.get("/api/v1/health", headers={CORRELATION_HEADER: "req-123"})
            generated = client.get("/api/v1/health")

        assert echoed.headers[CORRELATION_HEADER] == "req-123"
        assert generated.headers[CORRELATION_HEADER]

    def test_debug_setting_should_reach_app(self, mock_gateway, mock_loader) -> None:
        settings = Settings(debug=True, build_index_on_startup=False)
        context = AppContext(settings, gateway=mock_gateway, loader=mock_loader)

        assert create_app(settings, context).debug is True
        assert create_app(Settings(debug=False), context).debug is False
