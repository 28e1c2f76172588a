"""Tests for the FastAPI application lifespan."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from figma_relay.app import app


def test_lifespan_configures_logging_from_settings(make_settings):
    """Startup loads settings and applies its log level."""
    settings = make_settings(log_level="DEBUG")
    with (
        patch("figma_relay.app.get_settings", return_value=settings),
        patch("figma_relay.app.configure_logging") as mock_logging,
    ):
        with TestClient(app) as client:
            assert client.get("/health").status_code == 200

    mock_logging.assert_called_once_with("DEBUG")
