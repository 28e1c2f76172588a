"""Shared test fixtures."""

from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from figma_relay.app import app
from figma_relay.config import Settings

DISCORD_URL = "https://discord.test/api/webhooks/1/token"


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Build Settings independent of the process environment and any .env file."""

    def _make(**overrides) -> Settings:
        values = {
            "discord_webhook_url": DISCORD_URL,
            "figma_api_token": "figd_test_token",
            "replace_words": [],
            "project_name": None,
            "figma_webhook_passcode": None,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()


@pytest.fixture
def comment_payload() -> dict:
    """A top-level FILE_COMMENT payload as Figma sends it."""
    return {
        "event_type": "FILE_COMMENT",
        "webhook_id": "77",
        "file_key": "fk123",
        "file_name": "Design",
        "comment": [{"text": "Please review"}],
        "comment_id": "c1",
        "parent_id": "",
        "resolved_at": "",
        "triggered_by": {"id": "u1", "handle": "alice", "img_url": "https://img.test/a.png"},
        "timestamp": "2024-05-01T10:00:00Z",
    }


@pytest.fixture
def reply_payload(comment_payload) -> dict:
    return {
        **comment_payload,
        "comment": [{"text": "Thanks"}],
        "comment_id": "c2",
        "parent_id": "42",
    }


@pytest.fixture
def version_payload() -> dict:
    return {
        "event_type": "FILE_VERSION_UPDATE",
        "file_key": "fk123",
        "file_name": "Design",
        "triggered_by": {"id": "u1", "handle": "alice", "img_url": "https://img.test/a.png"},
        "description": "Header and footer reworked",
        "label": "v1.2",
        "version_id": "991",
        "timestamp": "2024-05-01T12:00:00Z",
    }
