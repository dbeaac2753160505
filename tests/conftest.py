"""Shared pytest fixtures for Conversation Generator tests."""

from types import SimpleNamespace
from typing import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from convogen.core.completion import CompletionClient
from convogen.core.config import ConvogenConfig
from convogen.ui.models import ConversationPrompt, UIState

TRIP_PROMPT = "What's the most memorable trip you've ever taken?"


def make_completion(content: str | None) -> SimpleNamespace:
    """Build an object shaped like an OpenAI chat completion response."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def test_config(monkeypatch) -> ConvogenConfig:
    """Create a configuration that ignores the developer's environment.

    Returns:
        ConvogenConfig instance for testing
    """
    for name in ("CONVOGEN_COMPLETION_MODEL", "CONVOGEN_API_BASE_URL", "CONVOGEN_SERVER_PORT"):
        monkeypatch.delenv(name, raising=False)
    return ConvogenConfig(
        _env_file=None,
        completion_model="test-model",
        completion_api_key="test-key",
        api_base_url="http://testserver",
    )


@pytest.fixture
def completion_factory():
    """Return :func:`make_completion` so tests can build custom responses."""
    return make_completion


@pytest.fixture
def mock_sdk() -> MagicMock:
    """OpenAI SDK stand-in whose chat completion returns the trip prompt.

    Override per test with ``mock_sdk.chat.completions.create.return_value``
    or ``side_effect``.
    """
    sdk = MagicMock()
    sdk.chat.completions.create.return_value = make_completion(TRIP_PROMPT)
    return sdk


@pytest.fixture
def completion_client(mock_sdk) -> CompletionClient:
    return CompletionClient(model="test-model", client=mock_sdk)


@pytest.fixture
def test_client(completion_client) -> Generator[TestClient, None, None]:
    """FastAPI TestClient with the completion client replaced by a stub."""
    from convogen.api.main import app

    app.state.completion_client = completion_client
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.state.completion_client = None


@pytest.fixture
def ui_state() -> UIState:
    """Create empty UI state for testing.

    Returns:
        UIState instance
    """
    return UIState()


@pytest.fixture
def selected_state() -> UIState:
    """UI state with a complete happy/travel/icebreaker selection."""
    return UIState(selected_mood="happy", selected_topic="travel", selected_type="icebreaker")


@pytest.fixture
def sample_prompt() -> ConversationPrompt:
    return ConversationPrompt(
        id="prompt-1",
        prompt=TRIP_PROMPT,
        mood="happy",
        topic="travel",
        type="icebreaker",
    )
