"""Integration tests for convogen.api.main — FastAPI REST API endpoints.

All tests use the FastAPI TestClient with the OpenAI SDK replaced by a mock
so that no network access occurs.  Tests cover every endpoint:

- ``POST /api/generate-conversation`` — Conversation starter generation.
- ``GET /api/catalog`` — Selector catalogs.
- ``GET /api/health`` — Liveness probe.
"""

from __future__ import annotations

import httpx
import openai
import pytest

MISSING = "Missing required fields: mood, topic, and type are required"
FAILED = "Failed to generate conversation prompt"


# ---------------------------------------------------------------------------
# Generation endpoint tests.
# ---------------------------------------------------------------------------


class TestGenerateConversation:
    """Test POST /api/generate-conversation."""

    def _payload(self, **overrides) -> dict:
        payload = {"mood": "happy", "topic": "travel", "type": "icebreaker"}
        payload.update(overrides)
        return {k: v for k, v in payload.items() if v is not None}

    def test_generate_success(self, test_client):
        resp = test_client.post("/api/generate-conversation", json=self._payload())

        assert resp.status_code == 200
        assert resp.json() == {"prompt": "What's the most memorable trip you've ever taken?"}

    def test_system_instruction_sent_to_completion(self, test_client, mock_sdk):
        test_client.post("/api/generate-conversation", json=self._payload())

        kwargs = mock_sdk.chat.completions.create.call_args.kwargs
        system = kwargs["messages"][0]["content"]
        assert kwargs["temperature"] == 0.8
        assert kwargs["max_tokens"] == 150
        assert "happy, cheerful, and upbeat" in system
        assert "travel, adventure, and exploring new places" in system
        assert "Create a simple, friendly icebreaker question" in system
        assert kwargs["messages"][1]["content"] == (
            "Generate a happy conversation starter about travel that works as a icebreaker."
        )

    def test_response_is_trimmed(self, test_client, mock_sdk, completion_factory):
        mock_sdk.chat.completions.create.return_value = completion_factory("\n  Hello there?  \n")

        resp = test_client.post("/api/generate-conversation", json=self._payload())

        assert resp.json() == {"prompt": "Hello there?"}

    def test_unknown_values_still_generate(self, test_client, mock_sdk):
        resp = test_client.post(
            "/api/generate-conversation",
            json={"mood": "grumpy", "topic": "taxes", "type": "rant"},
        )

        assert resp.status_code == 200
        system = mock_sdk.chat.completions.create.call_args.kwargs["messages"][0]["content"]
        assert "- Mood: grumpy" in system

    @pytest.mark.parametrize(
        "missing",
        [("mood",), ("topic",), ("type",), ("mood", "topic"), ("topic", "type"), ("mood", "type")],
    )
    def test_missing_fields_return_400(self, test_client, mock_sdk, missing):
        payload = self._payload(**{field: None for field in missing})

        resp = test_client.post("/api/generate-conversation", json=payload)

        assert resp.status_code == 400
        assert resp.json() == {"error": MISSING}
        mock_sdk.chat.completions.create.assert_not_called()

    def test_empty_string_field_returns_400(self, test_client, mock_sdk):
        resp = test_client.post("/api/generate-conversation", json=self._payload(topic=""))

        assert resp.status_code == 400
        assert resp.json() == {"error": MISSING}
        mock_sdk.chat.completions.create.assert_not_called()

    def test_empty_body_returns_400(self, test_client, mock_sdk):
        resp = test_client.post("/api/generate-conversation", json={})

        assert resp.status_code == 400
        mock_sdk.chat.completions.create.assert_not_called()

    def test_malformed_json_returns_500(self, test_client, mock_sdk):
        resp = test_client.post(
            "/api/generate-conversation",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

        assert resp.status_code == 500
        assert resp.json() == {"error": FAILED}
        mock_sdk.chat.completions.create.assert_not_called()

    def test_numeric_field_is_stringified(self, test_client, mock_sdk):
        resp = test_client.post("/api/generate-conversation", json=self._payload(mood=7))

        assert resp.status_code == 200
        messages = mock_sdk.chat.completions.create.call_args.kwargs["messages"]
        assert "- Mood: 7" in messages[0]["content"]
        assert messages[1]["content"].startswith("Generate a 7 conversation starter")

    @pytest.mark.parametrize("value", [0, False])
    def test_falsy_scalar_field_returns_400(self, test_client, mock_sdk, value):
        resp = test_client.post("/api/generate-conversation", json=self._payload(topic=value))

        assert resp.status_code == 400
        assert resp.json() == {"error": MISSING}
        mock_sdk.chat.completions.create.assert_not_called()

    def test_list_field_returns_400(self, test_client, mock_sdk):
        resp = test_client.post(
            "/api/generate-conversation", json=self._payload(type=["icebreaker"])
        )

        assert resp.status_code == 400
        assert resp.json() == {"error": MISSING}
        mock_sdk.chat.completions.create.assert_not_called()

    @pytest.mark.parametrize("content", ["", "   ", None])
    def test_empty_completion_returns_500(self, test_client, mock_sdk, completion_factory, content):
        mock_sdk.chat.completions.create.return_value = completion_factory(content)

        resp = test_client.post("/api/generate-conversation", json=self._payload())

        assert resp.status_code == 500
        assert resp.json() == {"error": FAILED}

    def test_transport_error_returns_500(self, test_client, mock_sdk):
        request = httpx.Request("POST", "https://api.example.com/v1/chat/completions")
        mock_sdk.chat.completions.create.side_effect = openai.APIConnectionError(request=request)

        resp = test_client.post("/api/generate-conversation", json=self._payload())

        assert resp.status_code == 500
        assert resp.json() == {"error": FAILED}
        assert mock_sdk.chat.completions.create.call_count == 1

    def test_service_error_returns_500(self, test_client, mock_sdk):
        request = httpx.Request("POST", "https://api.example.com/v1/chat/completions")
        response = httpx.Response(429, request=request)
        mock_sdk.chat.completions.create.side_effect = openai.RateLimitError(
            "rate limited", response=response, body=None
        )

        resp = test_client.post("/api/generate-conversation", json=self._payload())

        assert resp.status_code == 500
        assert resp.json() == {"error": FAILED}

    def test_unexpected_error_returns_500(self, test_client, mock_sdk):
        mock_sdk.chat.completions.create.side_effect = ValueError("unexpected SDK failure")

        resp = test_client.post("/api/generate-conversation", json=self._payload())

        assert resp.status_code == 500
        assert resp.json() == {"error": FAILED}

    def test_get_not_allowed(self, test_client):
        resp = test_client.get("/api/generate-conversation")

        assert resp.status_code == 405
        assert "error" in resp.json()


# ---------------------------------------------------------------------------
# Catalog and health endpoint tests.
# ---------------------------------------------------------------------------


class TestCatalog:
    """Test GET /api/catalog."""

    def test_catalog_sizes(self, test_client):
        data = test_client.get("/api/catalog").json()

        assert "version" in data
        assert len(data["moods"]) == 8
        assert len(data["topics"]) == 12
        assert len(data["types"]) == 6

    def test_catalog_entries(self, test_client):
        data = test_client.get("/api/catalog").json()

        assert data["moods"][0] == {
            "value": "happy",
            "label": "Happy & Cheerful",
            "emoji": "😊",
            "description": None,
        }
        assert data["types"][0]["description"] == "Great for meeting new people"


class TestHealth:
    def test_health(self, test_client):
        resp = test_client.get("/api/health")

        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestUnknownRoute:
    def test_404_uses_error_shape(self, test_client):
        resp = test_client.get("/api/nope")

        assert resp.status_code == 404
        assert resp.json() == {"error": "Not Found"}
