"""Tests for convogen.core.completion — the completion service wrapper."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from convogen.core.completion import (
    MAX_TOKENS,
    TEMPERATURE,
    CompletionClient,
    generate_conversation_prompt,
)
from convogen.core.errors import (
    CompletionTransportError,
    ConversationGenerationError,
    GenerationFailure,
)
from convogen.core.prompt_builder import build_messages


class TestComplete:
    """Tests for CompletionClient.complete."""

    def test_sends_fixed_sampling_parameters(self, completion_client, mock_sdk):
        messages = build_messages("happy", "travel", "icebreaker")

        completion_client.complete(messages)

        mock_sdk.chat.completions.create.assert_called_once_with(
            model="test-model",
            messages=messages,
            temperature=0.8,
            max_tokens=150,
        )
        assert TEMPERATURE == 0.8
        assert MAX_TOKENS == 150

    def test_returns_trimmed_first_choice(self, completion_client, mock_sdk):
        mock_sdk.chat.completions.create.return_value = SimpleNamespace(
            choices=[
                SimpleNamespace(message=SimpleNamespace(content="  First?\n")),
                SimpleNamespace(message=SimpleNamespace(content="Second?")),
            ]
        )

        assert completion_client.complete([]) == "First?"

    @pytest.mark.parametrize("content", ["", "   \n", None])
    def test_empty_content_is_generation_failure(
        self, completion_client, mock_sdk, completion_factory, content
    ):
        mock_sdk.chat.completions.create.return_value = completion_factory(content)

        with pytest.raises(GenerationFailure):
            completion_client.complete([])

    def test_no_choices_is_generation_failure(self, completion_client, mock_sdk):
        mock_sdk.chat.completions.create.return_value = SimpleNamespace(choices=[])

        with pytest.raises(GenerationFailure):
            completion_client.complete([])

    def test_sdk_error_is_transport_error(self, completion_client, mock_sdk):
        request = httpx.Request("POST", "https://api.example.com/v1/chat/completions")
        mock_sdk.chat.completions.create.side_effect = openai.APIConnectionError(request=request)

        with pytest.raises(CompletionTransportError) as exc_info:
            completion_client.complete([])

        assert isinstance(exc_info.value, ConversationGenerationError)
        assert isinstance(exc_info.value.__cause__, openai.APIConnectionError)

    def test_single_attempt_no_retry(self, completion_client, mock_sdk):
        request = httpx.Request("POST", "https://api.example.com/v1/chat/completions")
        mock_sdk.chat.completions.create.side_effect = openai.APIConnectionError(request=request)

        with pytest.raises(CompletionTransportError):
            completion_client.complete([])

        assert mock_sdk.chat.completions.create.call_count == 1


class TestClientConstruction:
    def test_from_config(self, test_config):
        client = CompletionClient.from_config(test_config)

        assert client.model == "test-model"
        assert client.api_key == "test-key"
        assert client.base_url is None

    def test_sdk_client_built_lazily(self, test_config, completion_factory):
        with patch("convogen.core.completion.OpenAI") as MockOpenAI:
            sdk = MagicMock()
            sdk.chat.completions.create.return_value = completion_factory("Hi?")
            MockOpenAI.return_value = sdk

            client = CompletionClient.from_config(test_config)
            MockOpenAI.assert_not_called()

            assert client.complete([]) == "Hi?"
            assert client.complete([]) == "Hi?"

            MockOpenAI.assert_called_once_with(api_key="test-key", base_url=None)

    def test_timeout_forwarded_when_set(self):
        with patch("convogen.core.completion.OpenAI") as MockOpenAI:
            CompletionClient(model="m", api_key="k", timeout=12.5)._get_client()

            MockOpenAI.assert_called_once_with(api_key="k", base_url=None, timeout=12.5)

    def test_missing_credential_is_transport_error(self):
        with patch("convogen.core.completion.OpenAI") as MockOpenAI:
            MockOpenAI.side_effect = openai.OpenAIError("api_key must be set")

            with pytest.raises(CompletionTransportError):
                CompletionClient(model="m").complete([])


class TestGenerateConversationPrompt:
    def test_builds_messages_for_selection(self, completion_client, mock_sdk):
        result = generate_conversation_prompt(completion_client, "happy", "travel", "icebreaker")

        assert result == "What's the most memorable trip you've ever taken?"
        kwargs = mock_sdk.chat.completions.create.call_args.kwargs
        assert kwargs["messages"] == build_messages("happy", "travel", "icebreaker")
