"""Completion service client.

Wraps the OpenAI chat-completions API behind a small class so the rest of
the application deals only in message lists and plain strings.  Exactly one
request is issued per call: there is no retry and no backoff.
"""

from __future__ import annotations

import logging

from openai import OpenAI, OpenAIError

from .config import ConvogenConfig
from .errors import CompletionTransportError, GenerationFailure
from .prompt_builder import build_messages

logger = logging.getLogger(__name__)

# Fixed sampling parameters for conversation starters.
TEMPERATURE = 0.8
MAX_TOKENS = 150


class CompletionClient:
    """Thin wrapper around ``OpenAI().chat.completions``.

    Args:
        model: Model name sent with every request.
        api_key: Service credential.  ``None`` lets the SDK read
            ``OPENAI_API_KEY``.
        base_url: Optional OpenAI-compatible endpoint.
        timeout: Optional request timeout in seconds.
        client: Pre-built SDK client (used by tests).
    """

    def __init__(
        self,
        model: str,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        client: OpenAI | None = None,
    ):
        self.model = model
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self._client = client

    def _get_client(self) -> OpenAI:
        # Built lazily: the SDK refuses to construct without a credential.
        if self._client is None:
            kwargs = {"api_key": self.api_key, "base_url": self.base_url}
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            self._client = OpenAI(**kwargs)
        return self._client

    @classmethod
    def from_config(cls, cfg: ConvogenConfig) -> "CompletionClient":
        return cls(
            model=cfg.completion_model,
            api_key=cfg.completion_api_key,
            base_url=cfg.completion_base_url,
            timeout=cfg.completion_timeout,
        )

    def complete(self, messages: list[dict[str, str]]) -> str:
        """Send *messages* and return the first choice's trimmed text.

        Raises:
            CompletionTransportError: The request failed at the service or
                network level.
            GenerationFailure: The response carried no text.
        """
        try:
            completion = self._get_client().chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
            )
        except OpenAIError as e:
            raise CompletionTransportError(f"Completion request failed: {e}") from e

        choices = getattr(completion, "choices", None) or []
        message = getattr(choices[0], "message", None) if choices else None
        content = getattr(message, "content", None)
        text = content.strip() if isinstance(content, str) else ""

        if not text:
            raise GenerationFailure("Completion service returned no content")
        return text


def generate_conversation_prompt(
    client: CompletionClient, mood: str, topic: str, conversation_type: str
) -> str:
    """Build the instructions for one selection and return the generated starter."""
    logger.info(
        f"Generating conversation prompt: mood={mood} topic={topic} type={conversation_type}"
    )
    prompt = client.complete(build_messages(mood, topic, conversation_type))
    logger.debug(f"Generated prompt ({len(prompt)} chars)")
    return prompt
