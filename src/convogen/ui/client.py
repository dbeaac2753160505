"""HTTP client the UI uses to reach the generation endpoint."""

import logging

import requests

from convogen.core.config import ConvogenConfig

from .models import Selection

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate-conversation"


class GenerationRequestError(Exception):
    """The generation round trip failed (network error, non-OK status, bad body)."""

    pass


class ConversationAPIClient:
    """Posts selections to ``/api/generate-conversation``.

    Args:
        base_url: API server base URL (e.g. ``http://127.0.0.1:8000``)
        timeout: Request timeout in seconds, or None for no explicit timeout
        session: Optional ``requests.Session`` (used by tests)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, cfg: ConvogenConfig) -> "ConversationAPIClient":
        return cls(base_url=cfg.api_base_url, timeout=cfg.request_timeout)

    def generate(self, selection: Selection) -> str:
        """Request one conversation starter for *selection*.

        Returns:
            The generated prompt text

        Raises:
            GenerationRequestError: On any transport failure, non-2xx status,
                or a response body without a string ``prompt``
        """
        url = f"{self.base_url}{GENERATE_PATH}"
        try:
            response = self.session.post(url, json=selection.as_payload(), timeout=self.timeout)
        except requests.RequestException as e:
            raise GenerationRequestError(f"Request to {url} failed: {e}") from e

        if not response.ok:
            raise GenerationRequestError(
                f"Generation endpoint returned {response.status_code}: {response.text[:200]}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise GenerationRequestError("Generation endpoint returned invalid JSON") from e

        prompt = data.get("prompt") if isinstance(data, dict) else None
        if not isinstance(prompt, str):
            raise GenerationRequestError("Generation response is missing 'prompt'")
        return prompt
