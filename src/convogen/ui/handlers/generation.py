"""Selection and generation handlers.

Generation is split into two chained Gradio events so the button can be
disabled while the request is outstanding::

    generate_btn.click(start_generation, ...).then(finish_generation, ...)

:func:`start_generation` validates and moves the session into
``GENERATING``; :func:`finish_generation` performs the HTTP round trip only
if the session actually reached that state.
"""

import logging

import gradio as gr

from convogen.core.config import config

from ..client import ConversationAPIClient, GenerationRequestError
from ..components import generate_button_update, notify_warning
from ..formatting import favorite_button_label, format_prompt_card
from ..models import (
    GENERATION_FAILED_MESSAGE,
    GENERATION_FAILED_TITLE,
    MISSING_SELECTIONS_TITLE,
    UIState,
)
from ..state import begin_generation, complete_generation, fail_generation, update_selection
from ..validation import GenerationInProgressError, ValidationError

logger = logging.getLogger(__name__)

_api_client: ConversationAPIClient | None = None


def get_api_client() -> ConversationAPIClient:
    """Return the process-wide API client, creating it on first use."""
    global _api_client
    if _api_client is None:
        _api_client = ConversationAPIClient.from_config(config)
        logger.info(f"ConversationAPIClient targeting {_api_client.base_url}")
    return _api_client


def update_selection_handler(
    mood: str | None, topic: str | None, conversation_type: str | None, state: UIState
) -> tuple[dict, UIState]:
    """Store the selector values and enable Generate once all three are set.

    Args:
        mood: Mood dropdown value (None when cleared)
        topic: Topic dropdown value (None when cleared)
        conversation_type: Type dropdown value (None when cleared)
        state: UI state

    Returns:
        Tuple of (generate_button_update, updated_state)
    """
    state = update_selection(state, mood or "", topic or "", conversation_type or "")
    return generate_button_update(state.can_generate(), state.is_generating()), state


def start_generation(state: UIState) -> tuple[dict, UIState]:
    """Validate the selection and enter ``GENERATING``.

    Returns:
        Tuple of (generate_button_update, updated_state)
    """
    try:
        begin_generation(state)
    except GenerationInProgressError:
        logger.info("Ignoring generate click while a request is outstanding")
        return generate_button_update(False, generating=True), state
    except ValidationError as e:
        notify_warning(MISSING_SELECTIONS_TITLE, str(e))
        return generate_button_update(state.can_generate()), state

    return generate_button_update(False, generating=True), state


def finish_generation(
    state: UIState, client: ConversationAPIClient | None = None
) -> tuple[str, str, str, dict, UIState]:
    """Send the pending selection to the API and display the result.

    Does nothing beyond refreshing the outputs when the session is not
    ``GENERATING`` (i.e. :func:`start_generation` rejected the click).

    Args:
        state: UI state
        client: API client (defaults to :func:`get_api_client`)

    Returns:
        Tuple of (card_markdown, favorite_button_label, prompt_text,
        generate_button_update, updated_state)
    """
    if state.is_generating() and state.pending_selection is not None:
        client = client or get_api_client()
        try:
            text = client.generate(state.pending_selection)
        except GenerationRequestError as e:
            logger.error(f"Generation request failed: {e}", exc_info=True)
            fail_generation(state)
            notify_warning(GENERATION_FAILED_TITLE, GENERATION_FAILED_MESSAGE)
        except Exception as e:
            logger.error(f"Unexpected error during generation: {e}", exc_info=True)
            fail_generation(state)
            notify_warning(GENERATION_FAILED_TITLE, GENERATION_FAILED_MESSAGE)
        else:
            complete_generation(state, text)

    current = state.current_prompt
    return (
        format_prompt_card(current),
        favorite_button_label(current),
        current.prompt if current else "",
        generate_button_update(state.can_generate(), state.is_generating()),
        state,
    )


def reset_generate_button(state: UIState) -> dict:
    """Button update used when the page (re)loads."""
    return gr.update(interactive=state.can_generate())
