"""State transitions for a Conversation Generator UI session.

The generation cycle is an explicit state machine on :class:`UIState`::

    IDLE / DISPLAYED --begin_generation--> GENERATING
    GENERATING --complete_generation--> DISPLAYED
    GENERATING --fail_generation--> IDLE   (current prompt left untouched)

Favorites are independent of that cycle: :func:`toggle_favorite` is a list
membership operation that also mirrors the flag onto the current prompt.
"""

import logging
import uuid

from .models import ConversationPrompt, GenerationStatus, Selection, UIState
from .validation import GenerationInProgressError, validate_selection

logger = logging.getLogger(__name__)


def new_prompt_id() -> str:
    """Mint a collision-resistant identifier for a generated prompt."""
    return uuid.uuid4().hex


def update_selection(
    state: UIState,
    mood: str | None = None,
    topic: str | None = None,
    conversation_type: str | None = None,
) -> UIState:
    """Store selector values on the state; ``None`` leaves a field unchanged.

    Args:
        state: UI state
        mood: New mood value ("" clears it)
        topic: New topic value ("" clears it)
        conversation_type: New conversation type value ("" clears it)

    Returns:
        Updated state
    """
    if mood is not None:
        state.selected_mood = mood
    if topic is not None:
        state.selected_topic = topic
    if conversation_type is not None:
        state.selected_type = conversation_type
    return state


def begin_generation(state: UIState) -> Selection:
    """Move the session into ``GENERATING`` and return the selection to send.

    Args:
        state: UI state

    Returns:
        The selection captured at the moment generation started

    Raises:
        GenerationInProgressError: If a request is already outstanding
        ValidationError: If mood, topic, or type is missing (no request
            must be sent)
    """
    if state.is_generating():
        raise GenerationInProgressError("A conversation prompt is already being generated")

    validate_selection(state)

    selection = state.selection()
    state.status = GenerationStatus.GENERATING
    state.pending_selection = selection
    logger.info(f"Generation started for {selection}")
    return selection


def complete_generation(state: UIState, text: str) -> ConversationPrompt:
    """Store a successful result as the current prompt.

    Args:
        state: UI state (must be ``GENERATING``)
        text: Prompt text returned by the API

    Returns:
        The newly created, not-yet-favorited prompt

    Raises:
        RuntimeError: If no generation is in progress
    """
    selection = state.pending_selection
    if not state.is_generating() or selection is None:
        raise RuntimeError("complete_generation called while not generating")

    prompt = ConversationPrompt(
        id=new_prompt_id(),
        prompt=text,
        mood=selection.mood,
        topic=selection.topic,
        type=selection.type,
        is_favorite=False,
    )
    state.current_prompt = prompt
    state.pending_selection = None
    state.status = GenerationStatus.DISPLAYED
    logger.info(f"Generation complete: {prompt.id}")
    return prompt


def fail_generation(state: UIState) -> UIState:
    """Abandon the outstanding generation and return to ``IDLE``.

    The previously displayed prompt (if any) is kept as-is.
    """
    state.pending_selection = None
    state.status = GenerationStatus.IDLE
    logger.info("Generation failed; returning to idle")
    return state


def toggle_favorite(state: UIState, prompt: ConversationPrompt) -> bool:
    """Add *prompt* to favorites, or remove it if it is already a favorite.

    Membership is decided by id.  When *prompt* is the current prompt its
    ``is_favorite`` flag is mirrored onto ``state.current_prompt``.

    Args:
        state: UI state
        prompt: Prompt to toggle (current prompt or a favorites entry)

    Returns:
        True if the prompt is a favorite after the call
    """
    if state.find_favorite(prompt.id) is not None:
        state.favorites = [f for f in state.favorites if f.id != prompt.id]
        is_favorite = False
    else:
        state.favorites.append(prompt.with_favorite(True))
        is_favorite = True

    if state.current_prompt is not None and state.current_prompt.id == prompt.id:
        state.current_prompt = state.current_prompt.with_favorite(is_favorite)

    logger.info(f"Toggled favorite for {prompt.id}: {is_favorite}")
    return is_favorite
