"""Favorite and copy handlers."""

import logging

import gradio as gr

from ..components import notify_info
from ..formatting import (
    favorite_button_label,
    favorite_choices,
    format_favorites,
    format_favorites_header,
    format_prompt_card,
)
from ..models import COPIED_MESSAGE, COPIED_TITLE, UIState
from ..state import toggle_favorite

logger = logging.getLogger(__name__)


def _favorites_outputs(state: UIState) -> tuple[str, str, str, str, dict, UIState]:
    current = state.current_prompt
    return (
        format_prompt_card(current),
        favorite_button_label(current),
        format_favorites_header(state.favorites),
        format_favorites(state.favorites),
        gr.update(choices=favorite_choices(state.favorites), value=None),
        state,
    )


def toggle_current_favorite(state: UIState) -> tuple[str, str, str, str, dict, UIState]:
    """Toggle favorite status of the prompt shown on the Generate tab.

    Args:
        state: UI state

    Returns:
        Tuple of (card_markdown, favorite_button_label, favorites_header,
        favorites_markdown, favorite_selector_update, updated_state)
    """
    if state.current_prompt is None:
        logger.debug("Favorite clicked with no prompt displayed")
    else:
        toggle_favorite(state, state.current_prompt)
    return _favorites_outputs(state)


def remove_favorite(
    favorite_id: str | None, state: UIState
) -> tuple[str, str, str, str, dict, UIState]:
    """Unfavorite the entry chosen in the favorites selector.

    Args:
        favorite_id: Id of the selected favorite (None if nothing selected)
        state: UI state

    Returns:
        Same tuple as :func:`toggle_current_favorite`
    """
    favorite = state.find_favorite(favorite_id) if favorite_id else None
    if favorite is None:
        logger.debug(f"No favorite selected for removal: {favorite_id!r}")
    else:
        toggle_favorite(state, favorite)
    return _favorites_outputs(state)


def select_favorite(favorite_id: str | None, state: UIState) -> str:
    """Return the text of the chosen favorite (fed to the clipboard snippet)."""
    favorite = state.find_favorite(favorite_id) if favorite_id else None
    return favorite.prompt if favorite else ""


def copy_prompt(text: str) -> str:
    """Confirm a clipboard copy.

    The clipboard write itself happens in the browser (see
    ``COPY_TO_CLIPBOARD_JS``); this handler changes no state.

    Args:
        text: Text that was copied

    Returns:
        The same text, unchanged
    """
    if text:
        notify_info(COPIED_TITLE, COPIED_MESSAGE)
    return text
