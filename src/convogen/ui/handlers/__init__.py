"""UI event handlers organized by feature area.

This package provides handlers for all Gradio UI events:
- generation: Selector updates and the two-step generation cycle
- favorites: Favorite toggling and clipboard confirmation
"""

from .favorites import (
    copy_prompt,
    remove_favorite,
    select_favorite,
    toggle_current_favorite,
)
from .generation import (
    finish_generation,
    get_api_client,
    reset_generate_button,
    start_generation,
    update_selection_handler,
)

__all__ = [
    # Generation handlers
    "finish_generation",
    "get_api_client",
    "reset_generate_button",
    "start_generation",
    "update_selection_handler",
    # Favorite handlers
    "copy_prompt",
    "remove_favorite",
    "select_favorite",
    "toggle_current_favorite",
]
