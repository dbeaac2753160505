"""Validation utilities for Conversation Generator UI inputs."""

import logging

from .models import MISSING_SELECTIONS_MESSAGE, UIState

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


class GenerationInProgressError(Exception):
    """A generation was requested while another one is still outstanding."""

    pass


def validate_selection(state: UIState) -> None:
    """Ensure mood, topic, and type are all chosen.

    Args:
        state: UI state holding the current selection

    Raises:
        ValidationError: If any of the three selections is missing
    """
    missing = [
        name
        for name, value in (
            ("mood", state.selected_mood),
            ("topic", state.selected_topic),
            ("type", state.selected_type),
        )
        if not value
    ]
    if missing:
        logger.debug(f"Selection incomplete, missing: {missing}")
        raise ValidationError(MISSING_SELECTIONS_MESSAGE)
