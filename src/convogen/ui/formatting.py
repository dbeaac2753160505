"""Markdown rendering for prompt cards and the favorites list."""

from convogen.core.catalog import (
    conversation_type_label,
    mood_emoji,
    mood_label,
    topic_emoji,
    topic_label,
)

from .models import ConversationPrompt

EMPTY_PROMPT_MARKDOWN = "*Pick a mood, topic, and type, then press **Generate Conversation**.*"

EMPTY_FAVORITES_MARKDOWN = (
    "### 🤍 No favorites yet\n\n"
    "Generate some conversation starters and save your favorites here!"
)


def format_badges(prompt: ConversationPrompt) -> str:
    """Render the mood, topic, and type badges as inline code spans."""
    return " ".join(
        [
            f"`{mood_emoji(prompt.mood)} {mood_label(prompt.mood)}`",
            f"`{topic_emoji(prompt.topic)} {topic_label(prompt.topic)}`",
            f"`{conversation_type_label(prompt.type)}`",
        ]
    )


def format_prompt_card(prompt: ConversationPrompt | None) -> str:
    """Render the current prompt for the Generate tab.

    Args:
        prompt: Current prompt, or None before the first generation

    Returns:
        Markdown for the prompt card
    """
    if prompt is None:
        return EMPTY_PROMPT_MARKDOWN

    heart = " ❤️" if prompt.is_favorite else ""
    return (
        f"### {mood_emoji(prompt.mood)} Your Conversation Starter{heart}\n\n"
        f"{format_badges(prompt)}\n\n"
        f"> {prompt.prompt}"
    )


def favorite_button_label(prompt: ConversationPrompt | None) -> str:
    if prompt is not None and prompt.is_favorite:
        return "❤️ Unfavorite"
    return "🤍 Favorite"


def format_favorites_header(favorites: list[ConversationPrompt]) -> str:
    return f"## Favorites ({len(favorites)})"


def format_favorites(favorites: list[ConversationPrompt]) -> str:
    """Render every favorite as a card, in the order they were favorited."""
    if not favorites:
        return EMPTY_FAVORITES_MARKDOWN

    cards = [
        f"#### {mood_emoji(f.mood)} {format_badges(f)}\n\n> {f.prompt}" for f in favorites
    ]
    return "\n\n---\n\n".join(cards)


def favorite_choices(favorites: list[ConversationPrompt]) -> list[tuple[str, str]]:
    """Return ``(label, id)`` pairs for the favorites selector dropdown."""
    choices = []
    for index, favorite in enumerate(favorites, start=1):
        text = favorite.prompt if len(favorite.prompt) <= 60 else favorite.prompt[:57] + "..."
        choices.append((f"{index}. {text}", favorite.id))
    return choices
