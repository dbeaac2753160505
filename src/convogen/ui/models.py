"""Data models for the Conversation Generator UI session."""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum

logger = logging.getLogger(__name__)


class GenerationStatus(str, Enum):
    """Where the session is in the selection -> request -> display cycle.

    A failed request returns the session to ``IDLE``; there is no sticky
    failure state.
    """

    IDLE = "idle"
    GENERATING = "generating"
    DISPLAYED = "displayed"


@dataclass(frozen=True)
class Selection:
    """The user's chosen mood, topic, and conversation type."""

    mood: str
    topic: str
    type: str

    def as_payload(self) -> dict[str, str]:
        """Return the JSON body for ``POST /api/generate-conversation``."""
        return {"mood": self.mood, "topic": self.topic, "type": self.type}


@dataclass(frozen=True)
class ConversationPrompt:
    """A generated conversation starter.

    Instances are immutable; flipping the favorite flag produces a copy via
    :meth:`with_favorite`.
    """

    id: str
    prompt: str
    mood: str
    topic: str
    type: str
    is_favorite: bool = False

    def with_favorite(self, is_favorite: bool) -> "ConversationPrompt":
        return replace(self, is_favorite=is_favorite)


@dataclass
class UIState:
    """Session state for the Gradio UI.

    Each browser session gets its own instance through ``gr.State``, so no
    state is shared between users and nothing survives a reload.

    Attributes
    ----------
    selected_mood : str
        Mood chosen in the selector ("" until chosen)
    selected_topic : str
        Topic chosen in the selector ("" until chosen)
    selected_type : str
        Conversation type chosen in the selector ("" until chosen)
    status : GenerationStatus
        Position in the generation state machine
    pending_selection : Selection | None
        Selection captured when the outstanding request started
    current_prompt : ConversationPrompt | None
        Last successfully generated prompt, shown on the Generate tab
    favorites : list[ConversationPrompt]
        Favorited prompts in the order they were favorited
    """

    selected_mood: str = ""
    selected_topic: str = ""
    selected_type: str = ""
    status: GenerationStatus = GenerationStatus.IDLE
    pending_selection: Selection | None = None
    current_prompt: ConversationPrompt | None = None
    favorites: list[ConversationPrompt] = field(default_factory=list)

    def has_complete_selection(self) -> bool:
        """Check if mood, topic, and type are all chosen."""
        return bool(self.selected_mood and self.selected_topic and self.selected_type)

    def selection(self) -> Selection:
        return Selection(self.selected_mood, self.selected_topic, self.selected_type)

    def is_generating(self) -> bool:
        return self.status is GenerationStatus.GENERATING

    def can_generate(self) -> bool:
        """Whether the Generate button should be enabled."""
        return self.has_complete_selection() and not self.is_generating()

    def find_favorite(self, prompt_id: str) -> ConversationPrompt | None:
        return next((f for f in self.favorites if f.id == prompt_id), None)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"UIState(status={self.status.value}, "
            f"current={self.current_prompt.id if self.current_prompt else None}, "
            f"favorites={len(self.favorites)})"
        )


# Notice texts shown through gr.Info / gr.Warning
MISSING_SELECTIONS_TITLE = "Missing selections"
MISSING_SELECTIONS_MESSAGE = "Please select a mood, topic, and conversation type."
GENERATION_FAILED_TITLE = "Generation failed"
GENERATION_FAILED_MESSAGE = "Failed to generate conversation prompt. Please try again."
COPIED_TITLE = "Copied!"
COPIED_MESSAGE = "Conversation prompt copied to clipboard."
