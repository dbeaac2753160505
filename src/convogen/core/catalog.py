"""Fixed selection catalogs: moods, topics, and conversation types.

Every selectable value lives here exactly once, together with the text the
UI shows for it and the phrase the prompt builder feeds to the completion
service.  The catalogs are plain tuples of frozen dataclasses; nothing is
registered or extended at runtime.

Unknown values are tolerated everywhere: lookups fall back to the raw value
(or to a generic emoji) so that a newer client can send options an older
server has never heard of.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MOOD_EMOJI = "💬"
DEFAULT_TOPIC_EMOJI = "🎯"


@dataclass(frozen=True)
class MoodOption:
    """A selectable mood.

    Attributes:
        value: Wire value sent to the API (e.g. ``"happy"``).
        label: Human readable label for the selector.
        emoji: Emoji shown next to the label and on prompt cards.
        description: Phrase injected into the system instruction.
    """

    value: str
    label: str
    emoji: str
    description: str


@dataclass(frozen=True)
class TopicOption:
    """A selectable topic (same shape as :class:`MoodOption`)."""

    value: str
    label: str
    emoji: str
    description: str


@dataclass(frozen=True)
class ConversationTypeOption:
    """A selectable conversation type.

    Attributes:
        value: Wire value sent to the API (e.g. ``"icebreaker"``).
        label: Human readable label for the selector.
        description: Short hint shown under the label in the UI.
        instruction: Guidance sentence injected into the system instruction.
    """

    value: str
    label: str
    description: str
    instruction: str


MOODS: tuple[MoodOption, ...] = (
    MoodOption("happy", "Happy & Cheerful", "😊", "happy, cheerful, and upbeat"),
    MoodOption("serious", "Serious & Deep", "🤔", "serious, thoughtful, and deep"),
    MoodOption("funny", "Funny & Playful", "😄", "funny, playful, and humorous"),
    MoodOption("romantic", "Romantic", "💕", "romantic, sweet, and affectionate"),
    MoodOption("curious", "Curious & Inquisitive", "🧐", "curious, inquisitive, and interested"),
    MoodOption("nostalgic", "Nostalgic", "🕰️", "nostalgic, reminiscent, and sentimental"),
    MoodOption(
        "inspirational", "Inspirational", "✨", "inspirational, motivational, and uplifting"
    ),
    MoodOption("casual", "Casual & Relaxed", "😌", "casual, relaxed, and easygoing"),
)

TOPICS: tuple[TopicOption, ...] = (
    TopicOption("hobbies", "Hobbies & Interests", "🎨", "hobbies, interests, and personal passions"),
    TopicOption("travel", "Travel & Adventure", "✈️", "travel, adventure, and exploring new places"),
    TopicOption("food", "Food & Cooking", "🍕", "food, cooking, and culinary experiences"),
    TopicOption("work", "Work & Career", "💼", "work, career, and professional life"),
    TopicOption(
        "relationships",
        "Relationships",
        "❤️",
        "relationships, friendships, and social connections",
    ),
    TopicOption("movies", "Movies & Entertainment", "🎬", "movies, entertainment, and film"),
    TopicOption("music", "Music", "🎵", "music, songs, and musical experiences"),
    TopicOption("books", "Books & Literature", "📚", "books, literature, and reading"),
    TopicOption("technology", "Technology", "💻", "technology, gadgets, and digital innovations"),
    TopicOption("sports", "Sports & Fitness", "⚽", "sports, fitness, and athletic activities"),
    TopicOption("nature", "Nature & Environment", "🌿", "nature, environment, and outdoor activities"),
    TopicOption("future", "Future & Dreams", "🔮", "future, dreams, and aspirations"),
)

CONVERSATION_TYPES: tuple[ConversationTypeOption, ...] = (
    ConversationTypeOption(
        "icebreaker",
        "Ice Breaker",
        "Great for meeting new people",
        "Create a simple, friendly icebreaker question that helps people get to know "
        "each other. Make it easy to answer and not too personal.",
    ),
    ConversationTypeOption(
        "deep",
        "Deep Question",
        "Meaningful conversations",
        "Create a thoughtful, deep question that encourages meaningful conversation "
        "and reflection. Make it philosophical or insightful.",
    ),
    ConversationTypeOption(
        "fun",
        "Fun Fact",
        "Interesting tidbits to share",
        "Create an interesting fun fact or trivia question that's entertaining and "
        "engaging. Make it surprising or amusing.",
    ),
    ConversationTypeOption(
        "story",
        "Story Prompt",
        "Share personal experiences",
        "Create a prompt that encourages sharing personal stories or experiences. "
        "Make it open-ended and inviting.",
    ),
    ConversationTypeOption(
        "opinion",
        "Opinion Seeker",
        "Get their perspective",
        "Create a question that asks for someone's opinion or perspective on a topic. "
        "Make it balanced and open to different viewpoints.",
    ),
    ConversationTypeOption(
        "hypothetical",
        "Hypothetical",
        "Imaginative scenarios",
        "Create a hypothetical scenario or 'what if' question that sparks imagination "
        "and creative thinking.",
    ),
)

_MOODS_BY_VALUE = {m.value: m for m in MOODS}
_TOPICS_BY_VALUE = {t.value: t for t in TOPICS}
_TYPES_BY_VALUE = {t.value: t for t in CONVERSATION_TYPES}


def find_mood(value: str) -> MoodOption | None:
    return _MOODS_BY_VALUE.get(value)


def find_topic(value: str) -> TopicOption | None:
    return _TOPICS_BY_VALUE.get(value)


def find_conversation_type(value: str) -> ConversationTypeOption | None:
    return _TYPES_BY_VALUE.get(value)


def mood_emoji(value: str) -> str:
    """Return the emoji for a mood, or the generic speech bubble."""
    option = find_mood(value)
    return option.emoji if option else DEFAULT_MOOD_EMOJI


def topic_emoji(value: str) -> str:
    """Return the emoji for a topic, or the generic target."""
    option = find_topic(value)
    return option.emoji if option else DEFAULT_TOPIC_EMOJI


def mood_label(value: str) -> str:
    option = find_mood(value)
    return option.label if option else value


def topic_label(value: str) -> str:
    option = find_topic(value)
    return option.label if option else value


def conversation_type_label(value: str) -> str:
    option = find_conversation_type(value)
    return option.label if option else value
