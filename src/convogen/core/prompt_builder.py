"""System and user instruction compilation for conversation starters.

The completion service receives two messages per request:

- a **system** instruction that describes the requested mood, topic, and
  conversation type in plain language, followed by fixed guidance on tone
  and length, and
- a short **user** instruction naming the raw selection values.

Instruction Structure::

    You are a conversation starter expert. ...

    Generate a conversation prompt with the following characteristics:
    - Mood: [mood description]
    - Topic: [topic description]
    - Type: [type instruction]

    Important guidelines:
    1. ... 7. [fixed guidance]

    The prompt should feel like something a real person would naturally say ...

Each description is looked up in :mod:`convogen.core.catalog`.  A value the
catalog does not know is inserted verbatim, so unknown selections still
produce a usable instruction.

Usage
-----
::

    messages = build_messages("happy", "travel", "icebreaker")
"""

from __future__ import annotations

from .catalog import find_conversation_type, find_mood, find_topic

# ---------------------------------------------------------------------------
# Fixed instruction sections.
# ---------------------------------------------------------------------------

_PREAMBLE = (
    "You are a conversation starter expert. Your task is to generate engaging, natural "
    "conversation prompts that help people avoid awkward silences and connect with others."
)

_GUIDELINES = """Important guidelines:
1. Make it sound natural and conversational, not robotic or scripted
2. Keep it concise (1-2 sentences maximum)
3. Make it easy for anyone to answer
4. Avoid controversial or overly personal topics
5. Ensure it's appropriate for most social situations
6. Make it engaging and thought-provoking
7. Return ONLY the conversation prompt text, no additional explanations or formatting"""

_CLOSING = (
    "The prompt should feel like something a real person would naturally say in a conversation."
)


def describe_mood(mood: str) -> str:
    """Return the descriptive phrase for *mood*, or *mood* itself if unknown."""
    option = find_mood(mood)
    return option.description if option else mood


def describe_topic(topic: str) -> str:
    """Return the descriptive phrase for *topic*, or *topic* itself if unknown."""
    option = find_topic(topic)
    return option.description if option else topic


def describe_type(conversation_type: str) -> str:
    """Return the guidance sentence for a conversation type, or the raw value."""
    option = find_conversation_type(conversation_type)
    return option.instruction if option else conversation_type


def build_system_prompt(mood: str, topic: str, conversation_type: str) -> str:
    """Compile the system instruction for one selection.

    Args:
        mood: Mood value (e.g. ``"happy"``).
        topic: Topic value (e.g. ``"travel"``).
        conversation_type: Conversation type value (e.g. ``"icebreaker"``).

    Returns:
        The full system instruction, sections separated by blank lines.
    """
    characteristics = "\n".join(
        [
            "Generate a conversation prompt with the following characteristics:",
            f"- Mood: {describe_mood(mood)}",
            f"- Topic: {describe_topic(topic)}",
            f"- Type: {describe_type(conversation_type)}",
        ]
    )
    return "\n\n".join([_PREAMBLE, characteristics, _GUIDELINES, _CLOSING])


def build_user_prompt(mood: str, topic: str, conversation_type: str) -> str:
    """Compile the user instruction, which names the raw selection values."""
    return (
        f"Generate a {mood} conversation starter about {topic} "
        f"that works as a {conversation_type}."
    )


def build_messages(mood: str, topic: str, conversation_type: str) -> list[dict[str, str]]:
    """Return the role-tagged message list sent to the completion service."""
    return [
        {"role": "system", "content": build_system_prompt(mood, topic, conversation_type)},
        {"role": "user", "content": build_user_prompt(mood, topic, conversation_type)},
    ]
