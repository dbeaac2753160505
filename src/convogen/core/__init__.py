"""Core functionality for the Conversation Generator.

Modules
-------
config
    Pydantic Settings configuration (CONVOGEN_ prefix).
catalog
    Fixed mood, topic, and conversation-type catalogs.
prompt_builder
    System and user instruction compilation.
completion
    Completion service client.
errors
    Generation exception hierarchy.
"""

from .catalog import CONVERSATION_TYPES, MOODS, TOPICS
from .completion import CompletionClient, generate_conversation_prompt
from .config import ConvogenConfig, config
from .errors import CompletionTransportError, ConversationGenerationError, GenerationFailure
from .prompt_builder import build_messages, build_system_prompt, build_user_prompt

__all__ = [
    "CONVERSATION_TYPES",
    "MOODS",
    "TOPICS",
    "CompletionClient",
    "generate_conversation_prompt",
    "ConvogenConfig",
    "config",
    "CompletionTransportError",
    "ConversationGenerationError",
    "GenerationFailure",
    "build_messages",
    "build_system_prompt",
    "build_user_prompt",
]
