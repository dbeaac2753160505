"""Exception hierarchy for conversation prompt generation.

The API layer collapses every :class:`ConversationGenerationError` into the
same generic 500 response; the distinction between the subclasses only
matters for logging and tests.
"""


class ConversationGenerationError(Exception):
    """Base class for server-side generation failures."""

    pass


class GenerationFailure(ConversationGenerationError):
    """The completion service answered, but with no usable text."""

    pass


class CompletionTransportError(ConversationGenerationError):
    """The completion service could not be reached or returned an error."""

    pass
