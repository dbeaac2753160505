"""Pydantic request and response models for the Conversation Generator API.

Models
------
GenerateConversationRequest
    Payload for ``POST /api/generate-conversation``.
GenerateConversationResponse
    Successful response carrying the generated starter.
ErrorResponse
    Body of every 4xx/5xx response.
CatalogResponse
    Payload of ``GET /api/catalog``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

MISSING_FIELDS_MESSAGE = "Missing required fields: mood, topic, and type are required"
GENERATION_FAILED_MESSAGE = "Failed to generate conversation prompt"

# JSON scalars accepted for a selection field; null means "not supplied".
FieldValue = str | int | float | bool | None


class GenerateConversationRequest(BaseModel):
    """Request body for the ``POST /api/generate-conversation`` endpoint.

    All three fields are required, but they are declared optional here so
    that a missing field reaches the route handler and produces the
    documented 400 response instead of a schema error.  Any truthy scalar
    is accepted and rendered as text, so ``{"mood": 7}`` counts as present.

    Attributes:
        mood: Mood value (e.g. ``"happy"``).
        topic: Topic value (e.g. ``"travel"``).
        type: Conversation type value (e.g. ``"icebreaker"``).
    """

    mood: FieldValue = Field(
        default=None,
        description="Mood value from the catalog (e.g. 'happy').",
    )
    topic: FieldValue = Field(
        default=None,
        description="Topic value from the catalog (e.g. 'travel').",
    )
    type: FieldValue = Field(
        default=None,
        description="Conversation type value from the catalog (e.g. 'icebreaker').",
    )

    def is_complete(self) -> bool:
        """Return True when all three fields are present and non-empty."""
        return bool(self.mood and self.topic and self.type)

    def as_text(self) -> tuple[str, str, str]:
        """Return (mood, topic, type) rendered as text."""
        return str(self.mood), str(self.topic), str(self.type)


class GenerateConversationResponse(BaseModel):
    """Successful response for ``POST /api/generate-conversation``."""

    prompt: str = Field(..., description="The generated conversation starter.")


class ErrorResponse(BaseModel):
    """Error body used by every failing endpoint."""

    error: str = Field(..., description="Human readable error message.")


class CatalogEntry(BaseModel):
    """One selectable option as exposed to frontends."""

    value: str
    label: str
    emoji: str | None = None
    description: str | None = None


class CatalogResponse(BaseModel):
    """Response body for ``GET /api/catalog``."""

    version: str
    moods: list[CatalogEntry]
    topics: list[CatalogEntry]
    types: list[CatalogEntry]
