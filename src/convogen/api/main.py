"""Conversation Generator — FastAPI Application.

This module defines the FastAPI ``app`` instance, the REST API routes, and
the ``main()`` CLI function that launches the uvicorn server.

Architecture
------------
- **Prompt compilation** happens in :mod:`convogen.core.prompt_builder`.
- **Text generation** is delegated to a
  :class:`~convogen.core.completion.CompletionClient` created once at
  startup and stored on ``app.state``.
- **No persistence**: every request is independent; favorites live in the
  UI session only.
- **Error bodies** always use the ``{"error": "..."}`` shape.  Route handlers
  raise :class:`HTTPException` and the handlers registered below render it.

Endpoints
---------
========  ==============================  ==================================
Method    Path                            Purpose
========  ==============================  ==================================
POST      ``/api/generate-conversation``  Generate one conversation starter
GET       ``/api/catalog``                Moods, topics, conversation types
GET       ``/api/health``                 Liveness probe
========  ==============================  ==================================

Usage
-----
CLI (installed entry point)::

    convogen-api

Direct invocation::

    python -m convogen.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from convogen import __version__
from convogen.api.models import (
    GENERATION_FAILED_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    CatalogEntry,
    CatalogResponse,
    ErrorResponse,
    GenerateConversationRequest,
    GenerateConversationResponse,
)
from convogen.core.catalog import CONVERSATION_TYPES, MOODS, TOPICS
from convogen.core.completion import CompletionClient, generate_conversation_prompt
from convogen.core.config import config
from convogen.core.errors import ConversationGenerationError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Application lifecycle: completion client setup.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the completion client on startup.

    Tests may pre-populate ``app.state.completion_client`` with a stub; an
    existing client is left untouched.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    if getattr(app.state, "completion_client", None) is None:
        app.state.completion_client = CompletionClient.from_config(config)
        logger.info(f"CompletionClient initialised (model={config.completion_model}).")

    yield


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Conversation Generator",
    description="Generates conversation starters for a chosen mood, topic, and type.",
    version=__version__,
    lifespan=lifespan,
)

# The Gradio UI runs as a separate process; allow it (or any other frontend)
# to call the API cross-origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Error rendering.
# ---------------------------------------------------------------------------


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTPException as ``{"error": detail}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render body validation failures as ``{"error": ...}``.

    A body that is not valid JSON is a server-side failure (500); any other
    shape problem is reported like a missing field (400).
    """
    errors = exc.errors()
    logger.warning(f"Rejected request body on {request.url.path}: {errors}")
    if any(err.get("type") == "json_invalid" for err in errors):
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=GENERATION_FAILED_MESSAGE).model_dump(),
        )
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=MISSING_FIELDS_MESSAGE).model_dump(),
    )


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.post(
    "/api/generate-conversation",
    response_model=GenerateConversationResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def generate_conversation(req: GenerateConversationRequest) -> GenerateConversationResponse:
    """Generate one conversation starter for the requested selection.

    This endpoint:

    1. Validates that ``mood``, ``topic``, and ``type`` are all present.
    2. Compiles the system and user instructions.
    3. Issues a single completion request (no retry).
    4. Returns the trimmed text of the first choice.

    Declared as a plain ``def`` so the blocking completion call runs in
    FastAPI's threadpool.

    Args:
        req: Validated :class:`GenerateConversationRequest` payload.

    Returns:
        :class:`GenerateConversationResponse` with the generated ``prompt``.

    Raises:
        HTTPException: 400 if a field is missing, 500 if generation fails.
    """
    if not req.is_complete():
        raise HTTPException(status_code=400, detail=MISSING_FIELDS_MESSAGE)

    client: CompletionClient = app.state.completion_client
    try:
        prompt = generate_conversation_prompt(client, *req.as_text())
    except ConversationGenerationError as e:
        logger.error(f"Error generating conversation: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=GENERATION_FAILED_MESSAGE) from e
    except Exception as e:
        logger.error(f"Unexpected error generating conversation: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=GENERATION_FAILED_MESSAGE) from e

    return GenerateConversationResponse(prompt=prompt)


@app.get("/api/catalog", response_model=CatalogResponse)
async def get_catalog() -> CatalogResponse:
    """Return the selectable moods, topics, and conversation types.

    Returns:
        :class:`CatalogResponse` with ``version``, ``moods``, ``topics``,
        and ``types``.
    """
    return CatalogResponse(
        version=__version__,
        moods=[CatalogEntry(value=m.value, label=m.label, emoji=m.emoji) for m in MOODS],
        topics=[CatalogEntry(value=t.value, label=t.label, emoji=t.emoji) for t in TOPICS],
        types=[
            CatalogEntry(value=t.value, label=t.label, description=t.description)
            for t in CONVERSATION_TYPES
        ],
    )


@app.get("/api/health")
async def health() -> dict:
    """Return a static liveness payload."""
    return {"status": "ok", "version": __version__}


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~convogen.core.config.config` (which
    loads from ``CONVOGEN_SERVER_HOST`` and ``CONVOGEN_SERVER_PORT``
    environment variables).  Defaults to ``0.0.0.0:8000``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "convogen.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
