"""Configuration management for the Conversation Generator.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the CONVOGEN_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (CONVOGEN_* prefix)
2. .env file in the project root
3. Default values defined in ConvogenConfig

Example .env file:
    CONVOGEN_COMPLETION_MODEL=gpt-4o-mini
    CONVOGEN_COMPLETION_API_KEY=sk-...
    CONVOGEN_API_BASE_URL=http://127.0.0.1:8000

Credentials
-----------
``completion_api_key`` is optional.  When it is left unset the OpenAI SDK
reads ``OPENAI_API_KEY`` from the environment as usual.

Sampling parameters (temperature, output token cap) are deliberately *not*
configuration: they live as constants in :mod:`convogen.core.completion`.

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.

Usage Example
-------------
    from convogen.core.config import config

    print(config.completion_model)
    print(config.api_base_url)
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConvogenConfig(BaseSettings):
    """Main configuration for the Conversation Generator.

    Attributes
    ----------
    Completion Service:
        completion_model : str
            Chat-completions model name sent with every request
        completion_api_key : str | None
            Service credential (falls back to OPENAI_API_KEY when unset)
        completion_base_url : str | None
            Alternative OpenAI-compatible endpoint
        completion_timeout : float | None
            Request timeout in seconds (None keeps the SDK default)

    API Server:
        server_host : str
            Bind address for the FastAPI server
        server_port : int
            Port for the FastAPI server (1024-65535)

    UI Settings:
        api_base_url : str
            Base URL the Gradio UI uses to reach the API server
        request_timeout : float | None
            Timeout for UI -> API requests (None = no explicit timeout)
        gradio_server_name : str
            Gradio bind address
        gradio_server_port : int
            Gradio port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)

    Logging:
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root log level used by the entry points

    Examples
    --------
        >>> custom_config = ConvogenConfig(
        ...     completion_model="gpt-4o",
        ...     api_base_url="http://localhost:9000",
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CONVOGEN_",
        case_sensitive=False,
    )

    # Completion service
    completion_model: str = Field(
        default="gpt-4o-mini",
        description="Chat-completions model used to generate conversation starters",
    )
    completion_api_key: str | None = Field(
        default=None,
        description="Completion service credential (OPENAI_API_KEY is used when unset)",
    )
    completion_base_url: str | None = Field(
        default=None,
        description="Base URL of an OpenAI-compatible completion service",
    )
    completion_timeout: float | None = Field(
        default=None,
        description="Completion request timeout in seconds (None = SDK default)",
        gt=0,
    )

    # API server
    server_host: str = Field(
        default="0.0.0.0",
        description="Bind address for the FastAPI server",
    )
    server_port: int = Field(
        default=8000,
        description="Port for the FastAPI server",
        ge=1024,
        le=65535,
    )

    # UI settings
    api_base_url: str = Field(
        default="http://127.0.0.1:8000",
        description="Base URL of the API server, as seen from the UI process",
    )
    request_timeout: float | None = Field(
        default=None,
        description="Timeout for UI -> API requests in seconds (None = no timeout)",
        gt=0,
    )
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level for the entry points",
    )


# Global configuration instance
# Loads values from environment variables (CONVOGEN_* prefix) and .env file.
config = ConvogenConfig()
