"""Conversation Generator - AI conversation starters by mood, topic, and type."""

__version__ = "0.1.0"

from convogen.core.config import ConvogenConfig, config

__all__ = [
    "ConvogenConfig",
    "config",
]
