"""Gradio user interface for the Conversation Generator."""
