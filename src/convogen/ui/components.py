"""Reusable UI pieces for the Conversation Generator Gradio interface."""

import gradio as gr

from convogen.core.catalog import CONVERSATION_TYPES, MOODS, TOPICS

from .formatting import EMPTY_PROMPT_MARKDOWN, favorite_button_label

# Runs in the browser: writes the component value to the clipboard and
# passes it through unchanged to the Python handler.
COPY_TO_CLIPBOARD_JS = """
(text) => {
    if (text) {
        navigator.clipboard.writeText(text);
    }
    return text;
}
"""

GENERATE_LABEL = "✨ Generate Conversation"
GENERATING_LABEL = "⏳ Generating..."


def mood_choices() -> list[tuple[str, str]]:
    return [(f"{m.emoji} {m.label}", m.value) for m in MOODS]


def topic_choices() -> list[tuple[str, str]]:
    return [(f"{t.emoji} {t.label}", t.value) for t in TOPICS]


def type_choices() -> list[tuple[str, str]]:
    return [(f"{t.label} · {t.description}", t.value) for t in CONVERSATION_TYPES]


def notify_info(title: str, message: str) -> None:
    """Show a transient confirmation toast."""
    gr.Info(f"{title} {message}")


def notify_warning(title: str, message: str) -> None:
    """Show a transient error toast."""
    gr.Warning(f"{title}: {message}")


def generate_button_update(can_generate: bool, generating: bool = False) -> dict:
    """Return the Generate button update for the current state."""
    return gr.update(
        value=GENERATING_LABEL if generating else GENERATE_LABEL,
        interactive=can_generate and not generating,
    )


class SelectorUI:
    """The three selector cards: mood, topic, and conversation type."""

    def __init__(self):
        with gr.Row():
            with gr.Column():
                gr.Markdown("### 😊 Choose Mood\nHow do you want the conversation to feel?")
                self.mood = gr.Dropdown(
                    label="Mood", choices=mood_choices(), value=None, show_label=False
                )
            with gr.Column():
                gr.Markdown("### 🎯 Choose Topic\nWhat do you want to talk about?")
                self.topic = gr.Dropdown(
                    label="Topic", choices=topic_choices(), value=None, show_label=False
                )
            with gr.Column():
                gr.Markdown("### 💬 Conversation Type\nWhat kind of conversation starter?")
                self.type = gr.Dropdown(
                    label="Type", choices=type_choices(), value=None, show_label=False
                )

    def inputs(self) -> list:
        return [self.mood, self.topic, self.type]


class PromptCardUI:
    """Card showing the current prompt with Copy and Favorite buttons."""

    def __init__(self):
        with gr.Group():
            self.card = gr.Markdown(value=EMPTY_PROMPT_MARKDOWN)
            with gr.Row():
                self.copy_btn = gr.Button("📋 Copy", size="sm", scale=1)
                self.favorite_btn = gr.Button(favorite_button_label(None), size="sm", scale=1)
            # Holds the raw prompt text for the clipboard snippet
            self.text = gr.Textbox(visible=False)
