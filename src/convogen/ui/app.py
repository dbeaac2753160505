"""Gradio UI for the Conversation Generator."""

import logging

import gradio as gr

from convogen.core.config import config

from .components import (
    COPY_TO_CLIPBOARD_JS,
    GENERATE_LABEL,
    PromptCardUI,
    SelectorUI,
)
from .formatting import EMPTY_FAVORITES_MARKDOWN, format_favorites_header
from .handlers import (
    copy_prompt,
    finish_generation,
    remove_favorite,
    reset_generate_button,
    select_favorite,
    start_generation,
    toggle_current_favorite,
    update_selection_handler,
)
from .models import UIState

# Configure logging
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui() -> gr.Blocks:
    """Create the Gradio UI.

    Returns:
        Gradio Blocks app
    """
    app = gr.Blocks(title="Conversation Generator")

    with app:
        # Session state - one instance per user
        ui_state = gr.State(UIState())

        gr.Markdown(
            """
            # ✨ Conversation Generator ✨
            ### Never run out of things to say! Generate engaging conversation starters tailored to any mood, topic, or situation.
            """
        )

        with gr.Tabs():
            with gr.Tab("Generate", id="generate_tab"):
                generate_btn, card = create_generation_tab(ui_state)

            with gr.Tab("Favorites", id="favorites_tab"):
                favorites_components = create_favorites_tab(ui_state)

        # Favorite toggle on the current prompt refreshes both tabs
        favorites_outputs = [
            card.card,
            card.favorite_btn,
            favorites_components["header"],
            favorites_components["list"],
            favorites_components["selector"],
            ui_state,
        ]
        card.favorite_btn.click(
            fn=toggle_current_favorite,
            inputs=[ui_state],
            outputs=favorites_outputs,
        )
        favorites_components["remove_btn"].click(
            fn=remove_favorite,
            inputs=[favorites_components["selector"], ui_state],
            outputs=favorites_outputs,
        )

        app.load(fn=reset_generate_button, inputs=[ui_state], outputs=[generate_btn])

    return app


def create_generation_tab(ui_state):
    """Create the selector cards, Generate button, and prompt card.

    Args:
        ui_state: UI state component

    Returns:
        Tuple of (generate_button, prompt_card)
    """
    selectors = SelectorUI()

    generate_btn = gr.Button(GENERATE_LABEL, variant="primary", size="lg", interactive=False)

    card = PromptCardUI()

    # Selector changes: store values, enable Generate once all three are set
    for dropdown in selectors.inputs():
        dropdown.change(
            fn=update_selection_handler,
            inputs=selectors.inputs() + [ui_state],
            outputs=[generate_btn, ui_state],
        )

    # Generate: lock the button, then perform the request
    generate_btn.click(
        fn=start_generation,
        inputs=[ui_state],
        outputs=[generate_btn, ui_state],
    ).then(
        fn=finish_generation,
        inputs=[ui_state],
        outputs=[card.card, card.favorite_btn, card.text, generate_btn, ui_state],
    )

    # Copy: clipboard write happens client-side, handler shows the toast
    card.copy_btn.click(
        fn=copy_prompt,
        inputs=[card.text],
        outputs=[card.text],
        js=COPY_TO_CLIPBOARD_JS,
    )

    return generate_btn, card


def create_favorites_tab(ui_state):
    """Create the favorites tab UI.

    Args:
        ui_state: UI state component

    Returns:
        Dictionary of favorites components for cross-tab event wiring
    """
    header = gr.Markdown(format_favorites_header([]))
    favorites_list = gr.Markdown(EMPTY_FAVORITES_MARKDOWN)

    with gr.Row():
        selector = gr.Dropdown(
            label="Selected favorite",
            choices=[],
            value=None,
            scale=3,
        )
        copy_btn = gr.Button("📋 Copy", size="sm", scale=1)
        remove_btn = gr.Button("💔 Remove", size="sm", scale=1)

    # Hidden text of the selected favorite, for the clipboard snippet
    selected_text = gr.Textbox(visible=False)

    selector.change(
        fn=select_favorite,
        inputs=[selector, ui_state],
        outputs=[selected_text],
    )
    copy_btn.click(
        fn=copy_prompt,
        inputs=[selected_text],
        outputs=[selected_text],
        js=COPY_TO_CLIPBOARD_JS,
    )

    return {
        "header": header,
        "list": favorites_list,
        "selector": selector,
        "remove_btn": remove_btn,
    }


def main():
    """Main entry point for the application."""
    logger.info("Starting Conversation Generator UI...")
    logger.info(f"API server: {config.api_base_url}")

    app = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    app.launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
    )


if __name__ == "__main__":
    main()
