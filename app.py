"""mnkbot: Gradio web app entry point."""

import logging

import gradio as gr

from mnkbot.ui.board_component import CLICK_JS
from mnkbot.ui.play_tab import build_play_tab

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

with gr.Blocks(title="mnkbot") as demo:
    gr.Markdown("# mnkbot")
    gr.Markdown(
        "Generalized tic-tac-toe: place stones on an M x N board, "
        "first to get K in a row, column or diagonal wins."
    )

    with gr.Tab("Play"):
        build_play_tab()

    # Bind board click handler JS on page load
    demo.load(fn=None, js=CLICK_JS)

if __name__ == "__main__":
    demo.launch(theme=gr.themes.Soft())
