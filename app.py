import gradio as gr
from functools import partial

from json_flattener.config import configure_logging, load_settings
from json_flattener.handlers import (
    clear_selection_handler,
    flatten_handler,
    load_file_into_input,
    select_all_handler,
    selection_change_handler,
)
from json_flattener.state import FlattenSession
from json_flattener.values import POLICIES

settings = load_settings()
configure_logging(settings.log_level)

# --- UI Definition ---
with gr.Blocks(title="JSON Flattener") as demo:
    gr.Markdown("# JSON Flattener and Field Selector")
    gr.Markdown("Paste or upload JSON, flatten nested objects into rows, and choose which fields to display.")

    # State
    session_state = gr.State(value=FlattenSession(policy=settings.policy))

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Input")
            json_input = gr.Textbox(label="JSON", placeholder="Paste your JSON here", lines=12)
            file_input = gr.File(label="Or upload a JSON file", file_types=[".json"])
            policy_selector = gr.Radio(choices=list(POLICIES), value=settings.policy, label="Flattening Policy")
            flatten_btn = gr.Button("Flatten JSON", variant="primary")
            status_msg = gr.Textbox(label="Status", interactive=False)

        # Right Panel: Fields & Table
        with gr.Column(scale=2):
            gr.Markdown("### 2. Select Fields to Display")
            field_selector = gr.CheckboxGroup(label="Fields", choices=[], value=[])
            with gr.Row():
                select_all_btn = gr.Button("Select all")
                clear_btn = gr.Button("Clear")

            gr.Markdown("### 3. Table")
            table = gr.Dataframe(label="Flattened Records", interactive=False, wrap=True)
            preview = gr.JSON(label=f"Raw records (first {settings.preview_rows})")

    file_input.upload(
        fn=load_file_into_input,
        inputs=[file_input],
        outputs=[json_input, status_msg],
    )

    flatten_btn.click(
        fn=partial(flatten_handler, settings),
        inputs=[json_input, policy_selector, session_state],
        outputs=[session_state, field_selector, table, preview, status_msg],
    )

    field_selector.input(
        fn=partial(selection_change_handler, settings),
        inputs=[field_selector, session_state],
        outputs=[session_state, table],
    )

    select_all_btn.click(
        fn=partial(select_all_handler, settings),
        inputs=[session_state],
        outputs=[session_state, field_selector, table],
    )

    clear_btn.click(
        fn=partial(clear_selection_handler, settings),
        inputs=[session_state],
        outputs=[session_state, field_selector, table],
    )

if __name__ == "__main__":
    demo.launch(server_name=settings.server_name, server_port=settings.server_port)
