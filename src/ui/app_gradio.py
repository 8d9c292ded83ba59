"""Gradio web interface for the sentiment dashboard"""
from __future__ import annotations

from typing import Any, List, Tuple

import gradio as gr

from config import logger
from src.core.ports.analysis import IAnalysisClient
from src.ui import cards, charts
from src.ui.dashboard import Dashboard, DashboardView, run_analysis

TITLE = "Advanced Sentiment Analysis Tool"
RESULT_SLOTS = 11

def _button_state(text: str) -> dict:
    """Enable the analyze button only when there is something to send"""
    return gr.update(interactive=bool(text and text.strip()))

def _busy() -> Tuple[dict, dict]:
    """Disable the button and clear any earlier error while a request runs"""
    return (
        gr.update(interactive=False, value="Analyzing..."),
        gr.update(value="", visible=False),
    )

def _idle(text: str) -> dict:
    """Restore the button label once the handler returns"""
    return gr.update(interactive=bool(text and text.strip()), value="Analyze Sentiment")

def _dashboard_values(dashboard: Dashboard) -> List[Any]:
    """Widget values in the order of the result slots"""
    return [
        charts.sentiment_pie_figure(dashboard.sentiment_pie),
        cards.metric_cards_markdown("Model Performance", dashboard.metric_cards),
        cards.confusion_matrix_markdown(dashboard.confusion_matrix),
        charts.roc_figure(dashboard.roc),
        charts.distribution_figure(dashboard.distribution),
        cards.metric_cards_markdown("Comparative Analysis", dashboard.comparative_cards),
        charts.aspect_sentiment_figure(dashboard.aspect_bars),
        cards.top_aspects_markdown(dashboard.top_aspects),
        cards.aspect_details_markdown(dashboard.aspect_cards),
        charts.correlation_table(dashboard.correlations),
        charts.temporal_trends_figure(dashboard.trends),
    ]

def view_updates(view: DashboardView | None) -> List[Any]:
    """
    Translate a DashboardView into updates for [banner, results, *widgets]

    None leaves every component untouched. An error hides the dashboard and
    shows the banner; the text box is never cleared.
    """
    if view is None:
        return [gr.update() for _ in range(RESULT_SLOTS + 2)]
    if view.error is not None:
        return [
            gr.update(value=view.error, visible=True),
            gr.update(visible=False),
            *[gr.update() for _ in range(RESULT_SLOTS)],
        ]
    return [
        gr.update(value="", visible=False),
        gr.update(visible=True),
        *_dashboard_values(view.dashboard),
    ]

def build_demo(client: IAnalysisClient) -> gr.Blocks:
    """
    Build the dashboard page around a page client

    Args:
        client: Object submitting text to POST /api/analyze

    Returns:
        gr.Blocks ready to be launched or mounted on the FastAPI app
    """

    def analyze_ui(text: str) -> List[Any]:
        logger.info("Received request")
        return view_updates(run_analysis(client, text))

    with gr.Blocks(title=TITLE) as demo:
        gr.Markdown(f"# {TITLE}")

        text = gr.Textbox(label="Text", placeholder="Enter your text here...", lines=6)
        button = gr.Button("Analyze Sentiment", variant="primary", interactive=False)
        banner = gr.Markdown(visible=False, elem_classes=["error-banner"])

        with gr.Column(visible=False) as results:
            with gr.Row():
                pie = gr.Plot(show_label=False)
                metrics = gr.Markdown()
            with gr.Row():
                confusion = gr.Markdown()
                roc = gr.Plot(show_label=False)
            with gr.Row():
                distribution = gr.Plot(show_label=False)
                comparative = gr.Markdown()

            gr.Markdown("## Aspect-Based Sentiment Analysis")
            aspect_chart = gr.Plot(show_label=False)
            top_aspects = gr.Markdown()
            aspect_details = gr.Markdown()
            gr.Markdown("### Aspect Correlations")
            correlations = gr.Dataframe(
                headers=["Aspect 1", "Aspect 2", "Correlation"],
                interactive=False,
            )
            trends = gr.Plot(show_label=False)

        outputs = [
            banner, results,
            pie, metrics, confusion, roc, distribution, comparative,
            aspect_chart, top_aspects, aspect_details, correlations, trends,
        ]

        text.change(_button_state, inputs=text, outputs=button)
        # one request in flight: the button stays disabled until the handler returns
        button.click(_busy, outputs=[button, banner], queue=False).then(
            analyze_ui, inputs=text, outputs=outputs
        ).then(_idle, inputs=text, outputs=button)

    return demo
