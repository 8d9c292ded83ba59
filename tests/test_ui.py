"""Tests for figures, cards and the Gradio page wiring."""
import plotly.graph_objects as go
import pytest

from src.core import AnalysisResult
from src.ui import cards, charts
from src.ui.app_gradio import RESULT_SLOTS, _busy, _idle, build_demo, view_updates
from src.ui.dashboard import DashboardView, render_dashboard


@pytest.fixture
def dashboard(sample_result):
    return render_dashboard(AnalysisResult.model_validate(sample_result))


class TestCharts:
    def test_roc_figure_uses_paired_points(self, dashboard):
        fig = charts.roc_figure(dashboard.roc)
        assert list(fig.data[0].x) == [0, 0.5, 1]
        assert list(fig.data[0].y) == [0, 0.8, 1]
        assert fig.layout.annotations[0].text == "AUC Score: 0.870"

    def test_aspect_bars_are_colored_by_band(self, dashboard):
        fig = charts.aspect_sentiment_figure(dashboard.aspect_bars)
        assert list(fig.data[0].marker.color) == ["#4CAF50", "#F44336", "#9E9E9E"]

    def test_one_trace_per_trend(self, dashboard):
        fig = charts.temporal_trends_figure(dashboard.trends)
        assert [trace.name for trace in fig.data] == ["service"]

    def test_empty_data_gives_placeholder(self):
        fig = charts.sentiment_pie_figure([])
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 0
        assert "no data" in fig.layout.title.text

    def test_empty_correlation_table_keeps_headers(self):
        frame = charts.correlation_table([])
        assert list(frame.columns) == ["Aspect 1", "Aspect 2", "Correlation"]
        assert frame.empty

    def test_correlation_table_rows(self, dashboard):
        frame = charts.correlation_table(dashboard.correlations)
        assert frame.iloc[0].tolist() == ["service", "price", "-0.30"]


class TestCards:
    def test_metric_cards(self, dashboard):
        text = cards.metric_cards_markdown("Model Performance", dashboard.metric_cards)
        assert "**Accuracy**: `85%`" in text
        assert "**F1 Score**: `0.805`" in text

    def test_confusion_matrix_grid(self, dashboard):
        text = cards.confusion_matrix_markdown(dashboard.confusion_matrix)
        rows = [line for line in text.splitlines() if "True" in line or "False" in line]
        assert "True Positive" in rows[0] and "False Positive" in rows[0]
        assert "False Negative" in rows[1] and "True Negative" in rows[1]

    def test_missing_confusion_matrix(self):
        assert "_No data_" in cards.confusion_matrix_markdown([])

    def test_aspect_details(self, dashboard):
        text = cards.aspect_details_markdown(dashboard.aspect_cards)
        assert "#### service" in text
        assert "`friendly`" in text
        assert "- The staff were friendly." in text


class TestGradioPage:
    def test_no_op_leaves_everything_untouched(self):
        updates = view_updates(None)
        assert len(updates) == RESULT_SLOTS + 2

    def test_error_shows_banner_and_hides_results(self):
        updates = view_updates(DashboardView(error="Error: API Error: X"))
        assert updates[0]["value"] == "Error: API Error: X"
        assert updates[0]["visible"] is True
        assert updates[1]["visible"] is False

    def test_dashboard_fills_every_widget(self, dashboard):
        updates = view_updates(DashboardView(dashboard=dashboard))
        assert len(updates) == RESULT_SLOTS + 2
        assert updates[0]["visible"] is False
        assert updates[1]["visible"] is True
        assert isinstance(updates[2], go.Figure)

    def test_busy_disables_button_and_hides_stale_error(self):
        button, banner = _busy()
        assert button["interactive"] is False
        assert button["value"] == "Analyzing..."
        assert banner["visible"] is False
        assert banner["value"] == ""

    @pytest.mark.parametrize("text, interactive", [("hello", True), ("   ", False), ("", False)])
    def test_idle_restores_button_for_current_text(self, text, interactive):
        update = _idle(text)
        assert update["interactive"] is interactive
        assert update["value"] == "Analyze Sentiment"

    def test_build_demo(self, analysis_client):
        demo = build_demo(analysis_client)
        assert demo.title == "Advanced Sentiment Analysis Tool"
