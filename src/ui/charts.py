"""Plotly figures and pandas tables for the dashboard widgets"""
from __future__ import annotations

from typing import List, Tuple

import pandas as pd
import plotly.graph_objects as go

from src.ui.dashboard import AspectBar, CorrelationRow, PieSlice, RocChart, TrendSeries

CHART_HEIGHT = 320
ACCENT = "#8884d8"

def _empty_figure(title: str) -> go.Figure:
    """Placeholder shown when the result has no data for a chart"""
    fig = go.Figure()
    fig.update_layout(
        title=f"{title} (no data)",
        height=CHART_HEIGHT,
        xaxis_visible=False,
        yaxis_visible=False,
    )
    return fig

def sentiment_pie_figure(slices: List[PieSlice]) -> go.Figure:
    """Donut chart of the three sentiment percentages"""
    if not slices:
        return _empty_figure("Overall Sentiment")
    fig = go.Figure(go.Pie(
        labels=[s.name for s in slices],
        values=[s.value for s in slices],
        marker={"colors": [s.color for s in slices]},
        hole=0.6,
        texttemplate="%{label}: %{value}%",
        sort=False,
    ))
    fig.update_layout(title="Overall Sentiment", height=CHART_HEIGHT, showlegend=False)
    return fig

def roc_figure(roc: RocChart) -> go.Figure:
    """ROC line with the AUC label annotated under the plot"""
    if not roc.points:
        fig = _empty_figure("ROC Curve")
    else:
        fpr, tpr = zip(*roc.points)
        fig = go.Figure(go.Scatter(
            x=list(fpr),
            y=list(tpr),
            mode="lines+markers",
            line={"color": ACCENT, "shape": "spline"},
            name="ROC",
        ))
        fig.update_layout(
            title="ROC Curve",
            height=CHART_HEIGHT,
            xaxis_title="False Positive Rate",
            yaxis_title="True Positive Rate",
        )
    if roc.auc_label:
        fig.add_annotation(
            text=roc.auc_label,
            xref="paper", yref="paper",
            x=0.5, y=-0.25,
            showarrow=False,
        )
    return fig

def distribution_figure(series: List[Tuple[str, float]]) -> go.Figure:
    """Filled area over the five sentiment buckets"""
    if not series:
        return _empty_figure("Sentiment Distribution")
    names, values = zip(*series)
    fig = go.Figure(go.Scatter(
        x=list(names),
        y=list(values),
        mode="lines",
        fill="tozeroy",
        line={"color": ACCENT, "shape": "spline"},
    ))
    fig.update_layout(title="Sentiment Distribution", height=CHART_HEIGHT)
    return fig

def aspect_sentiment_figure(bars: List[AspectBar]) -> go.Figure:
    """Horizontal bars on a fixed -1..1 axis"""
    if not bars:
        return _empty_figure("Aspect Sentiments")
    fig = go.Figure(go.Bar(
        x=[b.sentiment for b in bars],
        y=[b.aspect for b in bars],
        orientation="h",
        marker={"color": [b.color for b in bars]},
    ))
    fig.update_layout(
        title="Aspect Sentiments",
        height=CHART_HEIGHT,
        xaxis={"range": [-1, 1]},
    )
    return fig

def temporal_trends_figure(trends: List[TrendSeries]) -> go.Figure:
    """One spline per aspect"""
    if not trends:
        return _empty_figure("Temporal Trends")
    fig = go.Figure()
    for trend in trends:
        fig.add_trace(go.Scatter(
            x=[p for p, _ in trend.points],
            y=[s for _, s in trend.points],
            mode="lines+markers",
            name=trend.aspect,
            line={"color": trend.color, "shape": "spline"},
        ))
    fig.update_layout(
        title="Temporal Trends",
        height=CHART_HEIGHT,
        yaxis={"range": [-1, 1]},
    )
    return fig

def correlation_table(rows: List[CorrelationRow]) -> pd.DataFrame:
    """Aspect pairs with their correlation; an empty frame keeps the headers"""
    return pd.DataFrame(
        [(r.aspect1, r.aspect2, r.correlation) for r in rows],
        columns=["Aspect 1", "Aspect 2", "Correlation"],
    )
