"""Map an AnalysisResult onto dashboard widgets

Every builder takes only its own slice of the result and accepts None, so a
missing section yields an empty widget instead of breaking the page.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

from config import logger
from src.core import AnalysisResult, AppError, SchemaViolationError
from src.core.models import (
    AspectBasedAnalysis,
    ComparativeAnalysis,
    ConfusionMatrix,
    ModelMetrics,
    RocCurve,
    SentimentDistribution,
    SentimentScores,
)
from src.core.ports.analysis import IAnalysisClient

Band = Literal["positive", "negative", "neutral"]

POSITIVE_COLOR = "#4CAF50"
NEGATIVE_COLOR = "#F44336"
NEUTRAL_COLOR = "#9E9E9E"
BAND_COLORS = {
    "positive": POSITIVE_COLOR,
    "negative": NEGATIVE_COLOR,
    "neutral": NEUTRAL_COLOR,
}

@dataclass(frozen=True)
class PieSlice:
    name: str
    value: float
    color: str

@dataclass(frozen=True)
class MetricCard:
    title: str
    value: str
    description: str = ""

@dataclass(frozen=True)
class MatrixCell:
    label: str
    value: int
    tone: Literal["correct", "error"]

@dataclass(frozen=True)
class RocChart:
    points: List[Tuple[float, float]]
    auc_label: Optional[str] = None

@dataclass(frozen=True)
class AspectBar:
    aspect: str
    sentiment: float
    band: Band
    color: str

@dataclass(frozen=True)
class CorrelationRow:
    aspect1: str
    aspect2: str
    correlation: str
    tone: Literal["positive", "negative"]

@dataclass(frozen=True)
class AspectCard:
    aspect: str
    sentiment: str
    confidence: str
    mentions: int
    keywords: List[str]
    examples: List[str]

@dataclass(frozen=True)
class TopAspectCard:
    aspect: str
    frequency: str
    sentiment: str

@dataclass(frozen=True)
class TrendSeries:
    aspect: str
    points: List[Tuple[str, float]]
    color: str

@dataclass(frozen=True)
class Dashboard:
    sentiment_pie: List[PieSlice] = field(default_factory=list)
    metric_cards: List[MetricCard] = field(default_factory=list)
    confusion_matrix: List[MatrixCell] = field(default_factory=list)
    roc: RocChart = field(default_factory=lambda: RocChart(points=[]))
    distribution: List[Tuple[str, float]] = field(default_factory=list)
    comparative_cards: List[MetricCard] = field(default_factory=list)
    aspect_bars: List[AspectBar] = field(default_factory=list)
    correlations: List[CorrelationRow] = field(default_factory=list)
    aspect_cards: List[AspectCard] = field(default_factory=list)
    top_aspects: List[TopAspectCard] = field(default_factory=list)
    trends: List[TrendSeries] = field(default_factory=list)

@dataclass(frozen=True)
class DashboardView:
    """What the page shows after a submission: an error banner or a dashboard"""
    error: Optional[str] = None
    dashboard: Optional[Dashboard] = None

def _plain(value: float) -> str:
    """Format like a JavaScript number: 85.0 -> '85', 85.5 -> '85.5'"""
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)

def sentiment_band(sentiment: float) -> Band:
    """Three-way band: > 0 positive, < 0 negative, exactly 0 neutral"""
    if sentiment > 0:
        return "positive"
    if sentiment < 0:
        return "negative"
    return "neutral"

def sentiment_pie(scores: Optional[SentimentScores]) -> List[PieSlice]:
    """Three slices in fixed order, each in its band color"""
    if scores is None:
        return []
    return [
        PieSlice("Positive", scores.positive, POSITIVE_COLOR),
        PieSlice("Negative", scores.negative, NEGATIVE_COLOR),
        PieSlice("Neutral", scores.neutral, NEUTRAL_COLOR),
    ]

def metric_cards(metrics: Optional[ModelMetrics]) -> List[MetricCard]:
    """Accuracy as a percentage, the rest to three decimals"""
    if metrics is None:
        return []
    return [
        MetricCard("Accuracy", f"{_plain(metrics.accuracy)}%"),
        MetricCard("Precision", f"{metrics.precision:.3f}"),
        MetricCard("Recall", f"{metrics.recall:.3f}"),
        MetricCard("F1 Score", f"{metrics.f1_score:.3f}"),
    ]

def confusion_cells(matrix: Optional[ConfusionMatrix]) -> List[MatrixCell]:
    """Row-major 2x2 grid: TP, FP on top, FN, TN below"""
    if matrix is None:
        return []
    return [
        MatrixCell("True Positive", matrix.true_positive, "correct"),
        MatrixCell("False Positive", matrix.false_positive, "error"),
        MatrixCell("False Negative", matrix.false_negative, "error"),
        MatrixCell("True Negative", matrix.true_negative, "correct"),
    ]

def roc_chart(curve: Optional[RocCurve], auc_score: Optional[float]) -> RocChart:
    """
    Pair falsePositiveRate[i] with truePositiveRate[i]

    Raises:
        SchemaViolationError: If the two arrays differ in length
    """
    auc_label = f"AUC Score: {auc_score:.3f}" if auc_score is not None else None
    if curve is None:
        return RocChart(points=[], auc_label=auc_label)
    fpr, tpr = curve.false_positive_rate, curve.true_positive_rate
    # validated curves are already paired; this covers ones built with model_construct
    if len(fpr) != len(tpr):
        raise SchemaViolationError(violations=[{
            "field": "rocCurve",
            "message": f"array lengths differ ({len(fpr)} vs {len(tpr)})",
        }])
    return RocChart(points=list(zip(fpr, tpr)), auc_label=auc_label)

def distribution_series(dist: Optional[SentimentDistribution]) -> List[Tuple[str, float]]:
    """Five buckets ordered from Very Negative to Very Positive"""
    if dist is None:
        return []
    return [
        ("Very Negative", dist.very_negative),
        ("Negative", dist.negative),
        ("Neutral", dist.neutral),
        ("Positive", dist.positive),
        ("Very Positive", dist.very_positive),
    ]

def comparative_cards(comparative: Optional[ComparativeAnalysis]) -> List[MetricCard]:
    """Cards comparing the text against its industry"""
    if comparative is None:
        return []
    return [
        MetricCard("Industry", comparative.industry),
        MetricCard("Average Sentiment", f"{comparative.average_sentiment:.2f}"),
        MetricCard(
            "Percentile Rank",
            f"{_plain(comparative.percentile_rank)}th",
            "Percentile rank compared to similar texts",
        ),
    ]

def aspect_bars(absa: Optional[AspectBasedAnalysis]) -> List[AspectBar]:
    """One bar per aspect, colored by its sentiment band"""
    if absa is None:
        return []
    bars = []
    for aspect in absa.aspects:
        band = sentiment_band(aspect.sentiment)
        bars.append(AspectBar(aspect.aspect, aspect.sentiment, band, BAND_COLORS[band]))
    return bars

def correlation_rows(absa: Optional[AspectBasedAnalysis]) -> List[CorrelationRow]:
    """Aspect pairs with the correlation to two decimals"""
    if absa is None:
        return []
    return [
        CorrelationRow(
            aspect1=rel.aspect1,
            aspect2=rel.aspect2,
            correlation=f"{rel.correlation:.2f}",
            tone="positive" if rel.correlation > 0 else "negative",
        )
        for rel in absa.aspect_relations
    ]

def aspect_cards(absa: Optional[AspectBasedAnalysis]) -> List[AspectCard]:
    """Detail card per aspect; confidence shown as a percentage"""
    if absa is None:
        return []
    return [
        AspectCard(
            aspect=a.aspect,
            sentiment=f"{a.sentiment:.2f}",
            confidence=f"{a.confidence * 100:.1f}%",
            mentions=a.mentions,
            keywords=list(a.keywords),
            examples=list(a.examples),
        )
        for a in absa.aspects
    ]

def top_aspect_cards(absa: Optional[AspectBasedAnalysis]) -> List[TopAspectCard]:
    """Most frequent aspects in the order the model listed them"""
    if absa is None:
        return []
    return [
        TopAspectCard(t.aspect, _plain(t.frequency), f"{t.average_sentiment:.2f}")
        for t in absa.top_aspects
    ]

def trend_color(index: int) -> str:
    """Distinct HSL color for the index-th trend line"""
    # golden-angle hue steps
    return f"hsl({index * 137.508}, 70%, 50%)"

def trend_series(absa: Optional[AspectBasedAnalysis]) -> List[TrendSeries]:
    """One line per aspect, points kept in timepoint order"""
    if absa is None:
        return []
    return [
        TrendSeries(
            aspect=trend.aspect,
            points=[(tp.point, tp.sentiment) for tp in trend.timepoints],
            color=trend_color(i),
        )
        for i, trend in enumerate(absa.temporal_trends)
    ]

def render_dashboard(result: AnalysisResult) -> Dashboard:
    """Build every widget from its own slice of the result"""
    absa = result.aspect_based_analysis
    return Dashboard(
        sentiment_pie=sentiment_pie(result.sentiment_scores),
        metric_cards=metric_cards(result.model_metrics),
        confusion_matrix=confusion_cells(result.confusion_matrix),
        roc=roc_chart(result.roc_curve, result.auc_score),
        distribution=distribution_series(result.sentiment_distribution),
        comparative_cards=comparative_cards(result.comparative_analysis),
        aspect_bars=aspect_bars(absa),
        correlations=correlation_rows(absa),
        aspect_cards=aspect_cards(absa),
        top_aspects=top_aspect_cards(absa),
        trends=trend_series(absa),
    )

def run_analysis(client: IAnalysisClient, text: str) -> Optional[DashboardView]:
    """
    Submit the text and build what the page should show

    Args:
        client: Page client calling the proxy
        text: Text typed by the user

    Returns:
        None for blank text (nothing is sent and the page stays as it is),
        otherwise a DashboardView holding either a dashboard or an error message
    """
    if not text or not text.strip():
        return None

    try:
        result = client.submit(text)
        if result is None:
            return None
        return DashboardView(dashboard=render_dashboard(result))
    except AppError as e:
        logger.warning(f"AppError: {e.to_dict()}")
        return DashboardView(error=f"Error: {e.message}")
    except Exception as e:
        logger.exception("Unexpected failure while building the dashboard")
        return DashboardView(error=f"Error: {e}")
