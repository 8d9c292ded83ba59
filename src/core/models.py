"""Core data models for the sentiment dashboard

Field names are snake_case in Python and camelCase on the wire, matching the
JSON document the language model is instructed to produce.
"""
from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# strict: booleans and numeric strings are not numbers on the wire
Number = Annotated[float, Field(strict=True)]
Count = Annotated[int, Field(strict=True, ge=0)]
Percent = Annotated[float, Field(strict=True, ge=0.0, le=100.0)]
Ratio = Annotated[float, Field(strict=True, ge=0.0, le=1.0)]
Polarity = Annotated[float, Field(strict=True, ge=-1.0, le=1.0)]


class WireModel(BaseModel):
    """Base model reading and writing camelCase keys, ignoring unknown keys"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        allow_inf_nan=False,
    )


class AnalysisRequest(BaseModel):
    """Body of POST /api/analyze"""
    text: str = Field(..., description="Free-form text to analyze")


class ErrorResult(BaseModel):
    """Error body returned by the proxy"""
    error: str
    details: Optional[str] = None


class SentimentScores(WireModel):
    positive: Percent
    negative: Percent
    neutral: Percent


class ModelMetrics(WireModel):
    accuracy: Percent
    precision: Ratio
    recall: Ratio
    f1_score: Ratio


class ConfusionMatrix(WireModel):
    true_positive: Count
    true_negative: Count
    false_positive: Count
    false_negative: Count


class SentimentDistribution(WireModel):
    very_positive: Number
    positive: Number
    neutral: Number
    negative: Number
    very_negative: Number


class RocCurve(WireModel):
    """ROC points stored as two arrays paired by index"""
    false_positive_rate: List[Ratio]
    true_positive_rate: List[Ratio]

    @model_validator(mode="after")
    def _check_paired(self) -> "RocCurve":
        if len(self.false_positive_rate) != len(self.true_positive_rate):
            raise ValueError(
                "falsePositiveRate and truePositiveRate must have the same length "
                f"(got {len(self.false_positive_rate)} and {len(self.true_positive_rate)})"
            )
        return self


class ComparativeAnalysis(WireModel):
    industry: str
    average_sentiment: Number
    percentile_rank: Percent


class Aspect(WireModel):
    aspect: str
    sentiment: Polarity
    confidence: Ratio
    mentions: Count
    keywords: List[str] = Field(default_factory=list)
    examples: List[str] = Field(default_factory=list)


class AspectRelation(WireModel):
    aspect1: str
    aspect2: str
    correlation: Polarity


class TopAspect(WireModel):
    aspect: str
    frequency: Number
    average_sentiment: Number


class TimePoint(WireModel):
    point: str
    sentiment: Number


class TemporalTrend(WireModel):
    aspect: str
    timepoints: List[TimePoint] = Field(default_factory=list)


class AspectBasedAnalysis(WireModel):
    aspects: List[Aspect] = Field(default_factory=list)
    aspect_relations: List[AspectRelation] = Field(default_factory=list)
    top_aspects: List[TopAspect] = Field(default_factory=list)
    temporal_trends: List[TemporalTrend] = Field(default_factory=list)


class AnalysisResult(WireModel):
    """
    Result of one analysis as produced by the language model

    Every section is optional so that a widget can tell its data is missing.
    A section that is present must be complete and within range.
    """
    sentiment_scores: Optional[SentimentScores] = None
    model_metrics: Optional[ModelMetrics] = None
    confusion_matrix: Optional[ConfusionMatrix] = None
    sentiment_distribution: Optional[SentimentDistribution] = None
    roc_curve: Optional[RocCurve] = None
    auc_score: Optional[Ratio] = None
    comparative_analysis: Optional[ComparativeAnalysis] = None
    aspect_based_analysis: Optional[AspectBasedAnalysis] = None

    # "model_" is a protected pydantic namespace; model_metrics is a wire field
    model_config = ConfigDict(protected_namespaces=())

    def to_json(self) -> str:
        """Encode with wire (camelCase) keys"""
        return self.model_dump_json(by_alias=True)


class AnalysisResponse(BaseModel):
    """Transport-neutral response of the analysis proxy"""
    status_code: int
    body: Union[ErrorResult, str]

    @property
    def ok(self) -> bool:
        return self.status_code == 200
