"""Pytest configuration and fixtures."""
import copy
import json
import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fastapi.testclient import TestClient  # noqa: E402

from src.analysis import AnalysisClient, AnalysisProxy  # noqa: E402
from src.api import create_app  # noqa: E402

SAMPLE_RESULT = {
    "sentimentScores": {"positive": 70, "negative": 10, "neutral": 20},
    "modelMetrics": {"accuracy": 85, "precision": 0.82, "recall": 0.79, "f1Score": 0.805},
    "confusionMatrix": {
        "truePositive": 40,
        "trueNegative": 35,
        "falsePositive": 8,
        "falseNegative": 7,
    },
    "sentimentDistribution": {
        "veryPositive": 25,
        "positive": 45,
        "neutral": 20,
        "negative": 7,
        "veryNegative": 3,
    },
    "rocCurve": {
        "falsePositiveRate": [0, 0.5, 1],
        "truePositiveRate": [0, 0.8, 1],
    },
    "aucScore": 0.87,
    "comparativeAnalysis": {
        "industry": "Hospitality",
        "averageSentiment": 0.42,
        "percentileRank": 78,
    },
    "aspectBasedAnalysis": {
        "aspects": [
            {
                "aspect": "service",
                "sentiment": 0.8,
                "confidence": 0.9,
                "mentions": 3,
                "keywords": ["friendly", "quick"],
                "examples": ["The staff were friendly."],
            },
            {
                "aspect": "price",
                "sentiment": -0.4,
                "confidence": 0.7,
                "mentions": 1,
                "keywords": ["expensive"],
                "examples": ["A bit expensive."],
            },
            {
                "aspect": "location",
                "sentiment": 0,
                "confidence": 0.5,
                "mentions": 1,
                "keywords": [],
                "examples": [],
            },
        ],
        "aspectRelations": [
            {"aspect1": "service", "aspect2": "price", "correlation": -0.3},
        ],
        "topAspects": [
            {"aspect": "service", "frequency": 3, "averageSentiment": 0.8},
        ],
        "temporalTrends": [
            {
                "aspect": "service",
                "timepoints": [
                    {"point": "start", "sentiment": 0.5},
                    {"point": "end", "sentiment": 0.9},
                ],
            },
        ],
    },
}


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


@pytest.fixture
def sample_result():
    """A complete, schema-conforming analysis payload."""
    return copy.deepcopy(SAMPLE_RESULT)


@pytest.fixture
def sample_json(sample_result):
    """The sample payload as the model would return it."""
    return json.dumps(sample_result)


@pytest.fixture
def fake_openai(sample_json):
    """OpenAI client stand-in whose completion returns the sample payload."""
    client = MagicMock()
    client.chat.completions.create.return_value = make_completion(sample_json)
    return client


@pytest.fixture
def proxy(fake_openai):
    return AnalysisProxy(client=fake_openai, model="gpt-3.5-turbo", timeout=5.0)


@pytest.fixture
def api_client(proxy):
    """Test client for the FastAPI app."""
    return TestClient(create_app(proxy))


@pytest.fixture
def analysis_client(api_client):
    """Page client talking to the app in-process."""
    return AnalysisClient(http=api_client)


@pytest.fixture
def completion_factory():
    """Factory for fake chat completions."""
    return make_completion
