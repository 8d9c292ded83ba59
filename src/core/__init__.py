"""
Core domain layer
"""
from .models import AnalysisRequest, AnalysisResponse, AnalysisResult, ErrorResult
from .exceptions import (
    AppError,
    ConfigurationError,
    RemoteError,
    MalformedPayloadError,
    SchemaViolationError,
    NetworkError,
    AnalysisTimeoutError,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "AnalysisResult",
    "ErrorResult",
    "AppError",
    "ConfigurationError",
    "RemoteError",
    "MalformedPayloadError",
    "SchemaViolationError",
    "NetworkError",
    "AnalysisTimeoutError",
]
