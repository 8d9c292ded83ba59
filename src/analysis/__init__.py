"""
Analysis module
"""

from .prompts import SYSTEM_PROMPT
from .proxy import AnalysisProxy
from .normalizer import normalize
from .client import AnalysisClient
from .container import (
    build_openai_client,
    build_analysis_proxy,
    build_analysis_client,
)

__all__ = [
    "SYSTEM_PROMPT",
    "AnalysisProxy",
    "normalize",
    "AnalysisClient",
    "build_openai_client",
    "build_analysis_proxy",
    "build_analysis_client",
]
