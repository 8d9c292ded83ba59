"""Ports (interface) for the analysis proxy and the page client"""
from typing import Optional, Protocol

from src.core import AnalysisRequest, AnalysisResponse, AnalysisResult

class IAnalysisProxy(Protocol):
    """Interface for the server-side proxy to the model provider"""

    def handle(self, request: AnalysisRequest) -> AnalysisResponse:
        """
        Forward the text to the model provider

        Args:
            request (AnalysisRequest): Text submitted by the user

        Returns:
            AnalysisResponse: Raw completion text with status 200, or an ErrorResult
        """
        ...

class IAnalysisClient(Protocol):
    """Interface used by the dashboard page to obtain a result"""

    def submit(self, text: str) -> Optional[AnalysisResult]:
        """
        Request an analysis for the text

        Args:
            text (str): Text typed by the user

        Returns:
            Optional[AnalysisResult]: Validated result, or None when text is blank
        """
        ...
