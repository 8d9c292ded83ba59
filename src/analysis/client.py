"""HTTP client the dashboard page uses to call the analysis proxy"""
from __future__ import annotations

from typing import Optional

import httpx

from config import logger
from src.core import (
    AnalysisResult,
    AnalysisTimeoutError,
    MalformedPayloadError,
    NetworkError,
    RemoteError,
)
from src.analysis.normalizer import normalize

ANALYZE_PATH = "/api/analyze"

class AnalysisClient:
    """
    Submit text to POST /api/analyze and normalize the answer

    Attributes:
        http: httpx.Client whose base_url points at the proxy and whose
            timeout bounds a single request
    """

    def __init__(self, http: httpx.Client) -> None:
        self.http = http

    def submit(self, text: str) -> Optional[AnalysisResult]:
        """
        Request an analysis for the text

        Args:
            text: Text typed by the user

        Returns:
            Validated AnalysisResult, or None for blank text (no request is sent)

        Raises:
            AnalysisTimeoutError: If the request or the provider call timed out
            NetworkError: If the proxy could not be reached
            MalformedPayloadError: If the response body is not JSON
            RemoteError: If the proxy reported an error
            SchemaViolationError: If the result does not match the schema
        """
        if not text or not text.strip():
            return None

        try:
            response = self.http.post(ANALYZE_PATH, json={"text": text})
        except httpx.TimeoutException as e:
            logger.warning(f"Request to analysis service timed out: {e!r}")
            raise AnalysisTimeoutError() from e
        except httpx.HTTPError as e:
            logger.warning(f"Request to analysis service failed: {e!r}")
            raise NetworkError(message=f"Could not reach the analysis service: {e}") from e

        if response.status_code == 504:
            raise AnalysisTimeoutError()

        try:
            body = response.json()
        except ValueError as e:
            logger.warning(f"Non-JSON response with status {response.status_code}")
            raise MalformedPayloadError() from e

        if response.status_code != 200 and not (isinstance(body, dict) and body.get("error")):
            raise RemoteError(
                error=f"Unexpected status {response.status_code}",
                details=response.text[:200] or None,
            )

        return normalize(body)
