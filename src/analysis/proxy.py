"""Server-side proxy forwarding analysis requests to the model provider"""
from __future__ import annotations

from typing import Optional

import openai
from openai import OpenAI

from config import logger
from src.core import AnalysisRequest, AnalysisResponse, ErrorResult
from src.analysis.prompts import SYSTEM_PROMPT

class AnalysisProxy:
    """
    Forward raw text to a chat-completion endpoint and return its JSON text

    The proxy does transport only: the completion content is returned
    verbatim and validated by the normalizer on the page side. Provider
    failures never escape `handle`; they become an ErrorResult.

    Attributes:
        client: Constructed OpenAI client, owned by the process entry point
        model: Chat completion model name
        timeout: Upper bound in seconds for one completion request
    """

    def __init__(
        self,
        client: OpenAI,
        model: str = "gpt-3.5-turbo",
        timeout: Optional[float] = 60.0,
    ) -> None:
        self.client = client
        self.model = model
        self.timeout = timeout

    def build_messages(self, text: str) -> list[dict[str, str]]:
        """Return the instruction message followed by the user's text"""
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": text},
        ]

    def handle(self, request: AnalysisRequest) -> AnalysisResponse:
        """
        Run one completion for the request text

        Args:
            request: Text submitted by the user

        Returns:
            AnalysisResponse with:
                - 200 and the completion content on success
                - 400 when the text is blank (no provider call is made)
                - 504 when the provider call exceeded the timeout
                - 500 on any other provider failure
        """
        if not request.text.strip():
            return AnalysisResponse(
                status_code=400,
                body=ErrorResult(
                    error="Text input is required",
                    details="Text must contain at least one non-whitespace character",
                ),
            )

        logger.info(f"Forwarding analysis request ({len(request.text)} chars) to {self.model}")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(request.text),
                response_format={"type": "json_object"},
                timeout=self.timeout,
            )
            content = response.choices[0].message.content if response.choices else None
        except openai.APITimeoutError as e:
            logger.error(f"Provider call timed out after {self.timeout}s: {e!r}")
            return AnalysisResponse(
                status_code=504,
                body=ErrorResult(error="Analysis timed out", details=str(e)),
            )
        except Exception as e:
            logger.exception("Full error details from provider call")
            return AnalysisResponse(
                status_code=500,
                body=ErrorResult(error="Error analyzing sentiment", details=str(e)),
            )

        if not isinstance(content, str):
            logger.error(f"Provider returned a completion without text content: {content!r}")
            return AnalysisResponse(
                status_code=500,
                body=ErrorResult(
                    error="Error analyzing sentiment",
                    details="The model returned an empty completion",
                ),
            )

        return AnalysisResponse(status_code=200, body=content)
