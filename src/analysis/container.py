"""Factories wiring the analysis objects from settings

Nothing here is cached: the process entry point builds each object once and
owns its lifecycle (closing the HTTP clients on shutdown).
"""
from typing import Optional

import httpx
from openai import OpenAI

from config import Settings
from src.analysis.client import AnalysisClient
from src.analysis.proxy import AnalysisProxy

def build_openai_client(settings: Settings) -> OpenAI:
    """
    Create the provider client

    Returns:
        OpenAI client authenticated with the resolved credential

    Raises:
        ConfigurationError: If neither OPENAI_API_KEY nor REPLIT_OPENAI_API_KEY is set
    """
    return OpenAI(
        api_key=settings.resolve_api_key(),
        timeout=settings.provider_timeout_seconds,
        max_retries=0,
    )

def build_analysis_proxy(settings: Settings, client: Optional[OpenAI] = None) -> AnalysisProxy:
    """
    Create the AnalysisProxy

    Args:
        settings: Application settings (model name, provider timeout)
        client: Provider client; built from settings when omitted
    """
    return AnalysisProxy(
        client=client or build_openai_client(settings),
        model=settings.openai_model,
        timeout=settings.provider_timeout_seconds,
    )

def build_analysis_client(settings: Settings, http: Optional[httpx.Client] = None) -> AnalysisClient:
    """
    Create the AnalysisClient used by the dashboard page

    Args:
        settings: Application settings (API base URL, client timeout)
        http: HTTP client to reuse; a new one targeting api_base_url when omitted
    """
    if http is None:
        http = httpx.Client(
            base_url=settings.api_base_url,
            timeout=settings.client_timeout_seconds,
        )
    return AnalysisClient(http=http)
