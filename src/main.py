"""Process entry point: build the provider client, the API and the page"""
from __future__ import annotations

import gradio as gr
import uvicorn
from fastapi import FastAPI

from config import Settings, logger, settings
from src.analysis import build_analysis_client, build_analysis_proxy, build_openai_client
from src.api import create_app
from src.ui.app_gradio import build_demo

def create_application(settings: Settings) -> FastAPI:
    """
    Wire the whole application from settings

    The OpenAI client and the page's HTTP client are created here and kept on
    `app.state` so the caller can close them when the server stops.

    Raises:
        ConfigurationError: If no API key is configured
    """
    openai_client = build_openai_client(settings)
    proxy = build_analysis_proxy(settings, client=openai_client)
    app = create_app(proxy)

    page_client = build_analysis_client(settings)
    app.state.openai_client = openai_client
    app.state.page_http = page_client.http

    logger.info(f"Mounting dashboard page (API at {settings.api_base_url})")
    return gr.mount_gradio_app(app, build_demo(page_client), path="/")

def main() -> None:
    app = create_application(settings)
    try:
        uvicorn.run(app, host=settings.host, port=settings.port)
    finally:
        app.state.page_http.close()
        app.state.openai_client.close()

if __name__ == "__main__":
    main()
