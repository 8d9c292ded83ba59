"""FastAPI application factory"""
from fastapi import FastAPI

from src.api.routes import router
from src.core.ports.analysis import IAnalysisProxy

def create_app(proxy: IAnalysisProxy) -> FastAPI:
    """
    Build the HTTP application around an already constructed proxy

    Args:
        proxy: Object implementing `handle(AnalysisRequest) -> AnalysisResponse`

    Returns:
        FastAPI app exposing POST /api/analyze
    """
    app = FastAPI(title="Sentiment Dashboard", version="1.0.0")
    app.state.proxy = proxy
    app.include_router(router)
    return app
