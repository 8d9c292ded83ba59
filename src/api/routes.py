"""HTTP routes for the analysis proxy"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.core import AnalysisRequest, ErrorResult
from src.core.ports.analysis import IAnalysisProxy

router = APIRouter(prefix="/api", tags=["analysis"])

def get_proxy(request: Request) -> IAnalysisProxy:
    """Return the proxy the application was created with"""
    return request.app.state.proxy

@router.post("/analyze")
def analyze(payload: AnalysisRequest, proxy: IAnalysisProxy = Depends(get_proxy)) -> JSONResponse:
    """
    Forward the text to the model provider

    A successful body is the completion text encoded as a JSON string, so the
    page decodes it a second time. Failures carry {"error", "details"}.
    """
    result = proxy.handle(payload)
    if isinstance(result.body, ErrorResult):
        return JSONResponse(
            status_code=result.status_code,
            content=result.body.model_dump(exclude_none=True),
        )
    return JSONResponse(status_code=result.status_code, content=result.body)
