from fastapi import APIRouter
from fastapi import Request as FastAPIRequest
from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from wireframe_converter.logging_utils import SERVICE_NAME, get_logs_by_request_id
from wireframe_converter.models.schemas import HealthResponse, LogsResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(fastapi_request: FastAPIRequest):
    """Health check. Reports whether an API key is configured, without calling upstream."""
    config = fastapi_request.app.state.config
    return HealthResponse(
        service=SERVICE_NAME,
        model=config.vision_model,
        api_configured=config.api_configured,
    )


@router.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint"""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@router.get("/logs/{request_id}", response_model=LogsResponse)
async def get_logs(request_id: str, fastapi_request: FastAPIRequest):
    """Get logs filtered by request ID (empty unless LOG_DIR is set)"""
    logs = get_logs_by_request_id(request_id, fastapi_request.app.state.config.log_dir)
    return LogsResponse(request_id=request_id, logs=logs, count=len(logs))
