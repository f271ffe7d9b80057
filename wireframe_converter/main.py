import time
from typing import Optional

from fastapi import FastAPI
from fastapi import Request as FastAPIRequest

from wireframe_converter import __version__
from wireframe_converter.config import Config
from wireframe_converter.logging_utils import (
    StructuredLogger,
    configure_logging,
    generate_request_id,
)
from wireframe_converter.metrics import (
    http_request_duration_seconds,
    http_requests_total,
)
from wireframe_converter.routes.admin import router as admin_router
from wireframe_converter.routes.convert import router as convert_router

logger = StructuredLogger("app")

UNMATCHED_ROUTE = "unmatched"


def _route_label(request: FastAPIRequest) -> str:
    """Route template for metric labels, so path parameters don't create new series."""
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ROUTE)


def create_app(config: Optional[Config] = None) -> FastAPI:
    """
    Build the FastAPI app around an explicit Config.

    With no config, settings are read from the environment (and .env).
    """
    if config is None:
        config = Config.from_env()

    configure_logging(config.log_level, config.log_dir)

    app = FastAPI(title="Wireframe Converter", version=__version__)
    app.state.config = config

    app.include_router(admin_router)
    app.include_router(convert_router)

    @app.middleware("http")
    async def logging_and_metrics_middleware(request: FastAPIRequest, call_next):
        """Log requests and record HTTP metrics."""
        incoming_request_id = request.headers.get("X-Request-ID")
        request_id = incoming_request_id or generate_request_id()
        start_time = time.time()

        is_metrics_endpoint = request.url.path == "/metrics"

        if not is_metrics_endpoint:
            logger.info(
                "Incoming request",
                context={
                    "endpoint": request.url.path,
                    "method": request.method,
                    "client": request.client.host if request.client else "unknown",
                },
                request_id=request_id,
            )

        request.state.request_id = request_id

        try:
            response = await call_next(request)
            duration = time.time() - start_time

            if not is_metrics_endpoint:
                http_requests_total.labels(
                    service="wireframe_converter",
                    endpoint=_route_label(request),
                    method=request.method,
                    status=response.status_code,
                ).inc()

                http_request_duration_seconds.labels(
                    service="wireframe_converter",
                    endpoint=_route_label(request),
                    method=request.method,
                ).observe(duration)

            if not (is_metrics_endpoint and response.status_code == 200):
                logger.info(
                    "Request completed",
                    context={
                        "endpoint": request.url.path,
                        "method": request.method,
                        "status_code": response.status_code,
                        "duration_seconds": round(duration, 3),
                    },
                    request_id=request_id,
                )

            response.headers["X-Request-ID"] = request_id
            return response

        except Exception as e:
            duration = time.time() - start_time

            if not is_metrics_endpoint:
                http_requests_total.labels(
                    service="wireframe_converter",
                    endpoint=_route_label(request),
                    method=request.method,
                    status=500,
                ).inc()

            logger.error(
                "Request failed",
                context={
                    "endpoint": request.url.path,
                    "method": request.method,
                    "error": str(e),
                    "duration_seconds": round(duration, 3),
                },
                request_id=request_id,
            )
            raise

    logger.info(
        "App ready",
        context={
            "model": config.vision_model,
            "api_configured": config.api_configured,
        },
    )
    return app
