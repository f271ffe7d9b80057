import json

from fastapi import APIRouter
from fastapi import Request as FastAPIRequest
from fastapi import Response

from wireframe_converter.errors import ConversionError
from wireframe_converter.logging_utils import StructuredLogger, generate_request_id
from wireframe_converter.metrics import (
    conversion_errors_total,
    conversion_requests_total,
)
from wireframe_converter.services.conversion import (
    convert_wireframe,
    parse_conversion_request,
)

router = APIRouter()
logger = StructuredLogger("convert")

JSON_UTF8 = "application/json; charset=UTF-8"


class JSONUTF8Response(Response):
    """Pre-encoded JSON body with an explicit UTF-8 charset."""

    media_type = JSON_UTF8


def error_response(error: ConversionError, request_id: str) -> JSONUTF8Response:
    """Map an error value to its HTTP status and the error envelope."""
    logger.error(
        "Conversion failed",
        context={"error_type": error.error_type, "error": error.message},
        request_id=request_id,
    )
    conversion_errors_total.labels(error_type=error.error_type).inc()
    conversion_requests_total.labels(outcome="error").inc()
    return JSONUTF8Response(
        content=json.dumps(error.to_envelope()).encode("utf-8"),
        status_code=error.http_status,
    )


@router.post("/api/toHtml", response_class=JSONUTF8Response)
async def to_html(fastapi_request: FastAPIRequest) -> JSONUTF8Response:
    """
    Convert a wireframe image into a Tailwind HTML page.

    Body: {"image": "<url-or-data-uri>"}. Responds with the chat completion
    JSON exactly as the upstream API returned it, or {"error": ...}.
    """
    request_id = getattr(fastapi_request.state, "request_id", generate_request_id())
    config = fastapi_request.app.state.config

    request = parse_conversion_request(await fastapi_request.body())
    if isinstance(request, ConversionError):
        return error_response(request, request_id)

    body = await convert_wireframe(request, config, request_id)
    if isinstance(body, ConversionError):
        return error_response(body, request_id)

    conversion_requests_total.labels(outcome="success").inc()
    return JSONUTF8Response(content=body, status_code=200)
