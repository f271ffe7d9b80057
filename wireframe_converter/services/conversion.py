import json
import time

import httpx
from pydantic import ValidationError

from wireframe_converter.clients.openai_client import send_completion
from wireframe_converter.config import Config
from wireframe_converter.errors import (
    ConversionError,
    InvalidRequestError,
    Result,
    UpstreamError,
)
from wireframe_converter.logging_utils import StructuredLogger
from wireframe_converter.metrics import upstream_latency_seconds
from wireframe_converter.models.schemas import (
    CompletionRequest,
    ConversionRequest,
    ImageUrl,
    ImageUrlPart,
    Message,
    TextPart,
)
from wireframe_converter.prompts import (
    WIREFRAME_SYSTEM_PROMPT,
    WIREFRAME_USER_INSTRUCTION,
)

logger = StructuredLogger("conversion")

MAX_TOKENS = 4096
IMAGE_DETAIL = "high"


def parse_conversion_request(body: bytes) -> Result[ConversionRequest]:
    """Validate the inbound body; anything without a string ``image`` is rejected."""
    try:
        return ConversionRequest.model_validate_json(body)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        reason = first.get("msg", "invalid request body")
        detail = f"{location}: {reason}" if location else reason
        return InvalidRequestError(f"Invalid request body: {detail}")


def build_completion_request(
    request: ConversionRequest, model: str
) -> CompletionRequest:
    """System prompt plus one user message pairing the image with the instruction."""
    return CompletionRequest(
        model=model,
        max_tokens=MAX_TOKENS,
        messages=[
            Message(role="system", content=WIREFRAME_SYSTEM_PROMPT),
            Message(
                role="user",
                content=[
                    ImageUrlPart(
                        image_url=ImageUrl(url=request.image, detail=IMAGE_DETAIL)
                    ),
                    TextPart(text=WIREFRAME_USER_INSTRUCTION),
                ],
            ),
        ],
    )


def validate_upstream_response(response: httpx.Response) -> Result[bytes]:
    """Accept 2xx responses carrying JSON; return the body bytes untouched."""
    if not response.is_success:
        return UpstreamError(
            f"OpenAI API responded with status {response.status_code}",
            upstream_status=response.status_code,
        )

    try:
        json.loads(response.content)
    except ValueError:
        return UpstreamError(
            "OpenAI API returned a body that is not JSON",
            upstream_status=response.status_code,
        )

    return response.content


async def convert_wireframe(
    request: ConversionRequest, config: Config, request_id: str
) -> Result[bytes]:
    """
    Build, dispatch and validate one completion for the given wireframe.

    Returns the upstream JSON body as bytes, or the first error value
    produced along the way.
    """
    completion = build_completion_request(request, config.vision_model)

    logger.info(
        "Converting wireframe",
        context={
            "model": completion.model,
            "max_tokens": completion.max_tokens,
            "image_is_data_uri": request.image.startswith("data:"),
        },
        request_id=request_id,
    )

    start_time = time.time()
    response = await send_completion(completion, config, request_id)
    duration = time.time() - start_time

    if isinstance(response, ConversionError):
        return response

    upstream_latency_seconds.labels(model=completion.model).observe(duration)

    body = validate_upstream_response(response)
    if isinstance(body, ConversionError):
        return body

    logger.info(
        "Conversion successful",
        context={
            "response_bytes": len(body),
            "upstream_duration_seconds": round(duration, 3),
        },
        request_id=request_id,
    )
    return body
