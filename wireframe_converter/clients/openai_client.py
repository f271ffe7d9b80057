from typing import Any

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from wireframe_converter.config import Config
from wireframe_converter.errors import ConfigurationError, Result, TransportError
from wireframe_converter.logging_utils import StructuredLogger
from wireframe_converter.models.schemas import CompletionRequest

logger = StructuredLogger("openai_client")

# Protocol fields the SDK's create() has no keyword for
_EXTRA_BODY_FIELDS = ("best_of",)


def _build_client(config: Config) -> AsyncOpenAI:
    """Create a client for one request, with SDK retries disabled."""
    options: dict[str, Any] = {
        "api_key": config.openai_api_key,
        "base_url": config.openai_base_url,
        "max_retries": 0,
        # None disables the SDK default (5s connect, 600s read)
        "timeout": config.upstream_timeout,
    }
    return AsyncOpenAI(**options)


async def send_completion(
    completion: CompletionRequest, config: Config, request_id: str
) -> Result[httpx.Response]:
    """
    POST the completion request to <base_url>/chat/completions.

    Returns the raw HTTP response whatever its status, so the caller decides
    what counts as success. The API key is read from config on every call;
    without one, no client is created and nothing is sent.
    """
    if not config.openai_api_key:
        return ConfigurationError("OpenAI API key is not set")

    client = _build_client(config)
    try:
        logger.info(
            "Calling chat completions API",
            context={"model": completion.model, "base_url": config.openai_base_url},
            request_id=request_id,
        )
        payload = completion.to_payload()
        extra_body = {k: payload.pop(k) for k in _EXTRA_BODY_FIELDS if k in payload}
        raw = await client.chat.completions.with_raw_response.create(
            **payload, extra_body=extra_body or None
        )
        return raw.http_response
    except APIStatusError as e:
        return e.response
    except APIConnectionError as e:
        return TransportError(f"OpenAI API request failed: {e}")
    finally:
        await client.close()
