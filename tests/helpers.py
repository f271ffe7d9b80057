from unittest.mock import AsyncMock, MagicMock

import httpx

UPSTREAM_URL = "https://api.openai.com/v1/chat/completions"


def make_upstream_response(
    status_code: int, json_body=None, content: bytes | None = None
) -> httpx.Response:
    """Build an httpx response as the SDK would hand it back."""
    request = httpx.Request("POST", UPSTREAM_URL)
    if json_body is not None:
        return httpx.Response(status_code, json=json_body, request=request)
    return httpx.Response(status_code, content=content or b"", request=request)


def upstream_request() -> httpx.Request:
    return httpx.Request("POST", UPSTREAM_URL)


def raw_response(http_response: httpx.Response) -> MagicMock:
    """Wrap an httpx response the way with_raw_response does."""
    raw = MagicMock()
    raw.http_response = http_response
    return raw


def raw_create(mock_openai) -> AsyncMock:
    """The patched with_raw_response.create of the mocked AsyncOpenAI instance."""
    return mock_openai.return_value.chat.completions.with_raw_response.create
