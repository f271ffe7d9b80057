import asyncio

import pytest

from tests.helpers import make_upstream_response, raw_create, raw_response
from wireframe_converter.errors import (
    ConfigurationError,
    InvalidRequestError,
    UpstreamError,
)
from wireframe_converter.models.schemas import CompletionRequest, ConversionRequest
from wireframe_converter.prompts import (
    WIREFRAME_SYSTEM_PROMPT,
    WIREFRAME_USER_INSTRUCTION,
)
from wireframe_converter.services.conversion import (
    MAX_TOKENS,
    build_completion_request,
    convert_wireframe,
    parse_conversion_request,
    validate_upstream_response,
)


@pytest.mark.unit
def test_build_completion_request_shape(sample_image_url):
    completion = build_completion_request(
        ConversionRequest(image=sample_image_url), model="gpt-4o"
    )

    assert completion.model == "gpt-4o"
    assert completion.max_tokens == MAX_TOKENS == 4096
    assert [m.role for m in completion.messages] == ["system", "user"]
    assert completion.messages[0].content == WIREFRAME_SYSTEM_PROMPT

    image_part, text_part = completion.messages[1].content
    assert image_part.image_url.url == sample_image_url
    assert image_part.image_url.detail == "high"
    assert text_part.text == WIREFRAME_USER_INSTRUCTION


@pytest.mark.unit
def test_payload_omits_unset_protocol_fields(sample_image_url):
    payload = build_completion_request(
        ConversionRequest(image=sample_image_url), model="gpt-4o"
    ).to_payload()

    assert set(payload) == {"model", "max_tokens", "messages"}
    assert "name" not in payload["messages"][0]


@pytest.mark.unit
def test_payload_keeps_protocol_fields_when_set():
    completion = CompletionRequest(
        model="gpt-4o",
        messages=[{"role": "user", "content": "hi"}],
        temperature=0.2,
        stop=["</html>"],
    )

    payload = completion.to_payload()

    assert payload["temperature"] == 0.2
    assert payload["stop"] == ["</html>"]


@pytest.mark.unit
def test_system_prompt_mentions_contract():
    assert "tailwind" in WIREFRAME_SYSTEM_PROMPT.lower()
    assert "placehold.co" in WIREFRAME_SYSTEM_PROMPT
    assert "Respond only with the HTML file." in WIREFRAME_SYSTEM_PROMPT


@pytest.mark.unit
def test_parse_conversion_request_ok(sample_image_url):
    result = parse_conversion_request(f'{{"image": "{sample_image_url}"}}'.encode())
    assert isinstance(result, ConversionRequest)
    assert result.image == sample_image_url


@pytest.mark.unit
def test_parse_conversion_request_missing_image():
    result = parse_conversion_request(b'{"picture": "x"}')

    assert isinstance(result, InvalidRequestError)
    assert result.http_status == 400
    assert result.message.startswith("Invalid request body: image")


@pytest.mark.unit
def test_validate_upstream_response_success():
    upstream = make_upstream_response(200, {"choices": [{"index": 0}]})
    assert validate_upstream_response(upstream) == upstream.content


@pytest.mark.unit
def test_validate_upstream_response_error_status():
    result = validate_upstream_response(make_upstream_response(503, {"error": "busy"}))

    assert isinstance(result, UpstreamError)
    assert result.upstream_status == 503
    assert result.http_status == 500
    assert result.to_envelope() == {"error": "OpenAI API responded with status 503"}


@pytest.mark.unit
def test_convert_wireframe_returns_body(
    config, mock_openai, sample_image_url, sample_completion_body
):
    upstream = make_upstream_response(200, sample_completion_body)
    raw_create(mock_openai).return_value = raw_response(upstream)

    result = asyncio.run(
        convert_wireframe(ConversionRequest(image=sample_image_url), config, "req-1")
    )

    assert result == upstream.content


@pytest.mark.unit
def test_convert_wireframe_without_key(
    config_without_key, mock_openai, sample_image_url
):
    result = asyncio.run(
        convert_wireframe(
            ConversionRequest(image=sample_image_url), config_without_key, "req-1"
        )
    )

    assert isinstance(result, ConfigurationError)
    assert result.error_type == "ConfigurationError"
    mock_openai.assert_not_called()


@pytest.mark.unit
def test_system_prompt_keeps_trailing_spaces():
    lines = WIREFRAME_SYSTEM_PROMPT.split("\n")

    assert len(lines) == 5
    assert all(line.endswith(" ") for line in lines[:4])
    assert lines[0] == (
        "You are an expert tailwind developer. A user will provide you with a "
    )
    assert lines[4] == "to create a placeholder image. Respond only with the HTML file."
