import pytest


@pytest.fixture
def sample_image_url():
    """Sample wireframe reference"""
    return "https://example.com/wireframes/login.png"


@pytest.fixture
def sample_data_uri():
    """Tiny PNG wireframe passed inline"""
    return "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8BQDwAEhQGAhKmMIQAAAABJRU5ErkJggg=="


@pytest.fixture
def sample_completion_body():
    """Chat completion body as the upstream API returns it"""
    return {
        "id": "chatcmpl-8abc123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4o",
        "choices": [
            {
                "index": 0,
                "message": {
                    "role": "assistant",
                    "content": "<!DOCTYPE html><html><body class=\"p-4\">Login</body></html>",
                },
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 812, "completion_tokens": 240, "total_tokens": 1052},
    }
