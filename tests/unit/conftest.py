from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from wireframe_converter.config import Config
from wireframe_converter.main import create_app

TEST_API_KEY = "sk-test-key"


@pytest.fixture
def config():
    """Config with an API key; never read from the process environment."""
    return Config(openai_api_key=TEST_API_KEY, vision_model="gpt-4o")


@pytest.fixture
def config_without_key():
    return Config(openai_api_key=None, vision_model="gpt-4o")


@pytest.fixture
def mock_openai():
    """
    Replace AsyncOpenAI in the client module.

    Yields the patched class; the instance it returns is
    ``mock_openai.return_value`` and its raw create call is
    ``mock_openai.return_value.chat.completions.with_raw_response.create``.
    """
    with patch("wireframe_converter.clients.openai_client.AsyncOpenAI") as mock_cls:
        mock_client = MagicMock()
        mock_client.chat.completions.with_raw_response.create = AsyncMock()
        mock_client.close = AsyncMock()
        mock_cls.return_value = mock_client
        yield mock_cls


@pytest.fixture
def client(config):
    return TestClient(create_app(config))


@pytest.fixture
def client_without_key(config_without_key):
    return TestClient(create_app(config_without_key))
