import os

# Settings are read when groq_relay.main is imported
os.environ["GROQ_API_KEY"] = "test-groq-key"

import functools

import httpx
import pytest
from unittest.mock import Mock
from httpx import Response
from fastapi.testclient import TestClient

from groq_relay.api.dependencies import get_settings_dependency
from groq_relay.completion.client import CompletionClient
from groq_relay.core.config import Settings
from groq_relay.core.constants import GroqModels
from groq_relay.main import create_app


TEST_API_KEY = "test-groq-key"


def completion_body(content):
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "model": "llama-3.1-8b-instant",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 1, "total_tokens": 6},
    }


class FakeUpstream:
    """Records outbound requests and answers them with a canned reply"""

    def __init__(self):
        self.requests = []
        self.reply = Response(200, json=completion_body("hello"))
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def test_settings():
    """Settings independent of any .env file or exported variables"""
    return Settings(
        _env_file=None,
        GROQ_API_KEY=TEST_API_KEY,
        GROQ_MODEL=GroqModels.LLAMA3_1_8B_INSTANT,
        GROQ_BASE_URL="https://api.groq.com/openai/v1",
        CORS_ORIGINS=["*"],
        ENVIRONMENT="development",
    )


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client(mocker, upstream, app, test_settings):
    """TestClient whose completion clients talk to ``upstream``"""
    mocker.patch(
        "groq_relay.api.dependencies.CompletionClient",
        functools.partial(
            CompletionClient, transport=httpx.MockTransport(upstream.handler)),
    )
    app.dependency_overrides[get_settings_dependency] = lambda: test_settings
    return TestClient(app)


@pytest.fixture
def mock_httpx_client(mocker):
    """Mock httpx.Client completely"""
    mock_client = mocker.Mock()

    mock_post_response = Mock(spec=Response)
    mock_post_response.raise_for_status.return_value = None
    mock_post_response.json.return_value = completion_body("mocked answer")

    mock_client.post.return_value = mock_post_response

    mocker.patch("httpx.Client", return_value=mock_client)
    return mock_client


@pytest.fixture
def api_key():
    return TEST_API_KEY


@pytest.fixture(name="completion_body")
def completion_body_fixture():
    return completion_body
