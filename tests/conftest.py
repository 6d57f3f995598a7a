import os

# Settings require an API key at import time
os.environ.setdefault("OPENAI_API_KEY", "test-key")

import httpx
import pytest
from fastapi.testclient import TestClient

from contract_api.main import app
from contract_api.core.config import settings
from contract_api.api.endpoints.generation import get_generator
from contract_api.services.generator import ContractGenerator
from contract_api.services.openai_client import OpenAIChatClient


class FakeOpenAI:
    """Stands in for the chat-completions API; records every request it gets."""

    def __init__(self):
        self.requests = []
        self.content = ""
        self.status_code = 200
        self.error = None

    def reply_with(self, content, status_code=200):
        self.content = content
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.status_code != 200:
            return httpx.Response(
                self.status_code,
                json={"error": {"message": "Rate limit reached", "type": "requests"}},
            )
        return httpx.Response(
            200,
            json={
                "id": "chatcmpl-test",
                "object": "chat.completion",
                "choices": [
                    {
                        "index": 0,
                        "message": {"role": "assistant", "content": self.content},
                        "finish_reason": "stop",
                    }
                ],
            },
        )

    def client(self, **kwargs) -> OpenAIChatClient:
        return OpenAIChatClient(
            api_key="test-key",
            model=settings.OPENAI_MODEL,
            transport=httpx.MockTransport(self.handler),
            **kwargs,
        )


@pytest.fixture
def fake_openai():
    return FakeOpenAI()


@pytest.fixture
def template_path():
    return settings.TEMPLATE_PATH


@pytest.fixture
def client(fake_openai, template_path):
    def override_get_generator():
        return ContractGenerator(fake_openai.client(), template_path)

    app.dependency_overrides[get_generator] = override_get_generator
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
