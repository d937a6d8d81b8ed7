"""Shared pytest fixtures for content generator tests."""

import os

# Keep test runs from writing logs/contentgen.log into the working tree.
os.environ["LOG_DIR"] = ""

from typing import Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

from ai_clients.base import AIClient, CompletionRequest, CompletionResponse


class FakeAIClient(AIClient):
    """In-memory generation client that records every request it receives.

    Returns ``reply`` for each call, or raises ``error`` when one is set.
    """

    provider = "fake"

    def __init__(self, reply: str = "Generated text", error: Optional[BaseException] = None):
        super().__init__(api_key="test-key")
        self.reply = reply
        self.error = error
        self.requests: List[CompletionRequest] = []

    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return CompletionResponse(
            content=self.reply,
            model="fake-model",
            input_tokens=10,
            output_tokens=20,
            cost=0.0,
            provider=self.provider,
        )


@pytest.fixture
def fake_ai_client() -> FakeAIClient:
    """Create a fake generation client with a fixed reply."""
    return FakeAIClient()


@pytest.fixture
def test_client(fake_ai_client: FakeAIClient) -> Generator[TestClient, None, None]:
    """FastAPI TestClient with the generation client dependency overridden.

    The client is not used as a context manager, so the lifespan (which
    would build a real SDK client) never runs.
    """
    from api.router import get_ai_client
    from main import app

    app.dependency_overrides[get_ai_client] = lambda: fake_ai_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def valid_payload() -> dict:
    """Minimal valid request body (tone and keywords omitted)."""
    return {"topic": "electric bikes", "contentType": "product_description"}
