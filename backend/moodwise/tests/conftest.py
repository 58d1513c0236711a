"""
Shared fixtures: fresh storage, a Groq client backed by httpx.MockTransport,
and a TestClient wired to both.
"""
import json
import httpx
import pytest
from fastapi.testclient import TestClient
from moodwise.api.dependencies import get_ai_service, get_storage
from moodwise.db.storage import MemoryStorage
from moodwise.main import app
from moodwise.services.groq_service import GroqService


def completion(content):
    """Minimal chat-completions payload."""
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def is_mood_request(request: httpx.Request) -> bool:
    body = json.loads(request.content)
    return body["messages"][0]["content"].startswith("You are an expert mood analyzer")


class FakeGroq:
    """Scripted provider: replies and mood payloads are served in order."""

    def __init__(self, reply="That sounds like a lot. How are you holding up?", moods=None):
        self.reply = reply
        self.moods = list(moods or [{"score": 7, "sentiment": "positive", "confidence": 0.8}])
        self.requests = []
        self.status_code = 200

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": {"message": "boom"}})
        if is_mood_request(request):
            mood = self.moods.pop(0) if len(self.moods) > 1 else self.moods[0]
            return httpx.Response(200, json=completion(json.dumps(mood)))
        return httpx.Response(200, json=completion(self.reply))


@pytest.fixture
def fake_groq():
    return FakeGroq()


@pytest.fixture
def ai_service(fake_groq):
    return GroqService(
        api_key="test-key",
        base_url="https://groq.test/openai/v1",
        model="test-model",
        transport=httpx.MockTransport(fake_groq),
    )


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def client(storage, ai_service):
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_ai_service] = lambda: ai_service
    yield TestClient(app)
    app.dependency_overrides.clear()
