"""
Tests for chat session and message endpoints.
"""
import pytest
from moodwise.api.dependencies import get_ai_service
from moodwise.main import app
from moodwise.services.groq_service import FALLBACK_REPLY


def start_session(client, **body):
    response = client.post("/api/chat/session", json=body or None)
    assert response.status_code == 200
    return response.json()["id"]


def test_create_session(client):
    """Test anonymous session creation."""
    response = client.post("/api/chat/session")
    assert response.status_code == 200
    data = response.json()
    assert data["id"].startswith("session_")
    assert data["user_id"] is None
    assert data["ended_at"] is None
    assert data["average_mood_score"] is None


def test_create_session_for_user(client):
    session_id = start_session(client, user_id="u1")
    assert client.get(f"/api/chat/session/{session_id}").json()["session"]["user_id"] == "u1"


def test_get_unknown_session(client):
    response = client.get("/api/chat/session/session_missing")
    assert response.status_code == 404
    assert response.json()["detail"] == "Session not found"


def test_send_message(client, fake_groq):
    """A turn stores both messages and returns the mood analysis."""
    session_id = start_session(client)
    response = client.post(
        "/api/chat/message",
        json={"session_id": session_id, "content": "  I finally finished my thesis!  "}
    )
    assert response.status_code == 200
    data = response.json()

    assert data["user_message"]["content"] == "I finally finished my thesis!"
    assert data["user_message"]["sender"] == "user"
    assert data["user_message"]["mood_score"] is None
    assert data["ai_message"]["content"] == fake_groq.reply
    assert data["ai_message"]["sender"] == "ai"
    assert data["ai_message"]["mood_score"] == 7.0
    assert data["mood_analysis"] == {
        "score": 7.0,
        "sentiment": "positive",
        "summary": "Mood: 7/10 (positive)"
    }

    detail = client.get(f"/api/chat/session/{session_id}").json()
    assert [m["sender"] for m in detail["messages"]] == ["user", "ai"]
    assert detail["session"]["average_mood_score"] == 7.0


def test_session_average_tracks_mean(client, fake_groq):
    """The session average is the mean of every stored mood score."""
    fake_groq.moods = [
        {"score": 8, "sentiment": "positive", "confidence": 0.9},
        {"score": 4, "sentiment": "slightly_negative", "confidence": 0.6},
        {"score": 3, "sentiment": "negative", "confidence": 0.7},
    ]
    session_id = start_session(client)

    expected = []
    for score, text in [(8, "great morning"), (4, "meh lunch"), (3, "awful evening")]:
        client.post("/api/chat/message", json={"session_id": session_id, "content": text})
        expected.append(score)
        session = client.get(f"/api/chat/session/{session_id}").json()["session"]
        assert session["average_mood_score"] == pytest.approx(sum(expected) / len(expected))


def test_history_is_sent_on_later_turns(client, fake_groq):
    session_id = start_session(client)
    client.post("/api/chat/message", json={"session_id": session_id, "content": "first"})
    client.post("/api/chat/message", json={"session_id": session_id, "content": "second"})

    reply_requests = [
        r for r in fake_groq.requests
        if not r["messages"][0]["content"].startswith("You are an expert mood analyzer")
    ]
    last = reply_requests[-1]["messages"]
    assert [m["role"] for m in last] == ["system", "user", "assistant", "user"]
    assert last[1]["content"] == "first"
    assert last[-1]["content"] == "second"


def test_send_message_without_session_id(client):
    """Test missing session id."""
    response = client.post("/api/chat/message", json={"content": "hello"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Session ID is required"


@pytest.mark.parametrize("body", [{"session_id": "session_x"}, {"session_id": "session_x", "content": "   "}])
def test_send_message_without_content(client, body):
    response = client.post("/api/chat/message", json=body)
    assert response.status_code == 400
    assert response.json()["detail"] == "Message content is required"


def test_send_message_unknown_session(client):
    response = client.post("/api/chat/message", json={"session_id": "session_missing", "content": "hi"})
    assert response.status_code == 404


def test_send_message_ai_outage_falls_back(client, fake_groq):
    """Provider failures produce the neutral fallback, not an error."""
    fake_groq.status_code = 500
    session_id = start_session(client)
    response = client.post("/api/chat/message", json={"session_id": session_id, "content": "hello?"})

    assert response.status_code == 200
    data = response.json()
    assert data["ai_message"]["content"] == FALLBACK_REPLY
    assert data["mood_analysis"] == {"score": 5.0, "sentiment": "neutral", "summary": "Mood: 5/10 (neutral)"}


def test_send_message_unexpected_error_returns_500(client):
    """Unexpected errors map to a generic 500."""
    class BrokenAI:
        async def analyze_message_and_respond(self, message, conversation_history=()):
            raise RuntimeError("unexpected")

    app.dependency_overrides[get_ai_service] = lambda: BrokenAI()
    session_id = start_session(client)
    response = client.post("/api/chat/message", json={"session_id": session_id, "content": "hi"})
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to process message"


def test_end_session(client):
    session_id = start_session(client)
    response = client.delete(f"/api/chat/session/{session_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Session ended successfully"}
    assert client.get(f"/api/chat/session/{session_id}").json()["session"]["ended_at"] is not None


def test_session_stats(client, fake_groq):
    fake_groq.moods = [{"score": 3, "sentiment": "negative", "confidence": 0.8}]
    session_id = start_session(client)

    stats = client.get(f"/api/chat/session/{session_id}/stats").json()
    assert stats["message_count"] == 0
    assert stats["current_mood_score"] == 5.0
    assert stats["sentiment"] == "Neutral"

    client.post("/api/chat/message", json={"session_id": session_id, "content": "rough week"})
    stats = client.get(f"/api/chat/session/{session_id}/stats").json()
    assert stats["message_count"] == 1
    assert stats["current_mood_score"] == 3.0
    assert stats["sentiment"] == "Worried"
    assert stats["mood_level"] == "low"
    assert stats["low_mood_alert"] is True
    assert stats["session_duration"] == "0 min"
    assert stats["is_active"] is True


def test_wrong_method_not_allowed(client):
    assert client.put("/api/chat/message", json={}).status_code == 405


def test_send_message_malformed_reply_falls_back(client, fake_groq):
    """A reply whose content is not text still yields a normal turn."""
    fake_groq.reply = ["not", "a", "string"]
    session_id = start_session(client)
    response = client.post("/api/chat/message", json={"session_id": session_id, "content": "hello"})

    assert response.status_code == 200
    assert response.json()["ai_message"]["content"] == FALLBACK_REPLY
    assert response.json()["mood_analysis"]["score"] == 7.0


def test_session_stats_use_reported_sentiment(client, fake_groq):
    """Stats label the sentiment the model returned, even when the score alone would say otherwise."""
    fake_groq.moods = [{"score": 7, "sentiment": "slightly_positive", "confidence": 0.8}]
    session_id = start_session(client)
    turn = client.post("/api/chat/message", json={"session_id": session_id, "content": "pretty decent day"}).json()
    assert turn["mood_analysis"]["sentiment"] == "slightly_positive"

    stats = client.get(f"/api/chat/session/{session_id}/stats").json()
    assert stats["sentiment"] == "Good"
    assert stats["current_mood_score"] == 7.0

    session = client.get(f"/api/chat/session/{session_id}").json()["session"]
    assert session["last_sentiment"] == "slightly_positive"
