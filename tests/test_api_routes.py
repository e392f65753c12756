"""Tests for API routes."""

from fastapi.testclient import TestClient

from calls_assistant.main import app
from calls_assistant.agent_logic import NO_UPCOMING_CALLS_REPLY, NOTHING_TO_COMPLETE_REPLY

client = TestClient(app)

ERROR_BODY = {"message": "An error occurred processing your request.", "action": None}


def _call(**overrides):
    call = {
        "id": "1",
        "clientName": "John Smith",
        "phoneNumber": "+1-555-0123",
        "scheduledTime": "2026-10-19T15:00:00",
        "duration": 30,
        "status": "scheduled",
        "notes": "Discuss Q4 sales report",
        "priority": "high",
        "category": "Sales",
    }
    call.update(overrides)
    return call


def test_root_endpoint():
    """Test root endpoint returns API info."""
    response = client.get("/")
    assert response.status_code == 200

    data = response.json()
    assert "message" in data
    assert data["endpoints"]["chat"] == "/api/chat"


def test_chat_show_calls_empty():
    response = client.post("/api/chat", json={"message": "show my calls", "calls": [], "chatHistory": []})

    assert response.status_code == 200
    assert response.json() == {"message": NO_UPCOMING_CALLS_REPLY, "action": None}


def test_chat_schedule_call_returns_camel_case_payload():
    response = client.post(
        "/api/chat",
        json={"message": "Book a call with Maria Lopez on Monday next week for 20 minutes", "calls": [], "chatHistory": []},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["action"] == "schedule_call"
    call = data["data"]
    assert call["clientName"] == "Maria Lopez"
    assert call["duration"] == 20
    assert call["status"] == "scheduled"
    assert call["scheduledTime"].endswith("T14:00:00")
    assert "id" not in call


def test_chat_mark_complete():
    calls = [_call(id="a", status="completed"), _call(id="b", clientName="Sarah Johnson")]

    response = client.post("/api/chat", json={"message": "mark as complete", "calls": calls, "chatHistory": []})

    assert response.status_code == 200
    assert response.json() == {
        "message": "✅ Marked call with Sarah Johnson as completed. Great job!",
        "action": "update_call",
        "data": {"id": "b", "status": "completed"},
    }


def test_chat_mark_complete_nothing_scheduled():
    response = client.post(
        "/api/chat",
        json={"message": "I'm finished", "calls": [_call(status="missed")], "chatHistory": []},
    )

    assert response.status_code == 200
    assert response.json() == {"message": NOTHING_TO_COMPLETE_REPLY, "action": None}


def test_chat_summary_with_history():
    """Chat history is accepted but does not change the answer."""
    calls = [_call(id="1"), _call(id="2", status="completed", priority="low")]
    history = [
        {"role": "assistant", "content": "Hello!"},
        {"role": "user", "content": "schedule a call"},
    ]

    response = client.post("/api/chat", json={"message": "give me a summary", "calls": calls, "chatHistory": history})

    assert response.status_code == 200
    message = response.json()["message"]
    assert "✅ Completed: 1" in message
    assert "📅 Scheduled: 1" in message
    assert "❌ Missed: 0" in message
    assert "🔥 High Priority: 1" in message
    assert "Total Calls: 2" in message


def test_chat_accepts_utc_timestamps(india_local_time):
    calls = [_call(scheduledTime="2026-10-19T15:00:00.000Z")]

    response = client.post("/api/chat", json={"message": "show calls", "calls": calls})

    assert response.status_code == 200
    assert response.json()["message"].endswith("1. John Smith - 10/19/2026, 8:30:00 PM (high priority)")


def test_chat_missing_calls_defaults_to_empty():
    response = client.post("/api/chat", json={"message": "show my calls"})

    assert response.status_code == 200
    assert response.json()["message"] == NO_UPCOMING_CALLS_REPLY


def test_chat_missing_message_is_generic_error():
    response = client.post("/api/chat", json={"calls": []})

    assert response.status_code == 500
    assert response.json() == ERROR_BODY


def test_chat_invalid_json_is_generic_error():
    response = client.post("/api/chat", content="not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 500
    assert response.json() == ERROR_BODY


def test_chat_invalid_call_is_generic_error():
    response = client.post(
        "/api/chat",
        json={"message": "show my calls", "calls": [_call(status="cancelled")], "chatHistory": []},
    )

    assert response.status_code == 500
    assert response.json() == ERROR_BODY
