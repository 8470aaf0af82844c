"""
API tests - FastAPI app with a fresh ServiceContainer per test
"""

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from interpreter.responses import CLARIFICATION_MESSAGE


@pytest.fixture
def client(services):
    return TestClient(create_app(services))


def _create_session(client) -> dict:
    response = client.post("/api/v1/sessions")
    assert response.status_code == 201
    return response.json()


# ---------------------------------------------------------------------------
# System
# ---------------------------------------------------------------------------

def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["sessions"] == 0


def test_root(client):
    assert client.get("/").json()["health"] == "/api/health"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def test_parse_command(client):
    response = client.post("/api/v1/commands/parse", json={"text": "make it faster"})

    assert response.status_code == 200
    assert response.json() == {
        "action": "change_speed",
        "parameters": {"speedMs": 500},
        "confidence": 0.5,
        "original_text": "make it faster",
    }


def test_parse_empty_text(client):
    body = client.post("/api/v1/commands/parse", json={}).json()

    assert body["action"] == "unknown"
    assert body["confidence"] == 0
    assert body["parameters"] == {}


def test_parse_override_example(client):
    body = client.post(
        "/api/v1/commands/parse",
        json={"text": "show buttons as columns whose height represents the numbers"},
    ).json()

    assert body["parameters"] == {"visualizationType": "buttons", "heightRepresentation": True}
    assert body["confidence"] == 0.8


def test_describe_command(client):
    body = client.post("/api/v1/commands/describe", json={"text": "please change it"}).json()

    assert body["command"]["confidence"] == 0.1
    assert body["response"] == CLARIFICATION_MESSAGE


def test_parse_text_too_long(client):
    response = client.post("/api/v1/commands/parse", json={"text": "a" * 2001})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


# ---------------------------------------------------------------------------
# Animations
# ---------------------------------------------------------------------------

def test_bubble_sort_from_numbers(client):
    response = client.post("/api/v1/animations/bubble-sort", json={"numbers": [5, 3, 8], "speed_ms": 1000})

    assert response.status_code == 200
    body = response.json()
    assert [s["type"] for s in body["steps"]] == ["compare", "swap", "compare", "compare", "complete"]
    assert body["steps"][1]["id"] == "step-1"
    assert body["steps"][1]["array"] == [3, 5, 8]
    assert body["summary"] == {"total_steps": 5, "comparisons": 3, "swaps": 1, "duration_ms": 4000}


def test_bubble_sort_from_text(client):
    body = client.post("/api/v1/animations/bubble-sort", json={"text": "9, x, 4"}).json()

    assert body["numbers"] == [9, 4]
    assert body["steps"][-1]["array"] == [4, 9]


def test_bubble_sort_requires_input(client):
    response = client.post("/api/v1/animations/bubble-sort", json={"speed_ms": 500})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_NUMBERS"


def test_bubble_sort_too_many_numbers(client):
    response = client.post("/api/v1/animations/bubble-sort", json={"numbers": list(range(65))})

    assert response.status_code == 422
    assert response.json()["error"]["details"]["max_length"] == 64


def test_bubble_sort_speed_out_of_range(client):
    response = client.post("/api/v1/animations/bubble-sort", json={"numbers": [2, 1], "speed_ms": 10})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_SPEED"


def test_bubble_sort_negative_speed_is_validation_error(client):
    response = client.post("/api/v1/animations/bubble-sort", json={"numbers": [2, 1], "speed_ms": -1})

    assert response.status_code == 422
    body = response.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["validation_errors"][0]["field"] == "speed_ms"


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------

def test_session_lifecycle(client):
    session = _create_session(client)
    session_id = session["id"]

    assert session["playback"]["state"] == "IDLE"
    assert client.get("/api/health").json()["sessions"] == 1

    assert client.get(f"/api/v1/sessions/{session_id}").json()["id"] == session_id

    assert client.delete(f"/api/v1/sessions/{session_id}").status_code == 204
    assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404


def test_session_display_options(client):
    display = _create_session(client)["display"]

    assert display["show_timeline"] is True
    assert display["show_description"] is True
    assert display["controls"]["play"] is True
    assert set(display["controls"]) == {
        "play", "pause", "reset", "step_forward", "step_backward", "speed_control",
    }


def test_unknown_session(client):
    response = client.get("/api/v1/sessions/missing")

    assert response.status_code == 404
    body = response.json()
    assert body["error"]["code"] == "SESSION_NOT_FOUND"
    assert body["error"]["details"] == {"session_id": "missing"}


def test_send_message_applies_command(client):
    session_id = _create_session(client)["id"]

    response = client.post(f"/api/v1/sessions/{session_id}/messages", json={"text": "use numbers 5, 3, 8"})

    assert response.status_code == 200
    body = response.json()
    assert body["applied"] is True
    assert body["command"]["parameters"] == {"numbers": [5, 3, 8]}
    assert body["session"]["numbers"] == [5, 3, 8]
    assert body["session"]["summary"]["total_steps"] == 5
    assert [m["role"] for m in body["session"]["history"]] == ["user", "assistant"]


def test_send_unclear_message(client):
    session_id = _create_session(client)["id"]

    body = client.post(f"/api/v1/sessions/{session_id}/messages", json={"text": "hmm"}).json()

    assert body["applied"] is False
    assert body["response"] == CLARIFICATION_MESSAGE


def test_playback_actions(client):
    session_id = _create_session(client)["id"]
    client.post(f"/api/v1/sessions/{session_id}/messages", json={"text": "use numbers 5, 3, 8"})
    base = f"/api/v1/sessions/{session_id}/playback"

    assert client.post(f"{base}/play").json()["playback"]["state"] == "PLAYING"

    playback = client.post(f"{base}/tick").json()["playback"]
    assert playback["position"] == 1
    assert playback["current_step"]["type"] == "swap"

    assert client.post(f"{base}/pause").json()["playback"]["state"] == "PAUSED"
    assert client.post(f"{base}/next").json()["playback"]["position"] == 2
    assert client.post(f"{base}/prev").json()["playback"]["position"] == 1

    end = client.post(f"{base}/seek", json={"index": 99}).json()
    assert end["playback"]["position"] == 4
    assert end["playback"]["state"] == "COMPLETE"
    assert end["colors"] == ["#10b981"] * 3

    reset = client.post(f"{base}/reset").json()["playback"]
    assert reset["position"] == 0
    assert reset["state"] == "PAUSED"


def test_invalid_playback_action(client):
    session_id = _create_session(client)["id"]

    response = client.post(f"/api/v1/sessions/{session_id}/playback/rewind")

    assert response.status_code == 400
    body = response.json()
    assert body["error"]["code"] == "INVALID_PLAYBACK_ACTION"
    assert "play" in body["error"]["details"]["valid_actions"]
