"""
Tests for API layer.

Tests:
- API service methods
- HTTP routes and status codes
- Session lifecycle via API
- Error handling
"""

import logging

import pytest
from fastapi.testclient import TestClient

from ..api.app import create_app
from ..api.schemas import (
    ChoiceRequest,
    CreateSessionRequest,
    ErrorCode,
    RestartRequest,
    SessionStatus,
)
from ..api.service import LifepathService
from ..config import Settings
from ..engine_core.constants import MAX_TURNS
from ..session import GameNotOverError, InvalidChoiceError, SessionNotFoundError


def open_choice(snapshot):
    """First choice in a snapshot the character is allowed to take."""
    choices = snapshot["scene"]["choices"]
    unlocked = [choice for choice in choices if not choice["locked"]]
    return (unlocked or choices)[0]["choice_id"]


class TestLifepathService:
    """Tests for LifepathService."""

    @pytest.fixture
    def service(self):
        """Create a fresh API service."""
        return LifepathService()

    def test_list_characters(self, service):
        response = service.list_characters()

        assert response.count == 4
        assert [c.character_id for c in response.characters][0] == "urchin"

    def test_create_session(self, service):
        response = service.create_session(CreateSessionRequest(character_id="farmer", seed=42))

        assert response.session_id
        assert response.status == SessionStatus.ACTIVE
        assert response.character_id == "farmer"
        assert response.seed == 42
        assert response.turn == 1
        assert response.max_turns == MAX_TURNS
        assert response.scene.choices
        assert response.last_result is None

    def test_choice_info(self, service):
        response = service.create_session(CreateSessionRequest(seed=42))
        for choice in response.scene.choices:
            assert 0.1 <= choice.chance <= 0.85
            assert choice.effort in ("physical", "mental", "social", "rest", "neutral")

    def test_submit_choice(self, service):
        session = service.create_session(CreateSessionRequest(seed=42))
        choice_id = open_choice(session.model_dump())

        turn = service.submit_choice(session.session_id, ChoiceRequest(choice_id=choice_id))

        assert turn.result.title in ("Success", "Failure")
        assert turn.session.turn == 2
        assert turn.session.last_result == turn.result
        assert any(item.label == "Upkeep" for item in turn.result.money_breakdown)

    def test_get_missing_session(self, service):
        with pytest.raises(SessionNotFoundError):
            service.get_session("nonexistent-id")

    def test_invalid_choice(self, service):
        session = service.create_session(CreateSessionRequest(seed=1))
        with pytest.raises(InvalidChoiceError):
            service.submit_choice(session.session_id, ChoiceRequest(choice_id="fly"))

    def test_ending_requires_finished_run(self, service):
        session = service.create_session(CreateSessionRequest(seed=1))
        with pytest.raises(GameNotOverError):
            service.get_ending(session.session_id)

    def test_end_session(self, service):
        session = service.create_session(CreateSessionRequest())

        assert service.end_session(session.session_id).success
        assert not service.end_session(session.session_id).success
        with pytest.raises(SessionNotFoundError):
            service.get_session(session.session_id)

    def test_list_sessions(self, service):
        for _ in range(3):
            service.create_session(CreateSessionRequest())

        assert service.list_sessions().count == 3

    def test_restart(self, service):
        session = service.create_session(CreateSessionRequest(seed=1))
        service.submit_choice(session.session_id, ChoiceRequest(choice_id=open_choice(session.model_dump())))

        restarted = service.restart_session(session.session_id, RestartRequest(seed=2))

        assert restarted.session_id == session.session_id
        assert restarted.turn == 1
        assert restarted.seed == 2

    def test_error_mapping(self, service):
        status, error = service.error_for(InvalidChoiceError("fly", "docks"))

        assert status == 400
        assert error.error_code == ErrorCode.INVALID_CHOICE
        assert error.details == {"choice_id": "fly", "scene_id": "docks"}

        status, error = service.error_for(SessionNotFoundError("x"))
        assert (status, error.error_code) == (404, ErrorCode.SESSION_NOT_FOUND)


class TestHttpApi:
    """Tests for the FastAPI routes."""

    @pytest.fixture
    def client(self):
        app = create_app(settings=Settings())
        return TestClient(app)

    def create(self, client, **body):
        response = client.post("/api/v1/sessions", json=body)
        assert response.status_code == 201
        return response.json()

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/api/docs"

    def test_characters(self, client):
        data = client.get("/api/v1/characters").json()

        assert data["count"] == 4
        assert {c["character_id"] for c in data["characters"]} == {
            "urchin", "apprentice", "refugee", "farmer",
        }

    def test_create_session_defaults(self, client):
        response = client.post("/api/v1/sessions")

        assert response.status_code == 201
        assert response.json()["character_id"] == "urchin"

    def test_create_session_with_seed(self, client):
        data = self.create(client, character_id="refugee", seed=7)

        assert data["seed"] == 7
        assert data["status"] == "active"
        assert data["stage"] in ("Early", "Rising", "Established", "Noble")
        assert data["season"] == "Spring"
        assert data["phase"] == "early"

    def test_unknown_character(self, client):
        response = client.post("/api/v1/sessions", json={"character_id": "wizard"})

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "UNKNOWN_CHARACTER"
        assert data["details"] == {"character_id": "wizard"}

    def test_missing_session(self, client):
        response = client.get("/api/v1/sessions/nope")

        assert response.status_code == 404
        assert response.json()["error_code"] == "SESSION_NOT_FOUND"

    def test_submit_choice(self, client):
        session = self.create(client, seed=11)
        response = client.post(
            f"/api/v1/sessions/{session['session_id']}/choices",
            json={"choice_id": open_choice(session)},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["session"]["turn"] == 2
        assert data["result"]["title"] in ("Success", "Failure")
        assert len(data["session"]["log"]) >= 1

    def test_invalid_choice(self, client):
        session = self.create(client, seed=11)
        response = client.post(
            f"/api/v1/sessions/{session['session_id']}/choices",
            json={"choice_id": "fly-away"},
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_CHOICE"

    def test_empty_choice_rejected(self, client):
        session = self.create(client, seed=11)
        response = client.post(
            f"/api/v1/sessions/{session['session_id']}/choices",
            json={"choice_id": ""},
        )

        assert response.status_code == 422

    def test_full_run(self, client):
        """Play a run to the end, then read the ending."""
        snapshot = self.create(client, character_id="apprentice", seed=5)
        session_id = snapshot["session_id"]

        early = client.get(f"/api/v1/sessions/{session_id}/ending")
        assert early.status_code == 409
        assert early.json()["error_code"] == "GAME_NOT_OVER"

        for _ in range(MAX_TURNS):
            if snapshot["game_over"]:
                break
            response = client.post(
                f"/api/v1/sessions/{session_id}/choices",
                json={"choice_id": open_choice(snapshot)},
            )
            assert response.status_code == 200
            snapshot = response.json()["session"]

        assert snapshot["game_over"]
        assert snapshot["status"] == "game_over"
        assert snapshot["ending_reason"]

        ending = client.get(f"/api/v1/sessions/{session_id}/ending")
        assert ending.status_code == 200
        assert ending.json()["kind"] in ("death", "archetype", "near_miss", "fallback")
        assert ending.json()["ending_reason"] == snapshot["ending_reason"]

        late = client.post(
            f"/api/v1/sessions/{session_id}/choices",
            json={"choice_id": open_choice(snapshot)},
        )
        assert late.status_code == 409
        assert late.json()["error_code"] == "GAME_OVER"

        assert session_id not in client.get("/api/v1/sessions").json()["sessions"]

    def test_restart(self, client):
        session = self.create(client, seed=3)
        session_id = session["session_id"]
        client.post(
            f"/api/v1/sessions/{session_id}/choices",
            json={"choice_id": open_choice(session)},
        )

        response = client.post(f"/api/v1/sessions/{session_id}/restart", json={"seed": 4})

        assert response.status_code == 200
        assert response.json()["turn"] == 1
        assert response.json()["seed"] == 4

    def test_restart_without_body(self, client):
        session = self.create(client)
        response = client.post(f"/api/v1/sessions/{session['session_id']}/restart")

        assert response.status_code == 200

    def test_end_session(self, client):
        session = self.create(client)
        session_id = session["session_id"]

        response = client.delete(f"/api/v1/sessions/{session_id}")
        assert response.json() == {"success": True, "session_id": session_id}

        assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404
        assert client.delete(f"/api/v1/sessions/{session_id}").json()["success"] is False

    def test_list_sessions(self, client):
        ids = {self.create(client)["session_id"] for _ in range(2)}
        data = client.get("/api/v1/sessions").json()

        assert ids <= set(data["sessions"])
        assert data["count"] == len(data["sessions"])

    def test_shared_service(self):
        service = LifepathService()
        session = service.create_session(CreateSessionRequest(seed=1))
        client = TestClient(create_app(service=service, settings=Settings()))

        response = client.get(f"/api/v1/sessions/{session.session_id}")
        assert response.status_code == 200
        assert response.json()["seed"] == 1


class TestAppLogging:
    """Logging is set up when the server starts, not when the app is built."""

    def test_building_app_keeps_root_handlers(self):
        root = logging.getLogger()
        before = list(root.handlers)

        create_app(settings=Settings())

        assert root.handlers == before

    def test_configured_on_startup(self, monkeypatch):
        from ..api import app as app_module

        calls = []
        monkeypatch.setattr(app_module, "configure_logging", calls.append)
        app = app_module.create_app(settings=Settings(log_level="DEBUG"))
        assert calls == []

        with TestClient(app) as client:
            assert client.get("/health").status_code == 200

        assert calls == ["DEBUG"]
