"""
Tests for API Pydantic schemas.

Validates that:
- Request/response models serialize correctly
- Error codes are properly structured
- Requests reject malformed input
"""

import pytest
from pydantic import ValidationError


class TestPydanticSchemas:
    """Tests for Pydantic schema validation."""

    def test_stats_info_from_engine_stats(self):
        """StatsInfo reads straight from an engine Stats record."""
        from lifepath.api.schemas import StatsInfo
        from lifepath.engine_core.stats import Stats

        info = StatsInfo.model_validate(Stats(money=3, health=9, luck=2))

        assert info.money == 3
        assert info.health == 9
        assert info.hunger_debt == 0

    def test_choice_info_chance_bounds(self):
        from lifepath.api.schemas import ChoiceInfo

        with pytest.raises(ValidationError):
            ChoiceInfo(choice_id="x", label="X", effort="rest", chance=1.2)

    def test_choice_request_requires_id(self):
        from lifepath.api.schemas import ChoiceRequest

        with pytest.raises(ValidationError):
            ChoiceRequest(choice_id="")
        with pytest.raises(ValidationError):
            ChoiceRequest()

    def test_create_request_defaults(self):
        from lifepath.api.schemas import CreateSessionRequest

        request = CreateSessionRequest()
        assert request.character_id is None
        assert request.seed is None

    def test_error_response_schema(self):
        """ErrorResponse has error_code and details."""
        from lifepath.api.schemas import ErrorCode, ErrorResponse

        response = ErrorResponse(
            error="Choice 'fly' is not offered in scene 'docks'",
            error_code=ErrorCode.INVALID_CHOICE,
            details={"choice_id": "fly", "scene_id": "docks"},
        )

        data = response.model_dump(mode="json")
        assert data["error_code"] == "INVALID_CHOICE"
        assert data["details"]["scene_id"] == "docks"
        assert data["api_version"] == "v1"

    def test_all_error_codes_exist(self):
        from lifepath.api.schemas import ErrorCode

        assert {code.value for code in ErrorCode} == {
            "SESSION_NOT_FOUND",
            "UNKNOWN_CHARACTER",
            "INVALID_CHOICE",
            "GAME_OVER",
            "GAME_NOT_OVER",
            "VALIDATION_ERROR",
        }

    def test_session_response_serializes(self):
        """A live session snapshot dumps to plain JSON types."""
        from lifepath.api.schemas import CreateSessionRequest
        from lifepath.api.service import LifepathService

        response = LifepathService().create_session(CreateSessionRequest(seed=21))
        data = response.model_dump(mode="json")

        assert data["status"] == "active"
        assert set(data["path_scores"]) == {"craft", "service", "trade", "crime"}
        assert data["weather"]["snow_intensity"] in ("gentle", "blizzard")
        assert isinstance(data["scene"]["choices"], list)
        assert data["api_version"] == "v1"

    def test_result_info_from_turn(self):
        """ResultInfo carries the net deltas and the itemized money change."""
        from lifepath.api.schemas import ChoiceRequest, CreateSessionRequest
        from lifepath.api.service import LifepathService

        service = LifepathService()
        session = service.create_session(CreateSessionRequest(seed=21))
        choice = next(c for c in session.scene.choices if not c.locked)
        turn = service.submit_choice(session.session_id, ChoiceRequest(choice_id=choice.choice_id))

        money = sum(item.value for item in turn.result.money_breakdown)
        assert turn.result.deltas.get("money", 0) == money
        assert turn.result.deltas.get("age") == 1
