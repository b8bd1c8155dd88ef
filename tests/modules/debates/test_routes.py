"""
Tests for debate API endpoints.

Routes run against a real DebateService on an in-memory store; a few
tests swap in a mock service to check error mapping in isolation.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.dependencies import get_debate_service
from modules.debates.exceptions import DebateNotFoundError
from modules.debates.models import HOUR_MS


def create(client, payload) -> dict:
    response = client.post("/api/debates", json=payload)
    assert response.status_code == 201
    return response.json()


class TestCreateDebate:
    """Tests for POST /api/debates"""

    def test_create_debate_success(self, client, debate_payload):
        response = client.post("/api/debates", json=debate_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "active"
        assert data["createdBy"] == "alice"
        assert data["votingOptions"] == {"option1": "X", "option2": "Y"}
        assert data["votes"] == {"tallies": {"X": 0, "Y": 0}, "voters": []}
        assert data["endsAt"] - data["createdAt"] == HOUR_MS
        assert data["chat"] == []

    def test_second_active_debate_rejected(self, client, debate_payload):
        create(client, debate_payload)

        response = client.post("/api/debates", json={**debate_payload, "title": "Again"})

        assert response.status_code == 400
        assert "already has an active debate" in response.json()["error"]

    def test_missing_fields(self, client):
        response = client.post("/api/debates", json={"title": "Only a title"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error.startswith("Missing required fields:")
        for field in ("description", "createdBy", "option1", "option2"):
            assert field in error

    def test_empty_field_counts_as_missing(self, client, debate_payload):
        response = client.post("/api/debates", json={**debate_payload, "title": ""})
        assert response.status_code == 400
        assert "title" in response.json()["error"]

    def test_identical_options_rejected(self, client, debate_payload):
        response = client.post("/api/debates", json={**debate_payload, "option2": "X"})
        assert response.status_code == 400

    def test_duration_over_max_rejected(self, client, debate_payload, settings):
        response = client.post(
            "/api/debates",
            json={**debate_payload, "durationHours": settings.max_duration_hours + 1},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_DURATION"


class TestListAndGet:
    def test_list_active_and_all(self, client, debate_payload, clock):
        create(client, debate_payload)
        create(client, {**debate_payload, "createdBy": "bob", "durationHours": 5})
        clock.advance(2 * HOUR_MS)

        active = client.get("/api/debates").json()
        everything = client.get("/api/debates", params={"all": "true"}).json()

        assert [d["createdBy"] for d in active] == ["bob"]
        assert len(everything) == 2
        assert {d["status"] for d in everything} == {"active", "ended"}

    def test_get_debate(self, client, debate_payload):
        created = create(client, debate_payload)
        response = client.get(f"/api/debates/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_debate_not_found(self, client):
        response = client.get("/api/debates/nope")
        assert response.status_code == 404
        assert response.json()["error"] == "Debate not found"

    def test_expired_debate_reported_ended(self, client, debate_payload, clock):
        created = create(client, debate_payload)
        clock.advance(HOUR_MS)
        client.get("/api/debates")

        assert client.get(f"/api/debates/{created['id']}").json()["status"] == "ended"


class TestVote:
    """Tests for POST /api/debates/{id}"""

    def test_vote_and_duplicate(self, client, debate_payload):
        debate_id = create(client, debate_payload)["id"]

        response = client.post(f"/api/debates/{debate_id}", json={"voterId": "bob", "option": "X"})
        assert response.status_code == 200
        assert response.json()["votes"] == {"tallies": {"X": 1, "Y": 0}, "voters": ["bob"]}

        again = client.post(f"/api/debates/{debate_id}", json={"voterId": "bob", "option": "Y"})
        assert again.status_code == 400
        assert again.json()["code"] == "ALREADY_VOTED"

        votes = client.get(f"/api/debates/{debate_id}").json()["votes"]
        assert votes == {"tallies": {"X": 1, "Y": 0}, "voters": ["bob"]}

    def test_vote_on_ended_debate(self, client, debate_payload, clock):
        debate_id = create(client, debate_payload)["id"]
        clock.advance(HOUR_MS)

        response = client.post(f"/api/debates/{debate_id}", json={"voterId": "bob", "option": "X"})

        assert response.status_code == 400
        assert response.json()["code"] == "DEBATE_NOT_ACTIVE"

    def test_vote_missing_fields(self, client, debate_payload):
        debate_id = create(client, debate_payload)["id"]
        response = client.post(f"/api/debates/{debate_id}", json={"voterId": "bob"})
        assert response.status_code == 400
        assert "option" in response.json()["error"]

    def test_vote_unknown_debate(self, client):
        response = client.post("/api/debates/nope", json={"voterId": "bob", "option": "X"})
        assert response.status_code == 404


class TestCancel:
    def test_cancel_by_creator(self, client, debate_payload):
        debate_id = create(client, debate_payload)["id"]
        response = client.post(f"/api/debates/{debate_id}/cancel", json={"requestedBy": "alice"})
        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"

    def test_cancel_by_other_user(self, client, debate_payload):
        debate_id = create(client, debate_payload)["id"]
        response = client.post(f"/api/debates/{debate_id}/cancel", json={"requestedBy": "eve"})
        assert response.status_code == 403


class TestChatAndReactions:
    def test_chat_flow(self, client, debate_payload):
        debate_id = create(client, debate_payload)["id"]

        assert client.get(f"/api/debates/{debate_id}/chat").json() == []

        messages = client.post(
            f"/api/debates/{debate_id}/chat",
            json={"author": "bob", "message": "X all the way"},
        ).json()
        assert len(messages) == 1
        assert messages[0]["debateId"] == debate_id
        assert messages[0]["reactions"] == {"upvotes": 0, "downvotes": 0, "reactors": {}}

        messages = client.post(
            f"/api/debates/{debate_id}/chat",
            json={"author": "carol", "message": "Y though"},
        ).json()
        assert [m["author"] for m in messages] == ["bob", "carol"]
        assert client.get(f"/api/debates/{debate_id}/chat").json() == messages

    def test_chat_missing_fields(self, client, debate_payload):
        debate_id = create(client, debate_payload)["id"]
        response = client.post(f"/api/debates/{debate_id}/chat", json={"author": "bob"})
        assert response.status_code == 400
        assert "message" in response.json()["error"]

    def test_chat_unknown_debate(self, client):
        assert client.get("/api/debates/nope/chat").status_code == 404
        response = client.post("/api/debates/nope/chat", json={"author": "bob", "message": "hi"})
        assert response.status_code == 404

    def test_reaction_toggle(self, client, debate_payload):
        debate_id = create(client, debate_payload)["id"]
        message_id = client.post(
            f"/api/debates/{debate_id}/chat",
            json={"author": "bob", "message": "hi"},
        ).json()[0]["id"]
        url = f"/api/debates/{debate_id}/messages/{message_id}/reactions"

        first = client.post(url, json={"userId": "carol", "reactionType": "upvote"})
        assert first.status_code == 200
        assert first.json()[0]["reactions"] == {
            "upvotes": 1,
            "downvotes": 0,
            "reactors": {"carol": "upvote"},
        }

        second = client.post(url, json={"userId": "carol", "reactionType": "upvote"})
        assert second.json()[0]["reactions"] == {"upvotes": 0, "downvotes": 0, "reactors": {}}

    def test_reaction_invalid_type(self, client, debate_payload):
        debate_id = create(client, debate_payload)["id"]
        response = client.post(
            f"/api/debates/{debate_id}/messages/m1/reactions",
            json={"userId": "carol", "reactionType": "laugh"},
        )
        assert response.status_code == 400

    def test_reaction_unknown_message(self, client, debate_payload):
        debate_id = create(client, debate_payload)["id"]
        response = client.post(
            f"/api/debates/{debate_id}/messages/nope/reactions",
            json={"userId": "carol", "reactionType": "upvote"},
        )
        assert response.status_code == 404
        assert response.json()["code"] == "MESSAGE_NOT_FOUND"


class TestResults:
    def test_results_endpoint(self, client, debate_payload, clock):
        debate_id = create(client, debate_payload)["id"]
        client.post(f"/api/debates/{debate_id}", json={"voterId": "bob", "option": "Y"})
        clock.advance(HOUR_MS)

        data = client.get("/api/debates/results").json()

        assert data["stats"] == {"totalDebates": 1, "totalVotes": 1, "totalParticipants": 1}
        result = data["debates"][0]
        assert result["winner"] == "Y"
        assert result["isTie"] is False
        assert result["percentages"] == {"X": 0, "Y": 100}
        assert data["mostPopular"][0]["debate"]["id"] == debate_id

    def test_results_filter_validation(self, client):
        response = client.get("/api/debates/results", params={"filter": "bogus"})
        assert response.status_code == 400


class TestErrorMapping:
    def test_mock_service_not_found(self, app):
        mock_service = AsyncMock()
        mock_service.get_debate.side_effect = DebateNotFoundError("debate-123")
        app.dependency_overrides[get_debate_service] = lambda: mock_service

        response = TestClient(app).get("/api/debates/debate-123")

        assert response.status_code == 404
        assert response.json() == {"error": "Debate not found", "code": "DEBATE_NOT_FOUND"}

    def test_unexpected_error_is_generic_500(self, app):
        mock_service = AsyncMock()
        mock_service.list_debates.side_effect = RuntimeError("secret stack detail")
        app.dependency_overrides[get_debate_service] = lambda: mock_service

        response = TestClient(app, raise_server_exceptions=False).get("/api/debates")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "secret" not in response.text
