"""HTTP 计分接口测试"""

import pytest
from fastapi.testclient import TestClient

from cardgame.web.server import app


@pytest.fixture
def client():
    return TestClient(app)


class TestScoreEndpoint:

    def test_index(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"

    def test_valid_hand(self, client):
        resp = client.post("/api/score", json={"hand": "2C,JR,td"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["score"] == 44
        assert body["subtotal"] == 22
        assert body["joker_count"] == 1
        assert body["multiplier"] == 2
        assert [c["token"] for c in body["cards"]] == ["2C", "JR", "td"]
        assert body["cards"][2]["code"] == "TD"
        assert body["cards"][1]["is_joker"] is True

    @pytest.mark.parametrize("hand,code,message", [
        ("2S|3D", "invalid_input", "Invalid input string"),
        ("1C", "unrecognised_card", "Card not recognised"),
        ("2C,2c", "duplicate_card", "Cards cannot be duplicated"),
        ("JR,JR,JR", "too_many_jokers", "A hand cannot contain more than two Jokers"),
    ])
    def test_errors(self, client, hand, code, message):
        resp = client.post("/api/score", json={"hand": hand})
        assert resp.status_code == 422
        assert resp.json() == {"error": code, "message": message}

    def test_missing_body_field(self, client):
        resp = client.post("/api/score", json={})
        assert resp.status_code == 422


class TestCardEndpoint:

    def test_card(self, client):
        resp = client.get("/api/cards/as")
        assert resp.status_code == 200
        body = resp.json()
        assert body["code"] == "AS"
        assert body["rank"] == "A"
        assert body["suit"] == "S"
        assert body["score"] == 56

    def test_joker(self, client):
        body = client.get("/api/cards/JR").json()
        assert body["is_joker"] is True
        assert body["score"] == 0

    def test_unknown_card(self, client):
        resp = client.get("/api/cards/1C")
        assert resp.status_code == 404
        assert resp.json()["message"] == "Card not recognised"
