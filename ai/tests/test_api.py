import json
import logging

import pytest
from fastapi.testclient import TestClient

from wellness_engine import CRISIS_SUPPORT_MESSAGE
from wellness_inference import api_analysis
from wellness_inference.app import app


@pytest.fixture()
def client():
    return TestClient(app)


def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_analysis_text_empty(client):
    r = client.post("/analysis/text", json={"text": ""})
    assert r.status_code == 200
    body = r.json()
    assert body["emotional_score"] == 50
    assert body["crisis_risk"] is False
    assert body["stress_indicators"] == []
    assert body["positive_indicators"] == []
    assert body["recommendations"] == []


def test_analysis_text_scores(client):
    body = client.post("/analysis/text", json={"text": "sad lonely hopeless"}).json()
    assert body["primary_emotion"] == "sad"
    assert body["emotional_score"] == 26
    assert len(body["recommendations"]) == 5


def test_analysis_text_too_long(client, monkeypatch):
    monkeypatch.setattr(api_analysis, "MAX_TEXT_CHARS", 10)
    r = client.post("/analysis/text", json={"text": "x" * 11})
    assert r.status_code == 413


@pytest.mark.parametrize("style", ["gentle", "motivational", "neutral"])
def test_respond_crisis_for_every_style(client, style):
    r = client.post("/analysis/respond", json={"text": "I want to hurt myself", "response_style": style})
    assert r.status_code == 200
    assert r.json()["output"] == CRISIS_SUPPORT_MESSAGE
    assert r.json()["meta"]["crisis_risk"] is True


def test_respond_from_prior_analysis(client):
    analysis = client.post("/analysis/text", json={"text": "sad"}).json()
    r = client.post("/analysis/respond", json={"analysis": analysis, "response_style": "neutral"})
    assert r.status_code == 200
    assert r.json()["output"].startswith("Current emotional state: sad. Score: 42/100.")


def test_respond_default_style(client):
    r = client.post("/analysis/respond", json={"text": "happy"})
    assert r.json()["meta"]["response_style"] == api_analysis.DEFAULT_RESPONSE_STYLE.value


def test_respond_needs_input(client):
    assert client.post("/analysis/respond", json={"response_style": "gentle"}).status_code == 400


def test_respond_rejects_unknown_style(client):
    r = client.post("/analysis/respond", json={"text": "happy", "response_style": "loud"})
    assert r.status_code == 422


def test_analysis_dream(client):
    body = client.post("/analysis/dream", json={"text": "I was flying over water"}).json()
    assert [s.split(":")[0] for s in body["symbols"]] == ["water", "flying"]


def test_journal_entry_route(client):
    r = client.post(
        "/entries/journal",
        json={"user_id": "u1", "text": "calm and focused", "response_style": "motivational"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["entry"]["kind"] == "journal"
    assert body["entry"]["mood"] == "calm"
    assert body["entry"]["emotional_score"] == 70
    assert body["xp_awarded"] == 15
    assert body["notifications"][0].startswith("⚡")
    assert body.get("game_profile") is None


def test_journal_entry_blank_is_400(client):
    r = client.post("/entries/journal", json={"user_id": "u1", "text": "  "})
    assert r.status_code == 400


def test_mood_entry_applies_xp(client):
    r = client.post(
        "/entries/mood",
        json={
            "user_id": "demo-user",
            "mood": "Good",
            "text": "happy",
            "game_profile": {"user_id": "demo-user", "level": 3, "xp": 45, "total_xp": 285},
        },
    )
    assert r.status_code == 200
    body = r.json()
    assert body["xp_awarded"] == 20
    assert body["game_profile"]["total_xp"] == 305
    assert body["game_profile"]["level"] == 4
    assert body["game_profile"]["xp"] == 65


def test_mood_entry_bad_level_is_400(client):
    r = client.post("/entries/mood", json={"user_id": "u1", "stress_level": 140})
    assert r.status_code == 400


def test_dream_entry_route(client):
    r = client.post("/entries/dream", json={"user_id": "u1", "text": "a house by the water"})
    assert r.status_code == 200
    body = r.json()
    assert body["entry"]["emotional_score"] == 60
    assert body["analysis"] is None
    assert len(body["entry"]["dream_symbols"]) == 2


def test_crisis_alert_logged_without_text(client, caplog):
    caplog.set_level(logging.INFO)
    secret = "I think everyone is better off dead without me"
    client.post("/analysis/text", json={"text": secret})

    messages = [rec.getMessage() for rec in caplog.records]
    assert any(m.startswith("ALERT::CRISIS_RISK_DETECTED") for m in messages)
    assert not any(secret in m for m in messages)

    events = [json.loads(m) for m in messages if m.startswith("{")]
    analyzed = [e for e in events if e["event"] == "text_analyzed"]
    assert analyzed and analyzed[-1]["crisis_risk"] is True
    assert analyzed[-1]["text_len"] == len(secret)
