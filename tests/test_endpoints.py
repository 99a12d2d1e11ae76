from fastapi.testclient import TestClient

from src.app import app
from src.generate.prompts import get_persona
from src.safety.greetings import GREETING_REPLIES
from tests.conftest import FakeClient


def test_root_ok():
    r = TestClient(app).get("/")
    assert r.status_code == 200


def test_health_ok():
    r = TestClient(app).get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_greeting(api, fake_client):
    r = api.post("/api/chat", json={"message": "hi"})
    assert r.status_code == 200
    body = r.json()
    assert body["reply"] in GREETING_REPLIES["en"]
    assert "flagged" not in body
    assert fake_client.calls == []


def test_crisis(api, fake_client):
    r = api.post("/api/chat", json={"message": "I want to kill myself"})
    assert r.status_code == 200
    body = r.json()
    assert body["flagged"] == "crisis"
    assert "911" in body["reply"]
    assert fake_client.calls == []


def test_empty_message(api):
    r = api.post("/api/chat", json={"message": ""})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid message"}


def test_wrong_type_message(api):
    r = api.post("/api/chat", json={"message": 42})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid message"}


def test_missing_body_fields(api):
    r = api.post("/api/chat", json={})
    assert r.status_code == 400


def test_normal_reply(api, fake_client):
    r = api.post("/api/chat", json={"message": "tell me a joke", "history": []})
    assert r.status_code == 200
    assert r.json() == {"reply": "Why did the chicken cross the road?"}
    assert len(fake_client.calls) == 1
    prompt = fake_client.calls[0][0]
    assert get_persona("open_chat").template in prompt
    assert "tell me a joke" in prompt


def test_prompt_field_is_a_synonym(api, fake_client):
    r = api.post("/chat", json={"prompt": "tell me a joke", "mode": "supportive", "sessionId": "s-1"})
    assert r.status_code == 200
    assert get_persona("supportive").template in fake_client.calls[0][0]


def test_garbage_history_is_tolerated(api, fake_client):
    r = api.post("/api/chat", json={"message": "tell me a joke", "history": "nope", "mode": 5})
    assert r.status_code == 200
    assert "(no prior messages)" in fake_client.calls[0][0]


def test_provider_failure(api, fake_client):
    fake_client.error = RuntimeError("upstream 503 with internal detail")
    r = api.post("/api/chat", json={"message": "tell me a joke"})
    assert r.status_code == 500
    assert r.json() == {"error": "Server error"}


def test_missing_key(monkeypatch):
    from src.app import get_orchestrator
    from src.generate import ReplyOrchestrator
    from src.generate.clients.gemini_client import GeminiClient

    app.dependency_overrides[get_orchestrator] = lambda: ReplyOrchestrator(GeminiClient(api_key=None))
    try:
        r = TestClient(app).post("/api/chat", json={"message": "tell me a joke"})
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 500
    assert r.json() == {"error": "Missing GEMINI_API_KEY"}


def test_cors_preflight(api):
    r = api.options(
        "/api/chat",
        headers={
            "Origin": "https://app.example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_cors_on_post(api):
    r = api.post("/api/chat", json={"message": "hi"}, headers={"Origin": "capacitor://localhost"})
    assert r.headers["access-control-allow-origin"] == "*"


def test_unexpected_failure_returns_json_error(api, monkeypatch):
    from src.generate import orchestrator as orchestrator_module

    def broken(*args, **kwargs):
        raise KeyError("template")

    monkeypatch.setattr(orchestrator_module, "build_prompt", broken)
    r = api.post("/api/chat", json={"message": "tell me a joke"})
    assert r.status_code == 500
    assert r.json() == {"error": "Server error"}


def test_cross_turn_history_is_flagged(api, fake_client):
    history = [
        {"role": "user", "content": "I'm going to do it tonight"},
        {"role": "assistant", "content": "Do what?"},
        {"role": "user", "content": "everyone is better if I'm dead"},
    ]
    r = api.post("/api/chat", json={"message": "ok", "history": history})
    assert r.json()["flagged"] == "crisis"
    assert fake_client.calls == []


def test_error_body_is_documented():
    schema = TestClient(app).get("/openapi.json").json()
    responses = schema["paths"]["/api/chat"]["post"]["responses"]
    for status in ("400", "500"):
        ref = responses[status]["content"]["application/json"]["schema"]["$ref"]
        assert ref.endswith("/ErrorBody")
