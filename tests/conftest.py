"""Common fixtures: fake model clients and an app client wired to them."""

import pytest
from fastapi.testclient import TestClient

from src.app import app, get_orchestrator
from src.generate import ReplyOrchestrator


class FakeClient:
    """Records every prompt; returns a fixed reply or raises."""

    def __init__(self, reply="Why did the chicken cross the road?", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, prompt, params):
        self.calls.append((prompt, params))
        if self.error is not None:
            raise self.error
        return self.reply, {"engine": "fake"}


def first(options):
    return options[0]


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def orchestrator(fake_client):
    return ReplyOrchestrator(model_client=fake_client, temperature=0.7)


@pytest.fixture
def api(orchestrator):
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
