from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.dependencies import auth
from app.dependencies.provider import get_openai_client
from app.main import app


class FakeCompletions:
    def __init__(self):
        self.reply = ""
        self.error = None
        self.no_choices = False
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.no_choices:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(role="assistant", content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(index=0, message=message)])


class FakeOpenAI:
    def __init__(self):
        self.completions = FakeCompletions()
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture(autouse=True)
def open_access(monkeypatch):
    monkeypatch.setattr(auth, "ACCESS_TOKEN", None)


@pytest.fixture
def provider() -> FakeOpenAI:
    return FakeOpenAI()


@pytest.fixture
def client(provider):
    app.dependency_overrides[get_openai_client] = lambda: provider
    yield TestClient(app)
    app.dependency_overrides.clear()
