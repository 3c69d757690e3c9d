"""Shared fixtures: a ready Config and a stand-in Anthropic client."""
from types import SimpleNamespace

import pytest

from agents.config import Config


@pytest.fixture
def config(tmp_path):
    return Config(
        anthropic_key="test-anthropic",
        elevenlabs_key="test-elevenlabs",
        stability_key="test-stability",
        output_dir=str(tmp_path),
    )


@pytest.fixture
def keyless_config(tmp_path):
    return Config(output_dir=str(tmp_path))


class FakeMessages:
    def __init__(self, reply):
        self.reply = reply
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        return SimpleNamespace(content=[SimpleNamespace(text=self.reply)])


@pytest.fixture
def fake_anthropic(monkeypatch):
    """Patch anthropic.Anthropic; call the fixture with the reply text to use."""
    state = {}

    def install(reply):
        messages = FakeMessages(reply)

        def factory(api_key=None, **kwargs):
            state["api_key"] = api_key
            return SimpleNamespace(messages=messages)

        monkeypatch.setattr("anthropic.Anthropic", factory)
        state["messages"] = messages
        return state

    return install
