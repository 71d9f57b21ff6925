from __future__ import annotations

import asyncio
from typing import Any, Dict, List

import pytest
from langchain_core.messages import AIMessage

from mailrewrite import create_app
from mailrewrite.config import Config


class FakeChatModel:
    """Scripted stand-in for a chat model: returns text or raises per model name."""

    def __init__(self, behaviours: Dict[str, Any], calls: List[Dict[str, Any]], name: str):
        self.behaviours = behaviours
        self.calls = calls
        self.name = name

    async def ainvoke(self, messages):
        self.calls.append({"model": self.name, "messages": messages})
        outcome = self.behaviours.get(self.name, "")
        if isinstance(outcome, BaseException):
            raise outcome
        if outcome == "hang":
            await asyncio.sleep(10)
        return AIMessage(content=outcome)


class FakeProvider:
    def __init__(self):
        self.behaviours: Dict[str, Any] = {}
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, model_name: str) -> FakeChatModel:
        return FakeChatModel(self.behaviours, self.calls, model_name)

    @property
    def models_called(self) -> List[str]:
        return [c["model"] for c in self.calls]


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def cfg(tmp_path):
    class TestConfig(Config):
        PROMPT_FILE = str(tmp_path / "system_prompt.md")
        WEB_DIR = str(tmp_path / "web")
        LLM_MODEL = "preferred-model"
        LLM_FALLBACK_MODEL = "fallback-model"
        LLM_TIMEOUT_SECONDS = 0.2
        PUBLIC_BASE_URL = None
        LOG_LEVEL = "DEBUG"

    return TestConfig


@pytest.fixture
def app(cfg, provider):
    app = create_app(cfg, chat_model_factory=provider)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
