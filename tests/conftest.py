from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

# The provider key is required by LlmConfig; tests never reach the network
os.environ.setdefault("OPENAI_API_KEY", "test-key")

from stepcoach.config.llm_config import LlmConfig  # noqa: E402
from stepcoach.main import app  # noqa: E402
from stepcoach.services.chat_service import ChatService, get_chat_service  # noqa: E402
from stepcoach.services.llm_service import LLMService  # noqa: E402


class FakeReply:
    def __init__(self, content: Any) -> None:
        self.content = content


class FakeChatModel:
    """Stands in for ChatOpenAI, recording what it was sent."""

    def __init__(self, reply: Any = "Keep walking!", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[list[Any]] = []

    async def ainvoke(self, messages: list[Any]) -> FakeReply:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return FakeReply(self.reply)


@pytest.fixture
def llm_config() -> LlmConfig:
    return LlmConfig(OPENAI_API_KEY="test-key", _env_file=None)


@pytest.fixture
def fake_model() -> FakeChatModel:
    return FakeChatModel()


@pytest.fixture
def client(llm_config: LlmConfig, fake_model: FakeChatModel):
    service = ChatService(llm_service=LLMService(llm_config=llm_config, llm=fake_model))
    app.dependency_overrides[get_chat_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
