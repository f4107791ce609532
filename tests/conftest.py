import asyncio
import json
from pathlib import Path

import pytest

from simphy_scriptgen.core.config import Settings
from simphy_scriptgen.knowledge import load_knowledge_base

KNOWLEDGE = {
    "api_summary": {
        "World": {"addDisc(radius)": "Creates a disc.", "setGravity(x, y)": "Sets gravity."}
    }
}


class FakeBackend:
    """Records outbound messages and answers with canned text."""

    def __init__(self, reply="World.clearAll();\n", error=None, delay=0.0):
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls = []

    async def complete(self, messages):
        self.calls.append(messages)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if callable(self.reply):
            return self.reply(messages)
        return self.reply


@pytest.fixture
def knowledge_path(tmp_path: Path) -> Path:
    path = tmp_path / "knowledge_base.json"
    path.write_text(json.dumps(KNOWLEDGE), encoding="utf-8")
    return path


@pytest.fixture
def knowledge_base(knowledge_path):
    return load_knowledge_base(knowledge_path)


@pytest.fixture
def settings(knowledge_path) -> Settings:
    return Settings(
        _env_file=None,
        OPENAI_API_KEY="test-key",
        SCRIPTGEN_KNOWLEDGE_BASE=knowledge_path,
    )


@pytest.fixture
def backend():
    return FakeBackend()
