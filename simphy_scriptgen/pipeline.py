from __future__ import annotations

import logging
from typing import Any

from .core.models import PROMPT_REQUIRED_ERROR
from .knowledge import KnowledgeBase
from .llm import ChatBackend
from .prompts import build_messages

logger = logging.getLogger(__name__)


class PromptRequiredError(ValueError):
    """Raised when a request carries no usable prompt."""


class ScriptPipeline:
    """Turns a natural-language request into a SimPhy script via the LLM."""

    def __init__(self, knowledge_base: KnowledgeBase, backend: ChatBackend) -> None:
        self.knowledge_base = knowledge_base
        self.backend = backend

    async def generate(self, prompt: Any) -> str:
        if not isinstance(prompt, str) or not prompt:
            raise PromptRequiredError(PROMPT_REQUIRED_ERROR)

        logger.info('Received prompt: "%s"', prompt)
        messages = build_messages(self.knowledge_base.serialized, prompt)
        script = await self.backend.complete(messages)
        logger.info("Script generated successfully.")
        return script
