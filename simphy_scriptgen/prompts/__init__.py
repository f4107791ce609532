from __future__ import annotations

from pathlib import Path
from textwrap import dedent

PROMPT_PATH = Path(__file__).with_name("system_prompt.md")

AUGMENTED_PROMPT_TEMPLATE = dedent(
    """
    ---
    HERE IS THE KNOWLEDGE BASE. USE ONLY THESE FUNCTIONS AND CONCEPTS:
    {knowledge_base}
    ---
    HERE IS THE USER'S REQUEST:
    "{prompt}"
    ---
    GENERATE THE SCRIPT:
    """
).strip()


def load_system_prompt() -> str:
    """Load the system prompt from the colocated markdown file."""
    try:
        return PROMPT_PATH.read_text(encoding="utf-8").strip()
    except FileNotFoundError as exc:
        raise RuntimeError(
            f"System prompt file not found at {PROMPT_PATH}. Ensure it exists."
        ) from exc


SYSTEM_PROMPT = load_system_prompt()


def build_augmented_prompt(knowledge_base: str, prompt: str) -> str:
    """Wrap the serialized knowledge base and the literal user request into one turn."""
    return AUGMENTED_PROMPT_TEMPLATE.format(knowledge_base=knowledge_base, prompt=prompt)


def build_messages(knowledge_base: str, prompt: str) -> list[dict[str, str]]:
    """Return the outbound chat messages for a single generation request."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_augmented_prompt(knowledge_base, prompt)},
    ]
