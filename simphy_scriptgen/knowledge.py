from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class KnowledgeBaseError(RuntimeError):
    """Raised when the knowledge base file cannot be read or parsed."""


@dataclass(frozen=True)
class KnowledgeBase:
    """Read-only SimPhy API knowledge base injected into every prompt."""

    data: Any
    source: Path
    serialized: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "serialized", json.dumps(self.data, indent=2, ensure_ascii=False)
        )


def load_knowledge_base(path: Path) -> KnowledgeBase:
    """Read and parse the knowledge base JSON file.

    Any failure is fatal for the caller: there is no useful way to answer a
    request without the knowledge base.
    """
    expanded_path = Path(path).expanduser().resolve()
    try:
        raw_data = expanded_path.read_text(encoding="utf-8")
        data = json.loads(raw_data)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.error("Failed to load or parse %s: %s", expanded_path, exc)
        raise KnowledgeBaseError(
            f"Failed to load or parse knowledge base at {expanded_path}: {exc}"
        ) from exc

    logger.info("Loaded the SimPhy knowledge base from %s", expanded_path)
    return KnowledgeBase(data=data, source=expanded_path)
