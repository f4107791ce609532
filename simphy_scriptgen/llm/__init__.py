from __future__ import annotations

from .client import ChatBackend, LLMClient, UpstreamError

__all__ = ["ChatBackend", "LLMClient", "UpstreamError"]
