"""SimPhy script generator (knowledge base, prompts, LLM)."""

from .core.config import Settings
from .pipeline import ScriptPipeline

__all__ = ["Settings", "ScriptPipeline"]
