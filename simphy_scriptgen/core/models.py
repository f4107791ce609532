from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

PROMPT_REQUIRED_ERROR = "Prompt is required"
GENERATION_FAILED_ERROR = "Failed to generate script"

# Fixed sampling parameters: low randomness, bounded output length.
TEMPERATURE = 0.2
TOP_P = 1.0
MAX_OUTPUT_TOKENS = 4096


class GenerateRequest(BaseModel):
    """Request payload for script generation."""

    model_config = ConfigDict(extra="ignore")

    prompt: Optional[str] = Field(
        None, description="Natural-language description of the simulation."
    )


class GenerateResponse(BaseModel):
    """Response payload for script generation."""

    model_config = ConfigDict(extra="forbid")

    script: str


class ErrorResponse(BaseModel):
    """Error payload returned for rejected or failed requests."""

    model_config = ConfigDict(extra="forbid")

    error: str


REASONING_MODEL_PREFIXES = ("gpt-5", "o1", "o3", "o4")


def sampling_parameters(model_name: str) -> dict[str, Any]:
    """Return chat-completion kwargs for the fixed sampling configuration."""
    # Reasoning models only accept default sampling and max_completion_tokens.
    if model_name.lower().startswith(REASONING_MODEL_PREFIXES):
        return {"max_completion_tokens": MAX_OUTPUT_TOKENS}
    return {
        "temperature": TEMPERATURE,
        "top_p": TOP_P,
        "max_tokens": MAX_OUTPUT_TOKENS,
    }
