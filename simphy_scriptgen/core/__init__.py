"""Core module for the script generator (config, models)."""

from .config import Settings
from .models import (
    GENERATION_FAILED_ERROR,
    PROMPT_REQUIRED_ERROR,
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
    sampling_parameters,
)

__all__ = [
    "Settings",
    "GenerateRequest",
    "GenerateResponse",
    "ErrorResponse",
    "PROMPT_REQUIRED_ERROR",
    "GENERATION_FAILED_ERROR",
    "sampling_parameters",
]
