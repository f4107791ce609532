from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from simphy_scriptgen.core.config import Settings
from simphy_scriptgen.core.models import (
    GENERATION_FAILED_ERROR,
    PROMPT_REQUIRED_ERROR,
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
)
from simphy_scriptgen.knowledge import load_knowledge_base
from simphy_scriptgen.llm import ChatBackend, LLMClient
from simphy_scriptgen.pipeline import PromptRequiredError, ScriptPipeline

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(
    settings: Optional[Settings] = None,
    backend: Optional[ChatBackend] = None,
) -> FastAPI:
    """Build the HTTP app; raises before serving if settings or the knowledge base are unusable."""
    if settings is None:
        settings = Settings()  # type: ignore[call-arg]  # Pydantic BaseSettings accepts env/.env
    knowledge_base = load_knowledge_base(settings.resolved_knowledge_base_path)
    pipeline = ScriptPipeline(knowledge_base, backend or LLMClient(settings))

    app = FastAPI(
        title="SimPhy Script Generator",
        description="Natural-language prompt to SimPhy JavaScript (FastAPI)",
        version="0.1.0",
    )
    app.state.pipeline = pipeline

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        return _error(400, PROMPT_REQUIRED_ERROR)

    @app.post(
        "/generate",
        response_model=GenerateResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def generate(body: GenerateRequest, request: Request):
        """Generate a SimPhy script for the prompt."""
        pipeline: ScriptPipeline = request.app.state.pipeline
        try:
            script = await pipeline.generate(body.prompt)
        except PromptRequiredError as exc:
            return _error(400, str(exc))
        except Exception:
            logger.exception("Error calling the AI model")
            return _error(500, GENERATION_FAILED_ERROR)
        return {"script": script}

    @app.get("/health", response_model=dict)
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
