#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional

import uvicorn

from simphy_scriptgen.core.config import Settings
from simphy_scriptgen.knowledge import load_knowledge_base
from simphy_scriptgen.llm import LLMClient
from simphy_scriptgen.logging_setup import configure_logging
from simphy_scriptgen.pipeline import ScriptPipeline
from simphy_scriptgen.server.main import create_app


def build_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="SimPhy script generator: natural-language prompt to SimPhy JavaScript."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser(
        "serve", help="Run the HTTP server exposing POST /generate."
    )
    serve_parser.add_argument(
        "--host", default=None, help="Bind address (default: SCRIPTGEN_HOST or 0.0.0.0)."
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: SCRIPTGEN_PORT or 3000).",
    )

    generate_parser = subparsers.add_parser(
        "generate", help="Generate a single script and print it to stdout."
    )
    generate_parser.add_argument(
        "prompt",
        nargs="*",
        help="Description of the simulation (wrap in quotes to include spaces).",
    )

    return parser


def _read_prompt(words: list[str]) -> str:
    if words:
        return " ".join(words)
    try:
        return input("Describe the simulation: ").strip()
    except EOFError:
        raise ValueError("No prompt provided.")


def _serve(settings: Settings, host: Optional[str], port: Optional[int]) -> None:
    app = create_app(settings)
    host = host or settings.host
    port = port or settings.port
    print(f"Backend server is running on http://{host}:{port}", file=sys.stderr)
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())


def _generate(settings: Settings, words: list[str]) -> str:
    knowledge_base = load_knowledge_base(settings.resolved_knowledge_base_path)
    pipeline = ScriptPipeline(knowledge_base, LLMClient(settings))
    return asyncio.run(pipeline.generate(_read_prompt(words)))


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_cli()
    args = parser.parse_args(argv)

    try:
        settings = Settings()  # type: ignore[call-arg]  # Pydantic BaseSettings accepts env/.env
        configure_logging(settings.log_level)
        if args.command == "serve":
            _serve(settings, args.host, args.port)
        else:
            print(_generate(settings, args.prompt))
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
