from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = PROJECT_ROOT / ".env"
DEFAULT_MODEL_NAME = "gpt-4o"
BUNDLED_KNOWLEDGE_BASE = Path(__file__).resolve().parents[1] / "knowledge_base.json"
DEFAULT_PORT = 3000


class Settings(BaseSettings):
    """App configuration loaded from environment variables."""

    openai_api_key: str = Field(
        "",
        alias="OPENAI_API_KEY",
    )
    openai_base_url: Optional[str] = Field(
        None,
        alias="OPENAI_BASE_URL",
    )
    model_name: str = Field(
        DEFAULT_MODEL_NAME,
        alias="SCRIPTGEN_MODEL",
    )
    knowledge_base_path: Optional[Path] = Field(
        None,
        alias="SCRIPTGEN_KNOWLEDGE_BASE",
    )
    host: str = Field("0.0.0.0", alias="SCRIPTGEN_HOST")
    port: int = Field(DEFAULT_PORT, alias="SCRIPTGEN_PORT")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        alias="SCRIPTGEN_CORS_ORIGINS",
    )
    log_level: str = Field("INFO", alias="SCRIPTGEN_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=ENV_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        protected_namespaces=(),
    )

    @model_validator(mode="after")
    def _require_api_key(self):
        if not self.openai_api_key.strip():
            raise ValueError(
                "OPENAI_API_KEY is not set. Put it in the .env file or set the env var."
            )
        return self

    @property
    def resolved_knowledge_base_path(self) -> Path:
        """Return the configured knowledge base, or the one shipped with the package.

        Relative paths are taken from the current working directory.
        """
        if self.knowledge_base_path is None:
            return BUNDLED_KNOWLEDGE_BASE
        path = self.knowledge_base_path.expanduser()
        if path.is_absolute():
            return path
        return Path.cwd() / path
