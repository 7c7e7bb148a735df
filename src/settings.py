# src/settings.py
import logging
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Diagram Codegen")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # dev server (run_dev.py)
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)

    # model backend: echo | ollama | openai
    LLM_ENGINE: str = Field(default="echo")
    OLLAMA_HOST: str = Field(default="http://localhost:11434")
    OLLAMA_MODEL: str = Field(default="mistral:7b-instruct")
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = Field(default="gpt-4o-mini")
    REQUEST_TIMEOUT: float = Field(default=180.0)

    # component catalog (YAML: category -> [components]); empty when unset
    CATALOG_PATH: str | None = None

    # audit trail
    LOG_ROOT: str = Field(default=".")
    STRICT_AUDIT: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package root logger."""
    logger = logging.getLogger("src")
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
        logger.addHandler(h)
    logger.setLevel(level.upper())
    return logger


settings = Settings()
