# Model client selection.

import logging

from src.settings import Settings
from .echo_dev_client import EchoDevClient

logger = logging.getLogger(__name__)


def build_model_client(settings: Settings):
    """Pick a backend from settings.LLM_ENGINE; unknown engines fall back to echo."""
    engine = settings.LLM_ENGINE.lower()
    if engine == "ollama":
        from .ollama_client import OllamaClient
        return OllamaClient(model=settings.OLLAMA_MODEL, host=settings.OLLAMA_HOST, timeout=settings.REQUEST_TIMEOUT)
    if engine == "openai":
        from .openai_client import OpenAIClient
        return OpenAIClient(
            model=settings.OPENAI_MODEL,
            api_key=settings.OPENAI_API_KEY,
            timeout=settings.REQUEST_TIMEOUT,
        )
    if engine != "echo":
        logger.warning("Unknown LLM_ENGINE %r, using echo client", settings.LLM_ENGINE)
    return EchoDevClient()


__all__ = ["build_model_client", "EchoDevClient"]
