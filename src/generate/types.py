# Shared types for the generator and its model clients.

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

from src.catalog import RelevantImports


@runtime_checkable
class ModelClient(Protocol):
    """Backend seam: render-ready prompt in, raw provider response out."""
    model: str

    def get_model_response(self, full_prompt: str) -> Any: ...


# (code, relevant imports) -> accepted?
ImportValidator = Callable[[str, RelevantImports], bool]


@dataclass
class ModelParams:
    """LLM parameters per request."""
    temperature: float = 0.3
    max_tokens: int = 1000


class CallableClient:
    """Adapts a plain function into a ModelClient."""

    def __init__(self, fn: Callable[[str], Any], model: str = "custom"):
        self.fn = fn
        self.model = model

    def get_model_response(self, full_prompt: str) -> Any:
        return self.fn(full_prompt)
