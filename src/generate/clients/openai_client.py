# Client for the OpenAI Chat Completions API.
# Same interface as OllamaClient; returns the SDK response object untouched.

from typing import Any, Optional

from openai import OpenAI

from ..types import ModelParams


class OpenAIClient:
    def __init__(
        self,
        model: str = "gpt-4o-mini",
        api_key: Optional[str] = None,
        params: Optional[ModelParams] = None,
        timeout: float = 180,
    ):
        self.model = model
        self.params = params or ModelParams()
        self.client = OpenAI(api_key=api_key, timeout=timeout)

    def get_model_response(self, full_prompt: str) -> Any:
        return self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": full_prompt}],
            temperature=self.params.temperature,
            max_tokens=self.params.max_tokens,
        )
