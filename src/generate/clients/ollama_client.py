# Client for Ollama local inference via /api/chat.
# Returns the raw JSON body ({"message": {"content": ...}}) for parse_response.

from typing import Any, Dict, Optional

import requests

from ..types import ModelParams


class OllamaClient:
    def __init__(
        self,
        model: str = "mistral:7b-instruct",
        host: str = "http://localhost:11434",
        params: Optional[ModelParams] = None,
        timeout: float = 180,
    ):
        self.model = model
        self.host = host.rstrip("/")
        self.params = params or ModelParams()
        self.timeout = timeout

    def get_model_response(self, full_prompt: str) -> Dict[str, Any]:
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": full_prompt}],
            "stream": False,
            "options": {
                "temperature": float(self.params.temperature),
                "num_predict": int(self.params.max_tokens),
            },
        }
        resp = requests.post(f"{self.host}/api/chat", json=payload, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()
