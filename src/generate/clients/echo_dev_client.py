# Dummy model client for local dev and testing without API calls.
# Echoes the prompt inside a fenced block so every request kind succeeds.

class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"

    def get_model_response(self, full_prompt: str) -> str:
        return f"[ECHO RESPONSE]\n```\n{full_prompt.strip()}\n```"
