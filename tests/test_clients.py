# Model client selection and the Ollama request shape (network mocked).

import pytest
import requests

from src.settings import Settings
from src.generate import CodeGenerator, parse_response
from src.generate.clients import EchoDevClient, build_model_client
from src.generate.clients.ollama_client import OllamaClient
from src.generate.clients.openai_client import OpenAIClient


class _FakeResponse:
    def __init__(self, body, status=200):
        self.body = body
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"HTTP {self.status}")

    def json(self):
        return self.body


def test_build_model_client_selects_engine():
    assert isinstance(build_model_client(Settings(LLM_ENGINE="echo")), EchoDevClient)
    assert isinstance(build_model_client(Settings(LLM_ENGINE="something-else")), EchoDevClient)

    ollama = build_model_client(Settings(LLM_ENGINE="ollama", OLLAMA_MODEL="llama3", OLLAMA_HOST="http://box:11434/"))
    assert isinstance(ollama, OllamaClient)
    assert ollama.model == "llama3"
    assert ollama.host == "http://box:11434"

    openai = build_model_client(Settings(LLM_ENGINE="openai", OPENAI_API_KEY="sk-test", OPENAI_MODEL="gpt-4o"))
    assert isinstance(openai, OpenAIClient)
    assert openai.model == "gpt-4o"


def test_ollama_client_posts_chat_request(monkeypatch):
    calls = {}

    def fake_post(url, json, timeout):
        calls.update(url=url, json=json, timeout=timeout)
        return _FakeResponse({"model": "llama3", "message": {"role": "assistant", "content": " done "}})

    monkeypatch.setattr(requests, "post", fake_post)
    client = OllamaClient(model="llama3", host="http://box:11434", timeout=5)
    raw = client.get_model_response("hello")

    assert calls["url"] == "http://box:11434/api/chat"
    assert calls["json"]["messages"] == [{"role": "user", "content": "hello"}]
    assert calls["json"]["stream"] is False
    assert calls["timeout"] == 5
    assert parse_response(raw) == "done"


def test_ollama_http_errors_propagate(monkeypatch, audit_log):
    monkeypatch.setattr(requests, "post", lambda url, json, timeout: _FakeResponse({}, status=500))
    gen = CodeGenerator(OllamaClient(model="llama3"), audit_log=audit_log)
    with pytest.raises(requests.HTTPError):
        gen.generate_text("hi")
