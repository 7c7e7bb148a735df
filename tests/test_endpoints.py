# HTTP surface tests; the generator dependency is swapped for an in-memory one.

import pytest
from fastapi.testclient import TestClient

from src.app import app, get_generator
from src.generate import CodeGenerator

from .conftest import FakeClient

client = TestClient(app)


@pytest.fixture
def use_response(catalog, audit_log):
    def _use(response):
        gen = CodeGenerator(FakeClient(response), catalog=catalog, audit_log=audit_log)
        app.dependency_overrides[get_generator] = lambda: gen
        return gen
    yield _use
    app.dependency_overrides.clear()


def test_root_ok():
    r = client.get("/")
    assert r.status_code == 200
    assert "message" in r.json()


def test_health_ok():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_generate_text_route(use_response):
    use_response({"message": {"content": "  Hello world  "}})
    r = client.post("/generate/text", json={"prompt": "greet"})
    assert r.status_code == 200
    assert r.json() == {"output": "Hello world", "model": "fake-model", "kind": "text"}


def test_generate_code_route(use_response):
    use_response("```js\nlet a = 1;\n```")
    r = client.post("/generate/code", json={"prompt": "a variable"})
    assert r.status_code == 200
    assert r.json()["output"] == "let a = 1;"


def test_generate_diagram_route(use_response):
    use_response({"code": "```\nconst d = 1;\n```"})
    r = client.post("/generate/diagram", json={"prompt": "Lambda"})
    assert r.status_code == 200
    assert r.json()["output"] == "const d = 1;"


def test_generation_errors_map_to_502(use_response):
    use_response("no fenced block")
    r = client.post("/generate/code", json={"prompt": "x"})
    assert r.status_code == 502
    assert "No code block" in r.json()["detail"]


def test_catalog_route(use_response):
    use_response("unused")
    r = client.get("/catalog")
    assert r.status_code == 200
    assert r.json()["categories"]["diagrams.onprem.queue.Queue"] == ["Kafka"]


def test_missing_prompt_is_rejected():
    r = client.post("/generate/text", json={})
    assert r.status_code == 422
