# Shared fixtures: in-memory model clients and a tmp audit log root.

from typing import Any, List

import pytest

from src.catalog import ComponentCatalog
from src.generate import CodeGenerator, GenerationLog


class FakeClient:
    """Returns a canned response and records every prompt it sees."""

    def __init__(self, response: Any, model: str = "fake-model"):
        self.response = response
        self.model = model
        self.prompts: List[str] = []

    def get_model_response(self, full_prompt: str) -> Any:
        self.prompts.append(full_prompt)
        return self.response


@pytest.fixture
def catalog() -> ComponentCatalog:
    return ComponentCatalog.from_mapping({
        "diagrams.aws.compute.Compute": ["EC2", "Lambda"],
        "diagrams.aws.database.Database": ["RDS", "DynamoDB"],
        "diagrams.onprem.queue.Queue": ["Kafka"],
    })


@pytest.fixture
def audit_log(tmp_path) -> GenerationLog:
    return GenerationLog(tmp_path)


@pytest.fixture
def make_generator(catalog, audit_log):
    def _make(response: Any, **kwargs) -> CodeGenerator:
        client = FakeClient(response)
        kwargs.setdefault("catalog", catalog)
        kwargs.setdefault("audit_log", audit_log)
        return CodeGenerator(model_client=client, **kwargs)
    return _make
