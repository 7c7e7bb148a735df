# CodeGenerator: shared prompt/parse/log flow over any model client.
# Providers only differ in get_model_response(); everything else lives here.

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

from src.catalog import ComponentCatalog, find_relevant_components, format_imports
from .audit import CODE_KIND, TEXT_KIND, GenerationLog
from .errors import ImportValidationError
from .parsing import extract_code_block, parse_response
from .prompts import build_code_prompt, build_diagram_prompt, build_text_prompt
from .types import CallableClient, ImportValidator, ModelClient
from .validation import allow_all_imports

logger = logging.getLogger(__name__)


class CodeGenerator:
    def __init__(
        self,
        model_client: Union[ModelClient, Callable[[str], Any]],
        model_name: Optional[str] = None,
        catalog: Optional[ComponentCatalog] = None,
        import_validator: Optional[ImportValidator] = None,
        audit_log: Optional[GenerationLog] = None,
        strict_audit: bool = True,
    ):
        if not hasattr(model_client, "get_model_response"):
            if not callable(model_client):
                raise TypeError("model_client must define get_model_response() or be callable")
            model_client = CallableClient(model_client, model=model_name or "custom")
        self.model_client = model_client
        self.model_name = model_name or getattr(model_client, "model", "unknown")
        self.catalog = catalog if catalog is not None else ComponentCatalog.empty()
        self.import_validator = import_validator or allow_all_imports
        self.audit_log = audit_log or GenerationLog()
        self.strict_audit = strict_audit

    def get_model_response(self, full_prompt: str) -> Any:
        return self.model_client.get_model_response(full_prompt)

    def _request_text(self, full_prompt: str) -> str:
        response = self.get_model_response(full_prompt)
        return parse_response(response)

    def _audit(self, kind: str, prompt: str, output: str) -> None:
        """Write the audit entry; only raises when strict_audit is set."""
        try:
            self.audit_log.log_generation(kind, self.model_name, prompt, output)
        except OSError:
            if self.strict_audit:
                raise
            logger.exception("Could not write %s log for %s", kind, self.model_name)

    def generate_diagram(self, prompt: str) -> str:
        """Generate diagram code restricted to the catalog components named in the prompt."""
        relevant = find_relevant_components(self.catalog, prompt)
        full_prompt = build_diagram_prompt(prompt, format_imports(relevant))

        code = extract_code_block(self._request_text(full_prompt))
        if not self.import_validator(code, relevant):
            raise ImportValidationError()

        self._audit(CODE_KIND, prompt, code)
        return code

    def generate_code(self, prompt: str) -> str:
        return extract_code_block(self._request_text(build_code_prompt(prompt)))

    def generate_text(self, prompt: str) -> str:
        content = self._request_text(build_text_prompt(prompt))
        self._audit(TEXT_KIND, prompt, content)
        return content
