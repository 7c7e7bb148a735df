# Errors raised by the generation layer. None of them are retried.

from __future__ import annotations

import json
from typing import Any


class GenerationError(Exception):
    """Base class for failures of a single generation request."""


class EmptyResponse(GenerationError):
    def __init__(self, message: str = "Model returned an empty response."):
        super().__init__(message)


class UnrecognizedResponseFormat(GenerationError):
    """The response matched none of the known envelope shapes."""

    def __init__(self, response: Any):
        self.response = response
        try:
            self.payload = json.dumps(response, indent=2, default=str)
        except (TypeError, ValueError):
            self.payload = repr(response)
        super().__init__(f"Unexpected response format:\n{self.payload}")


class NoCodeBlockFound(GenerationError):
    def __init__(self, message: str = "No code block found in the response."):
        super().__init__(message)


class ImportValidationError(GenerationError):
    def __init__(self, message: str = "Generated code failed import validation."):
        super().__init__(message)
