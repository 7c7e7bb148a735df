# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import CodeGenerator
from .types import CallableClient, ImportValidator, ModelClient, ModelParams
from .errors import (
    EmptyResponse,
    GenerationError,
    ImportValidationError,
    NoCodeBlockFound,
    UnrecognizedResponseFormat,
)
from .parsing import extract_code_block, parse_response
from .audit import CODE_KIND, TEXT_KIND, GenerationLog
from .validation import allow_all_imports, imports_within_catalog
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "CodeGenerator",
    "CallableClient",
    "ImportValidator",
    "ModelClient",
    "ModelParams",
    "EmptyResponse",
    "GenerationError",
    "ImportValidationError",
    "NoCodeBlockFound",
    "UnrecognizedResponseFormat",
    "extract_code_block",
    "parse_response",
    "CODE_KIND",
    "TEXT_KIND",
    "GenerationLog",
    "allow_all_imports",
    "imports_within_catalog",
    "EchoDevClient",
]
