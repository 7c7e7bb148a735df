# Normalize model responses into text and pull code out of fenced blocks.

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from .errors import EmptyResponse, NoCodeBlockFound, UnrecognizedResponseFormat

logger = logging.getLogger(__name__)

# a language tag is a single word-like token alone on the fence line
_FENCED_BLOCK = re.compile(r"```(?:[\w+#.-]*[ \t]*\n)?(.*?)```", re.DOTALL)

_UNRECOGNIZED = object()


def _text_or_unrecognized(value: Any, strip: bool = True) -> Any:
    if not isinstance(value, str):
        return _UNRECOGNIZED
    return value.strip() if strip else value


def _envelope_text(response: Mapping) -> Any:
    if "text" in response:
        return _text_or_unrecognized(response["text"], strip=False)

    choices = response.get("choices")
    if "choices" in response and isinstance(choices, (list, tuple)):
        first = choices[0] if choices else None
        if isinstance(first, Mapping):
            message = first.get("message")
            if isinstance(message, Mapping) and "content" in message:
                content = message["content"]
            elif "content" in first:
                content = first["content"]
            else:
                return ""
            # tool-call only completions carry content=None
            return "" if content is None else _text_or_unrecognized(content)
        return ""

    if "message" in response:
        message = response["message"]
        if isinstance(message, Mapping) and "content" in message:
            return _text_or_unrecognized(message["content"])
        return _text_or_unrecognized(message)
    if "content" in response:
        return _text_or_unrecognized(response["content"])
    return _text_or_unrecognized(response.get("code"))


def parse_response(response: Any) -> str:
    """
    Extract the text payload from a model response.

    Shapes are tried in a fixed order because they overlap (a payload can
    carry both `choices` and `content`):

    1. None / ""             -> EmptyResponse
    2. plain string          -> as-is
    3. {"text": "<str>"}     -> as-is
    4. {"choices": [...]}    -> first choice's message.content or content, trimmed
    5. {"message": ...}      -> message string or message.content, trimmed
    6. {"content": "<str>"}  -> trimmed
    7. {"code": "<str>"}     -> trimmed

    Anything else, including non-string payloads in those fields, raises
    UnrecognizedResponseFormat.
    """
    if response is None or response == "":
        logger.error("Received empty or undefined response.")
        raise EmptyResponse()

    logger.debug("Raw response: %r", response)

    if isinstance(response, str):
        return response

    # SDK objects (e.g. OpenAI ChatCompletion) are pydantic models
    if hasattr(response, "model_dump"):
        response = response.model_dump()

    text = _envelope_text(response) if isinstance(response, Mapping) else _UNRECOGNIZED
    if text is not _UNRECOGNIZED:
        return text

    err = UnrecognizedResponseFormat(response)
    logger.error("Unexpected response format: %s", err.payload)
    raise err


def extract_code_block(text: str) -> str:
    """Return the trimmed body of the first ``` fenced block in text."""
    match = _FENCED_BLOCK.search(text or "")
    if not match:
        raise NoCodeBlockFound()
    return match.group(1).strip()
