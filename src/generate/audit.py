# Append-only audit trail of prompts and generated output, one file per model.

from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

TEXT_KIND = "generated_text"
CODE_KIND = "generated_code"

_FILE_SUFFIX = {TEXT_KIND: "text_log.txt", CODE_KIND: "code_log.txt"}
_OUTPUT_HEADER = {TEXT_KIND: "Generated Text:", CODE_KIND: "Generated Code:"}
DIVIDER = "=" * 80


def _safe_model_name(model_name: str) -> str:
    return model_name.replace("/", "_").replace("\\", "_")


class GenerationLog:
    """Writes log entries under <root>/generated_text and <root>/generated_code."""

    def __init__(self, root: str | Path = "."):
        self.root = Path(root)

    def path_for(self, kind: str, model_name: str) -> Path:
        if kind not in _FILE_SUFFIX:
            raise ValueError(f"Unknown generation kind: {kind!r}")
        return self.root / kind / f"{_safe_model_name(model_name)}_{_FILE_SUFFIX[kind]}"

    def log_generation(self, kind: str, model_name: str, prompt: str, output: str) -> Path:
        path = self.path_for(kind, model_name)
        path.parent.mkdir(parents=True, exist_ok=True)

        timestamp = dt.datetime.now(dt.timezone.utc).isoformat()
        entry = (
            f"Timestamp: {timestamp}\n"
            f"User Prompt:\n{prompt}\n\n"
            f"{_OUTPUT_HEADER[kind]}\n{output}\n\n"
            f"{DIVIDER}\n\n"
        )
        # single write per entry; concurrent writers may still interleave
        with open(path, "a", encoding="utf-8") as f:
            f.write(entry)
        logger.debug("Logged %s for %s to %s", kind, model_name, path)
        return path
