# Render matched components as import lines for the diagram prompt.

from __future__ import annotations

import logging
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)


def format_imports(relevant_imports: Mapping[str, Sequence[str]]) -> str:
    """
    One `import { A, B } from 'pkg.mod';` line per category.

    The last dotted segment of a category (the class name) is dropped to get
    the module path. Categories without a dot have no module path and are
    skipped.
    """
    lines = []
    for category, components in relevant_imports.items():
        if not components:
            continue
        base_module = category.rsplit(".", 1)[0] if "." in category else ""
        if not base_module:
            logger.warning("Skipping category %r: no module path to import from", category)
            continue
        lines.append(f"import {{ {', '.join(components)} }} from '{base_module}';")
    return "\n".join(lines)
