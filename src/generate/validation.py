# Import validators for generated diagram code.
# A validator takes (code, relevant_imports) and returns True to accept.

from __future__ import annotations

import re
from typing import Dict, Set

from src.catalog import RelevantImports

_IMPORT_LINE = re.compile(r"^\s*import\s*\{([^}]*)\}\s*from\s*['\"]([^'\"]+)['\"]", re.MULTILINE)


def allow_all_imports(code: str, relevant_imports: RelevantImports) -> bool:
    return True


def imports_within_catalog(code: str, relevant_imports: RelevantImports) -> bool:
    """Reject code that imports names the catalog lookup did not offer."""
    allowed: Dict[str, Set[str]] = {}
    for category, components in relevant_imports.items():
        if "." not in category:
            continue
        allowed.setdefault(category.rsplit(".", 1)[0], set()).update(components)

    for names, module in _IMPORT_LINE.findall(code):
        requested = {n.strip() for n in names.split(",") if n.strip()}
        if not requested <= allowed.get(module, set()):
            return False
    return True
