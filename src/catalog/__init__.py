# Component catalog package.
# Exposes the catalog value, prompt lookup, and import formatting.

from .types import ComponentCatalog, RelevantImports
from .lookup import CatalogFormatError, all_components, find_relevant_components, load_catalog
from .imports import format_imports

__all__ = [
    "ComponentCatalog",
    "RelevantImports",
    "CatalogFormatError",
    "all_components",
    "find_relevant_components",
    "load_catalog",
    "format_imports",
]
