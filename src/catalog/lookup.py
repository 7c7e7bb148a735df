# Match catalog components against prompt text, and load catalogs from YAML.

from __future__ import annotations

import os
from typing import Optional

import yaml

from .types import ComponentCatalog, RelevantImports


class CatalogFormatError(ValueError):
    """Raised when a catalog file is not a mapping of category -> list of names."""


def find_relevant_components(catalog: ComponentCatalog, prompt: str) -> RelevantImports:
    """
    Return the components whose names occur in the prompt.

    Matching is a case-insensitive substring test, so short names also match
    inside longer words. Category and component order follow the catalog.
    """
    haystack = prompt.lower()
    relevant: RelevantImports = {}
    for category, components in catalog.items():
        for component in components:
            if component.lower() in haystack:
                relevant.setdefault(category, []).append(component)
    return relevant


def all_components(catalog: ComponentCatalog) -> ComponentCatalog:
    return catalog


def load_catalog(path: Optional[str]) -> ComponentCatalog:
    """Load a catalog from a YAML file; no path means an empty catalog."""
    if not path:
        return ComponentCatalog.empty()
    if not os.path.exists(path):
        raise FileNotFoundError(f"Catalog file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise CatalogFormatError(f"Catalog {path} must be a mapping, got {type(data).__name__}")
    for category, components in data.items():
        if not isinstance(components, list):
            raise CatalogFormatError(f"Category '{category}' in {path} must list component names")
        bad = [c for c in components if not isinstance(c, str) or not c]
        if bad:
            raise CatalogFormatError(f"Category '{category}' in {path} has empty or non-string component names: {bad!r}")
    return ComponentCatalog.from_mapping(data)
