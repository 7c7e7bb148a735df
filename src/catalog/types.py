# Data types for the component catalog layer.

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Tuple

# category -> matched components, rebuilt per prompt
RelevantImports = Dict[str, List[str]]


@dataclass(frozen=True)
class ComponentCatalog(Mapping):
    """Read-only mapping of dotted category path -> ordered component names."""
    entries: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Iterable[str]]) -> "ComponentCatalog":
        return cls(tuple((str(cat), tuple(str(c) for c in comps)) for cat, comps in data.items()))

    @classmethod
    def empty(cls) -> "ComponentCatalog":
        return cls()

    def __getitem__(self, category: str) -> Tuple[str, ...]:
        for cat, comps in self.entries:
            if cat == category:
                return comps
        raise KeyError(category)

    def __iter__(self) -> Iterator[str]:
        return (cat for cat, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> Dict[str, List[str]]:
        return {cat: list(comps) for cat, comps in self.entries}
