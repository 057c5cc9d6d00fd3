"""Name-keyed registry of source set overrides.

// [LAW:one-source-of-truth] Declared overrides live in one registry per extension.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping

from nullability_policy.core.classifier import DEFAULT_SOURCE_SET_TYPE, SourceSetOverride


class OverrideRegistry(Mapping[str, SourceSetOverride]):
    """Overrides keyed by exact source set name, in declaration order.

    Types are stored as declared; validation happens when a task is classified.
    """

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        self._overrides: dict[str, SourceSetOverride] = {}
        for name, source_set_type in (overrides or {}).items():
            self.register(name, source_set_type)

    def register(self, name: str, type: str = DEFAULT_SOURCE_SET_TYPE) -> SourceSetOverride:
        if not name:
            raise ValueError("Source set name must not be empty")
        if name in self._overrides:
            raise ValueError(f"Source set '{name}' is already registered")
        override = SourceSetOverride(name=name, type=type)
        self._overrides[name] = override
        return override

    def configure(self, name: str, type: str | None = None) -> SourceSetOverride:
        """Return the override for ``name``, registering it or changing its type."""
        existing = self._overrides.get(name)
        if existing is None:
            return self.register(name, DEFAULT_SOURCE_SET_TYPE if type is None else type)
        if type is None or type == existing.type:
            return existing
        updated = dataclasses.replace(existing, type=type)
        self._overrides[name] = updated
        return updated

    def find_by_name(self, name: str) -> SourceSetOverride | None:
        return self._overrides.get(name)

    def __getitem__(self, name: str) -> SourceSetOverride:
        return self._overrides[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._overrides)

    def __len__(self) -> int:
        return len(self._overrides)

    def __repr__(self) -> str:
        entries = ", ".join(f"{o.name}={o.type}" for o in self._overrides.values())
        return f"OverrideRegistry({entries})"
