"""User-facing nullability configuration.

Holds the checker versions and the source set overrides a build declares.

// [LAW:one-source-of-truth] Default checker versions are declared here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import nullability_policy.app.overrides
from nullability_policy.core.classifier import DEFAULT_SOURCE_SET_TYPE, SourceSetOverride


ERROR_PRONE_VERSION = "2.41.0"
NULLAWAY_VERSION = "0.12.9"

ERROR_PRONE_MODULE = "com.google.errorprone:error_prone_core"
NULLAWAY_MODULE = "com.uber.nullaway:nullaway"


@dataclass
class NullabilityExtension:
    error_prone_version: str = ERROR_PRONE_VERSION
    nullaway_version: str = NULLAWAY_VERSION
    source_sets: nullability_policy.app.overrides.OverrideRegistry = field(
        default_factory=nullability_policy.app.overrides.OverrideRegistry
    )

    def source_set(self, name: str, type: str | None = None) -> SourceSetOverride:
        """Declare (or re-type) an override for ``name``."""
        return self.source_sets.configure(name, type)

    def checker_dependencies(self) -> tuple[str, ...]:
        """Coordinates the host adds to its checker classpath."""
        return (
            f"{ERROR_PRONE_MODULE}:{self.error_prone_version}",
            f"{NULLAWAY_MODULE}:{self.nullaway_version}",
        )

    @classmethod
    def from_settings(cls, settings: Mapping) -> NullabilityExtension:
        """Build an extension from a loaded settings mapping.

        Expected shape::

            {"error_prone_version": "...", "nullaway_version": "...",
             "source_sets": {"test": {"type": "test"}, "integrationTest": {}}}

        A bare string is accepted in place of ``{"type": ...}``.
        """
        if not isinstance(settings, Mapping):
            raise ValueError("Settings must be a mapping")
        extension = cls(
            error_prone_version=_version(settings, "error_prone_version", ERROR_PRONE_VERSION),
            nullaway_version=_version(settings, "nullaway_version", NULLAWAY_VERSION),
        )
        raw_source_sets = settings.get("source_sets") or {}
        if not isinstance(raw_source_sets, Mapping):
            raise ValueError("'source_sets' must be a mapping of name to settings")
        for name, raw in raw_source_sets.items():
            extension.source_sets.register(str(name), _source_set_type(name, raw))
        return extension


def _version(settings: Mapping, key: str, default: str) -> str:
    value = settings.get(key)
    if value is None:
        return default
    text = str(value).strip()
    if not text:
        raise ValueError(f"'{key}' must not be empty")
    return text


def _source_set_type(name: object, raw: object) -> str:
    if raw is None:
        return DEFAULT_SOURCE_SET_TYPE
    if isinstance(raw, str):
        return raw
    if isinstance(raw, Mapping):
        return str(raw.get("type", DEFAULT_SOURCE_SET_TYPE))
    raise ValueError(f"Source set '{name}' settings must be a mapping or a type string")
