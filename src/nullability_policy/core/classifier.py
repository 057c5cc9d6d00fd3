"""Compile task classification.

// [LAW:single-enforcer] Source set type validation happens here, at read time.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass

import nullability_policy.core.task_names


logger = logging.getLogger(__name__)

SOURCE_SET_TYPES = ("main", "test")
DEFAULT_SOURCE_SET_TYPE = "main"


class Category(enum.Enum):
    """Nullability checking mode for one compile task."""

    MAIN = "main"
    TEST = "test"
    DISABLED = "disabled"


@dataclass(frozen=True)
class SourceSetOverride:
    """User-declared opt-in of a source set into checking."""

    name: str
    type: str = DEFAULT_SOURCE_SET_TYPE


class SourceSetTypeError(ValueError):
    """An override declares a type other than 'main' or 'test'."""

    def __init__(self, source_set_type: str) -> None:
        supported = ", ".join(f"'{t}'" for t in SOURCE_SET_TYPES)
        super().__init__(
            f"Unknown source set type '{source_set_type}'. Supported types are: {supported}"
        )
        self.source_set_type = source_set_type


_CATEGORY_BY_TYPE: dict[str, Category] = {
    "main": Category.MAIN,
    "test": Category.TEST,
}


def category_for_type(source_set_type: str) -> Category:
    category = _CATEGORY_BY_TYPE.get(source_set_type)
    if category is None:
        raise SourceSetTypeError(source_set_type)
    return category


def classify(task_name: str, overrides: Mapping[str, SourceSetOverride]) -> Category:
    """Decide the checking mode for a compile task.

    Tasks that are not compile tasks, and source sets nobody opted in, are
    left unchecked. The primary source set is always checked as main code.
    """
    name = nullability_policy.core.task_names.source_set_name(task_name)
    if name is None:
        logger.debug("task=%s not a compile task; checking disabled", task_name)
        return Category.DISABLED
    if not name:
        return Category.MAIN
    override = overrides.get(name)
    if override is None:
        logger.debug("task=%s source_set=%s has no override; checking disabled", task_name, name)
        return Category.DISABLED
    category = category_for_type(override.type)
    logger.debug("task=%s source_set=%s category=%s", task_name, name, category.name)
    return category
