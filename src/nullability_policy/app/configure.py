"""Per-task checker wiring.

The host reads a task's category, enabled flag and options lazily and may do
so repeatedly; each derivation runs once per task.

// [LAW:one-source-of-truth] Category -> options flows through TaskConfiguration only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import nullability_policy.core.classifier
import nullability_policy.core.options
from nullability_policy.app.extension import NullabilityExtension
from nullability_policy.core.classifier import Category
from nullability_policy.core.memoize import MemoizedComputation
from nullability_policy.core.options import OptionSet


logger = logging.getLogger(__name__)


class TaskConfiguration:
    """Lazily derived checker configuration for one compile task."""

    def __init__(self, task_name: str, extension: NullabilityExtension) -> None:
        self.task_name = task_name
        self._category = MemoizedComputation.of(
            lambda: nullability_policy.core.classifier.classify(task_name, extension.source_sets)
        )
        self._options = MemoizedComputation.of(
            lambda: nullability_policy.core.options.build_options(self._category.get())
        )

    @property
    def category(self) -> Category:
        return self._category.get()

    @property
    def enabled(self) -> bool:
        return self.category is not Category.DISABLED

    @property
    def options(self) -> OptionSet:
        return self._options.get()

    @property
    def args(self) -> list[str]:
        return self.options.to_args()

    def __repr__(self) -> str:
        return f"TaskConfiguration({self.task_name!r})"


def configure_task(task_name: str, extension: NullabilityExtension) -> TaskConfiguration:
    return TaskConfiguration(task_name, extension)


def configure_tasks(
    task_names: Iterable[str],
    extension: NullabilityExtension,
) -> dict[str, TaskConfiguration]:
    """Wire every task; classification is deferred until a value is read."""
    configured = {name: configure_task(name, extension) for name in task_names}
    logger.debug("configured %d task(s)", len(configured))
    return configured
