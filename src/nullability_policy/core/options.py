"""Checker option derivation per task category.

// [LAW:one-source-of-truth] NullAway option keys and contract annotations are declared here.
// [LAW:dataflow-not-control-flow] Disabled tasks get an OptionSet value, not a skipped branch.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from nullability_policy.core.classifier import Category


CHECK_NAME = "NullAway"

CUSTOM_CONTRACT_ANNOTATIONS: frozenset[str] = frozenset({"org.springframework.lang.Contract"})
"""Contract annotations honoured in every checked source set."""

CUSTOM_CONTRACT_TEST_ANNOTATIONS: frozenset[str] = frozenset(
    {"org.assertj.core.internal.annotation.Contract"}
)
"""Additional contract annotations honoured in test source sets."""


class CheckSeverity(enum.Enum):
    DEFAULT = "DEFAULT"
    OFF = "OFF"
    WARN = "WARN"
    ERROR = "ERROR"


@dataclass(frozen=True)
class OptionSet:
    """Checker configuration for one compile task.

    ``checks`` and ``check_options`` are ordered pairs so the rendered
    arguments are stable across builds.
    """

    enabled: bool
    disable_all_checks: bool = False
    checks: tuple[tuple[str, CheckSeverity], ...] = ()
    check_options: tuple[tuple[str, str], ...] = ()

    def option(self, key: str) -> str | None:
        return dict(self.check_options).get(key)

    def to_args(self) -> list[str]:
        """Render checker command-line arguments; empty when disabled."""
        if not self.enabled:
            return []
        args: list[str] = []
        if self.disable_all_checks:
            args.append("-XepDisableAllChecks")
        args.extend(f"-Xep:{name}:{severity.value}" for name, severity in self.checks)
        args.extend(f"-XepOpt:{key}={value}" for key, value in self.check_options)
        return args

    def to_dict(self) -> dict:
        return {
            "enabled": self.enabled,
            "disable_all_checks": self.disable_all_checks,
            "checks": {name: severity.value for name, severity in self.checks},
            "check_options": dict(self.check_options),
        }


def join_annotations(*annotation_sets: Iterable[str]) -> str:
    """Sort each set and join them in the given order with commas."""
    seen: set[str] = set()
    ordered: list[str] = []
    for annotations in annotation_sets:
        for annotation in sorted(set(annotations)):
            if annotation not in seen:
                seen.add(annotation)
                ordered.append(annotation)
    return ",".join(ordered)


def contract_annotations_option(category: Category) -> str:
    if category is Category.TEST:
        return join_annotations(CUSTOM_CONTRACT_ANNOTATIONS, CUSTOM_CONTRACT_TEST_ANNOTATIONS)
    return join_annotations(CUSTOM_CONTRACT_ANNOTATIONS)


def build_options(category: Category) -> OptionSet:
    """Build the checker options for a task of the given category."""
    if category is Category.DISABLED:
        return OptionSet(enabled=False)
    check_options = [
        (f"{CHECK_NAME}:OnlyNullMarked", "true"),
        (f"{CHECK_NAME}:CustomContractAnnotations", contract_annotations_option(category)),
        (f"{CHECK_NAME}:JSpecifyMode", "true"),
    ]
    if category is Category.TEST:
        check_options.append((f"{CHECK_NAME}:HandleTestAssertionLibraries", "true"))
    return OptionSet(
        enabled=True,
        disable_all_checks=True,
        checks=((CHECK_NAME, CheckSeverity.ERROR),),
        check_options=tuple(check_options),
    )
