"""Compile task name decomposition.

Task names follow ``compile<SourceSet>Java``; bucketed variants of one source
set append a digit run (``compileTest3Java``), which is dropped before lookup.

// [LAW:one-source-of-truth] The compile task name convention lives here only.
"""

from __future__ import annotations

import re


COMPILE_TASK_NAME = re.compile(r"compile(\w*)Java", re.ASCII)

_TRAILING_DIGITS = re.compile(r"\d+\Z", re.ASCII)


def strip_trailing_digits(value: str) -> str:
    """Drop a digit run anchored at the end; embedded digits are kept."""
    return _TRAILING_DIGITS.sub("", value)


def uncapitalize(value: str) -> str:
    """Lower-case the first character only (``"ABC"`` -> ``"aBC"``)."""
    if not value:
        return value
    return value[0].lower() + value[1:]


def match_compile_task(task_name: str) -> str | None:
    """Return the middle segment of a compile task name, or None if it is not one."""
    match = COMPILE_TASK_NAME.fullmatch(task_name)
    if match is None:
        return None
    return match.group(1)


def source_set_name(task_name: str) -> str | None:
    """Derive the source set name a compile task builds.

    Returns ``""`` for the primary ``compileJava`` task and None when the task
    name does not follow the compile task convention.
    """
    segment = match_compile_task(task_name)
    if segment is None:
        return None
    return uncapitalize(strip_trailing_digits(segment))
