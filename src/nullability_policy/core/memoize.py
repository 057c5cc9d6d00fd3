"""At-most-once evaluation of a zero-argument computation.

Lazy host properties may ask for the same derived value many times; wrapping
the supplier here keeps the underlying work to a single run.

// [LAW:single-enforcer] The has-run check is the only gate on the delegate.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar


T = TypeVar("T")


class MemoizedComputation(Generic[T]):
    """Single-slot cache around ``delegate``.

    A failing delegate is not retried: the exception is stored and re-raised
    by every later ``get()``. Not safe for concurrent first calls unless
    created with ``thread_safe=True``.
    """

    def __init__(self, delegate: Callable[[], T], *, thread_safe: bool = False) -> None:
        self._delegate = delegate
        self._value: T | None = None
        self._error: BaseException | None = None
        self._has_run = False
        self._lock = threading.Lock() if thread_safe else None

    @classmethod
    def of(cls, delegate: Callable[[], T], *, thread_safe: bool = False) -> MemoizedComputation[T]:
        return cls(delegate, thread_safe=thread_safe)

    @property
    def has_run(self) -> bool:
        return self._has_run

    def get(self) -> T:
        if not self._has_run:
            if self._lock is None:
                self._run()
            else:
                with self._lock:
                    if not self._has_run:
                        self._run()
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]

    __call__ = get

    def _run(self) -> None:
        try:
            self._value = self._delegate()
        except Exception as exc:
            self._error = exc
        self._has_run = True
