"""Instrumentation that counts successes and failures of calls and times them."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Protocol, TypeVar

RESULT_TYPE = "result_type"
RESULT_TYPE_ERROR = "error"
RESULT_TYPE_SUCCESS = "success"
TIMING_SUFFIX = "latency"

T = TypeVar("T")


class Stopwatch(Protocol):
    def stop(self) -> None: ...


class Counter(Protocol):
    def inc(self, delta: int) -> None: ...


class Timer(Protocol):
    def start(self) -> Stopwatch: ...


class Scope(Protocol):
    def tagged(self, tags: Mapping[str, str]) -> Scope: ...

    def sub_scope(self, name: str) -> Scope: ...

    def counter(self, name: str) -> Counter: ...

    def timer(self, name: str) -> Timer: ...


class Call:
    """Tracks successes, errors and timing of calls under one metric name.

    Creates the counters ``name`` tagged ``result_type=success`` and
    ``result_type=error``, and the timer ``latency`` in the sub-scope ``name``.
    """

    def __init__(self, scope: Scope, name: str) -> None:
        self._error = scope.tagged({RESULT_TYPE: RESULT_TYPE_ERROR}).counter(name)
        self._success = scope.tagged({RESULT_TYPE: RESULT_TYPE_SUCCESS}).counter(name)
        self._timing = scope.sub_scope(name).timer(TIMING_SUFFIX)

    def execute(self, fn: Callable[[], T]) -> T:
        """Run fn, record its duration and outcome, and return its result or re-raise."""
        stopwatch = self._timing.start()
        try:
            result = fn()
        except BaseException:
            stopwatch.stop()
            self._error.inc(1)
            raise
        stopwatch.stop()
        self._success.inc(1)
        return result