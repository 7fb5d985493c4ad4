"""Histogram bucket definitions and the bucket pairs derived from them."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

MIN_DURATION = -(1 << 63)
MAX_DURATION = (1 << 63) - 1
MAX_FLOAT = sys.float_info.max


class BucketsError(ValueError):
    """Raised when bucket parameters are invalid."""


def _format_fraction(value: int, precision: int) -> tuple[str, int]:
    scale = 10**precision
    digits = f"{value % scale:0{precision}d}".rstrip("0")
    return ("." + digits if digits else ""), value // scale


def format_duration(ns: int) -> str:
    """Format a duration in nanoseconds the way durations are conventionally shown, e.g. 1m30s."""
    sign = "-" if ns < 0 else ""
    u = abs(ns)
    if u == 0:
        return "0s"
    if u < SECOND:
        if u < MICROSECOND:
            return f"{sign}{u}ns"
        if u < MILLISECOND:
            precision, unit = 3, "µs"
        else:
            precision, unit = 6, "ms"
        frac, whole = _format_fraction(u, precision)
        return f"{sign}{whole}{frac}{unit}"

    frac, secs = _format_fraction(u, 9)
    text = f"{secs % 60}{frac}s"
    mins = secs // 60
    if mins:
        text = f"{mins % 60}m{text}"
        hours = mins // 60
        if hours:
            text = f"{hours}h{text}"
    return sign + text


class ValueBuckets(list):
    """Bucket upper bounds expressed as floats."""

    def __str__(self) -> str:
        return "[" + " ".join(f"{v:f}" for v in self) + "]"

    def as_values(self) -> list[float]:
        """Return the bounds as floats."""
        return [float(v) for v in self]

    def as_durations(self) -> list[int]:
        """Return the bounds as nanosecond durations, treating values as seconds."""
        return [int(v * SECOND) for v in self]


class DurationBuckets(list):
    """Bucket upper bounds expressed as durations in nanoseconds."""

    def __str__(self) -> str:
        return "[" + " ".join(format_duration(d) for d in self) + "]"

    def as_values(self) -> list[float]:
        """Return the bounds as floats in seconds."""
        return [d / SECOND for d in self]

    def as_durations(self) -> list[int]:
        """Return the bounds as nanosecond durations."""
        return [int(d) for d in self]


Buckets = Union[ValueBuckets, DurationBuckets]

DEFAULT_BUCKETS: Buckets | None = None


@dataclass(frozen=True)
class BucketPair:
    """Lower and upper bounds of a single derived bucket."""

    lower_bound_value: float = 0.0
    upper_bound_value: float = 0.0
    lower_bound_duration: int = 0
    upper_bound_duration: int = 0


SINGLE_BUCKET = BucketPair(
    lower_bound_value=-MAX_FLOAT,
    upper_bound_value=MAX_FLOAT,
    lower_bound_duration=MIN_DURATION,
    upper_bound_duration=MAX_DURATION,
)


def buckets_equal(x: Buckets | None, y: Buckets | None) -> bool:
    """Return whether two bucket sets are of the same kind and hold the same bounds."""
    for kind in (DurationBuckets, ValueBuckets):
        if isinstance(x, kind):
            return isinstance(y, kind) and list(x) == list(y)
    return True


def bucket_pairs(buckets: Buckets | Iterable[float] | None) -> list[BucketPair]:
    """Derive sorted lower/upper bound pairs, open-ended at both extremes."""
    if buckets is None:
        return [SINGLE_BUCKET]

    if isinstance(buckets, DurationBuckets):
        bounds = sorted(buckets.as_durations())
        if not bounds:
            return [SINGLE_BUCKET]
        edges = [MIN_DURATION, *bounds, MAX_DURATION]
        return [
            BucketPair(lower_bound_duration=lo, upper_bound_duration=hi)
            for lo, hi in zip(edges, edges[1:])
        ]

    if not isinstance(buckets, ValueBuckets):
        buckets = ValueBuckets(buckets)
    values = sorted(buckets.as_values())
    if not values:
        return [SINGLE_BUCKET]
    edges = [-MAX_FLOAT, *values, MAX_FLOAT]
    return [
        BucketPair(lower_bound_value=lo, upper_bound_value=hi)
        for lo, hi in zip(edges, edges[1:])
    ]


def _check_count(n: int) -> None:
    if n <= 0:
        raise BucketsError("n needs to be > 0")


def _check_exponential(start: float, factor: float, n: int) -> None:
    _check_count(n)
    if start <= 0:
        raise BucketsError("start needs to be > 0")
    if factor <= 1:
        raise BucketsError("factor needs to be > 1")


def linear_value_buckets(start: float, width: float, n: int) -> ValueBuckets:
    """Create n value buckets starting at start, each width apart."""
    _check_count(n)
    return ValueBuckets(start + float(i) * width for i in range(n))


def linear_duration_buckets(start: int, width: int, n: int) -> DurationBuckets:
    """Create n duration buckets starting at start, each width apart."""
    _check_count(n)
    return DurationBuckets(start + i * width for i in range(n))


def exponential_value_buckets(start: float, factor: float, n: int) -> ValueBuckets:
    """Create n value buckets starting at start, each factor times the previous."""
    _check_exponential(start, factor, n)
    result = ValueBuckets()
    curr = float(start)
    for _ in range(n):
        result.append(curr)
        curr *= factor
    return result


def exponential_duration_buckets(start: int, factor: float, n: int) -> DurationBuckets:
    """Create n duration buckets starting at start, each factor times the previous."""
    _check_exponential(start, factor, n)
    result = DurationBuckets()
    curr = int(start)
    for _ in range(n):
        result.append(curr)
        curr = int(float(curr) * factor)
    return result