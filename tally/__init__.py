"""Metric building blocks: histogram buckets, identity hashing, caches, size-counting transports and call instrumentation."""

__version__ = "0.1.0"

__all__ = ["cache", "histogram", "identity", "instrument", "transports"]