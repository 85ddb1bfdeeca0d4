"""utilkit — predicate and data-manipulation helpers."""

__version__ = "0.3.0"
