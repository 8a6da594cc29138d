"""
adalex startup helpers: build-once initialization of shared read-only data.
"""

from .lazy_init import LazyComponent, LazyRegistry

__all__ = ["LazyComponent", "LazyRegistry"]
