"""Typed JSON value nodes with lenient coercions, configurable serialization and object iterators."""

__version__ = "0.1.0"
__all__ = ["kinds", "value", "iterator"]