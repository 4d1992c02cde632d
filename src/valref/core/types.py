"""Core type definitions for valref."""

type Copy[T] = T
"""Type alias indicating a value is an independent copy.

When you see `Copy[T]` in a return type, the returned value is a deep copy.
Mutations to this copy do NOT affect the source instance, and mutations to
the source do not show up in the copy.
"""
