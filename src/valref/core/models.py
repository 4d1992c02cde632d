"""Semantics models: binding modes, protocols and metadata.

A type declares how it behaves when bound to a second name. Value types hand
out an independent copy, reference types hand out the same instance.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol, Self, TypeVar, runtime_checkable

T = TypeVar("T")


class Semantics(Enum):
    """What binding an instance to a second name produces."""

    VALUE = auto()  # Independent copy
    REFERENCE = auto()  # Alias of the same instance

    def get_strategy(self) -> Callable[[T], T]:
        """Get the binding function for this mode.

        Returns:
            Pure function implementing the binding.
        """
        # Late import to avoid circular dependency
        from valref.core import operations

        strategies = {
            Semantics.VALUE: operations.copy_on_bind,
            Semantics.REFERENCE: operations.alias_on_bind,
        }
        return strategies[self]


@runtime_checkable
class DeepCopyable(Protocol):
    """Reference type that can produce a fully independent duplicate."""

    def deep_copy(self) -> Self: ...


@dataclass(slots=True, frozen=True)
class SemanticsMeta:
    """Metadata for registered types."""

    semantics: Semantics
    type_name: str
