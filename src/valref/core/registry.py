"""Semantics registry, decorators, and binding operations.

Usage:
    @value_type
    @dataclass
    class Point:
        x: float
        y: float

    @reference_type
    @dataclass(eq=False)
    class Rectangle:
        width: float
        height: float

    b = bind(a)  # copy for Point, alias for Rectangle
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import is_dataclass
from typing import overload

from valref.core.models import Semantics, SemanticsMeta
from valref.core.operations import copy_on_bind, duplicate_using_protocol
from valref.core.types import Copy

logger = logging.getLogger(__name__)


def _type_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class SemanticsRegistry:
    """Process-local registry mapping types to their declared semantics."""

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._by_type: dict[type, SemanticsMeta] = {}

    def register(self, cls: type, semantics: Semantics) -> SemanticsMeta:
        """Register a type with its binding semantics.

        Args:
            cls: Class to register.
            semantics: Declared binding mode.

        Returns:
            Metadata for the type. Registering again with the same semantics
            returns the existing metadata.

        Raises:
            RuntimeError: If the type is already registered with other semantics.
        """
        existing = self._by_type.get(cls)
        if existing is not None:
            if existing.semantics is not semantics:
                raise RuntimeError(
                    f"Conflicting semantics for {existing.type_name}: "
                    f"registered as {existing.semantics.name}, got {semantics.name}"
                )
            return existing

        meta = SemanticsMeta(semantics=semantics, type_name=_type_name(cls))
        self._by_type[cls] = meta
        logger.debug("Registered %s as %s", meta.type_name, semantics.name)
        return meta

    def get_meta(self, cls: type) -> SemanticsMeta | None:
        """Get metadata for a registered type.

        Args:
            cls: Class to look up.

        Returns:
            Metadata if registered, None otherwise.
        """
        return self._by_type.get(cls)

    def semantics_of(self, cls: type) -> Semantics | None:
        """Get the declared semantics of a type, or None if unregistered."""
        meta = self._by_type.get(cls)
        return meta.semantics if meta is not None else None

    def is_registered(self, cls: type) -> bool:
        """Check if a type has declared semantics.

        Args:
            cls: Class to check.

        Returns:
            True if registered, False otherwise.
        """
        return cls in self._by_type


# Module-level registry instance
_registry = SemanticsRegistry()


def get_registry() -> SemanticsRegistry:
    """Access the global semantics registry.

    Returns:
        The process-local SemanticsRegistry instance.
    """
    return _registry


def _share_on_deepcopy(self: object, memo: dict[int, object]) -> object:
    """Reference instances held by a value stay shared when the value is copied."""
    return self


def _declare(semantics: Semantics) -> Callable[[type], type]:
    def decorator(c: type) -> type:
        if not is_dataclass(c):
            raise TypeError(
                f"{c.__name__} must be a dataclass to declare {semantics.name.lower()} "
                f"semantics. Did you forget @dataclass decorator?"
            )
        meta = _registry.register(c, semantics)
        if semantics is Semantics.REFERENCE and "__deepcopy__" not in c.__dict__:
            c.__deepcopy__ = _share_on_deepcopy  # type: ignore
        c.__semantics_meta__ = meta  # type: ignore
        return c

    return decorator


@overload
def value_type(cls: type) -> type: ...


@overload
def value_type(cls: None = None) -> Callable[[type], type]: ...


def value_type(cls: type | None = None) -> type | Callable[[type], type]:
    """Declare a dataclass as a value type.

    Binding an instance with bind() produces an independent deep copy.

    Note:
        Apply @value_type AFTER @dataclass.
    """
    decorator = _declare(Semantics.VALUE)
    return decorator if cls is None else decorator(cls)


@overload
def reference_type(cls: type) -> type: ...


@overload
def reference_type(cls: None = None) -> Callable[[type], type]: ...


def reference_type(cls: type | None = None) -> type | Callable[[type], type]:
    """Declare a dataclass as a reference type.

    Binding an instance with bind() returns the same instance. Use
    @dataclass(eq=False) so equality and hashing follow identity.

    Note:
        Apply @reference_type AFTER @dataclass.
    """
    decorator = _declare(Semantics.REFERENCE)
    return decorator if cls is None else decorator(cls)


def _require_semantics(instance: object) -> Semantics:
    semantics = _registry.semantics_of(type(instance))
    if semantics is None:
        raise TypeError(
            f"{type(instance).__name__} has no declared semantics. "
            f"Decorate it with @value_type or @reference_type."
        )
    return semantics


def bind[T](instance: T) -> T:
    """Bind an instance to a new name using its declared semantics.

    Args:
        instance: Instance of a registered type.

    Returns:
        Deep copy for value types, the same instance for reference types.

    Raises:
        TypeError: If the instance's type has no declared semantics.
    """
    semantics = _require_semantics(instance)
    logger.debug("Binding %s by %s", type(instance).__name__, semantics.name)
    return semantics.get_strategy()(instance)


def duplicate[T](instance: T) -> Copy[T]:
    """Produce an independent instance with equal field values.

    Value types are always duplicable. Reference types must opt in by
    implementing DeepCopyable; duplication is never implicit.

    Args:
        instance: Instance of a registered type.

    Returns:
        Fresh instance, never the argument itself.

    Raises:
        TypeError: If the type has no declared semantics, or is a reference
            type without deep_copy().
    """
    semantics = _require_semantics(instance)
    logger.debug("Duplicating %s (%s)", type(instance).__name__, semantics.name)
    if semantics is Semantics.VALUE:
        return copy_on_bind(instance)
    return duplicate_using_protocol(instance)
