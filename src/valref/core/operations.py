"""Pure functions for binding and duplication.

These are stateless functions; the registry decides which one applies to a
given type.
"""

from __future__ import annotations

import copy
from dataclasses import fields, is_dataclass
from typing import Any, TypeVar, cast

from valref.core.models import DeepCopyable
from valref.core.types import Copy

T = TypeVar("T")


# Binding strategies


def copy_on_bind(instance: T) -> Copy[T]:
    """Bind by value.

    Args:
        instance: Instance to bind.

    Returns:
        Deep copy of the source. Reference-type instances it holds stay shared.
    """
    return copy.deepcopy(instance)


def alias_on_bind(instance: T) -> T:
    """Bind by reference.

    Args:
        instance: Instance to bind.

    Returns:
        The same instance unchanged.
    """
    return instance


# Duplication


def duplicate_using_protocol(instance: T) -> Copy[T]:
    """Duplicate an instance through the DeepCopyable protocol.

    Args:
        instance: Instance to duplicate (must implement DeepCopyable).

    Returns:
        Fresh instance via deep_copy().

    Raises:
        TypeError: If instance doesn't implement DeepCopyable.
    """
    if not isinstance(instance, DeepCopyable):
        raise TypeError(f"{type(instance).__name__} does not implement DeepCopyable protocol")
    return cast(T, instance.deep_copy())


def fields_equal(a: Any, b: Any) -> bool:
    """Compare two dataclass instances field by field.

    Ignores the types' own __eq__, so reference types with identity equality
    can still be compared structurally.

    Args:
        a: First instance.
        b: Second instance.

    Returns:
        True if both are the same dataclass type with equal field values.

    Raises:
        TypeError: If either argument is not a dataclass instance.
    """
    for obj in (a, b):
        if not is_dataclass(obj) or isinstance(obj, type):
            raise TypeError(f"{type(obj).__name__} is not a dataclass instance")
    if type(a) is not type(b):
        return False
    return all(getattr(a, f.name) == getattr(b, f.name) for f in fields(a))
