"""Geometry types: a value-typed point and a reference-typed rectangle."""

from dataclasses import dataclass

from valref.core import reference_type, value_type


@value_type
@dataclass(slots=True)
class Point:
    """2D point. Each binding owns its own coordinates."""

    x: float
    y: float


@reference_type
@dataclass(slots=True, eq=False)
class Rectangle:
    """Rectangle shared by every binding that refers to it.

    No copy operation is provided; aliasing is the only available semantics.
    """

    width: float
    height: float
