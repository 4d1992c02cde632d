"""valref: value vs reference semantics, declared per type.

Usage:
    from dataclasses import dataclass
    from valref import bind, value_type

    @value_type
    @dataclass
    class Position:
        x: float
        y: float

    a = Position(0, 0)
    b = bind(a)      # independent copy
    b.x = 1          # a.x is still 0
"""

__version__ = "0.1.0"

# Core primitives
from valref.core import (
    Copy,
    DeepCopyable,
    Semantics,
    SemanticsRegistry,
    bind,
    duplicate,
    fields_equal,
    get_registry,
    reference_type,
    value_type,
)

# Demonstration routines
from valref.demos import DEMOS, run_demos

# Demonstration types
from valref.models import Document, GameState, PlayerScore, Point, Rectangle

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "Semantics",
    "SemanticsRegistry",
    "DeepCopyable",
    "get_registry",
    "value_type",
    "reference_type",
    "bind",
    "duplicate",
    "fields_equal",
    # Models
    "Point",
    "PlayerScore",
    "Rectangle",
    "GameState",
    "Document",
    # Demos
    "DEMOS",
    "run_demos",
]
