"""Demonstration types: value types, reference types, explicit duplication."""

from valref.models.document import Document
from valref.models.game import GameState, PlayerScore
from valref.models.geometry import Point, Rectangle

__all__ = [
    # Value types
    "Point",
    "PlayerScore",
    # Reference types
    "Rectangle",
    "GameState",
    "Document",
]
