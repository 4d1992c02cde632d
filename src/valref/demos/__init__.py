"""Demonstration routines and their catalog."""

from valref.demos.routines import (
    DEMOS,
    HEADINGS,
    copy_document,
    create_point,
    create_rectangle,
    run_demos,
    score_players,
    share_game_state,
)

__all__ = [
    "DEMOS",
    "HEADINGS",
    "run_demos",
    "create_point",
    "create_rectangle",
    "copy_document",
    "score_players",
    "share_game_state",
]
