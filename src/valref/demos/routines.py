"""Driver routines: bind, mutate once, print both bindings.

Value types show divergence after the mutation, reference types show
convergence. Every routine writes to stdout and returns None.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from valref.core import bind
from valref.models import Document, GameState, PlayerScore, Point, Rectangle

logger = logging.getLogger(__name__)


def create_point() -> None:
    """Point is a value type: the second binding is a separate instance."""
    point_a = Point(x=10.0, y=20.0)
    point_b = bind(point_a)

    point_b.x = 15.0

    print(f"Point A: ({point_a.x}, {point_a.y})")
    print(f"Point B: ({point_b.x}, {point_b.y})")


def create_rectangle() -> None:
    """Rectangle is a reference type: both bindings share one instance."""
    rectangle_a = Rectangle(width=10.0, height=20.0)
    rectangle_b = bind(rectangle_a)

    rectangle_b.width = 15.0

    print(f"Rectangle A: {rectangle_a.width} x {rectangle_a.height}")
    print(f"Rectangle B: {rectangle_b.width} x {rectangle_b.height}")


def copy_document() -> None:
    """Document needs an explicit deep_copy() to get an independent instance."""
    original = Document(title="Original", content="This is the original content.")
    copied = original.deep_copy()

    copied.title = "Copy"
    copied.content = "This is the copied content."

    print(f"Original Document Title: {original.title}")
    print(f"Copied Document Title: {copied.title}")


def score_players() -> None:
    player1_score = PlayerScore(points=0)
    player2_score = bind(player1_score)

    player2_score.add_points(10)

    print(f"Player 1 Score: {player1_score.points}")
    print(f"Player 2 Score: {player2_score.points}")


def share_game_state() -> None:
    game_state = GameState(level=1, is_paused=False)
    shared_game_state = bind(game_state)

    shared_game_state.pause_game()

    print(f"Is the game paused? {str(game_state.is_paused).lower()}")


# Catalog in presentation order
DEMOS: dict[str, Callable[[], None]] = {
    "point": create_point,
    "rectangle": create_rectangle,
    "document": copy_document,
    "score": score_players,
    "game_state": share_game_state,
}

HEADINGS: dict[str, str] = {
    "point": "## 1. Structs and the Stack",
    "rectangle": "## 2. Classes and the Heap",
    "document": "## 3. Deep Copying a Class Instance",
    "score": "## 4. Value Types for Independent Data",
    "game_state": "## 5. Reference Types for Shared State",
}


def run_demos(names: Iterable[str] | None = None, *, headings: bool = False) -> None:
    """Run the selected demos in catalog order.

    Args:
        names: Demo names to run. None runs all of them.
        headings: Print each demo's section heading before it.

    Raises:
        KeyError: If any name is not in the catalog. Nothing runs in that case.
    """
    if names is None:
        selected = set(DEMOS)
    else:
        selected = set(names)
        unknown = selected - DEMOS.keys()
        if unknown:
            raise KeyError(f"Unknown demo(s): {', '.join(sorted(unknown))}")

    for name, routine in DEMOS.items():
        if name not in selected:
            continue
        logger.debug("Running demo %s", name)
        if headings:
            print(HEADINGS[name])
        routine()
