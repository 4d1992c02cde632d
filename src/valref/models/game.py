"""Game types.

PlayerScore is simple independent data; GameState is shared mutable state.
"""

from dataclasses import dataclass

from valref.core import reference_type, value_type


@value_type
@dataclass(slots=True)
class PlayerScore:
    points: int

    def add_points(self, delta: int) -> None:
        """Add delta (may be negative) to this score only."""
        self.points += delta


@reference_type
@dataclass(slots=True, eq=False)
class GameState:
    level: int
    is_paused: bool

    def pause_game(self) -> None:
        """Pause the game for every binding. Idempotent."""
        self.is_paused = True
