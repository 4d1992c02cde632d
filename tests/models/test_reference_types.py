"""Tests for reference types: every alias observes every mutation."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from valref import GameState, Rectangle, bind, duplicate

finite_floats = st.floats(allow_nan=False, allow_infinity=False)


def test_rectangle_alias_sees_mutation():
    rectangle_a = Rectangle(10.0, 20.0)
    rectangle_b = bind(rectangle_a)

    rectangle_b.width = 15.0

    assert rectangle_a.width == 15.0
    assert rectangle_b.width == 15.0
    assert rectangle_a is rectangle_b


@given(w=finite_floats, h=finite_floats, new_w=finite_floats)
def test_rectangle_alias_converges_for_all_sizes(w, h, new_w):
    """CRITICAL: No aliasing divergence.

    Why: Two bindings to one instance must never disagree.
    """
    original = Rectangle(w, h)
    alias = bind(original)

    alias.width = new_w

    assert original.width == new_w
    assert original.height == h


def test_rectangle_mutation_through_original_seen_by_alias():
    original = Rectangle(1.0, 1.0)
    alias = bind(original)

    original.height = 3.0

    assert alias.height == 3.0


def test_rectangle_has_no_copy_operation():
    with pytest.raises(TypeError, match="DeepCopyable"):
        duplicate(Rectangle(1.0, 2.0))


def test_rectangle_equality_is_identity():
    a = Rectangle(1.0, 2.0)
    assert a == bind(a)
    assert a != Rectangle(1.0, 2.0)
    assert len({a, bind(a)}) == 1


def test_pause_game_visible_through_alias():
    game_state = GameState(1, False)
    shared = bind(game_state)

    shared.pause_game()

    assert game_state.is_paused is True


def test_pause_game_is_idempotent():
    once = GameState(3, False)
    twice = GameState(3, False)
    alias = bind(twice)

    once.pause_game()
    alias.pause_game()
    twice.pause_game()

    assert (once.level, once.is_paused) == (twice.level, twice.is_paused) == (3, True)


def test_pause_game_leaves_level_alone():
    state = GameState(7, True)
    state.pause_game()
    assert state.level == 7
    assert state.is_paused is True
