"""Unit tests for turn order."""

import pytest

from unoengine.engine import Direction, TurnState


def turn(index: int, count: int, direction: Direction = Direction.CLOCKWISE) -> TurnState:
    return TurnState(current_player_index=index, direction=direction, player_count=count)


def test_advance_clockwise_wraps() -> None:
    assert turn(3, 4).advance([True] * 4).current_player_index == 0


def test_advance_counter_clockwise_wraps() -> None:
    t = turn(0, 4, Direction.COUNTER_CLOCKWISE)
    assert t.advance([True] * 4).current_player_index == 3


def test_skip_passes_exactly_one_player() -> None:
    assert turn(0, 4).advance([True] * 4, skip=True).current_player_index == 2


def test_skip_with_two_players_returns_to_actor() -> None:
    assert turn(1, 2).advance([True, True], skip=True).current_player_index == 1


def test_inactive_players_are_passed_over() -> None:
    flags = [True, False, True, True]
    assert turn(0, 4).advance(flags).current_player_index == 2
    assert turn(0, 4).advance(flags, skip=True).current_player_index == 3
    assert turn(2, 4, Direction.COUNTER_CLOCKWISE).advance(flags).current_player_index == 0


def test_advance_from_inactive_seat() -> None:
    flags = [False, True, True]
    assert turn(0, 3).advance(flags).current_player_index == 1


def test_reversed() -> None:
    t = turn(1, 3).reversed()
    assert t.direction is Direction.COUNTER_CLOCKWISE
    assert t.reversed().direction is Direction.CLOCKWISE
    assert t.advance([True] * 3).current_player_index == 0


def test_flags_must_cover_seats() -> None:
    with pytest.raises(ValueError):
        turn(0, 3).advance([True, True])
    with pytest.raises(ValueError):
        turn(0, 2).advance([False, False])
