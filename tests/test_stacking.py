"""Unit tests for the draw-chain state machine."""

import pytest

from conftest import B, R, WILD, WILD4, draw_two, num, skip
from unoengine.engine import InvalidStack, StackKind, StackState
from unoengine.engine.stacking import IDLE, can_stack, is_stacking_card, push_draw_four, push_draw_two, settle


def test_idle_by_default() -> None:
    assert StackState() == IDLE
    assert IDLE.is_idle
    assert IDLE.pending_total == 0


def test_total_only_while_pending() -> None:
    with pytest.raises(ValueError):
        StackState(StackKind.NONE, 2)
    with pytest.raises(ValueError):
        StackState(StackKind.DRAW_TWO, 0)
    with pytest.raises(ValueError):
        StackState(StackKind.DRAW_TWO, -2)


def test_draw_two_accumulates() -> None:
    s = push_draw_two(push_draw_two(IDLE))
    assert s == StackState(StackKind.DRAW_TWO, 4, False)


def test_draw_four_on_draw_two_locks() -> None:
    s = push_draw_four(push_draw_two(push_draw_two(IDLE)))
    assert s == StackState(StackKind.DRAW_FOUR, 8, True)
    with pytest.raises(InvalidStack):
        push_draw_two(s)


def test_fresh_draw_four_chain() -> None:
    s = push_draw_four(IDLE)
    assert s == StackState(StackKind.DRAW_FOUR, 4, False)
    with pytest.raises(InvalidStack):
        push_draw_two(s)
    assert push_draw_four(s).pending_total == 8


def test_lock_survives_further_draw_fours() -> None:
    s = push_draw_four(push_draw_four(push_draw_two(IDLE)))
    assert s.is_locked
    assert s.pending_total == 10


def test_settle_resets() -> None:
    state, owed = settle(push_draw_four(push_draw_two(IDLE)))
    assert state == IDLE
    assert owed == 6


def test_can_stack() -> None:
    d2_chain = push_draw_two(IDLE)
    d4_chain = push_draw_four(IDLE)
    assert can_stack(draw_two(B), d2_chain)
    assert can_stack(WILD4, d2_chain)
    assert can_stack(WILD4, d4_chain)
    assert not can_stack(draw_two(B), d4_chain)
    assert not can_stack(WILD, d2_chain)
    assert not can_stack(skip(R), d2_chain)
    assert not can_stack(draw_two(R), IDLE)


def test_is_stacking_card() -> None:
    assert is_stacking_card(draw_two(R))
    assert is_stacking_card(WILD4)
    assert not is_stacking_card(WILD)
    assert not is_stacking_card(num(R, 2))


def test_str() -> None:
    assert str(IDLE) == "no pending draws"
    assert str(push_draw_four(push_draw_two(IDLE))) == "6 pending (draw_four, locked)"
