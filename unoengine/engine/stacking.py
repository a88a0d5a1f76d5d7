"""Draw-chain stacking: accumulating Draw Two / Wild Draw Four penalties."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from unoengine.engine.card import Card, Kind
from unoengine.engine.errors import InvalidStack


class StackKind(str, Enum):
    NONE = "none"
    DRAW_TWO = "draw_two"
    DRAW_FOUR = "draw_four"


@dataclass(frozen=True)
class StackState:
    """Pending forced draw owed by the next player to act.

    is_locked is set once a Wild Draw Four joins a Draw Two chain.
    """

    pending_kind: StackKind = StackKind.NONE
    pending_total: int = 0
    is_locked: bool = False

    def __post_init__(self) -> None:
        if self.pending_total < 0:
            raise ValueError("pending_total cannot be negative")
        if (self.pending_kind is StackKind.NONE) != (self.pending_total == 0):
            raise ValueError("pending_total must be nonzero exactly while a chain is pending")

    @property
    def is_idle(self) -> bool:
        return self.pending_kind is StackKind.NONE

    @property
    def is_accumulating(self) -> bool:
        return not self.is_idle

    def __str__(self) -> str:
        if self.is_idle:
            return "no pending draws"
        lock = ", locked" if self.is_locked else ""
        return f"{self.pending_total} pending ({self.pending_kind.value}{lock})"


IDLE = StackState()


def push_draw_two(state: StackState) -> StackState:
    """Add a Draw Two to the chain. Rejected once a Wild Draw Four is in it."""
    if state.is_locked or state.pending_kind is StackKind.DRAW_FOUR:
        raise InvalidStack("A Draw Two cannot be stacked on a Wild Draw Four")
    return StackState(StackKind.DRAW_TWO, state.pending_total + 2, False)


def push_draw_four(state: StackState) -> StackState:
    """Add a Wild Draw Four to the chain, locking it if it was a Draw Two chain."""
    locked = state.is_locked or state.pending_kind is StackKind.DRAW_TWO
    return StackState(StackKind.DRAW_FOUR, state.pending_total + 4, locked)


def settle(state: StackState) -> Tuple[StackState, int]:
    """Resolve the chain: return the idle state and how many cards must be drawn."""
    return IDLE, state.pending_total


def is_stacking_card(card: Card) -> bool:
    return card.kind in (Kind.DRAW_TWO, Kind.WILD_DRAW_FOUR)


def can_stack(card: Card, state: StackState) -> bool:
    """Whether playing card would extend the current chain."""
    if state.is_idle:
        return False
    if card.kind is Kind.WILD_DRAW_FOUR:
        return True
    if card.kind is Kind.DRAW_TWO:
        return not state.is_locked and state.pending_kind is StackKind.DRAW_TWO
    return False
