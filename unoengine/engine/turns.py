"""Turn order: current seat, direction, and advancing past skipped players."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Sequence


class Direction(int, Enum):
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = -1

    def flipped(self) -> "Direction":
        return Direction(-self.value)

    def __str__(self) -> str:
        return "clockwise" if self is Direction.CLOCKWISE else "counter-clockwise"


@dataclass(frozen=True)
class TurnState:
    current_player_index: int
    direction: Direction
    player_count: int

    def reversed(self) -> "TurnState":
        return replace(self, direction=self.direction.flipped())

    def next_index(self, active: Sequence[bool], skip: bool = False) -> int:
        """Seat of the next active player, stepping past one more if skip is set."""
        if len(active) != self.player_count:
            raise ValueError("active flags must cover every seat")
        if not any(active):
            raise ValueError("No active players left")
        steps = 2 if skip else 1
        idx = self.current_player_index
        for _ in range(steps):
            idx = _step(idx, self.direction, active)
        return idx

    def advance(self, active: Sequence[bool], skip: bool = False) -> "TurnState":
        return replace(self, current_player_index=self.next_index(active, skip))


def _step(idx: int, direction: Direction, active: Sequence[bool]) -> int:
    n = len(active)
    for _ in range(n):
        idx = (idx + direction.value) % n
        if active[idx]:
            return idx
    return idx
