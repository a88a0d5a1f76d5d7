"""Card, Color and Kind types for UNO."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, Optional


class Color(str, Enum):
    """Card colors."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"

    def __str__(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Parse a color name, ignoring case and surrounding whitespace."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ValueError(f"{text!r} is not an UNO standard color") from None


class Kind(str, Enum):
    """Card kinds."""

    NUMBER = "number"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"
    WILD = "wild"
    WILD_DRAW_FOUR = "wild_draw_four"


WILD_KINDS = frozenset({Kind.WILD, Kind.WILD_DRAW_FOUR})
ACTION_KINDS = (Kind.SKIP, Kind.REVERSE, Kind.DRAW_TWO)

_COLOR_ORDER = {color: i for i, color in enumerate(Color)}
_KIND_ORDER = {kind: i for i, kind in enumerate(Kind)}


@dataclass(frozen=True)
class Card:
    """A UNO card.

    Number cards carry a color and a number 0-9. Skip, Reverse and Draw Two carry
    a color only. Wild and Wild Draw Four have color=None in hand and pick up the
    chosen color when they are played.
    """

    color: Optional[Color]
    kind: Kind
    number: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is Kind.NUMBER:
            if self.number is None or not 0 <= self.number <= 9:
                raise ValueError(f"Number cards need a number 0-9, got {self.number!r}")
        elif self.number is not None:
            raise ValueError(f"{self.kind.value} cards cannot carry a number")
        if self.kind not in WILD_KINDS and self.color is None:
            raise ValueError("Non-wild cards must have a color")

    @classmethod
    def number_card(cls, color: Color, number: int) -> "Card":
        return cls(color=color, kind=Kind.NUMBER, number=number)

    @classmethod
    def wild(cls, draw_four: bool = False) -> "Card":
        return cls(color=None, kind=Kind.WILD_DRAW_FOUR if draw_four else Kind.WILD)

    @property
    def is_wild(self) -> bool:
        return self.kind in WILD_KINDS

    @property
    def is_resolved(self) -> bool:
        """True once the card has a color (always true for non-wilds)."""
        return self.color is not None

    def with_color(self, color: Optional[Color]) -> "Card":
        """Return this wild with a chosen color attached (or cleared with None)."""
        if not self.is_wild:
            raise ValueError(f"Only wild cards can change color, not {self}")
        return replace(self, color=color)

    def as_held(self) -> "Card":
        """The card as it sits in a hand: wilds lose any chosen color."""
        return self.with_color(None) if self.is_wild else self

    def sort_key(self) -> tuple:
        color_rank = _COLOR_ORDER[self.color] if self.color is not None else len(_COLOR_ORDER)
        return (color_rank, _KIND_ORDER[self.kind], self.number if self.number is not None else -1)

    def __str__(self) -> str:
        color = str(self.color) if self.color is not None else "None"
        if self.kind is Kind.WILD_DRAW_FOUR:
            return f"Wild Draw 4 ({color})" if self.color else "Wild Draw 4"
        if self.kind is Kind.WILD:
            return f"Wild ({color})" if self.color else "Wild"
        if self.kind is Kind.DRAW_TWO:
            return f"{color} Draw 2"
        if self.kind is Kind.SKIP:
            return f"{color} Skip"
        if self.kind is Kind.REVERSE:
            return f"{color} Reverse"
        return f"{color} {self.number}"


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Return cards in display order: by color, then kind, then number."""
    return sorted(cards, key=Card.sort_key)
