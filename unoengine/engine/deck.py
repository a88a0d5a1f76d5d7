"""Deck creation, shuffling, and the draw/discard piles."""

import logging
from typing import List, Optional

from unoengine.engine.card import ACTION_KINDS, Card, Color
from unoengine.engine.errors import DeckExhausted, UnresolvedWildError
from unoengine.engine.random_source import RandomSource

logger = logging.getLogger(__name__)

DECK_SIZE = 108


def build_standard_deck() -> List[Card]:
    """Create a standard 108-card UNO deck, unshuffled.

    - 4 colors x (one 0, two each of 1-9): 76 cards
    - 4 colors x two each of Skip, Reverse, Draw Two: 24 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    """
    cards: List[Card] = []

    for color in Color:
        cards.append(Card.number_card(color, 0))
        for number in range(1, 10):
            cards.append(Card.number_card(color, number))
            cards.append(Card.number_card(color, number))
        for kind in ACTION_KINDS:
            cards.append(Card(color=color, kind=kind))
            cards.append(Card(color=color, kind=kind))

    for _ in range(4):
        cards.append(Card.wild())
        cards.append(Card.wild(draw_four=True))

    return cards


def shuffle(cards: List[Card], rng: RandomSource) -> List[Card]:
    """Shuffle cards in place and return them."""
    rng.shuffle(cards)
    return cards


class Deck:
    """Draw pile plus discard pile. The last element of each list is its top."""

    def __init__(
        self,
        rng: RandomSource,
        draw_pile: Optional[List[Card]] = None,
        discard_pile: Optional[List[Card]] = None,
    ):
        self._rng = rng
        self.draw_pile: List[Card] = list(draw_pile) if draw_pile is not None else build_standard_deck()
        self.discard_pile: List[Card] = list(discard_pile or [])
        self.reshuffles = 0

    def __len__(self) -> int:
        return len(self.draw_pile)

    @property
    def top(self) -> Optional[Card]:
        """The active card, or None before the first discard."""
        return self.discard_pile[-1] if self.discard_pile else None

    @property
    def available(self) -> int:
        """Cards a draw can still reach: the draw pile plus all but the top discard."""
        return len(self.draw_pile) + max(len(self.discard_pile) - 1, 0)

    def shuffle(self) -> None:
        shuffle(self.draw_pile, self._rng)

    def draw(self, n: int = 1) -> List[Card]:
        """Remove and return the top n cards.

        Refills from the discard pile (keeping its top card) when the draw pile is
        short. Raises DeckExhausted, without moving anything, if both piles
        together hold fewer than n reachable cards.
        """
        if n < 0:
            raise ValueError(f"Cannot draw a negative number of cards: {n}")
        if n > self.available:
            raise DeckExhausted(requested=n, available=self.available)
        if len(self.draw_pile) < n:
            self._recycle_discards()
        drawn = [self.draw_pile.pop() for _ in range(n)]
        return drawn

    def discard(self, card: Card) -> None:
        """Put a card on top of the discard pile, making it the active card."""
        if not card.is_resolved:
            raise UnresolvedWildError(f"{card} must have a chosen color before it is discarded")
        self.discard_pile.append(card)

    def _recycle_discards(self) -> None:
        top = self.discard_pile.pop()
        recycled = [card.as_held() for card in self.discard_pile]
        self.draw_pile = recycled + self.draw_pile
        self._rng.shuffle(self.draw_pile)
        self.discard_pile = [top]
        self.reshuffles += 1
        logger.info("Draw pile low, reshuffled %d discards into %d cards", len(recycled), len(self.draw_pile))
