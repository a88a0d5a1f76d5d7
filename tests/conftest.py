"""Shared fixtures: build games with hand-picked hands and piles."""

from collections import Counter

import pytest

from unoengine.engine import (
    Card,
    Color,
    Deck,
    Direction,
    Game,
    GameConfig,
    Kind,
    Player,
    SeededRandom,
    TurnState,
    build_standard_deck,
)

R, Y, G, B = Color.RED, Color.YELLOW, Color.GREEN, Color.BLUE


def num(color: Color, n: int) -> Card:
    return Card.number_card(color, n)


def skip(color: Color) -> Card:
    return Card(color, Kind.SKIP)


def reverse(color: Color) -> Card:
    return Card(color, Kind.REVERSE)


def draw_two(color: Color) -> Card:
    return Card(color, Kind.DRAW_TWO)


WILD = Card.wild()
WILD4 = Card.wild(draw_four=True)


@pytest.fixture
def make_game():
    """Return a builder for a game in a chosen position.

    Unless draw_pile is given, the draw pile holds every card of a standard deck
    not already placed, so the game still adds up to 108 cards.
    """

    def build(hands, top, *, draw_pile=None, discard=None, config=None, seed=0, current=0):
        rng = SeededRandom(seed)
        placed = [c.as_held() for hand in hands for c in hand] + [c.as_held() for c in (discard or [])] + [top.as_held()]
        if draw_pile is None:
            remaining = Counter(build_standard_deck())
            remaining.subtract(placed)
            assert all(v >= 0 for v in remaining.values()), "scenario uses more copies than a deck has"
            draw_pile = list(remaining.elements())
            rng.shuffle(draw_pile)
        players = [Player(id=f"p{i}", hand=list(hand)) for i, hand in enumerate(hands)]
        deck = Deck(rng, draw_pile=draw_pile, discard_pile=list(discard or []) + [top])
        return Game(
            players=players,
            deck=deck,
            turn=TurnState(current_player_index=current, direction=Direction.CLOCKWISE, player_count=len(players)),
            rng=rng,
            config=config or GameConfig(),
        )

    return build
