"""Unit tests for game history logging."""

from conftest import B, G, R, WILD, draw_two, num
from unoengine.engine import (
    EventKind,
    PlayCard,
    SeededRandom,
    attempt_draw,
    attempt_play,
    get_legal_actions,
    new_game,
)


def test_history_initialization():
    game = new_game(2, rng=SeededRandom(0))
    assert len(game.history) == 0
    assert game.events == []


def test_history_records_play():
    # Find a deal where player_0 has something to play
    for seed in range(100):
        game = new_game(2, rng=SeededRandom(seed))
        actions = get_legal_actions(game, "player_0")
        play = next((a for a in actions if isinstance(a, PlayCard)), None)
        if play is not None:
            break
    assert play is not None

    attempt_play(game, "player_0", play.card, color=play.chosen_color)

    assert game.history[0].startswith("player_0 played")
    assert str(game.top_discard()) in game.history[0]


def test_history_records_draw():
    game = new_game(2, rng=SeededRandom(42))
    attempt_draw(game, "player_0")
    assert game.history[-1] == "player_0 drew a card"


def test_history_persists_across_turns(make_game):
    game = make_game([[draw_two(R), num(R, 9), num(G, 9)], [num(B, 5), num(G, 2)]], num(R, 1))

    attempt_play(game, "p0", draw_two(R))
    attempt_draw(game, "p1")

    assert game.history == ["p0 played Red Draw 2", "p1 drew 2 cards (penalty)"]


def test_wild_history_shows_chosen_color(make_game):
    game = make_game([[WILD, num(R, 9)], [num(B, 5)]], num(R, 1))
    attempt_play(game, "p0", WILD, color="green")
    assert game.history[0] == "p0 played Wild (Green)"
    kinds = [e.kind for e in game.events]
    assert kinds[:2] == [EventKind.CARD_PLAYED, EventKind.COLOR_CHOSEN]
