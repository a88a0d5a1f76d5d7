"""Game operations: setup, playing, drawing, choosing colors, and status."""

import logging
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple, Union

from unoengine.engine.card import Card, Color, Kind
from unoengine.engine.config import GameConfig
from unoengine.engine.deck import Deck
from unoengine.engine.errors import (
    CardNotInHand,
    ColorChoiceRequired,
    DeckExhausted,
    GameOver,
    IllegalPlay,
    InvalidColor,
    InvalidPlayerCount,
    NotYourTurn,
    UnexpectedColorChoice,
)
from unoengine.engine.game_state import (
    Aborted,
    EventKind,
    Game,
    GameEvent,
    GameStatus,
    InProgress,
    Player,
    PlayOutcome,
    Won,
)
from unoengine.engine.random_source import RandomSource, SeededRandom
from unoengine.engine.rules import (
    Action,
    DrawCard,
    EffectResult,
    PlayCard,
    apply_effects,
    is_legal,
    resolve_color,
)
from unoengine.engine.stacking import IDLE, can_stack, settle
from unoengine.engine.turns import Direction, TurnState

logger = logging.getLogger(__name__)

ColorLike = Union[Color, str, None]


def new_game(
    player_count: int,
    *,
    rng: Optional[RandomSource] = None,
    config: Optional[GameConfig] = None,
    player_ids: Optional[Sequence[str]] = None,
) -> Game:
    """Create a game: shuffle, deal each player a hand, and flip the first card.

    A wild flipped as the first card gets a random color. The first card's action
    is not applied.
    """
    config = config or GameConfig()
    if player_count < 2:
        raise InvalidPlayerCount(f"UNO needs at least 2 players, got {player_count}")
    if player_count > config.max_players:
        raise InvalidPlayerCount(
            f"{player_count} players cannot each be dealt {config.hand_size} cards "
            f"(max {config.max_players})"
        )
    ids = [f"player_{i}" for i in range(player_count)] if player_ids is None else list(player_ids)
    if len(ids) != player_count:
        raise InvalidPlayerCount(f"Got {len(ids)} player ids for {player_count} players")
    if len(set(ids)) != len(ids):
        raise InvalidPlayerCount(f"Player ids must be unique: {ids}")

    rng = rng or SeededRandom()
    deck = Deck(rng)
    deck.shuffle()

    players = [Player(id=pid) for pid in ids]
    for _ in range(config.hand_size):
        for player in players:
            player.hand.extend(deck.draw(1))

    first = deck.draw(1)[0]
    if first.is_wild:
        first = first.with_color(list(Color)[rng.randrange(len(Color))])
    deck.discard(first)

    game = Game(
        players=players,
        deck=deck,
        turn=TurnState(current_player_index=0, direction=Direction.CLOCKWISE, player_count=player_count),
        rng=rng,
        config=config,
    )
    logger.info("New game: %d players, first card %s", player_count, first)
    return game


def attempt_play(
    game: Game,
    player_id: str,
    card: Card,
    color: ColorLike = None,
) -> PlayOutcome:
    """Play a card from player_id's hand.

    A wild played without a color is staged: it stays in the hand, the outcome has
    awaiting_color set, and the turn waits for choose_color. Passing color (or a
    wild that already carries one) plays it in one step.

    Raises:
        GameOver, UnknownPlayer, NotYourTurn, ColorChoiceRequired, CardNotInHand,
        IllegalPlay, UnexpectedColorChoice, InvalidColor, InvalidStack,
        DeckExhausted. Nothing changes when an error is raised.
    """
    player = _acting_player(game, player_id)
    if game.staged_wild is not None:
        raise ColorChoiceRequired(f"Choose a color for {game.staged_wild} first")

    held = card.as_held()
    if held not in player.hand:
        raise CardNotInHand(f"{card} is not in {player_id}'s hand")
    top = game.top_discard()
    if not is_legal(held, top):
        raise IllegalPlay(f"{held} cannot be played on {top}")

    if not held.is_wild:
        if color is not None:
            raise UnexpectedColorChoice(f"{held} is not a wild card; no color to choose")
        return _commit_play(game, player, held)

    chosen = color if color is not None else card.color
    if chosen is None:
        # Any color will do: the checks only depend on the kind.
        _check_play(game, player, held.with_color(Color.RED))
        game.staged_wild = held
        logger.debug("%s staged %s, waiting for a color", player_id, held)
        return PlayOutcome(card=held, awaiting_color=True, next_player=player_id)
    return _commit_play(game, player, resolve_color(held, _coerce_color(chosen)))


def choose_color(game: Game, player_id: str, color: ColorLike) -> PlayOutcome:
    """Pick the color for a staged wild and finish the play."""
    if game.is_over:
        raise GameOver("The game is over")
    player = game.player(player_id)
    if game.staged_wild is None:
        raise UnexpectedColorChoice("There is no wild card waiting for a color")
    if game.current_player.id != player_id:
        raise NotYourTurn(f"{game.current_player.id} is choosing a color, not {player_id}")
    return _commit_play(game, player, resolve_color(game.staged_wild, _coerce_color(color)))


def attempt_draw(game: Game, player_id: str) -> List[Card]:
    """Draw one card, or take the whole pending penalty when a chain is active.

    Taking a penalty always ends the turn. A voluntary draw ends it unless the
    game is configured with draw_ends_turn=False.
    """
    player = _acting_player(game, player_id)
    if game.staged_wild is not None:
        raise ColorChoiceRequired(f"Choose a color for {game.staged_wild} first")

    if game.stack.is_accumulating:
        _, owed = settle(game.stack)
        drawn = _draw_into(game, player, owed)
        game.stack = IDLE
        game.record(
            GameEvent(EventKind.FORCED_DRAW, player_id, tuple(drawn), len(drawn)),
            f"{player_id} drew {len(drawn)} cards (penalty)",
        )
        logger.info("%s took a %d card penalty", player_id, len(drawn))
        _advance(game)
        return drawn

    drawn = _draw_into(game, player, 1)
    game.record(GameEvent(EventKind.CARDS_DRAWN, player_id, tuple(drawn), 1), f"{player_id} drew a card")
    logger.debug("%s drew %s", player_id, drawn[0])
    if game.config.draw_ends_turn:
        _advance(game)
    return drawn


def view_hand(game: Game, player_id: str) -> List[Card]:
    """Return a copy of a player's hand in the order the cards arrived."""
    return list(game.player(player_id).hand)


def game_status(game: Game) -> GameStatus:
    if game.aborted is not None:
        return Aborted(reason=game.aborted)
    if game.winner is not None:
        return Won(player_id=game.winner)
    return InProgress(
        current_player_id=game.current_player.id,
        direction=game.turn.direction,
        stack=game.stack,
    )


def get_legal_actions(game: Game, player_id: str) -> List[Action]:
    """Return all actions the current player may submit.

    Empty when the game is over, when it is not player_id's turn, or while a
    staged wild waits for choose_color.
    """
    if game.is_over or game.current_player.id != player_id or game.staged_wild is not None:
        return []

    top = game.top_discard()
    actions: List[Action] = []
    seen = set()
    for card in game.current_player.hand:
        if card in seen:
            continue
        seen.add(card)
        if not is_legal(card, top):
            continue
        if card.kind is Kind.DRAW_TWO and game.stack.is_accumulating and not can_stack(card, game.stack):
            continue
        if card.is_wild:
            actions.extend(PlayCard(card=card, chosen_color=color) for color in Color)
        else:
            actions.append(PlayCard(card=card))

    actions.append(DrawCard())
    return actions


def _acting_player(game: Game, player_id: str) -> Player:
    if game.is_over:
        raise GameOver("The game is over")
    player = game.player(player_id)
    if game.current_player.id != player_id:
        raise NotYourTurn(f"It is {game.current_player.id}'s turn, not {player_id}'s")
    return player


def _coerce_color(color: ColorLike) -> Color:
    if isinstance(color, Color):
        return color
    if isinstance(color, str):
        try:
            return Color.parse(color)
        except ValueError as e:
            raise InvalidColor(str(e)) from None
    raise InvalidColor(f"Wild cards need a real color, got {color!r}")


def _check_play(game: Game, player: Player, played: Card) -> Tuple[EffectResult, int]:
    """Validate a play without changing anything.

    Returns the card's effect and the penalty the player still owes afterwards.
    A play that empties the hand owes nothing: it wins, or in play_until_last
    mode the chain dies with the finisher.
    """
    stack_before = game.stack
    effect = apply_effects(played, game.turn, game.stack, game.active_count)
    owed = stack_before.pending_total if stack_before.is_accumulating and not can_stack(played, stack_before) else 0
    if len(player.hand) == 1:
        owed = 0
    if owed and owed > game.deck.available + 1:
        # The played card itself becomes drawable once it is on the discard pile.
        raise DeckExhausted(requested=owed, available=game.deck.available + 1)
    return effect, owed


def _commit_play(game: Game, player: Player, played: Card) -> PlayOutcome:
    effect, owed = _check_play(game, player, played)

    pid = player.id
    player.hand.remove(played.as_held())
    game.deck.discard(played)
    game.staged_wild = None
    game.record(GameEvent(EventKind.CARD_PLAYED, pid, (played,), 1), f"{pid} played {played}")
    if played.is_wild:
        game.record(GameEvent(EventKind.COLOR_CHOSEN, pid, (played,)))
    logger.debug("%s played %s", pid, played)

    outcome = PlayOutcome(card=played)

    if not player.hand:
        outcome.finished = True
        if _finish(game, player):
            outcome.winner = game.winner
            return outcome
        if game.stack.is_accumulating and not can_stack(played, game.stack):
            # A finished player leaves the chain unanswered; it dies with them.
            effect = replace(effect, stack_state=IDLE)
    elif len(player.hand) == 1:
        outcome.uno = True
        game.record(GameEvent(EventKind.UNO, pid), f"{pid} called UNO")

    game.turn = effect.turn_state
    game.stack = effect.stack_state
    if effect.reversed:
        game.record(GameEvent(EventKind.DIRECTION_REVERSED, pid))

    if owed:
        drawn = _draw_into(game, player, owed)
        game.stack = IDLE
        outcome.forced_draw = drawn
        game.record(
            GameEvent(EventKind.FORCED_DRAW, pid, tuple(drawn), len(drawn)),
            f"{pid} drew {len(drawn)} cards (penalty)",
        )
        logger.info("%s did not stack and took a %d card penalty", pid, len(drawn))

    outcome.skipped_player = _advance(game, skip=effect.skip_next)
    outcome.next_player = game.current_player.id
    return outcome


def _finish(game: Game, player: Player) -> bool:
    """Record that player emptied their hand. Returns True if the game is now over."""
    game.finishers.append(player.id)
    if game.config.play_until_last:
        player.active = False
        game.record(GameEvent(EventKind.PLAYER_FINISHED, player.id), f"{player.id} finished #{len(game.finishers)}")
        if game.active_count > 1:
            logger.info("%s finished in place %d", player.id, len(game.finishers))
            return False

    game.winner = game.finishers[0]
    game.record(GameEvent(EventKind.WON, game.winner), f"{game.winner} WON!")
    logger.info("%s won the game", game.winner)
    return True


def _advance(game: Game, skip: bool = False) -> Optional[str]:
    """Move the turn on, returning the id of the skipped player if any."""
    flags = game.active_flags
    skipped = None
    if skip:
        skipped = game.players[game.turn.next_index(flags)].id
        game.record(GameEvent(EventKind.SKIPPED, skipped), f"{skipped} was skipped")
    game.turn = game.turn.advance(flags, skip=skip)
    return skipped


def _draw_into(game: Game, player: Player, n: int) -> List[Card]:
    reshuffles = game.deck.reshuffles
    try:
        drawn = game.deck.draw(n)
    except DeckExhausted as e:
        if e.available == 0:
            _abort(game, str(e))
        raise
    if game.deck.reshuffles != reshuffles:
        game.record(GameEvent(EventKind.DECK_RESHUFFLED), "discard pile reshuffled into the deck")
    player.hand.extend(drawn)
    return drawn


def _abort(game: Game, reason: str) -> None:
    game.aborted = f"Deck exhausted: {reason}"
    game.record(GameEvent(EventKind.DECK_EXHAUSTED), game.aborted)
    logger.error("Game aborted: no cards left to draw (%s)", reason)
