"""Game state for UNO."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from unoengine.engine.card import Card
from unoengine.engine.config import GameConfig
from unoengine.engine.deck import Deck
from unoengine.engine.errors import UnknownPlayer
from unoengine.engine.random_source import RandomSource
from unoengine.engine.stacking import IDLE, StackState
from unoengine.engine.turns import Direction, TurnState


@dataclass
class Player:
    id: str
    hand: List[Card] = field(default_factory=list)
    active: bool = True


class EventKind(str, Enum):
    CARD_PLAYED = "card_played"
    COLOR_CHOSEN = "color_chosen"
    CARDS_DRAWN = "cards_drawn"
    FORCED_DRAW = "forced_draw"
    SKIPPED = "skipped"
    DIRECTION_REVERSED = "direction_reversed"
    UNO = "uno"
    PLAYER_FINISHED = "player_finished"
    WON = "won"
    DECK_RESHUFFLED = "deck_reshuffled"
    DECK_EXHAUSTED = "deck_exhausted"


@dataclass(frozen=True)
class GameEvent:
    kind: EventKind
    player_id: Optional[str] = None
    cards: tuple[Card, ...] = ()
    count: int = 0


@dataclass(frozen=True)
class InProgress:
    current_player_id: str
    direction: Direction
    stack: StackState


@dataclass(frozen=True)
class Won:
    player_id: str


@dataclass(frozen=True)
class Aborted:
    reason: str


GameStatus = Union[InProgress, Won, Aborted]


@dataclass
class PlayOutcome:
    """What a committed (or staged) play did."""

    card: Card
    awaiting_color: bool = False
    next_player: Optional[str] = None
    skipped_player: Optional[str] = None
    uno: bool = False
    finished: bool = False
    winner: Optional[str] = None
    forced_draw: List[Card] = field(default_factory=list)


@dataclass
class Game:
    """Mutable UNO game aggregate.

    Drive it through the operations in unoengine.engine.game; reading fields
    directly is fine, writing them is not.
    """

    players: List[Player]
    deck: Deck
    turn: TurnState
    rng: RandomSource
    config: GameConfig = field(default_factory=GameConfig)
    stack: StackState = IDLE
    staged_wild: Optional[Card] = None  # wild waiting on choose_color
    winner: Optional[str] = None
    aborted: Optional[str] = None
    finishers: List[str] = field(default_factory=list)
    history: List[str] = field(default_factory=list)
    events: List[GameEvent] = field(default_factory=list)

    @property
    def is_over(self) -> bool:
        return self.winner is not None or self.aborted is not None

    @property
    def player_order(self) -> tuple[str, ...]:
        return tuple(p.id for p in self.players)

    @property
    def current_player(self) -> Player:
        return self.players[self.turn.current_player_index]

    @property
    def active_flags(self) -> List[bool]:
        return [p.active for p in self.players]

    @property
    def active_count(self) -> int:
        return sum(self.active_flags)

    def top_discard(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.deck.top

    def player(self, player_id: str) -> Player:
        for p in self.players:
            if p.id == player_id:
                return p
        raise UnknownPlayer(f"No player with id {player_id!r}")

    def seat_of(self, player_id: str) -> int:
        return self.players.index(self.player(player_id))

    def card_count(self) -> int:
        """Cards across the draw pile, discard pile and every hand."""
        return len(self.deck.draw_pile) + len(self.deck.discard_pile) + sum(len(p.hand) for p in self.players)

    def record(self, event: GameEvent, line: Optional[str] = None) -> None:
        self.events.append(event)
        if line:
            self.history.append(line)


@dataclass
class PlayerView:
    """Filtered game state visible to a single player.

    Contains only that player's hand and public info.
    """

    my_hand: List[Card]
    top_discard: Optional[Card]
    current_player: str
    direction: Direction
    stack: StackState
    awaiting_color: bool
    winner: Optional[str]
    player_order: tuple[str, ...]
    num_cards_per_player: Dict[str, int]
    history: List[str]  # Recent game events

    @classmethod
    def from_game(cls, game: Game, player_id: str) -> "PlayerView":
        """Create a player view from the full game, hiding other players' hands."""
        return cls(
            my_hand=list(game.player(player_id).hand),
            top_discard=game.top_discard(),
            current_player=game.current_player.id,
            direction=game.turn.direction,
            stack=game.stack,
            awaiting_color=game.staged_wild is not None,
            winner=game.winner,
            player_order=game.player_order,
            num_cards_per_player={p.id: len(p.hand) for p in game.players},
            history=list(game.history[-10:]),  # Last 10 events
        )
