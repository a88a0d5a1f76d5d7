"""Game engine for UNO."""

from unoengine.engine.card import Card, Color, Kind, sort_cards
from unoengine.engine.config import GameConfig
from unoengine.engine.deck import DECK_SIZE, Deck, build_standard_deck, shuffle
from unoengine.engine.errors import (
    CardNotInHand,
    ChoiceError,
    ColorChoiceRequired,
    DeckExhausted,
    GameOver,
    IllegalPlay,
    InvalidColor,
    InvalidPlayerCount,
    InvalidStack,
    NotYourTurn,
    PlayError,
    SetupError,
    UnexpectedColorChoice,
    UnknownPlayer,
    UnoError,
    UnresolvedWildError,
)
from unoengine.engine.game import (
    attempt_draw,
    attempt_play,
    choose_color,
    game_status,
    get_legal_actions,
    new_game,
    view_hand,
)
from unoengine.engine.game_state import (
    Aborted,
    EventKind,
    Game,
    GameEvent,
    GameStatus,
    InProgress,
    Player,
    PlayerView,
    PlayOutcome,
    Won,
)
from unoengine.engine.random_source import RandomSource, SeededRandom, XorShift64
from unoengine.engine.rules import (
    Action,
    DrawCard,
    EffectResult,
    PlayCard,
    apply_effects,
    is_legal,
    resolve_color,
)
from unoengine.engine.stacking import StackKind, StackState
from unoengine.engine.turns import Direction, TurnState

__all__ = [
    "Card",
    "Color",
    "Kind",
    "sort_cards",
    "GameConfig",
    "DECK_SIZE",
    "Deck",
    "build_standard_deck",
    "shuffle",
    "UnoError",
    "SetupError",
    "InvalidPlayerCount",
    "PlayError",
    "NotYourTurn",
    "UnknownPlayer",
    "CardNotInHand",
    "IllegalPlay",
    "InvalidStack",
    "ColorChoiceRequired",
    "GameOver",
    "ChoiceError",
    "UnexpectedColorChoice",
    "InvalidColor",
    "DeckExhausted",
    "UnresolvedWildError",
    "new_game",
    "attempt_play",
    "choose_color",
    "attempt_draw",
    "view_hand",
    "game_status",
    "get_legal_actions",
    "Game",
    "Player",
    "PlayerView",
    "PlayOutcome",
    "GameEvent",
    "EventKind",
    "GameStatus",
    "InProgress",
    "Won",
    "Aborted",
    "RandomSource",
    "SeededRandom",
    "XorShift64",
    "Action",
    "PlayCard",
    "DrawCard",
    "EffectResult",
    "is_legal",
    "resolve_color",
    "apply_effects",
    "StackKind",
    "StackState",
    "Direction",
    "TurnState",
]
