"""Game configuration."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from unoengine.engine.deck import DECK_SIZE

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class GameConfig:
    """House rules for a game.

    hand_size: cards dealt to each player.
    draw_ends_turn: when False a voluntary draw keeps the turn, so the player may
        draw again or play.
    play_until_last: when True, players who empty their hand drop out and the
        game continues until only one player holds cards.
    """

    hand_size: int = 7
    draw_ends_turn: bool = True
    play_until_last: bool = False

    def __post_init__(self) -> None:
        if self.hand_size < 1:
            raise ValueError(f"hand_size must be at least 1, got {self.hand_size}")

    @property
    def max_players(self) -> int:
        # Every hand is dealt from one deck and one card is flipped to start.
        return (DECK_SIZE - 1) // self.hand_size

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """Build a config from UNO_* environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            hand_size=_int(env, "UNO_HAND_SIZE", defaults.hand_size),
            draw_ends_turn=_bool(env, "UNO_DRAW_ENDS_TURN", defaults.draw_ends_turn),
            play_until_last=_bool(env, "UNO_PLAY_UNTIL_LAST", defaults.play_until_last),
        )


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {raw!r}")
