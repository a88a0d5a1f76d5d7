"""Errors raised by the UNO engine.

Every error a caller can trigger derives from UnoError. A failed operation never
changes the game.
"""


class UnoError(Exception):
    """Base class for engine errors."""


class SetupError(UnoError):
    """The game could not be created."""


class InvalidPlayerCount(SetupError):
    pass


class PlayError(UnoError):
    """An attempted play or draw was rejected."""


class NotYourTurn(PlayError):
    pass


class UnknownPlayer(PlayError):
    pass


class CardNotInHand(PlayError):
    pass


class IllegalPlay(PlayError):
    """The card matches neither color, number nor kind of the active card."""


class InvalidStack(PlayError):
    """A Draw Two was played onto a chain that already holds a Wild Draw Four."""


class ColorChoiceRequired(PlayError):
    """A staged wild is still waiting for its color."""


class GameOver(PlayError):
    """The game has already been won or aborted."""


class ChoiceError(UnoError):
    """A color choice was rejected."""


class UnexpectedColorChoice(ChoiceError):
    pass


class InvalidColor(ChoiceError):
    pass


class DeckExhausted(UnoError):
    """The draw and discard piles together cannot satisfy a draw."""

    def __init__(self, requested: int, available: int):
        super().__init__(f"Cannot draw {requested} card(s): only {available} available")
        self.requested = requested
        self.available = available


class UnresolvedWildError(ValueError):
    """A wild reached the discard pile without a chosen color.

    This is a programming error in the caller, not a rule violation.
    """
