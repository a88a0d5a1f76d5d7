"""UNO rules: play legality, wild colors, and special-card effects."""

from dataclasses import dataclass
from typing import Optional, Union

from unoengine.engine.card import Card, Color, Kind
from unoengine.engine.errors import ColorChoiceRequired, InvalidColor
from unoengine.engine.stacking import StackState, push_draw_four, push_draw_two
from unoengine.engine.turns import TurnState


@dataclass(frozen=True)
class PlayCard:
    """Action: play a card. For wilds, chosen_color picks the new color."""

    card: Card
    chosen_color: Optional[Color] = None


@dataclass(frozen=True)
class DrawCard:
    """Action: draw a card, or take the pending penalty when a chain is active."""

    pass


Action = Union[PlayCard, DrawCard]


@dataclass(frozen=True)
class EffectResult:
    """Turn and stack state after a card's effect, before the turn advances."""

    turn_state: TurnState
    stack_state: StackState
    skip_next: bool = False
    reversed: bool = False


def is_legal(card: Card, active_card: Card) -> bool:
    """Check if a card can be played on the active card."""
    # Wilds can always be played
    if card.is_wild:
        return True
    if card.color == active_card.color:
        return True
    if card.kind is Kind.NUMBER:
        return active_card.kind is Kind.NUMBER and card.number == active_card.number
    return card.kind == active_card.kind


def resolve_color(card: Card, chosen_color: Optional[Color]) -> Card:
    """Attach the chosen color to a wild, producing the instance that gets discarded."""
    if not card.is_wild:
        raise ValueError(f"{card} is not a wild card")
    if not isinstance(chosen_color, Color):
        raise InvalidColor(f"Wild cards need one of {', '.join(str(c) for c in Color)}, got {chosen_color!r}")
    return card.with_color(chosen_color)


def apply_effects(
    card: Card,
    turn_state: TurnState,
    stack_state: StackState,
    active_players: Optional[int] = None,
) -> EffectResult:
    """Work out what playing card does to turn order and the draw chain.

    Pure: the inputs are left alone and a new EffectResult is returned.
    active_players defaults to every seat and decides whether Reverse acts as Skip.

    Raises:
        InvalidStack: a Draw Two on a chain that holds a Wild Draw Four.
        ColorChoiceRequired: a wild without a chosen color.
    """
    if active_players is None:
        active_players = turn_state.player_count

    match card.kind:
        case Kind.NUMBER:
            return EffectResult(turn_state, stack_state)
        case Kind.SKIP:
            return EffectResult(turn_state, stack_state, skip_next=True)
        case Kind.REVERSE:
            # With two players a Reverse hands the turn straight back, like a Skip.
            return EffectResult(
                turn_state.reversed(),
                stack_state,
                skip_next=active_players == 2,
                reversed=True,
            )
        case Kind.DRAW_TWO:
            return EffectResult(turn_state, push_draw_two(stack_state))
        case Kind.WILD:
            _require_color(card)
            return EffectResult(turn_state, stack_state)
        case Kind.WILD_DRAW_FOUR:
            _require_color(card)
            return EffectResult(turn_state, push_draw_four(stack_state))
        case _:
            raise ValueError(f"Unknown card kind: {card.kind}")


def _require_color(card: Card) -> None:
    if not card.is_resolved:
        raise ColorChoiceRequired(f"{card} needs a color before its effect resolves")
