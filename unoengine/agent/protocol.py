"""Agent protocol - interface that human and simulation agents implement."""

from typing import Protocol, runtime_checkable

from unoengine.engine import Action, PlayerView


@runtime_checkable
class AgentProtocol(Protocol):
    """Interface for UNO-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_id: str,
    ) -> Action | None:
        """Choose an action given the player view and legal actions.

        Args:
            player_view: Filtered view with only this player's hand and public info.
            legal_actions: List of valid actions to choose from. Wild cards appear
                once per color, so a chosen PlayCard always carries its color.
            player_id: This agent's player ID.

        Returns:
            One of the legal actions, or None to draw.
        """
        ...
