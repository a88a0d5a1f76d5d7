"""Human agent - reads actions from terminal."""

from unoengine.engine import Action, PlayerView, sort_cards
from unoengine.engine.rules import DrawCard


def describe_action(action: Action) -> str:
    if isinstance(action, DrawCard):
        return "DRAW"
    extra = f" (choose color: {action.chosen_color})" if action.chosen_color else ""
    return f"PLAY {action.card}{extra}"


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_id: str,
    ) -> Action | None:
        if not legal_actions:
            return None

        print(f"\n--- {player_id}'s turn ({self._name}) ---")
        print("Your hand:", ", ".join(str(c) for c in sort_cards(player_view.my_hand)))
        print("Top discard:", player_view.top_discard)
        if player_view.stack.is_accumulating:
            print(f"Draw chain: {player_view.stack} - stack onto it or draw")
        print("\nLegal actions:")
        for i, a in enumerate(legal_actions):
            print(f"  {i}: {describe_action(a)}")

        while True:
            try:
                raw = input("Enter number: ").strip()
                idx = int(raw)
                if 0 <= idx < len(legal_actions):
                    return legal_actions[idx]
            except ValueError:
                pass
            print("Invalid. Try again.")
