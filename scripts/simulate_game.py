"""Simulate a game with random agents, printing each move as it happens."""

import logging

from unoengine.agents.random_agent import RandomAgent
from unoengine.engine import Action, PlayerView
from unoengine.orchestration.game_runner import GameRunner


class VerboseRandomAgent(RandomAgent):
    def get_action(self, view: PlayerView, actions: list[Action], player_id: str) -> Action | None:
        # Log the last move from history to see the game progress
        if view.history:
            print(f"> {view.history[-1]}")
        return super().get_action(view, actions, player_id)


def main():
    logging.basicConfig(level=logging.INFO)
    agents = {
        f"p{i}": VerboseRandomAgent(f"Bot{i}", seed=i)
        for i in range(1, 5)
    }

    runner = GameRunner(agents, seed=42)
    result = runner.run()

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")
    if result.aborted:
        print(f"Aborted: {result.aborted}")


if __name__ == "__main__":
    main()
