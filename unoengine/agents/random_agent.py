"""Random agent - picks uniformly among legal plays, drawing only when it must."""

import random
from typing import Optional

from unoengine.engine import Action, PlayerView
from unoengine.engine.rules import PlayCard


class RandomAgent:
    """Baseline agent for soak simulations. Makes no attempt to play well."""

    def __init__(self, name: str = "random", seed: Optional[int] = None):
        self._name = name
        self._rng = random.Random(seed)

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
        # Prefer playing over drawing to make game progress
        play_actions = [a for a in legal_actions if isinstance(a, PlayCard)]
        if play_actions:
            return self._rng.choice(play_actions)
        return self._rng.choice(legal_actions)
