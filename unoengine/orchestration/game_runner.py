"""Single game runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from unoengine.engine import (
    DeckExhausted,
    Game,
    GameConfig,
    PlayerView,
    SeededRandom,
    attempt_draw,
    attempt_play,
    get_legal_actions,
    new_game,
)
from unoengine.engine.rules import DrawCard

if TYPE_CHECKING:
    from unoengine.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[str]
    num_turns: int
    player_ids: tuple[str, ...]
    aborted: Optional[str] = None
    history: tuple[str, ...] = ()


class GameRunner:
    """Runs a single UNO game to completion."""

    def __init__(
        self,
        agents: dict[str, "AgentProtocol"],
        seed: Optional[int] = None,
        config: Optional[GameConfig] = None,
        max_turns: int = 1000,
    ):
        self._agents = agents
        self._seed = seed
        self._config = config
        self._max_turns = max_turns
        self.game: Optional[Game] = None

    def run(self) -> GameResult:
        """Run the game and return the result."""
        player_ids = list(self._agents.keys())
        game = new_game(
            len(player_ids),
            rng=SeededRandom(self._seed),
            config=self._config,
            player_ids=player_ids,
        )
        self.game = game
        num_turns = 0

        while not game.is_over and num_turns < self._max_turns:
            pid = game.current_player.id
            agent = self._agents[pid]
            legal = get_legal_actions(game, pid)
            if not legal:
                break

            player_view = PlayerView.from_game(game, pid)
            action = agent.get_action(player_view, legal, pid)

            if action is None:
                action = next((a for a in legal if isinstance(a, DrawCard)), legal[0])

            try:
                if isinstance(action, DrawCard):
                    attempt_draw(game, pid)
                else:
                    attempt_play(game, pid, action.card, color=action.chosen_color)
            except DeckExhausted as e:
                logger.warning("%s could not draw: %s", pid, e)
                break
            num_turns += 1

        if not game.is_over:
            logger.info("Game stopped after %d turns without a winner", num_turns)

        return GameResult(
            winner=game.winner,
            num_turns=num_turns,
            player_ids=tuple(player_ids),
            aborted=game.aborted,
            history=tuple(game.history),
        )
