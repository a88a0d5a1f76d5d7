"""Simulation - run many games and aggregate results."""

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Optional

from unoengine.engine import GameConfig
from unoengine.orchestration.game_runner import GameRunner


@dataclass
class SimulationResult:
    wins: dict[str, int] = field(default_factory=dict)
    aborted: int = 0
    unfinished: int = 0
    total_turns: int = 0

    @property
    def games(self) -> int:
        return sum(self.wins.values()) + self.aborted + self.unfinished


def run_simulation(
    agents: dict[str, Any],
    num_games: int = 100,
    seed: Optional[int] = None,
    config: Optional[GameConfig] = None,
) -> SimulationResult:
    """Play num_games games between the same agents.

    Seating alternates between the given order and its reverse so nobody always
    moves first. Each game gets its own seed drawn from seed.
    """
    player_ids = list(agents.keys())
    wins: Counter[str] = Counter()
    result = SimulationResult()

    rng = random.Random(seed)
    for g in range(num_games):
        order = player_ids if g % 2 == 0 else list(reversed(player_ids))
        ordered_agents = {pid: agents[pid] for pid in order}
        runner = GameRunner(ordered_agents, seed=rng.randint(0, 2**31 - 1), config=config)
        game_result = runner.run()
        result.total_turns += game_result.num_turns
        if game_result.winner:
            wins[game_result.winner] += 1
        elif game_result.aborted:
            result.aborted += 1
        else:
            result.unfinished += 1

    result.wins = dict(wins)
    return result
