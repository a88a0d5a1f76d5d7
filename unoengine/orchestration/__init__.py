"""Game orchestration."""

from unoengine.orchestration.game_runner import GameResult, GameRunner
from unoengine.orchestration.simulation import SimulationResult, run_simulation

__all__ = ["GameRunner", "GameResult", "run_simulation", "SimulationResult"]
