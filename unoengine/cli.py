"""CLI entry point."""

from __future__ import annotations

import logging
import os
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO game engine with draw-chain stacking")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _configure_logging(level: Optional[str]) -> None:
    level = (level or os.environ.get("UNO_LOG_LEVEL") or "WARNING").upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"Unknown log level: {level}. Use one of {', '.join(LOG_LEVELS)}.")
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _resolve_seed(seed: Optional[int]) -> Optional[int]:
    if seed is not None:
        return seed
    raw = os.environ.get("UNO_SEED")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise typer.BadParameter(f"UNO_SEED must be an integer, got {raw!r}") from None


def _load_config() -> "GameConfig":
    from unoengine.engine import GameConfig

    try:
        return GameConfig.from_env()
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None


def _check_players(players: int, config: "GameConfig") -> None:
    if not 2 <= players <= config.max_players:
        raise typer.BadParameter(f"--players must be between 2 and {config.max_players}")


@app.command()
def play(
    players: int = typer.Option(2, "--players", "-n", help="Number of hot-seat human players"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed (or UNO_SEED)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="DEBUG, INFO, WARNING or ERROR"),
) -> None:
    """Play a single hot-seat game in the terminal."""
    from unoengine.agents.human_agent import HumanAgent
    from unoengine.orchestration.game_runner import GameRunner

    _configure_logging(log_level)
    config = _load_config()
    _check_players(players, config)
    agent_map = {f"player_{i}": HumanAgent(name=f"Human_{i}") for i in range(players)}
    runner = GameRunner(agent_map, seed=_resolve_seed(seed), config=config)
    result = runner.run()
    if result.aborted:
        typer.echo(f"Game aborted: {result.aborted}")
    else:
        typer.echo(f"Winner: {result.winner or 'None (unfinished)'}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def simulate(
    players: int = typer.Option(4, "--players", "-n", help="Number of random-play seats"),
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed (or UNO_SEED)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="DEBUG, INFO, WARNING or ERROR"),
) -> None:
    """Run many games between random-play agents and report the results."""
    from unoengine.agents.random_agent import RandomAgent
    from unoengine.orchestration.simulation import run_simulation

    _configure_logging(log_level)
    config = _load_config()
    _check_players(players, config)
    seed = _resolve_seed(seed)
    agent_map = {
        f"player_{i}": RandomAgent(name=f"Random_{i}", seed=None if seed is None else seed + i)
        for i in range(players)
    }
    result = run_simulation(agent_map, num_games=games, seed=seed, config=config)
    typer.echo(f"Simulation results ({result.games} games):")
    for pid, w in sorted(result.wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  {pid}: {w} wins")
    typer.echo(f"  aborted: {result.aborted}")
    typer.echo(f"  unfinished: {result.unfinished}")


if __name__ == "__main__":
    app()
