"""Command-line entry point: play single games or agent-vs-agent series."""

from __future__ import annotations

from typing import Dict, Optional

import typer
from rich.console import Console
from rich.table import Table
from tqdm import trange

from connectn.agents import Agent, HumanAgent, MinimaxAgent, MonteCarloAgent, RandomAgent
from connectn.engine import Board, ConnectNConfig, Tile
from connectn.game import MAX_TURNS, Game

app = typer.Typer(no_args_is_help=True)
console = Console()

AGENT_KINDS = ("human", "minimax", "mcts", "random")


def _parse_column(raw: str) -> Optional[int]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def prompt_for_column(board: Board, name: str) -> int:
    """Ask for a column on the console. Legality is left to the game."""

    _, cols = board.shape
    while True:
        raw = console.input(f"What will be your move {name}? Column (0-{cols - 1}): ")
        col = _parse_column(raw)
        if col is None:
            console.print("Enter a column index.")
            continue
        return col


def build_agent(
    kind: str,
    tile: Tile,
    *,
    depth: int,
    simulations: int,
    exploration: float,
    seed: Optional[int],
    verbose: bool,
) -> Agent:
    side = tile.symbol
    agent_console = console if verbose else None
    if kind == "human":
        return HumanAgent(f"Human {side}", tile, prompt_for_column)
    if kind == "random":
        return RandomAgent(f"Random {side}", tile, seed=seed)
    if kind == "minimax":
        return MinimaxAgent(f"Minimax {side}", tile, depth=depth, console=agent_console)
    if kind == "mcts":
        return MonteCarloAgent(
            f"Monte Carlo {side}",
            tile,
            simulations=simulations,
            exploration=exploration,
            seed=seed,
            console=agent_console,
        )
    raise ValueError(f"unsupported agent kind: {kind}")


def _pick_seed(base: Optional[int], offset: int) -> Optional[int]:
    return None if base is None else base + offset


def _make_config(rows: int, cols: int, connect: int) -> ConnectNConfig:
    cfg = ConnectNConfig(rows=rows, cols=cols, n=connect)
    try:
        cfg.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return cfg


def _check_kind(kind: str, option: str) -> None:
    if kind not in AGENT_KINDS:
        raise typer.BadParameter(f"{option} must be one of {'|'.join(AGENT_KINDS)}")


@app.command()
def play(
    positive: str = typer.Option("human", help="Agent for X (moves first): human|minimax|mcts|random."),
    negative: str = typer.Option("mcts", help="Agent for O: human|minimax|mcts|random."),
    rows: int = typer.Option(6, help="Board rows."),
    cols: int = typer.Option(7, help="Board columns."),
    connect: int = typer.Option(4, help="Connection length N."),
    depth: int = typer.Option(5, help="Minimax search depth (plies)."),
    simulations: int = typer.Option(2000, help="MCTS simulations per move."),
    exploration: float = typer.Option(1.5, help="UCT exploration constant."),
    seed: Optional[int] = typer.Option(None, help="Base random seed for MCTS/random agents."),
    max_turns: int = typer.Option(MAX_TURNS, help="Safety cap on turns."),
    verbose: bool = typer.Option(False, "--verbose", help="Print search statistics.", is_flag=True),
    quiet: bool = typer.Option(False, "--quiet", help="Only print the result.", is_flag=True),
) -> None:
    _check_kind(positive, "positive")
    _check_kind(negative, "negative")
    cfg = _make_config(rows, cols, connect)

    common = dict(depth=depth, simulations=simulations, exploration=exploration, verbose=verbose)
    x_agent = build_agent(positive, Tile.POSITIVE, seed=_pick_seed(seed, 0), **common)
    o_agent = build_agent(negative, Tile.NEGATIVE, seed=_pick_seed(seed, 1), **common)

    game = Game(x_agent, o_agent, cfg, max_turns=max_turns, console=None if quiet else console)
    outcome = game.play()

    if quiet:
        if not outcome.is_over:
            console.print(f"result: unfinished after {outcome.turns} turns")
        elif outcome.is_draw:
            console.print("result: draw")
        else:
            winner = x_agent if outcome.winner == Tile.POSITIVE else o_agent
            console.print(f"result: {winner.name} wins in {len(outcome.moves)} moves")


@app.command()
def series(
    first: str = typer.Option("minimax", help="First agent: minimax|mcts|random."),
    second: str = typer.Option("mcts", help="Second agent: minimax|mcts|random."),
    games: int = typer.Option(10, help="Number of games; sides alternate every game."),
    rows: int = typer.Option(6, help="Board rows."),
    cols: int = typer.Option(7, help="Board columns."),
    connect: int = typer.Option(4, help="Connection length N."),
    depth: int = typer.Option(4, help="Minimax search depth (plies)."),
    simulations: int = typer.Option(500, help="MCTS simulations per move."),
    exploration: float = typer.Option(1.5, help="UCT exploration constant."),
    seed: int = typer.Option(0, help="Base random seed."),
    max_turns: int = typer.Option(MAX_TURNS, help="Safety cap on turns per game."),
) -> None:
    _check_kind(first, "first")
    _check_kind(second, "second")
    if "human" in (first, second):
        console.print("series only runs automated agents")
        raise typer.Exit(code=2)
    if games < 1:
        raise typer.BadParameter("games must be >= 1")
    cfg = _make_config(rows, cols, connect)

    tally: Dict[str, int] = {"first": 0, "second": 0, "draw": 0, "unfinished": 0}
    common = dict(depth=depth, simulations=simulations, exploration=exploration, verbose=False)

    for g in trange(games, desc="series", leave=False):
        first_is_x = g % 2 == 0
        first_tile = Tile.POSITIVE if first_is_x else Tile.NEGATIVE
        a = build_agent(first, first_tile, seed=seed + 2 * g, **common)
        b = build_agent(second, first_tile.enemy, seed=seed + 2 * g + 1, **common)
        x_agent, o_agent = (a, b) if first_is_x else (b, a)

        outcome = Game(x_agent, o_agent, cfg, max_turns=max_turns).play()
        if not outcome.is_over:
            tally["unfinished"] += 1
        elif outcome.is_draw:
            tally["draw"] += 1
        elif outcome.winner == first_tile:
            tally["first"] += 1
        else:
            tally["second"] += 1

    table = Table(title=f"{games} games on {rows}x{cols}, connect {connect}")
    table.add_column("agent")
    table.add_column("wins", justify="right")
    table.add_row(f"{first} (first)", str(tally["first"]))
    table.add_row(f"{second} (second)", str(tally["second"]))
    table.add_row("draws", str(tally["draw"]))
    if tally["unfinished"]:
        table.add_row("unfinished", str(tally["unfinished"]))
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
