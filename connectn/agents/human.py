"""Human-in-the-loop agent that defers input handling to a prompt function."""

from __future__ import annotations

from typing import Callable

from connectn.agents.base import Agent, check_tile
from connectn.engine import Board, Move, Tile, resolve_drop

PromptFn = Callable[[Board, str], int]


class HumanAgent(Agent):
    def __init__(self, name: str, tile: Tile, prompt_fn: PromptFn) -> None:
        self.name = name
        self.tile = check_tile(tile)
        self.prompt_fn = prompt_fn

    def next_move(self, board: Board) -> Move:
        # No legality check here: an unplayable column is handed to the game,
        # which rejects the placement.
        col = self.prompt_fn(board, self.name)
        return Move(resolve_drop(board, col), self.tile)
