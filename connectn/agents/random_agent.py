"""Random baseline agent."""

from __future__ import annotations

import random
from typing import Optional

from connectn.agents.base import Agent, check_tile
from connectn.engine import Board, Move, Tile, generate_valid_positions


class RandomAgent(Agent):
    def __init__(self, name: str, tile: Tile, seed: Optional[int] = None) -> None:
        self.name = name
        self.tile = check_tile(tile)
        self.rng = random.Random(seed)

    def next_move(self, board: Board) -> Move:
        positions = generate_valid_positions(board)
        if not positions:
            raise ValueError("no legal moves available")
        return Move(self.rng.choice(positions), self.tile)
