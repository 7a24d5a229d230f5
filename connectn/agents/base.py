"""Abstract base class for Connect-N agents."""

from __future__ import annotations

import abc

from connectn.engine import Board, Move, Tile


class Agent(abc.ABC):
    name: str
    tile: Tile

    @abc.abstractmethod
    def next_move(self, board: Board) -> Move:
        """Pick a move for `self.tile`. Implementations must not mutate `board`."""
        raise NotImplementedError


def check_tile(tile: Tile) -> Tile:
    tile = Tile(tile)
    if tile == Tile.EMPTY:
        raise ValueError("agent tile must be POSITIVE or NEGATIVE")
    return tile
