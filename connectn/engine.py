"""
Connect-N board engine: tiles, moves, a two-colour bitboard and move generation.

Coordinates follow the screen convention:
- row 0 is the top row, row `rows - 1` is the bottom row
- a position is (col, row); its bit index is `row * cols + col`
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class ConnectNConfig:
    rows: int = 6
    cols: int = 7
    n: int = 4

    def validate(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError("rows/cols must be >= 1")
        if self.n < 2:
            raise ValueError("n must be >= 2")
        if self.n > max(self.rows, self.cols):
            raise ValueError("n must be <= max(rows, cols)")


class Tile(enum.IntEnum):
    NEGATIVE = -1
    EMPTY = 0
    POSITIVE = 1

    @property
    def enemy(self) -> "Tile":
        if self is Tile.POSITIVE:
            return Tile.NEGATIVE
        if self is Tile.NEGATIVE:
            return Tile.POSITIVE
        return Tile.EMPTY

    @property
    def symbol(self) -> str:
        return tile_symbol(self)


def tile_symbol(tile: int) -> str:
    sym = {+1: "X", -1: "O", 0: "."}
    if tile not in sym:
        raise ValueError(f"invalid tile: {tile!r}")
    return sym[int(tile)]


class Position(NamedTuple):
    col: int
    row: int


class Shape(NamedTuple):
    rows: int
    cols: int


@dataclass(frozen=True)
class Move:
    position: Position
    tile: Tile


class Board:
    """
    Two disjoint bit-sets, one per colour.

    Placement obeys gravity: a cell can only be filled when it sits on the
    bottom row or the cell directly below it is occupied.
    """

    def __init__(self, config: Optional[ConnectNConfig] = None) -> None:
        cfg = config if config is not None else ConnectNConfig()
        cfg.validate()
        self._cfg = cfg
        self._positive = 0
        self._negative = 0

    @property
    def config(self) -> ConnectNConfig:
        return self._cfg

    @property
    def shape(self) -> Shape:
        return Shape(self._cfg.rows, self._cfg.cols)

    @property
    def connection_length(self) -> int:
        return self._cfg.n

    @property
    def bits(self) -> Tuple[int, int]:
        return self._positive, self._negative

    def in_range(self, pos: Position) -> bool:
        col, row = pos
        return 0 <= col < self._cfg.cols and 0 <= row < self._cfg.rows

    def _index(self, pos: Position) -> int:
        return pos[1] * self._cfg.cols + pos[0]

    def at(self, pos: Position) -> Optional[Tile]:
        if not self.in_range(pos):
            return None
        bit = 1 << self._index(pos)
        if self._positive & bit:
            return Tile.POSITIVE
        if self._negative & bit:
            return Tile.NEGATIVE
        return Tile.EMPTY

    def place(self, move: Move) -> bool:
        pos = move.position
        if not self.in_range(pos):
            return False
        if self.at(pos) != Tile.EMPTY:
            return False

        col, row = pos
        if row + 1 != self._cfg.rows and self.at(Position(col, row + 1)) == Tile.EMPTY:
            return False

        bit = 1 << self._index(pos)
        if move.tile == Tile.POSITIVE:
            self._positive |= bit
        elif move.tile == Tile.NEGATIVE:
            self._negative |= bit
        else:
            return False
        return True

    def remove(self, move: Move) -> bool:
        pos = move.position
        if not self.in_range(pos):
            return False

        mask = ~(1 << self._index(pos))
        if move.tile == Tile.POSITIVE:
            self._positive &= mask
        elif move.tile == Tile.NEGATIVE:
            self._negative &= mask
        else:
            return False
        return True

    def is_full(self) -> bool:
        return all(self.at(Position(c, 0)) != Tile.EMPTY for c in range(self._cfg.cols))

    def copy(self) -> "Board":
        other = Board.__new__(Board)
        other._cfg = self._cfg
        other._positive = self._positive
        other._negative = self._negative
        return other

    def to_array(self) -> np.ndarray:
        board = np.zeros((self._cfg.rows, self._cfg.cols), dtype=np.int8)
        for r in range(self._cfg.rows):
            for c in range(self._cfg.cols):
                board[r, c] = int(self.at(Position(c, r)))
        return board

    @classmethod
    def from_array(cls, array: np.ndarray, n: int = 4) -> "Board":
        """
        Build a board from a (rows, cols) array of {-1, 0, +1}.

        Bits are set directly, so gravity is not checked.
        """

        grid = np.asarray(array)
        if grid.ndim != 2:
            raise ValueError("array must be 2-dimensional")
        rows, cols = grid.shape
        board = cls(ConnectNConfig(rows=rows, cols=cols, n=n))
        for r in range(rows):
            for c in range(cols):
                value = int(grid[r, c])
                if value not in (-1, 0, 1):
                    raise ValueError(f"invalid tile value {value} at row {r}, col {c}")
                bit = 1 << (r * cols + c)
                if value == Tile.POSITIVE:
                    board._positive |= bit
                elif value == Tile.NEGATIVE:
                    board._negative |= bit
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cfg == other._cfg and self.bits == other.bits

    def __repr__(self) -> str:
        return f"Board(rows={self._cfg.rows}, cols={self._cfg.cols}, n={self._cfg.n}, bits={self.bits})"


def generate_valid_positions(board: Board) -> List[Position]:
    """Lowest empty cell of every non-full column, in column order."""

    rows, cols = board.shape
    res: List[Position] = []
    for col in range(cols):
        if board.at(Position(col, 0)) != Tile.EMPTY:
            continue
        res.append(resolve_drop(board, col))
    return res


def resolve_drop(board: Board, col: int) -> Position:
    """
    Resolve a column to the row a dropped tile would land on.

    A full column, or a column outside the board, resolves to row -1, which
    `Board.place` rejects.
    """

    rows, _ = board.shape
    for row in range(rows):
        if board.at(Position(col, row)) != Tile.EMPTY:
            return Position(col, row - 1)
    return Position(col, rows - 1)
