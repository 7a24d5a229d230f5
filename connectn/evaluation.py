"""Terminal detection and heuristic scoring for Connect-N boards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from connectn.engine import Board, Position, Tile

# Signed 64-bit bounds. A won position saturates to these so the search
# treats it as an unambiguous win or loss.
MAX_SCORE = 2**63 - 1
MIN_SCORE = -(2**63)

# (dcol, drow): horizontal, vertical, and the two diagonals.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (1, -1), (1, 1))


@dataclass(frozen=True)
class Evaluation:
    result: Optional[int]  # +1 / -1 win, 0 draw, None while in progress
    score: int

    @property
    def is_terminal(self) -> bool:
        return self.result is not None


def _win(tile: Tile) -> Evaluation:
    return Evaluation(int(tile), MAX_SCORE if tile == Tile.POSITIVE else MIN_SCORE)


def _count_dir(board: Board, pos: Position, dcol: int, drow: int, tile: Tile) -> int:
    """Same-tile cells after `pos` along (dcol, drow), at most N - 1."""

    count = 0
    col, row = pos
    for i in range(1, board.connection_length):
        cur = board.at(Position(col + dcol * i, row + drow * i))
        if cur is None or cur != tile:
            break
        count += 1
    return count


def _scan_lines(board: Board, pos: Position, tile: Tile) -> Tuple[bool, int]:
    """
    Score the four lines through `pos`.

    Returns (won, score). The forward run is checked against N before the
    backward run is added, matching how partial lines are scored.
    """

    n = board.connection_length
    score = 0
    for dcol, drow in DIRECTIONS:
        count = 1 + _count_dir(board, pos, dcol, drow, tile)
        if count >= n:
            return True, 0
        count += _count_dir(board, pos, -dcol, -drow, tile)
        if count >= n:
            return True, 0
        score += 10**count * int(tile)
    return False, score


def _draw_or(board: Board, score: int) -> Evaluation:
    if board.is_full():
        return Evaluation(0, 0)
    return Evaluation(None, score)


def evaluate(board: Board) -> Evaluation:
    """
    Whole-board evaluation.

    Every occupied cell contributes 10**run per direction, signed by its tile.
    Lines are counted once per member cell, so the score over-weights long
    partial lines; search only compares scores, it never reads them as exact.
    """

    rows, cols = board.shape
    score = 0
    for row in range(rows):
        for col in range(cols):
            pos = Position(col, row)
            tile = board.at(pos)
            if tile is None or tile == Tile.EMPTY:
                continue
            won, line_score = _scan_lines(board, pos, tile)
            if won:
                return _win(tile)
            score += line_score
    return _draw_or(board, score)


def evaluate_last_move(board: Board, last: Position) -> Evaluation:
    """Evaluate only the lines through the last placed tile."""

    tile = board.at(last)
    if tile is None or tile == Tile.EMPTY:
        return Evaluation(None, 0)

    won, score = _scan_lines(board, last, tile)
    if won:
        return _win(tile)
    return _draw_or(board, score)
