"""Depth-bounded minimax agent with alpha-beta pruning."""

from __future__ import annotations

from typing import Optional, Tuple

from rich.console import Console

from connectn.agents.base import Agent, check_tile
from connectn.engine import Board, Move, Tile, generate_valid_positions
from connectn.evaluation import MAX_SCORE, MIN_SCORE, evaluate


class MinimaxAgent(Agent):
    """
    Alpha-beta agent over the shared-sign heuristic.

    Scores are absolute: positive favours POSITIVE, negative favours NEGATIVE.
    So the side holding POSITIVE maximizes and the side holding NEGATIVE
    minimizes, whichever of them is this agent.

    The board is searched in place: each move is placed, searched and removed
    again. `next_move` copies the game board once so the game never sees the
    intermediate states.
    """

    def __init__(
        self,
        name: str,
        tile: Tile,
        *,
        depth: int = 5,
        console: Optional[Console] = None,
    ) -> None:
        if depth < 1:
            raise ValueError("depth must be >= 1")
        self.name = name
        self.tile = check_tile(tile)
        self.depth = depth
        self.console = console
        self.last_nodes = 0

    def next_move(self, board: Board) -> Move:
        if evaluate(board).is_terminal:
            raise ValueError("position is already terminal")

        self.last_nodes = 0
        score, move = self.alphabeta(board.copy(), MIN_SCORE, MAX_SCORE, self.depth, False)
        if move is None:
            raise ValueError("no legal moves available")

        if self.console is not None:
            self.console.print(
                f"{self.name}: col {move.position.col} row {move.position.row} "
                f"score={score} nodes={self.last_nodes} depth={self.depth}"
            )
        return move

    def alphabeta(
        self,
        board: Board,
        alpha: int,
        beta: int,
        depth: int,
        is_enemy: bool,
    ) -> Tuple[int, Optional[Move]]:
        self.last_nodes += 1

        ev = evaluate(board)
        if depth == 0 or ev.is_terminal:
            return ev.score, None

        tile = self.tile.enemy if is_enemy else self.tile
        maximizing = tile == Tile.POSITIVE

        positions = generate_valid_positions(board)
        if not positions:
            raise ValueError("no legal moves available")

        best_move = Move(positions[0], tile)
        if maximizing:
            best = MIN_SCORE
            for pos in positions:
                move = Move(pos, tile)
                board.place(move)
                score, _ = self.alphabeta(board, alpha, beta, depth - 1, not is_enemy)
                board.remove(move)

                if score > best:
                    best = score
                    best_move = move
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # beta cut-off
            return best, best_move

        best = MAX_SCORE
        for pos in positions:
            move = Move(pos, tile)
            board.place(move)
            score, _ = self.alphabeta(board, alpha, beta, depth - 1, not is_enemy)
            board.remove(move)

            if score < best:
                best = score
                best_move = move
            beta = min(beta, score)
            if beta <= alpha:
                break  # alpha cut-off
        return best, best_move
