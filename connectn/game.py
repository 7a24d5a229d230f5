"""Game driver: turn sequencing between two agents on an authoritative board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from rich.console import Console

from connectn.agents.base import Agent
from connectn.engine import Board, ConnectNConfig, Move, Tile
from connectn.evaluation import evaluate, evaluate_last_move
from connectn.render import format_move_history, render_board

# Hard cap on loop iterations; an agent that keeps returning unplayable moves
# would otherwise never finish.
MAX_TURNS = 1000


@dataclass(frozen=True)
class GameOutcome:
    is_over: bool
    winner: Tile  # EMPTY for a draw or an unfinished game
    reason: str  # "connect-n" / "draw" / "turn-limit"
    turns: int
    moves: Tuple[Move, ...]

    @property
    def is_draw(self) -> bool:
        return self.is_over and self.winner == Tile.EMPTY


class Game:
    """
    One match between a POSITIVE and a NEGATIVE agent. POSITIVE moves first.

    A move the board refuses does not end the turn with an error: the
    unchanged board is re-evaluated and the same agent is asked again on the
    next iteration.
    """

    def __init__(
        self,
        positive: Agent,
        negative: Agent,
        config: Optional[ConnectNConfig] = None,
        *,
        max_turns: int = MAX_TURNS,
        console: Optional[Console] = None,
    ) -> None:
        if max_turns < 1:
            raise ValueError("max_turns must be >= 1")
        self.board = Board(config)
        self.positive = positive
        self.negative = negative
        self.current = positive
        self.max_turns = max_turns
        self.console = console
        self.is_over = False
        self.moves: List[Move] = []

    def _swap_players(self) -> None:
        if self.current is self.positive:
            self.current = self.negative
        elif self.current is self.negative:
            self.current = self.positive
        else:
            raise RuntimeError(f"current agent {self.current.name!r} is not registered in this game")

    def make_move(self) -> Optional[int]:
        """Play one turn and return the terminal result (+1/-1/0) or None."""

        move = self.current.next_move(self.board)
        if not self.is_over and self.board.place(move):
            self.moves.append(move)
            self._swap_players()
            return evaluate_last_move(self.board, move.position).result
        return evaluate(self.board).result

    def play(self) -> GameOutcome:
        result: Optional[int] = None
        turns = 0
        for turns in range(1, self.max_turns + 1):
            self._show(render_board(self.board))
            self._show(f"It is {self.current.name}'s turn ({self.current.tile.symbol})")
            result = self.make_move()
            if result is not None:
                self.is_over = True
                break

        self._show(render_board(self.board))
        outcome = self._outcome(result, turns)
        self._announce(outcome)
        return outcome

    def _outcome(self, result: Optional[int], turns: int) -> GameOutcome:
        moves = tuple(self.moves)
        if result is None:
            return GameOutcome(False, Tile.EMPTY, "turn-limit", turns, moves)
        if result == 0:
            return GameOutcome(True, Tile.EMPTY, "draw", turns, moves)
        return GameOutcome(True, Tile(result), "connect-n", turns, moves)

    def _announce(self, outcome: GameOutcome) -> None:
        if outcome.reason == "turn-limit":
            self._show(f"Stopped after {outcome.turns} turns without a result")
        elif outcome.is_draw:
            self._show("It's a draw!")
        else:
            winner = self.positive if outcome.winner == Tile.POSITIVE else self.negative
            self._show(f"Player {winner.name} has won!")
        if outcome.moves:
            self._show(f"Moves: {format_move_history(outcome.moves)}")

    def _show(self, text: str) -> None:
        if self.console is not None:
            self.console.print(text, highlight=False, markup=False)
