"""Monte Carlo Tree Search agent with UCT selection and random playouts."""

from __future__ import annotations

import math
from typing import Dict, List, Optional

import numpy as np
from rich.console import Console
from rich.table import Table

from connectn.agents.base import Agent, check_tile
from connectn.engine import Board, Move, Tile, generate_valid_positions
from connectn.evaluation import evaluate


class MCTSNode:
    """
    One search-tree node with its own copy of the board.

    `turn` is the tile to move at this node. `wins` accumulates playout
    results signed by the searching agent's tile at every depth, not by the
    tile to move here; UCT therefore steers both levels toward outcomes that
    are good for the searching agent.

    Children are owned through `children`; `parent` is only used to walk
    back up during backpropagation.
    """

    def __init__(self, board: Board, turn: Tile, parent: Optional["MCTSNode"] = None) -> None:
        self.board = board.copy()
        self.turn = turn
        self.parent = parent
        self.children: Dict[Move, "MCTSNode"] = {}
        self.visits = 0
        self.wins = 0
        self._refresh()

    def _refresh(self) -> None:
        ev = evaluate(self.board)
        self.is_terminal = ev.is_terminal
        self.win_state = ev.result
        self._max_children = len(generate_valid_positions(self.board))

    @property
    def is_fully_expanded(self) -> bool:
        return len(self.children) == self._max_children

    def win_rate(self) -> float:
        return 0.0 if self.visits == 0 else self.wins / self.visits

    def apply_move(self, move: Move) -> bool:
        if not self.board.place(move):
            return False
        self._refresh()
        self.turn = self.turn.enemy
        return True

    def create_child(self, move: Move) -> "MCTSNode":
        board = self.board.copy()
        if not board.place(move):
            raise RuntimeError(f"cannot expand node with illegal move {move}")
        child = MCTSNode(board, self.turn.enemy, parent=self)
        self.children[move] = child
        return child

    def unexpanded_moves(self) -> List[Move]:
        moves = [Move(pos, self.turn) for pos in generate_valid_positions(self.board)]
        return [m for m in moves if m not in self.children]


class MonteCarloAgent(Agent):
    """
    Classic four-phase MCTS: traverse, expand one child, random playout,
    backpropagate. The tree is rebuilt for every move.
    """

    def __init__(
        self,
        name: str,
        tile: Tile,
        *,
        simulations: int = 2000,
        exploration: float = 1.5,
        seed: Optional[int] = None,
        console: Optional[Console] = None,
    ) -> None:
        if simulations < 1:
            raise ValueError("simulations must be >= 1")
        self.name = name
        self.tile = check_tile(tile)
        self.simulations = simulations
        self.exploration = exploration
        self.rng = np.random.default_rng(seed)
        self.console = console

    def next_move(self, board: Board) -> Move:
        root = self.search(board)
        if not root.children:
            raise ValueError("no legal moves available")

        # max() keeps the first child in column order on ties.
        best_move = max(root.children, key=lambda m: root.children[m].visits)

        if self.console is not None:
            self._print_root(root, best_move)
        return best_move

    def search(self, board: Board) -> MCTSNode:
        root = MCTSNode(board, self.tile)
        if root.is_terminal:
            return root

        for _ in range(self.simulations):
            leaf = self.traverse(root)
            result = self.playout(leaf)
            self.backpropagate(leaf, result)
        return root

    def traverse(self, node: MCTSNode) -> MCTSNode:
        while not node.is_terminal:
            if not node.is_fully_expanded:
                return self.expand(node)
            node = self.best_uct(node)
        return node

    def expand(self, node: MCTSNode) -> MCTSNode:
        # Children are created in column order.
        return node.create_child(node.unexpanded_moves()[0])

    def uct(self, node: MCTSNode, child: MCTSNode) -> float:
        # Every child got one visit from the playout that created it.
        return child.wins / child.visits + self.exploration * math.sqrt(
            math.log(node.visits) / child.visits
        )

    def best_uct(self, node: MCTSNode) -> MCTSNode:
        if not node.children:
            raise ValueError("node has no children to select from")
        return max(node.children.values(), key=lambda child: self.uct(node, child))

    def playout(self, node: MCTSNode) -> int:
        if node.is_terminal:
            return int(node.win_state)

        board = node.board.copy()
        turn = node.turn
        while True:
            ev = evaluate(board)
            if ev.is_terminal:
                return int(ev.result)

            positions = generate_valid_positions(board)
            pos = positions[int(self.rng.integers(len(positions)))]
            if not board.place(Move(pos, turn)):
                raise RuntimeError(f"playout could not place generated move at {pos}")
            turn = turn.enemy

    def backpropagate(self, node: Optional[MCTSNode], result: int) -> None:
        reward = result * int(self.tile)
        while node is not None:
            node.wins += reward
            node.visits += 1
            node = node.parent

    def _print_root(self, root: MCTSNode, chosen: Move) -> None:
        table = Table(title=f"{self.name}: {self.simulations} simulations")
        table.add_column("col", justify="right")
        table.add_column("row", justify="right")
        table.add_column("visits", justify="right")
        table.add_column("win rate", justify="right")
        for move, child in root.children.items():
            marker = " *" if move == chosen else ""
            table.add_row(
                str(move.position.col),
                str(move.position.row),
                f"{child.visits}{marker}",
                f"{child.win_rate():.3f}",
            )
        self.console.print(table)
